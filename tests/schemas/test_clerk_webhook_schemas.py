import pytest
from pydantic import ValidationError

from app.schemas.clerk_webhook import (
    ClerkDeletedUserData,
    ClerkEventType,
    ClerkUserData,
    ClerkWebhookEvent,
)
from tests.webhook_helpers import create_user_event_data


@pytest.mark.parametrize(
    "value, expected",
    [
        ("user.created", ClerkEventType.USER_CREATED),
        ("user.updated", ClerkEventType.USER_UPDATED),
        ("user.deleted", ClerkEventType.USER_DELETED),
        ("session.created", None),
        ("", None),
    ],
)
def test_event_type_from_value(value, expected):
    assert ClerkEventType.from_value(value) is expected


def test_full_name_joins_first_and_last():
    data = ClerkUserData.model_validate(create_user_event_data(first_name="Ada", last_name="Lovelace"))
    assert data.full_name == "Ada Lovelace"


def test_full_name_skips_missing_parts():
    assert ClerkUserData(id="u1", first_name=None, last_name="Lovelace").full_name == "Lovelace"
    assert ClerkUserData(id="u1").full_name is None


def test_email_is_none_without_addresses():
    data = ClerkUserData.model_validate(create_user_event_data(email=None))
    assert data.email is None


def test_user_data_requires_id():
    with pytest.raises(ValidationError):
        ClerkUserData.model_validate({"first_name": "A"})


def test_deleted_user_data_requires_non_empty_id():
    with pytest.raises(ValidationError):
        ClerkDeletedUserData(id="")


def test_event_requires_type():
    with pytest.raises(ValidationError):
        ClerkWebhookEvent.model_validate({"data": {}})
