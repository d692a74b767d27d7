import pytest

from app import create_app
from app.extensions import db
from app.models import User
from tests.webhook_helpers import WebhookTestingConfig


@pytest.fixture
def app():
    app = create_app(WebhookTestingConfig)

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db_session(app):
    with app.app_context():
        yield db.session


@pytest.fixture
def existing_user(db_session):
    user = User(
        id="user_existing",
        name="Jane Doe",
        email="jane@example.com",
        image_url="https://img.example.com/jane.png",
    )
    db_session.add(user)
    db_session.commit()
    return user
