"""
Clerk webhook signature verification.
"""

from flask import current_app
from pydantic import ValidationError
from svix.webhooks import Webhook, WebhookVerificationError

from app.exceptions import (
    InvalidWebhookPayloadException,
    MissingWebhookHeadersException,
    WebhookConfigurationException,
    WebhookVerificationException,
)
from app.schemas.clerk_webhook import ClerkWebhookEvent

SVIX_HEADERS = ("svix-id", "svix-timestamp", "svix-signature")


def create_webhook_verifier(webhook_secret: str | None) -> Webhook:
    """
    Build the svix verifier once at startup.

    Raises:
        WebhookConfigurationException: if the signing secret is missing or unusable
    """
    if not webhook_secret:
        raise WebhookConfigurationException(
            "CLERK_WEBHOOK_SECRET must be set. Copy the signing secret from the Clerk Dashboard into .env"
        )

    try:
        return Webhook(webhook_secret)
    except ValueError as e:
        raise WebhookConfigurationException(f"CLERK_WEBHOOK_SECRET is not a valid signing secret: {e}") from e


def verify_clerk_webhook(payload: bytes, headers) -> ClerkWebhookEvent:
    """
    Verify a Clerk webhook and return the parsed event.

    The body is only decoded after the signature over the raw bytes checks out,
    so this is the only place an event value can come from.

    Args:
        payload: Raw request body bytes
        headers: Request headers

    Returns:
        ClerkWebhookEvent: the verified event

    Raises:
        MissingWebhookHeadersException: if any svix header is absent
        WebhookVerificationException: if the signature or timestamp is rejected
        InvalidWebhookPayloadException: if the verified body is not a Clerk event
    """
    svix_headers = {name: headers.get(name) for name in SVIX_HEADERS}

    if not all(svix_headers.values()):
        missing = [name for name, value in svix_headers.items() if not value]
        raise MissingWebhookHeadersException(f"Missing svix headers: {', '.join(missing)}")

    verifier: Webhook = current_app.webhook_verifier

    try:
        verifier.verify(payload, svix_headers)
    except (WebhookVerificationError, ValueError) as e:
        # ValueError covers malformed signature headers
        raise WebhookVerificationException(str(e)) from e

    try:
        return ClerkWebhookEvent.model_validate_json(payload)
    except ValidationError as e:
        raise InvalidWebhookPayloadException(str(e)) from e
