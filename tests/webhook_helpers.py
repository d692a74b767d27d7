"""
Helpers for building signed Clerk webhook requests in tests.
"""

import json
from datetime import datetime, timezone

from svix.webhooks import Webhook

from app.config import TestingConfig

TEST_WEBHOOK_SECRET = "whsec_MfKQ9r8GKYqrTwjUPD8ILPZIo2LaLaSw"


def create_user_event_data(
    user_id: str = "u1",
    first_name: str | None = "A",
    last_name: str | None = "B",
    email: str | None = "a@b.com",
    image_url: str | None = "http://x/i.png",
) -> dict:
    return {
        "id": user_id,
        "object": "user",
        "first_name": first_name,
        "last_name": last_name,
        "email_addresses": [{"id": "idn_1", "email_address": email}] if email else [],
        "image_url": image_url,
    }


def create_event(event_type: str, data: dict) -> str:
    return json.dumps({"type": event_type, "object": "event", "data": data})


def sign_headers(body: str, msg_id: str = "msg_test", secret: str = TEST_WEBHOOK_SECRET, timestamp=None) -> dict:
    timestamp = timestamp or datetime.now(timezone.utc)
    signature = Webhook(secret).sign(msg_id, timestamp, body)
    return {
        "svix-id": msg_id,
        "svix-timestamp": str(int(timestamp.timestamp())),
        "svix-signature": signature,
        "Content-Type": "application/json",
    }


def post_webhook(client, body: str, headers: dict | None = None):
    if headers is None:
        headers = sign_headers(body)
    return client.post("/api/webhooks", data=body, headers=headers)


class WebhookTestingConfig(TestingConfig):
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    CLERK_WEBHOOK_SECRET = TEST_WEBHOOK_SECRET
    SENTRY_DSN = None
