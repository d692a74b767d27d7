"""
Clerk webhook handlers.
"""

from flask import current_app, jsonify, request
from pydantic import ValidationError

from app.auth.webhooks import verify_clerk_webhook
from app.exceptions import (
    InvalidWebhookPayloadException,
    MissingWebhookHeadersException,
    UserStoreException,
    WebhookVerificationException,
)
from app.routes.webhooks import bp
from app.schemas.clerk_webhook import (
    ClerkDeletedUserData,
    ClerkEventType,
    ClerkUserData,
    ClerkWebhookEvent,
)
from app.services.user_sync_service import create_user, delete_user, update_user


@bp.post("/webhooks")
def clerk_webhook():
    """
    Handle Clerk user lifecycle webhooks.

    Documentation: https://clerk.com/docs/integrations/webhooks/overview
    """
    # Raw payload, the signature covers these exact bytes
    payload = request.get_data()

    try:
        event = verify_clerk_webhook(payload, request.headers)
    except MissingWebhookHeadersException as e:
        current_app.logger.warning(f"Clerk webhook rejected: {e}")
        return jsonify({"error": "Missing svix headers"}), 400
    except WebhookVerificationException as e:
        current_app.logger.warning(f"Clerk webhook signature verification failed: {e}")
        return jsonify({"error": "Verification error"}), 400
    except InvalidWebhookPayloadException as e:
        current_app.logger.warning(f"Clerk webhook payload is not an event: {e}")
        return jsonify({"error": "Invalid event payload"}), 400

    current_app.logger.info(f"Received Clerk webhook: {event.type} ({request.headers.get('svix-id')})")

    event_type = ClerkEventType.from_value(event.type)
    handler = EVENT_HANDLERS.get(event_type)
    if handler is None:
        return jsonify({"message": "Webhook received"}), 200

    try:
        return handler(event)
    except ValidationError as e:
        current_app.logger.warning(f"Invalid {event.type} payload: {e}")
        return jsonify({"error": "Invalid event payload"}), 400
    except UserStoreException as e:
        return jsonify({"error": str(e)}), 500


def handle_user_created(event: ClerkWebhookEvent):
    create_user(ClerkUserData.model_validate(event.data))
    return jsonify({"message": "User created"}), 201


def handle_user_updated(event: ClerkWebhookEvent):
    update_user(ClerkUserData.model_validate(event.data))
    return jsonify({"message": "User updated"}), 200


def handle_user_deleted(event: ClerkWebhookEvent):
    delete_user(ClerkDeletedUserData.model_validate(event.data))
    return jsonify({"message": "User deleted"}), 200


EVENT_HANDLERS = {
    ClerkEventType.USER_CREATED: handle_user_created,
    ClerkEventType.USER_UPDATED: handle_user_updated,
    ClerkEventType.USER_DELETED: handle_user_deleted,
}
