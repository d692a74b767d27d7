"""
Custom exceptions for the user sync service.
These provide consistent error handling across the application.
"""


class UserSyncException(Exception):
    """Base exception for all user sync exceptions."""

    pass


class WebhookConfigurationException(UserSyncException):
    """Raised when the webhook signing secret is missing at startup."""

    pass


class WebhookVerificationException(UserSyncException):
    """Raised when a webhook request cannot be authenticated."""

    pass


class MissingWebhookHeadersException(WebhookVerificationException):
    """Raised when one of the svix headers is absent."""

    pass


class InvalidWebhookPayloadException(UserSyncException):
    """Raised when a verified payload does not match the expected event shape."""

    pass


class UserStoreException(UserSyncException):
    """Raised when a write to the users table fails."""

    def __init__(self, original: Exception):
        super().__init__(str(original))
        self.original = original
