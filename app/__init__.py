import os

import sentry_sdk
from dotenv import load_dotenv
from flask import Flask
from sentry_sdk.integrations.flask import FlaskIntegration
from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration

# Import models to ensure they are registered with SQLAlchemy
from . import models
from .auth.webhooks import create_webhook_verifier
from .config import ENV_DEVELOPMENT, ENV_PRODUCTION, ENV_STAGING, ENV_TESTING

# Import extensions from the extensions module
from .extensions import db, migrate


def create_app(config_class=None):
    """
    Application factory function to create and configure the Flask app.

    Raises:
        WebhookConfigurationException: if CLERK_WEBHOOK_SECRET is not set
    """
    app = Flask(__name__)

    # Load environment variables early
    load_dotenv()

    # --- Configuration ---
    if config_class is None:
        # Determine configuration based on FLASK_ENV environment variable
        env = os.getenv("FLASK_ENV", ENV_DEVELOPMENT)
        if env == ENV_PRODUCTION:
            from .config import ProductionConfig

            config_class = ProductionConfig
        elif env == ENV_STAGING:
            from .config import StagingConfig

            config_class = StagingConfig
        elif env == ENV_TESTING:
            from .config import TestingConfig

            config_class = TestingConfig
        else:  # Default to development
            from .config import DevelopmentConfig

            config_class = DevelopmentConfig

    app.config.from_object(config_class)

    # --- Sentry Initialization ---
    sentry_dsn = app.config.get("SENTRY_DSN")
    if sentry_dsn:
        sentry_sdk.init(
            dsn=sentry_dsn,
            integrations=[
                FlaskIntegration(),
                SqlalchemyIntegration(),
            ],
            traces_sample_rate=app.config.get("SENTRY_TRACES_SAMPLE_RATE", 1.0),
            profiles_sample_rate=app.config.get("SENTRY_PROFILES_SAMPLE_RATE", 1.0),
            environment=app.config.get("FLASK_ENV"),
            release=app.config.get("APP_VERSION", None),
        )
        app.logger.info(f"Sentry initialized for environment: {app.config.get('FLASK_ENV')}")
    else:
        app.logger.info("SENTRY_DSN not found. Sentry will not be initialized.")

    # --- Webhook Verifier Initialization ---
    # A missing signing secret is a deployment error, so fail here rather than per request
    app.webhook_verifier = create_webhook_verifier(app.config.get("CLERK_WEBHOOK_SECRET"))

    # --- Initialize Flask Extensions (after app config) ---
    db.init_app(app)
    migrate.init_app(app, db)

    # --- Register Blueprints ---
    from .routes.main import bp as main_bp
    from .routes.webhooks import bp as webhooks_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(webhooks_bp)

    return app
