from flask import Blueprint, current_app, jsonify
from sqlalchemy import text

from app.extensions import db

bp = Blueprint("main", __name__)


# Health check endpoint
@bp.route("/health")
def health():
    db_status = "disconnected"
    try:
        with db.engine.connect() as con:
            con.execute(text("SELECT 1"))
        db_status = "connected"
    except Exception as e:
        db_status = f"failed: {e}"

    verifier_status = "not initialized"
    if getattr(current_app, "webhook_verifier", None) is not None:
        verifier_status = "initialized"

    return (
        jsonify(
            {
                "status": "healthy",
                "message": "User sync webhook receiver is running",
                "database": db_status,
                "webhook_verifier": verifier_status,
                "version": current_app.config.get("APP_VERSION", "unknown"),
                "environment": current_app.config.get("FLASK_ENV", "unknown"),
            }
        ),
        200,
    )


# Basic route
@bp.route("/")
def index():
    return jsonify(
        {
            "message": "User sync webhook receiver",
            "version": current_app.config.get("APP_VERSION", "unknown"),
        }
    )
