from ..extensions import db


class TimestampMixin:
    """Adds created_at / updated_at columns maintained by the database clock."""

    __abstract__ = True

    created_at = db.Column(db.DateTime(timezone=True), server_default=db.func.now(), nullable=False)
    updated_at = db.Column(
        db.DateTime(timezone=True), server_default=db.func.now(), onupdate=db.func.now(), nullable=False
    )
