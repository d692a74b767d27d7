"""
Mirrors Clerk user lifecycle events into the users table.

Each function is a single-row, single-statement write committed on its own.
Nothing is retried and nothing is deduplicated: a replayed user.created
fails on the primary key and surfaces as a UserStoreException.
"""

from contextlib import contextmanager

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from app.exceptions import UserStoreException
from app.extensions import db
from app.models import User
from app.schemas.clerk_webhook import ClerkDeletedUserData, ClerkUserData


@contextmanager
def _store_write(action: str, user_id: str):
    try:
        yield
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Failed to {action} user {user_id}: {e}")
        raise UserStoreException(e) from e


def create_user(data: ClerkUserData) -> User:
    user = User(
        id=data.id,
        name=data.full_name,
        email=data.email,
        image_url=data.image_url,
    )
    with _store_write("create", data.id):
        db.session.add(user)

    current_app.logger.info(f"Created user {data.id}")
    return user


def update_user(data: ClerkUserData) -> int:
    """
    Overwrite name, email and image of the row keyed by the event's id.

    Returns:
        int: number of rows updated (0 if the user is not mirrored locally)
    """
    with _store_write("update", data.id):
        updated = (
            db.session.query(User)
            .filter(User.id == data.id)
            .update(
                {
                    User.name: data.full_name,
                    User.email: data.email,
                    User.image_url: data.image_url,
                },
                synchronize_session=False,
            )
        )

    if updated == 0:
        current_app.logger.warning(f"user.updated for {data.id} matched no local user")
    else:
        current_app.logger.info(f"Updated user {data.id}")
    return updated


def delete_user(data: ClerkDeletedUserData) -> int:
    """Delete the row keyed by the event's id. Returns the number of rows deleted."""
    with _store_write("delete", data.id):
        deleted = db.session.query(User).filter(User.id == data.id).delete(synchronize_session=False)

    if deleted == 0:
        current_app.logger.warning(f"user.deleted for {data.id} matched no local user")
    else:
        current_app.logger.info(f"Deleted user {data.id}")
    return deleted
