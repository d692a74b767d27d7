from typing import Optional

from ..extensions import db
from .mixins import TimestampMixin


class User(db.Model, TimestampMixin):
    """Local mirror of a Clerk user. Rows are only written by verified webhook events."""

    __tablename__ = "users"

    # Clerk user id (user_...), never generated locally
    id = db.Column(db.String(64), primary_key=True)

    name = db.Column(db.String(255), nullable=True)
    email = db.Column(db.String(320), nullable=True, index=True)
    image_url = db.Column("imageUrl", db.String(2048), nullable=True)

    @staticmethod
    def get_by_id(user_id: str) -> Optional["User"]:
        return User.query.filter_by(id=user_id).first()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "imageUrl": self.image_url,
        }

    def __repr__(self):
        return f"<User {self.id} - Email: {self.email}>"
