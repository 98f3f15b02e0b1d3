"""
User Model
"""

import uuid
from datetime import datetime

from flask_login import UserMixin
from blogify.extensions import db


def generate_id():
    """New opaque document id (32 lowercase hex characters)."""
    return uuid.uuid4().hex


class User(UserMixin, db.Model):
    """User model for authentication"""
    __tablename__ = 'users'

    id = db.Column(db.String(32), primary_key=True, default=generate_id)
    full_name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    # Werkzeug hash string; the salt is embedded in it
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f'<User {self.email}>'
