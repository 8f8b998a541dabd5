"""
User Model
"""

from datetime import datetime, timezone

from secretsapp.extensions import db


def utcnow():
    """Naive UTC timestamp (SQLite drops tzinfo anyway)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class User(db.Model):
    """Registered identity: a unique identifier and its salted hash"""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    identifier = db.Column(db.String(255), unique=True, nullable=False, index=True)
    secret_hash = db.Column(db.String(255), nullable=False)
    secret_salt = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    # Sessions go away with the identity
    sessions = db.relationship('AuthSession', backref='user', lazy=True,
                               cascade='all, delete-orphan')

    def __repr__(self):
        return f'<User {self.identifier}>'
