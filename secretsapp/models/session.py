"""
Auth Session Model
"""

from secretsapp.extensions import db
from secretsapp.models.user import utcnow


class AuthSession(db.Model):
    """Server-held session mapping an opaque token to one user"""
    __tablename__ = 'auth_sessions'

    session_id = db.Column(db.String(128), primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'),
                        nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    last_seen_at = db.Column(db.DateTime, default=utcnow, nullable=False, index=True)

    def __repr__(self):
        # Never print the token itself
        return f'<AuthSession user:{self.user_id} since {self.created_at}>'
