"""
Session Manager

Issues opaque tokens backed by AuthSession rows. Only the token travels in
the cookie; the identity is re-read from the credential store on every
resolve, so a revoked session stops working on the very next request.
"""

import logging
import secrets
from datetime import timedelta

from flask_login import UserMixin
from sqlalchemy import or_

from secretsapp.auth.errors import IdentityNotFound, NoSession
from secretsapp.models import AuthSession
from secretsapp.models.user import utcnow

logger = logging.getLogger(__name__)


class SessionPrincipal(UserMixin):
    """What Flask-Login sees as ``current_user``.

    ``get_id`` returns the session token, so that is all Flask-Login writes
    into the cookie.
    """

    def __init__(self, user, session_id):
        self.user = user
        self.session_id = session_id

    @property
    def identifier(self):
        return self.user.identifier

    def get_id(self):
        return self.session_id


class SessionManager:
    """Issue, resolve and revoke server-side sessions."""

    def __init__(self, db, store, token_bytes=32, idle_timeout=1800, max_lifetime=28800):
        self.db = db
        self.store = store
        self.token_bytes = token_bytes
        self.idle_timeout = timedelta(seconds=idle_timeout)
        self.max_lifetime = timedelta(seconds=max_lifetime)

    def issue(self, user):
        session_id = secrets.token_urlsafe(self.token_bytes)
        now = utcnow()
        self.db.session.add(AuthSession(session_id=session_id, user_id=user.id,
                                        created_at=now, last_seen_at=now))
        self.db.session.commit()
        logger.info('Issued session for user id=%s', user.id)
        return session_id

    def resolve(self, session_id):
        """Return the User bound to ``session_id`` or raise NoSession."""
        if not session_id:
            raise NoSession()

        record = self.db.session.get(AuthSession, session_id)
        if record is None:
            raise NoSession()

        now = utcnow()
        if self._is_expired(record, now):
            user_id = record.user_id
            self.db.session.delete(record)
            self.db.session.commit()
            logger.info('Session for user id=%s expired', user_id)
            raise NoSession()

        try:
            user = self.store.get(record.user_id)
        except IdentityNotFound:
            raise NoSession() from None

        record.last_seen_at = now
        self.db.session.commit()
        return user

    def revoke(self, session_id):
        """Destroy a session. Unknown or already revoked tokens are ignored."""
        if not session_id:
            return
        deleted = AuthSession.query.filter_by(session_id=session_id).delete()
        self.db.session.commit()
        if deleted:
            logger.info('Revoked session')

    def revoke_all(self, user):
        count = AuthSession.query.filter_by(user_id=user.id).delete()
        self.db.session.commit()
        logger.info('Revoked %d session(s) for user id=%s', count, user.id)
        return count

    def purge_expired(self):
        now = utcnow()
        count = AuthSession.query.filter(or_(
            AuthSession.last_seen_at < now - self.idle_timeout,
            AuthSession.created_at < now - self.max_lifetime,
        )).delete(synchronize_session=False)
        self.db.session.commit()
        logger.info('Purged %d expired session(s)', count)
        return count

    def _is_expired(self, record, now):
        return (now - record.last_seen_at > self.idle_timeout
                or now - record.created_at > self.max_lifetime)
