"""
Credential Store

Persists one User row per identifier. Uniqueness is left to the database
constraint so two concurrent registrations cannot both succeed.
"""

import logging

from sqlalchemy.exc import IntegrityError

from secretsapp.auth.errors import DuplicateIdentifier, IdentityNotFound, InvalidIdentifier
from secretsapp.models import User

logger = logging.getLogger(__name__)


class CredentialStore:
    """Create and look up identities."""

    def __init__(self, db, hasher, case_sensitive=False):
        self.db = db
        self.hasher = hasher
        self.case_sensitive = case_sensitive

    def normalize(self, identifier):
        value = (identifier or '').strip()
        if not self.case_sensitive:
            value = value.casefold()
        return value

    def create(self, identifier, secret):
        """Persist a new identity and return it.

        Raises:
            InvalidIdentifier: identifier is blank
            ValueError: secret is empty
            DuplicateIdentifier: identifier already registered
        """
        key = self.normalize(identifier)
        if not key:
            raise InvalidIdentifier('identifier must not be blank')

        secret_hash, secret_salt = self.hasher.derive(secret)
        user = User(identifier=key, secret_hash=secret_hash, secret_salt=secret_salt)

        self.db.session.add(user)
        try:
            self.db.session.commit()
        except IntegrityError as exc:
            self.db.session.rollback()
            raise DuplicateIdentifier(key) from exc

        logger.info('Registered identity %s (id=%s)', key, user.id)
        return user

    def find(self, identifier):
        key = self.normalize(identifier)
        user = User.query.filter_by(identifier=key).first() if key else None
        if user is None:
            raise IdentityNotFound(key)
        return user

    def get(self, user_id):
        user = self.db.session.get(User, user_id)
        if user is None:
            raise IdentityNotFound(user_id)
        return user
