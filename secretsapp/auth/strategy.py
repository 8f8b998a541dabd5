"""
Authentication Strategy

Checks an (identifier, secret) pair against the credential store.
"""

import logging

from secretsapp.auth.errors import IdentityNotFound, InvalidCredentials

logger = logging.getLogger(__name__)

# Verified against when the identifier is unknown, so both failures cost the same
_DUMMY_SECRET = 'not-a-real-password'


class AuthStrategy:
    """Local username/password strategy."""

    def __init__(self, store, hasher):
        self.store = store
        self.hasher = hasher
        self._dummy = None

    def register(self, identifier, secret):
        return self.store.create(identifier, secret)

    def authenticate(self, identifier, secret):
        """Return the matching User or raise InvalidCredentials."""
        try:
            user = self.store.find(identifier)
        except IdentityNotFound:
            self._burn(secret)
            logger.debug('Login for unknown identifier rejected')
            raise InvalidCredentials() from None

        if not self.hasher.verify(secret, user.secret_hash, user.secret_salt):
            raise InvalidCredentials()
        return user

    def _burn(self, secret):
        if self._dummy is None:
            self._dummy = self.hasher.derive(_DUMMY_SECRET)
        self.hasher.verify(secret, *self._dummy)
