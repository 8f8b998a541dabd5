"""
Auth Errors

Every failure a caller of the auth services is expected to recover from.
Storage failures are not listed here; they surface as SQLAlchemyError.
"""


class AuthError(Exception):
    """Base class for authentication failures."""


class DuplicateIdentifier(AuthError):
    """An identity with this identifier already exists."""

    def __init__(self, identifier):
        super().__init__(f'identifier already registered: {identifier}')
        self.identifier = identifier


class InvalidIdentifier(AuthError):
    """The identifier is blank after normalisation."""


class IdentityNotFound(AuthError):
    """No identity matches the lookup key."""


class InvalidCredentials(AuthError):
    """Unknown identifier or wrong secret; deliberately not told apart."""


class NoSession(AuthError):
    """The session token is missing, unknown, expired or revoked."""
