"""
Auth Services

Builds the credential store, hasher, strategy and session manager from the
app config and hangs them off ``app.extensions`` so handlers get them from
the current app instead of module globals.
"""

from flask import current_app

from secretsapp.auth.passwords import PasswordHasher
from secretsapp.auth.sessions import SessionManager
from secretsapp.auth.store import CredentialStore
from secretsapp.auth.strategy import AuthStrategy

EXTENSION_KEY = 'auth'


class AuthServices:
    """The auth components for one application instance."""

    def __init__(self, hasher, store, strategy, sessions):
        self.hasher = hasher
        self.store = store
        self.strategy = strategy
        self.sessions = sessions

    @classmethod
    def from_config(cls, config, db):
        hasher = PasswordHasher(method=config['PASSWORD_HASH_METHOD'],
                                salt_length=config['PASSWORD_SALT_LENGTH'])
        store = CredentialStore(db, hasher, case_sensitive=config['IDENTIFIER_CASE_SENSITIVE'])
        strategy = AuthStrategy(store, hasher)
        sessions = SessionManager(db, store,
                                  token_bytes=config['SESSION_TOKEN_BYTES'],
                                  idle_timeout=config['SESSION_IDLE_TIMEOUT'],
                                  max_lifetime=config['SESSION_MAX_LIFETIME'])
        return cls(hasher, store, strategy, sessions)


def init_auth_services(app, db):
    services = AuthServices.from_config(app.config, db)
    app.extensions[EXTENSION_KEY] = services
    return services


def get_auth_services():
    return current_app.extensions[EXTENSION_KEY]
