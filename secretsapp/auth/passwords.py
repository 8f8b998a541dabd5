"""
Password Hashing

Thin wrapper around werkzeug.security that keeps the salt and the digest in
separate fields. The plaintext secret is never logged or returned.
"""

from werkzeug.security import check_password_hash, generate_password_hash


class PasswordHasher:
    """Derive and verify salted, deliberately slow password hashes."""

    def __init__(self, method='pbkdf2:sha256:600000', salt_length=32):
        self.method = method
        self.salt_length = salt_length

    def derive(self, secret):
        """Return ``(secret_hash, secret_salt)`` for a new record.

        A fresh random salt is generated on every call. ``secret_hash`` keeps
        the werkzeug method prefix so old records still verify after the
        configured method changes.
        """
        if not secret:
            raise ValueError('Password must not be empty')
        encoded = generate_password_hash(secret, method=self.method, salt_length=self.salt_length)
        method, salt, digest = encoded.split('$', 2)
        return f'{method}${digest}', salt

    def verify(self, secret, secret_hash, secret_salt):
        """Check ``secret`` against a stored hash/salt pair."""
        if not secret or not secret_hash or not secret_salt:
            return False
        method, sep, digest = secret_hash.partition('$')
        if not sep:
            return False
        try:
            return check_password_hash(f'{method}${secret_salt}${digest}', secret)
        except ValueError:
            # Unknown method or mangled record
            return False
