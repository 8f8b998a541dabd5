"""
Configuration settings for the Secrets application
"""
import os


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {'1', 'true', 'yes', 'y', 'on'}


class Config:
    """Flask application configuration"""

    # Flask secret key for signing the session cookie
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Database configuration (relative SQLite paths live in the instance folder)
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///secrets.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Identifiers are stripped and case-folded unless this is enabled
    IDENTIFIER_CASE_SENSITIVE = _env_flag('IDENTIFIER_CASE_SENSITIVE', False)

    # Password hashing (werkzeug.security method string)
    PASSWORD_HASH_METHOD = os.environ.get('PASSWORD_HASH_METHOD') or 'pbkdf2:sha256:600000'
    PASSWORD_SALT_LENGTH = int(os.environ.get('PASSWORD_SALT_LENGTH', '32'))

    # Server-side sessions
    SESSION_TOKEN_BYTES = int(os.environ.get('SESSION_TOKEN_BYTES', '32'))
    SESSION_IDLE_TIMEOUT = int(os.environ.get('SESSION_IDLE_TIMEOUT', '1800'))      # 30 minutes
    SESSION_MAX_LIFETIME = int(os.environ.get('SESSION_MAX_LIFETIME', '28800'))     # 8 hours

    # Session cookie flags
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    SESSION_COOKIE_SECURE = _env_flag('SESSION_COOKIE_SECURE', False)

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    # Cheap hash so the suite stays fast
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256:1000'
    PASSWORD_SALT_LENGTH = 16
    LOG_LEVEL = 'DEBUG'
