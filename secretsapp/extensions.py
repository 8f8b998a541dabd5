"""
Flask Extensions

Bound to the application in ``create_app`` with ``init_app``.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager; the user id it stores is the opaque server-side session id
login_manager = LoginManager()
