"""
Auth Blueprint

Registration, login and logout on top of server-held sessions.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from secretsapp.auth import routes  # noqa: E402, F401
