"""
Pages Blueprint

Public home page and the protected secrets page.
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__)

from secretsapp.pages import routes  # noqa: E402, F401
