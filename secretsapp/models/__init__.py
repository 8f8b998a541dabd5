"""
Models Package

Exports all models for easy importing.
"""

from secretsapp.models.user import User
from secretsapp.models.session import AuthSession

__all__ = ['User', 'AuthSession']
