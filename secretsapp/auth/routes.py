"""
Auth Routes

Register, login and logout. Every credential check goes through the
AuthStrategy; no handler builds a record holding a plaintext password.
"""

import logging

from flask import render_template, request, redirect, url_for, flash, session
from flask_login import login_user, logout_user, current_user

from secretsapp.auth import auth_bp
from secretsapp.auth.errors import DuplicateIdentifier, InvalidCredentials, InvalidIdentifier
from secretsapp.auth.services import get_auth_services
from secretsapp.auth.sessions import SessionPrincipal

logger = logging.getLogger(__name__)


def _end_current_session(services):
    """Revoke the server-side session (if any) and clear the cookie state."""
    if current_user.is_authenticated:
        services.sessions.revoke(current_user.get_id())
    logout_user()
    session.clear()


def _start_session(services, user):
    """Bind a fresh session to ``user``; the client keeps at most one."""
    _end_current_session(services)
    session_id = services.sessions.issue(user)
    login_user(SessionPrincipal(user, session_id))


@auth_bp.route('/register', methods=['GET', 'POST'])
def register():
    """User registration route"""
    services = get_auth_services()

    if request.method == 'GET':
        if current_user.is_authenticated:
            return redirect(url_for('pages.secrets'))
        return render_template('auth/register.html')

    username = request.form.get('username', '')
    password = request.form.get('password', '')

    if not password:
        flash('Please provide both username and password.', 'danger')
        return redirect(url_for('auth.register'))

    try:
        user = services.strategy.register(username, password)
    except InvalidIdentifier:
        flash('Please provide both username and password.', 'danger')
        return redirect(url_for('auth.register'))
    except DuplicateIdentifier as exc:
        logger.warning('Registration rejected, identifier taken: %s', exc.identifier)
        flash('That username is already registered.', 'danger')
        return redirect(url_for('auth.register'))

    _start_session(services, user)
    return redirect(url_for('pages.secrets'))


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """User login route"""
    services = get_auth_services()

    if request.method == 'GET':
        if current_user.is_authenticated:
            return redirect(url_for('pages.secrets'))
        return render_template('auth/login.html')

    username = request.form.get('username', '')
    password = request.form.get('password', '')

    try:
        user = services.strategy.authenticate(username, password)
    except InvalidCredentials:
        logger.warning('Failed login for %r', services.store.normalize(username))
        flash('Invalid username or password.', 'danger')
        return redirect(url_for('pages.home'))

    _start_session(services, user)
    logger.info('User %s logged in', user.identifier)
    return redirect(url_for('pages.secrets'))


@auth_bp.route('/logout')
def logout():
    """User logout route"""
    _end_current_session(get_auth_services())
    flash('You have been logged out.', 'info')
    return redirect(url_for('pages.home'))
