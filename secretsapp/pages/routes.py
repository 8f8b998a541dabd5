"""
Page Routes
"""

from flask import render_template
from flask_login import login_required, current_user

from secretsapp.auth.decorators import no_cache
from secretsapp.pages import pages_bp


@pages_bp.route('/')
def home():
    """Public landing page"""
    return render_template('pages/home.html')


@pages_bp.route('/secrets')
@no_cache
@login_required
def secrets():
    """Protected page, only served to an authenticated session"""
    return render_template('pages/secrets.html', identifier=current_user.identifier)
