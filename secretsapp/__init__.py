"""
Secrets - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging

from flask import Flask, redirect, render_template, request, url_for
from sqlalchemy.exc import SQLAlchemyError

from secretsapp.extensions import db, login_manager
from secretsapp.config import Config

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    logging.getLogger('secretsapp').setLevel(app.config['LOG_LEVEL'])

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)

    from secretsapp.auth.services import init_auth_services, get_auth_services
    init_auth_services(app, db)

    # Register blueprints
    from secretsapp.auth import auth_bp
    from secretsapp.pages import pages_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(pages_bp)

    from secretsapp.cli import register_commands
    register_commands(app)

    # Flask-Login hands us whatever SessionPrincipal.get_id() returned: the session id
    @login_manager.user_loader
    def load_user(session_id):
        from secretsapp.auth.errors import NoSession
        from secretsapp.auth.sessions import SessionPrincipal
        try:
            user = get_auth_services().sessions.resolve(session_id)
        except NoSession:
            return None
        return SessionPrincipal(user, session_id)

    # Unauthenticated requests to protected pages: plain redirect, no reason given
    @login_manager.unauthorized_handler
    def unauthorized():
        return redirect(url_for('auth.login'))

    @app.errorhandler(SQLAlchemyError)
    def storage_unavailable(error):
        db.session.rollback()
        logger.error('Storage failure on %s %s', request.method, request.path, exc_info=error)
        return render_template('error.html'), 500

    # Create database tables
    with app.app_context():
        import secretsapp.models  # noqa: F401
        db.create_all()

    return app
