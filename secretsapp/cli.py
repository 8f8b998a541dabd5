"""
Flask CLI commands

    flask --app app init-db
    flask --app app purge-sessions
"""

import click
from flask.cli import with_appcontext

from secretsapp.auth.services import get_auth_services
from secretsapp.extensions import db


@click.command('init-db')
@with_appcontext
def init_db_command():
    """Create any missing tables."""
    db.create_all()
    click.echo('Database tables created.')


@click.command('purge-sessions')
@with_appcontext
def purge_sessions_command():
    """Delete idle or over-age sessions."""
    count = get_auth_services().sessions.purge_expired()
    click.echo(f'Purged {count} expired session(s).')


def register_commands(app):
    app.cli.add_command(init_db_command)
    app.cli.add_command(purge_sessions_command)
