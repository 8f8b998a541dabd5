from datetime import timedelta

from secretsapp.extensions import db
from secretsapp.models import AuthSession
from secretsapp.models.user import utcnow


def test_init_db_command(app):
    result = app.test_cli_runner().invoke(args=['init-db'])
    assert result.exit_code == 0
    assert 'Database tables created.' in result.output


def test_purge_sessions_command(app):
    with app.app_context():
        services = app.extensions['auth']
        user = services.store.create('a@x.com', 'pw1')
        stale = services.sessions.issue(user)
        services.sessions.issue(user)
        db.session.get(AuthSession, stale).last_seen_at = utcnow() - timedelta(days=1)
        db.session.commit()

    result = app.test_cli_runner().invoke(args=['purge-sessions'])
    assert result.exit_code == 0
    assert 'Purged 1 expired session(s).' in result.output

    with app.app_context():
        assert AuthSession.query.count() == 1
