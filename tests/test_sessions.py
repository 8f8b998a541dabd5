import os
from datetime import timedelta

import pytest

from secretsapp.auth.errors import NoSession
from secretsapp.extensions import db
from secretsapp.models import AuthSession
from secretsapp.models.user import utcnow


@pytest.fixture()
def user(services):
    return services.store.create('a@x.com', 'pw1')


def test_issue_and_resolve(services, user):
    session_id = services.sessions.issue(user)
    assert services.sessions.resolve(session_id).id == user.id


def test_token_holds_no_identity_data(services, user):
    session_id = services.sessions.issue(user)
    assert 'a@x.com' not in session_id


@pytest.mark.parametrize('token', ['', None, 'not-a-real-token'])
def test_resolve_unknown_raises(services, token):
    with pytest.raises(NoSession):
        services.sessions.resolve(token)


def test_revoke_is_idempotent(services, user):
    session_id = services.sessions.issue(user)
    services.sessions.revoke(session_id)
    services.sessions.revoke(session_id)
    services.sessions.revoke('never-issued')
    services.sessions.revoke(None)

    with pytest.raises(NoSession):
        services.sessions.resolve(session_id)


def test_revoke_only_touches_one_session(services, user):
    keep = services.sessions.issue(user)
    drop = services.sessions.issue(user)
    services.sessions.revoke(drop)
    assert services.sessions.resolve(keep).id == user.id


def test_idle_session_expires(services, user):
    session_id = services.sessions.issue(user)
    record = db.session.get(AuthSession, session_id)
    record.last_seen_at = utcnow() - services.sessions.idle_timeout - timedelta(seconds=1)
    db.session.commit()

    with pytest.raises(NoSession):
        services.sessions.resolve(session_id)
    assert db.session.get(AuthSession, session_id) is None


def test_absolute_lifetime_enforced(services, user):
    session_id = services.sessions.issue(user)
    record = db.session.get(AuthSession, session_id)
    record.created_at = utcnow() - services.sessions.max_lifetime - timedelta(seconds=1)
    db.session.commit()

    with pytest.raises(NoSession):
        services.sessions.resolve(session_id)


def test_resolve_refreshes_last_seen(services, user):
    session_id = services.sessions.issue(user)
    record = db.session.get(AuthSession, session_id)
    stale = utcnow() - timedelta(minutes=5)
    record.last_seen_at = stale
    db.session.commit()

    services.sessions.resolve(session_id)
    assert db.session.get(AuthSession, session_id).last_seen_at > stale


def test_purge_expired(services, user):
    live = services.sessions.issue(user)
    dead = services.sessions.issue(user)
    db.session.get(AuthSession, dead).last_seen_at = utcnow() - timedelta(days=2)
    db.session.commit()

    assert services.sessions.purge_expired() == 1
    assert db.session.get(AuthSession, live) is not None
    assert db.session.get(AuthSession, dead) is None


def test_revoke_all(services, user):
    other = services.store.create('b@x.com', 'pw2')
    services.sessions.issue(user)
    services.sessions.issue(user)
    kept = services.sessions.issue(other)

    assert services.sessions.revoke_all(user) == 2
    assert AuthSession.query.count() == 1
    assert services.sessions.resolve(kept).id == other.id


def test_deleting_user_invalidates_sessions(services, user):
    session_id = services.sessions.issue(user)
    db.session.delete(user)
    db.session.commit()
    with pytest.raises(NoSession):
        services.sessions.resolve(session_id)


def test_tokens_are_not_sequential(services, user):
    tokens = [services.sessions.issue(user) for _ in range(50)]

    assert len(set(tokens)) == len(tokens)
    assert all(len(t) >= 43 for t in tokens)
    # Consecutive tokens share no meaningful prefix
    for a, b in zip(tokens, tokens[1:]):
        assert len(os.path.commonprefix([a, b])) < 8
