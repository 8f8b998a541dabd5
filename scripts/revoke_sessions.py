"""Log a user out everywhere by revoking all of their sessions."""
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from secretsapp import create_app
from secretsapp.auth.errors import IdentityNotFound
from secretsapp.auth.services import get_auth_services

if len(sys.argv) != 2:
    raise SystemExit("usage: revoke_sessions.py USERNAME")

app = create_app()

with app.app_context():
    services = get_auth_services()
    try:
        user = services.store.find(sys.argv[1])
    except IdentityNotFound:
        raise SystemExit(f"No such user: {sys.argv[1]}")
    count = services.sessions.revoke_all(user)
    print(f"Revoked {count} session(s) for {user.identifier}")
