"""Create a user from the command line (or print that it already exists)."""
import sys
import os
from getpass import getpass

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from secretsapp import create_app
from secretsapp.auth.errors import DuplicateIdentifier
from secretsapp.auth.services import get_auth_services

app = create_app()

with app.app_context():
    username = input("Username: ").strip()
    password = getpass("Password: ")
    if password != getpass("Repeat password: "):
        raise SystemExit("Passwords do not match")

    try:
        user = get_auth_services().store.create(username, password)
        print(f"Created user {user.identifier}")
    except DuplicateIdentifier:
        print(f"User {username} already exists")
