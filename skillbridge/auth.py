from sqlalchemy import text

from skillbridge.errors import AuthError, ValidationError
from skillbridge.utils import check_password, hash_password

_dummy_hash = None


def _spend_hash_time(password):
    """Run one bcrypt check so an unknown email costs as much as a wrong password."""
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = hash_password('not-a-real-password')
    check_password(_dummy_hash, password)


def authenticate(session, email, password):
    """
    Verify an email/password pair and return the minimal identity of the user.
    Nothing is issued: every request is authenticated on its own.
    """
    if not email or not password:
        raise ValidationError('Email and password are required')

    user = session.execute(
        text("SELECT id, name, role, password_hash FROM users WHERE email = :email"),
        {'email': str(email).strip()},
    ).fetchone()

    if not user:
        _spend_hash_time(str(password))
        raise AuthError('unknown email')

    if not check_password(user[3], str(password)):
        raise AuthError('bad credential')

    return {'id': user[0], 'name': user[1], 'role': user[2]}
