"""Session token handling and access checks.

Session tokens are HS256 JSON web tokens carrying the user id. Any problem
with a presented credential is reported as the same ``Unauthenticated``
error so callers cannot tell an expired token from a forged one.
"""
from datetime import timedelta
from typing import Optional

from flask import current_app
from jose import JWTError, jwt

from clock import utcnow
from errors import Unauthenticated, Unauthorized
from extensions import db
from models import User


def sign_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed session token for ``user``."""
    now = utcnow()
    if expires_delta is None:
        expires_delta = timedelta(days=current_app.config['JWT_EXPIRE_DAYS'])
    payload = {
        'id': user.id,
        'iat': now,
        'exp': now + expires_delta,
    }
    return jwt.encode(payload, current_app.config['JWT_SECRET'],
                      algorithm=current_app.config['JWT_ALGORITHM'])


def verify_token(token: str) -> dict:
    """Decode ``token``, checking signature and expiry. Raises JWTError."""
    return jwt.decode(token, current_app.config['JWT_SECRET'],
                      algorithms=[current_app.config['JWT_ALGORITHM']])


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the credential of a ``Bearer <token>`` header, else None."""
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) != 2 or parts[0] != 'Bearer':
        return None
    return parts[1]


def resolve_identity(authorization: Optional[str], cookie_token: Optional[str] = None) -> User:
    """Resolve request credentials to a User or raise Unauthenticated.

    The cookie is only consulted when no Authorization header was sent.
    """
    if authorization:
        token = extract_bearer_token(authorization)
    else:
        token = cookie_token if cookie_token and cookie_token != 'none' else None

    if not token:
        raise Unauthenticated()

    try:
        payload = verify_token(token)
    except JWTError as e:
        current_app.logger.info(f'Rejected session token: {e}')
        raise Unauthenticated()

    user_id = payload.get('id')
    if not isinstance(user_id, int):
        raise Unauthenticated()
    user = db.session.get(User, user_id)
    if user is None:
        raise Unauthenticated()
    return user


def check_role(user: User, roles) -> None:
    if user.role not in roles:
        raise Unauthorized(f'User role {user.role} is not authorized to access this route')


def is_owner_or_admin(resource, user: User) -> bool:
    return resource.user_id == user.id or user.role == 'admin'


def ensure_owner(resource, user: User, action: str) -> None:
    """Raise Unauthorized unless ``user`` owns ``resource`` or is an admin."""
    if not is_owner_or_admin(resource, user):
        raise Unauthorized(
            f'User {user.id} is not authorized to {action} '
            f'{resource.__class__.__name__.lower()} {resource.id}'
        )
