"""User account service functions.

Passwords are hashed here, on every write path that sets one, rather than in
a model hook.
"""
from typing import Optional

from flask import current_app

from errors import Unauthenticated, ValidationError
from extensions import db
from models import User

REGISTRATION_ROLES = ('user', 'publisher')

# Fields an account owner may change through update-details
DETAIL_FIELDS = ('name', 'email')


def _normalize_email(email: Optional[str]) -> Optional[str]:
    return email.strip().lower() if isinstance(email, str) else email


def create_user(name: str, email: str, password: str, role: str = None) -> User:
    """Create a new user with the given credentials."""
    user = User(
        name=name.strip() if isinstance(name, str) else name,
        email=_normalize_email(email),
        role=role or 'user'
    )
    user.validate(password=password or '')
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    current_app.logger.info(f'User {user.email} created with role {user.role}')
    return user


def register_user(name: str, email: str, password: str, role: str = None) -> User:
    """Self-service registration; admin accounts cannot be self-assigned."""
    if role is not None and role not in REGISTRATION_ROLES:
        raise ValidationError(f'{role} is not a valid role')
    return create_user(name=name, email=email, password=password, role=role)


def authenticate(email: str, password: str) -> User:
    if not isinstance(email, str) or not isinstance(password, str) or not email or not password:
        raise ValidationError('Please provide an email and password')
    user = User.query.filter_by(email=_normalize_email(email)).first()
    if user is None or not user.check_password(password):
        raise Unauthenticated('Invalid credentials')
    return user


def find_by_email(email: str) -> Optional[User]:
    if not isinstance(email, str):
        return None
    return User.query.filter_by(email=_normalize_email(email)).first()


def update_details(user: User, data: dict) -> User:
    """Change the name and/or email of ``user``."""
    for field in DETAIL_FIELDS:
        if field in data and data[field] is not None:
            value = data[field]
            setattr(user, field, _normalize_email(value) if field == 'email' else value)
    user.validate()
    db.session.commit()
    return user


def update_password(user: User, current_password: str, new_password: str) -> User:
    if not isinstance(current_password, str) or not user.check_password(current_password):
        raise Unauthenticated('Password is incorrect')
    user.validate(password=new_password or '')
    user.set_password(new_password)
    db.session.commit()
    current_app.logger.info(f'Password updated for user {user.id}')
    return user


def update_user(user: User, data: dict) -> User:
    """Administrative update of any account field, password included."""
    for field in ('name', 'email', 'role'):
        if field in data and data[field] is not None:
            value = data[field]
            setattr(user, field, _normalize_email(value) if field == 'email' else value)
    password = data.get('password')
    user.validate(password=password)
    if password:
        user.set_password(password)
    db.session.commit()
    return user


def delete_user(user: User) -> None:
    """Delete ``user`` with everything they own.

    Averages of other users' bootcamps that this user's courses or reviews
    contributed to are recomputed afterwards.
    """
    from services.course_service import update_average_cost
    from services.review_service import update_average_rating

    user_id = user.id
    owned = {bootcamp.id for bootcamp in user.bootcamps}
    costed = {course.bootcamp_id for course in user.courses} - owned
    rated = {review.bootcamp_id for review in user.reviews} - owned

    db.session.delete(user)
    db.session.commit()

    for bootcamp_id in costed:
        update_average_cost(bootcamp_id)
    for bootcamp_id in rated:
        update_average_rating(bootcamp_id)
    current_app.logger.info(f'User {user_id} deleted')
