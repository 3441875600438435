"""Password Reset Service.
Issues, validates and consumes short lived password reset tokens.

Only the sha256 digest of a token is stored on the user, next to its expiry.
The plaintext is handed back once, to be emailed to the account owner.
"""
from datetime import timedelta
import hashlib
import secrets

from flask import current_app

from clock import utcnow
from errors import InvalidOrExpiredToken, UpstreamFailure
from extensions import db
from models import User
from services.email_service import send_email


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode('utf-8')).hexdigest()


class PasswordResetService:

    def issue_reset_token(self, user: User) -> str:
        """Create a reset token for ``user`` and return its plaintext.

        Saved without running model validation: only the reset fields change.
        """
        token = secrets.token_hex(20)
        minutes = current_app.config.get('RESET_TOKEN_EXPIRE_MINUTES', 10)

        user.reset_password_token = hash_token(token)
        user.reset_password_expire = utcnow() + timedelta(minutes=minutes)
        try:
            db.session.commit()
        except Exception as e:
            db.session.rollback()
            current_app.logger.error(f'Error creating reset token: {e}')
            raise

        current_app.logger.info(f'Password reset token created for user {user.id}')
        return token

    def clear_reset_token(self, user: User) -> None:
        user.clear_reset_token()
        db.session.commit()

    def find_user_by_token(self, token: str):
        """Return the user holding an unexpired ``token``, or None."""
        return User.query.filter(
            User.reset_password_token == hash_token(token),
            User.reset_password_expire > utcnow()
        ).first()

    def consume_reset_token(self, token: str, new_password: str) -> User:
        """Set ``new_password`` for the holder of ``token`` and burn the token."""
        user = self.find_user_by_token(token)
        if user is None:
            raise InvalidOrExpiredToken()

        user.validate(password=new_password)
        user.set_password(new_password)
        user.clear_reset_token()
        db.session.commit()

        current_app.logger.info(f'Password reset completed for user {user.id}')
        return user

    def request_password_reset(self, user: User, reset_url_for) -> None:
        """Issue a token and email its reset link to ``user``.

        ``reset_url_for`` maps the plaintext token to the link sent out. When
        the email cannot be sent the token is revoked again before failing.
        """
        token = self.issue_reset_token(user)
        reset_url = reset_url_for(token)
        body = (
            'You are receiving this email because you (or someone else) has '
            'requested the reset of a password. Please make a PUT request to:\n\n'
            f'{reset_url}'
        )
        try:
            send_email(user.email, 'Password reset token', body)
        except Exception as e:
            current_app.logger.error(f'Failed to send reset email to {user.email}: {e}')
            self.clear_reset_token(user)
            raise UpstreamFailure('Email could not be sent')
