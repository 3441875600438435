"""Application error types and the central error translator.

Every failure raised by a route or service ends up in one of the handlers
registered by ``register_error_handlers`` and is serialized as
``{"success": false, "error": message}``.
"""
from typing import Iterable

from flask import current_app, jsonify
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import HTTPException

from extensions import db


class ErrorResponse(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {'success': False, 'error': self.message}


class ValidationError(ErrorResponse):
    status_code = 400

    @classmethod
    def from_messages(cls, messages: Iterable[str]):
        return cls(', '.join(messages))


class InvalidOrExpiredToken(ValidationError):
    def __init__(self, message: str = 'Invalid token'):
        super().__init__(message)


class NotFound(ErrorResponse):
    status_code = 404

    @classmethod
    def for_id(cls, resource_id):
        return cls(f'Resource not found with id of {resource_id}')


class Unauthenticated(ErrorResponse):
    status_code = 401

    def __init__(self, message: str = 'Not authorized to access this route'):
        super().__init__(message)


class Unauthorized(ErrorResponse):
    status_code = 403


class Conflict(ErrorResponse):
    status_code = 400

    def __init__(self, message: str = 'Duplicate field value entered'):
        super().__init__(message)


class UpstreamFailure(ErrorResponse):
    status_code = 500


def register_error_handlers(app):
    """Attach the JSON error translator to ``app``."""

    @app.errorhandler(ErrorResponse)
    def handle_error_response(error):
        # Discard whatever the failed request assigned before it was rejected
        db.session.rollback()
        if error.status_code >= 500:
            current_app.logger.error(f'{error.__class__.__name__}: {error.message}')
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(IntegrityError)
    def handle_integrity_error(error):
        db.session.rollback()
        current_app.logger.info(f'Integrity error: {error.orig}')
        if 'unique' in str(error.orig).lower():
            return handle_error_response(Conflict())
        return handle_error_response(ValidationError('Invalid or missing field value'))

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return jsonify({'success': False, 'error': error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        db.session.rollback()
        current_app.logger.exception(f'Unhandled error: {error}')
        return jsonify({'success': False, 'error': 'Server Error'}), 500
