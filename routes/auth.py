from datetime import timedelta
from functools import wraps

from flask import Blueprint, current_app, jsonify, request, url_for

from services import user_service
from services.auth_service import check_role, resolve_identity, sign_token
from services.password_reset_service import PasswordResetService
from errors import NotFound, ValidationError

auth_bp = Blueprint('auth', __name__)

TOKEN_COOKIE = 'token'


def protect(f):
    """Require a valid session token.

    The resolved user is handed to the view as the ``current_user`` keyword
    argument.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        user = resolve_identity(
            request.headers.get('Authorization'),
            request.cookies.get(TOKEN_COOKIE)
        )
        kwargs['current_user'] = user
        return f(*args, **kwargs)
    return decorated_function


def authorize(*roles):
    """Restrict a protected view to the given roles. Apply below ``protect``."""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            check_role(kwargs['current_user'], roles)
            return f(*args, **kwargs)
        return decorated_function
    return decorator


def json_body():
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data


def send_token_response(user, status_code=200):
    """Respond with a fresh session token, also set as an HTTP-only cookie."""
    token = sign_token(user)
    response = jsonify({'success': True, 'token': token})
    response.set_cookie(
        TOKEN_COOKIE,
        token,
        max_age=int(timedelta(days=current_app.config['JWT_COOKIE_EXPIRE_DAYS']).total_seconds()),
        httponly=True,
        secure=current_app.config.get('JWT_COOKIE_SECURE', False),
        samesite='Lax',
    )
    return response, status_code


@auth_bp.route('/register', methods=['POST'])
def register():
    data = json_body()
    user = user_service.register_user(
        name=data.get('name'),
        email=data.get('email'),
        password=data.get('password'),
        role=data.get('role')
    )
    return send_token_response(user)


@auth_bp.route('/login', methods=['POST'])
def login():
    data = json_body()
    user = user_service.authenticate(data.get('email'), data.get('password'))
    current_app.logger.info(f'User {user.email} logged in successfully')
    return send_token_response(user)


@auth_bp.route('/logout', methods=['GET'])
def logout():
    response = jsonify({'success': True, 'data': {}})
    response.set_cookie(TOKEN_COOKIE, 'none', max_age=10, httponly=True)
    return response


@auth_bp.route('/me', methods=['GET'])
@protect
def get_me(current_user):
    return jsonify({'success': True, 'data': current_user.to_dict()})


@auth_bp.route('/updatedetails', methods=['PUT'])
@protect
def update_details(current_user):
    user = user_service.update_details(current_user, json_body())
    return jsonify({'success': True, 'data': user.to_dict()})


@auth_bp.route('/updatepassword', methods=['PUT'])
@protect
def update_password(current_user):
    data = json_body()
    user = user_service.update_password(
        current_user,
        data.get('current_password'),
        data.get('new_password')
    )
    return send_token_response(user)


@auth_bp.route('/forgotpassword', methods=['POST'])
def forgot_password():
    data = json_body()
    user = user_service.find_by_email(data.get('email') or '')
    if user is None:
        raise NotFound('There is no user with that email')

    reset_service = PasswordResetService()
    reset_service.request_password_reset(
        user,
        lambda token: url_for('auth.reset_password', resettoken=token, _external=True)
    )
    current_app.logger.info(f'Password reset requested for {user.email}')
    return jsonify({'success': True, 'data': 'Email sent'})


@auth_bp.route('/resetpassword/<resettoken>', methods=['PUT'])
def reset_password(resettoken):
    data = json_body()
    reset_service = PasswordResetService()
    user = reset_service.consume_reset_token(resettoken, data.get('password') or '')
    return send_token_response(user)
