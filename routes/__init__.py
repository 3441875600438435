# Blueprint registration module
# Import all blueprints
from .auth import auth_bp
from .bootcamps import bootcamps_bp
from .courses import courses_bp
from .reviews import reviews_bp
from .users import users_bp

API_PREFIX = '/api/v1'


def register_blueprints(app):
    app.register_blueprint(auth_bp, url_prefix=f'{API_PREFIX}/auth')
    app.register_blueprint(bootcamps_bp, url_prefix=f'{API_PREFIX}/bootcamps')
    app.register_blueprint(courses_bp, url_prefix=API_PREFIX)
    app.register_blueprint(reviews_bp, url_prefix=API_PREFIX)
    app.register_blueprint(users_bp, url_prefix=f'{API_PREFIX}/users')


__all__ = [
    'auth_bp',
    'bootcamps_bp',
    'courses_bp',
    'reviews_bp',
    'users_bp',
    'register_blueprints',
]
