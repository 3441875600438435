from flask import Flask, jsonify, request
from config import get_config
from extensions import db, migrate, bcrypt, mail
from errors import register_error_handlers
import logging
from logging.handlers import RotatingFileHandler
import os

def configure_logging(app):
    """Send app logs to a rotating file, or stdout when LOG_TO_STDOUT is set."""
    if app.debug or app.testing:
        return

    if app.config.get('LOG_TO_STDOUT'):
        handler = logging.StreamHandler()
    else:
        if not os.path.exists('logs'):
            os.mkdir('logs')
        handler = RotatingFileHandler('logs/bootcamp_directory.log', maxBytes=10240, backupCount=10)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'))
    level = getattr(logging, app.config.get('LOG_LEVEL', 'INFO'), logging.INFO)
    handler.setLevel(level)
    app.logger.addHandler(handler)
    app.logger.setLevel(level)
    app.logger.info('Bootcamp Directory startup')

def create_app(config_name=None):
    app = Flask(__name__)

    # Get configuration based on environment or passed parameter
    if config_name:
        from config import config
        app.config.from_object(config[config_name])
    else:
        app.config.from_object(get_config())

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    bcrypt.init_app(app)
    mail.init_app(app)

    # Import models to register them with SQLAlchemy
    from models import User, Bootcamp, Course, Review  # noqa: F401

    configure_logging(app)

    # Request logging
    if app.config.get('LOG_REQUESTS'):
        @app.after_request
        def log_request(response):
            app.logger.info(f'{request.method} {request.url} {response.status_code}')
            return response

    # Register blueprints
    from routes import register_blueprints
    register_blueprints(app)

    # Main route
    @app.route('/')
    def index():
        return jsonify({'success': True, 'data': 'Bootcamp Directory API', 'version': 'v1'})

    # Error handlers
    register_error_handlers(app)

    return app
