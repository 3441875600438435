import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    # Security settings
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'
    SERVER_NAME = os.environ.get('SERVER_NAME')
    APPLICATION_ROOT = os.environ.get('APPLICATION_ROOT', '/')
    PREFERRED_URL_SCHEME = os.environ.get('PREFERRED_URL_SCHEME', 'http')

    # Database configuration
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///bootcamp_directory.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # JSON web tokens
    JWT_SECRET = os.environ.get('JWT_SECRET') or 'dev-jwt-secret-change-in-production'
    JWT_ALGORITHM = os.environ.get('JWT_ALGORITHM', 'HS256')
    JWT_EXPIRE_DAYS = int(os.environ.get('JWT_EXPIRE_DAYS', 30))
    JWT_COOKIE_EXPIRE_DAYS = int(os.environ.get('JWT_COOKIE_EXPIRE_DAYS', 30))
    JWT_COOKIE_SECURE = False

    # Password reset tokens are short lived
    RESET_TOKEN_EXPIRE_MINUTES = int(os.environ.get('RESET_TOKEN_EXPIRE_MINUTES', 10))

    # Password hashing cost
    BCRYPT_LOG_ROUNDS = int(os.environ.get('BCRYPT_LOG_ROUNDS', 12))

    # Email configuration
    MAIL_SERVER = os.environ.get('MAIL_SERVER')
    MAIL_PORT = int(os.environ.get('MAIL_PORT', 587))
    MAIL_USE_TLS = os.environ.get('MAIL_USE_TLS', 'True').lower() == 'true'
    MAIL_USERNAME = os.environ.get('MAIL_USERNAME')
    MAIL_PASSWORD = os.environ.get('MAIL_PASSWORD')
    MAIL_DEFAULT_SENDER = os.environ.get('MAIL_DEFAULT_SENDER', 'noreply@bootcamp-directory.io')

    # Geocoding provider (MapQuest compatible)
    GEOCODER_URL = os.environ.get('GEOCODER_URL', 'https://www.mapquestapi.com/geocoding/v1/address')
    GEOCODER_API_KEY = os.environ.get('GEOCODER_API_KEY')
    GEOCODER_TIMEOUT = int(os.environ.get('GEOCODER_TIMEOUT', 10))

    # File upload settings
    MAX_CONTENT_LENGTH = int(os.environ.get('MAX_CONTENT_LENGTH', 16 * 1024 * 1024))  # 16MB default
    MAX_FILE_UPLOAD = int(os.environ.get('MAX_FILE_UPLOAD', 1000000))
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER', 'public/uploads')

    # Pagination
    RESULTS_PER_PAGE = int(os.environ.get('RESULTS_PER_PAGE', 25))
    RESULTS_MAX_LIMIT = int(os.environ.get('RESULTS_MAX_LIMIT', 100))  # 0 disables the clamp

    # Logging
    LOG_TO_STDOUT = os.environ.get('LOG_TO_STDOUT', 'False').lower() == 'true'
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
    LOG_REQUESTS = os.environ.get('LOG_REQUESTS', 'False').lower() == 'true'

    # Debug mode - automatically set based on environment
    DEBUG = os.environ.get('FLASK_ENV', 'development').lower() == 'development'

    # Testing mode
    TESTING = False

class ProductionConfig(Config):
    DEBUG = False
    JWT_COOKIE_SECURE = True


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_REQUESTS = True

class TestingConfig(Config):
    TESTING = True
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    JWT_SECRET = 'test-jwt-secret'
    BCRYPT_LOG_ROUNDS = 4
    MAIL_SUPPRESS_SEND = True
    GEOCODER_API_KEY = None

config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': Config
}

def get_config():
    """Get configuration based on environment variable"""
    env = os.environ.get('FLASK_ENV', 'development').lower()
    return config.get(env, config['default'])
