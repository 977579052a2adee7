# File: qr_attendance/config.py
"""Configuration module for QR Attendance."""
import os


class Config:
    """Base configuration."""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///attendance.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = False

    # Schema bootstrap
    AUTO_INIT_DB = True
    SEED_DEMO_DATA = True

    # CORS
    CORS_ORIGINS = "*"

    # Rate Limiting
    RATELIMIT_STORAGE_URI = os.environ.get('RATELIMIT_STORAGE_URI') or 'memory://'
    RATELIMIT_DEFAULT = "2000 per hour"
    SESSION_CREATE_RATE_LIMIT = "30 per hour"

    # Check-in sessions
    SESSION_DEFAULT_DURATION_MINUTES = 30
    SESSION_MAX_DURATION_MINUTES = 24 * 60
    # Overrides the request host when building check-in URLs (e.g. behind a proxy)
    PUBLIC_BASE_URL = os.environ.get('PUBLIC_BASE_URL')

    # QR rendering
    QR_BOX_SIZE = 10
    QR_BORDER = 4

    # Logging
    LOG_LEVEL = 'INFO'
    LOG_FILE = os.environ.get('LOG_FILE') or 'logs/app.log'


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    TESTING = False
    SQLALCHEMY_DATABASE_URI = os.environ.get('DEV_DATABASE_URL') or \
        'sqlite:///attendance.db'
    LOG_LEVEL = 'DEBUG'


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    TESTING = False
    SECRET_KEY = os.environ.get('SECRET_KEY')  # Must be set in production
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///attendance.db'

    # Enhanced security
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    LOG_FILE = os.environ.get('LOG_FILE') or '/app/logs/app.log'


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    AUTO_INIT_DB = False
    SEED_DEMO_DATA = False
    RATELIMIT_ENABLED = False
    PUBLIC_BASE_URL = None
    LOG_LEVEL = 'WARNING'


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(config_name: str = None):
    """Get configuration by name."""
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'default')
    return config.get(config_name, config['default'])
