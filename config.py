import os

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


def env_flag(name, default=False):
    """Read a boolean flag from the environment ('1', 'true', 'yes', 'on')"""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    MAX_CONTENT_LENGTH = 64 * 1024  # 64KB, a contact form never needs more
    JSON_AS_ASCII = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Server
    PORT = int(os.environ.get('PORT', '5000'))
    ENABLE_SITE = env_flag('ENABLE_SITE', True)

    # Outbound mail (relay)
    EMAIL_USER = os.environ.get('EMAIL_USER')
    EMAIL_PASS = os.environ.get('EMAIL_PASS')
    SMTP_HOST = os.environ.get('SMTP_HOST', 'smtp.gmail.com')
    SMTP_PORT = int(os.environ.get('SMTP_PORT', '587'))
    SMTP_USE_TLS = env_flag('SMTP_USE_TLS', True)
    CONTACT_RECIPIENT = os.environ.get('CONTACT_RECIPIENT') or EMAIL_USER

    # Contact form (client side)
    API_BASE_URL = os.environ.get('API_BASE_URL', 'http://localhost:5000')
    RELAY_TIMEOUT = float(os.environ['RELAY_TIMEOUT']) if os.environ.get('RELAY_TIMEOUT') else None
    CONTACT_DEMO_MODE = env_flag('CONTACT_DEMO_MODE', False)

    # CORS for the relay endpoints
    CORS_ORIGINS = [
        o.strip() for o in os.environ.get('CORS_ORIGINS', '*').split(',') if o.strip()
    ]

    # Static content
    DATA_DIR = os.environ.get('DATA_DIR', os.path.join(BASE_DIR, 'data'))
    SITE_OWNER = os.environ.get('SITE_OWNER', 'Portfolio')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SECRET_KEY = 'testing-secret'
    EMAIL_USER = 'owner@example.com'
    EMAIL_PASS = 'app-password'
    CONTACT_RECIPIENT = 'owner@example.com'
    API_BASE_URL = 'http://relay.test'
    CONTACT_DEMO_MODE = False
    CORS_ORIGINS = ['*']
    ENABLE_SITE = True


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(config_name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
