import os


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Web server settings
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', 5000))
    DEBUG = os.environ.get('DEBUG', 'False').lower() == 'true'

    # Converter settings
    # Strict mode only accepts the known IFF/status letters in TTM sentences
    STRICT_CODE_LETTERS = os.environ.get('STRICT_CODE_LETTERS', 'True').lower() == 'true'

    # Payload limits
    MAX_LINES_PER_PAYLOAD = int(os.environ.get('MAX_LINES_PER_PAYLOAD', 1000))

    # Echo every converted message to the console
    LOG_PARSED_MESSAGES = os.environ.get('LOG_PARSED_MESSAGES', 'False').lower() == 'true'


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_PARSED_MESSAGES = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    LOG_PARSED_MESSAGES = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    STRICT_CODE_LETTERS = True
    MAX_LINES_PER_PAYLOAD = 50
    LOG_PARSED_MESSAGES = False


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': Config
}
