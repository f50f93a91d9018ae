"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


def _env_flag(name, default='False'):
    return os.getenv(name, default).lower() in ('1', 'true', 'yes')


class Config:
    """Base configuration class with all settings."""

    DEBUG = _env_flag('DEBUG')
    TESTING = False

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')
    STATIC_DIR = os.getenv('STATIC_DIR', 'public')

    # Game Settings
    MAX_GUESSES = int(os.getenv('MAX_GUESSES', 6))
    WORD_LIST_PATH = os.getenv('WORD_LIST_PATH')  # None -> packaged words.json
    REQUIRE_DICTIONARY_WORD = _env_flag('REQUIRE_DICTIONARY_WORD')
    DEDUPE_WRONG_LETTERS = _env_flag('DEDUPE_WRONG_LETTERS')

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')
    LOG_TO_FILE = _env_flag('LOG_TO_FILE', 'True')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    LOG_TO_FILE = False
    MAX_GUESSES = 6
    REQUIRE_DICTIONARY_WORD = False
    DEDUPE_WRONG_LETTERS = False


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
