"""
Configuration Management Module

Runtime configuration for the terminal game. Every setting is read from an
environment variable with a default; an optional config.env beside this
module is loaded first.
"""

import os
from dotenv import load_dotenv

from .game_settings import WORD_LENGTH, MAX_GUESSES

# Load environment variables from config.env
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Base configuration class with all settings."""

    DEBUG = _env_flag('DEBUG', 'False')
    TESTING = False

    # Dictionary Settings
    WORD_LIST_PATH = os.getenv('WORD_LIST_PATH') or None
    RESTRICT_ALPHABET = _env_flag('RESTRICT_ALPHABET', 'True')

    # Game Settings
    WORD_LENGTH = int(os.getenv('WORD_LENGTH', WORD_LENGTH))
    MAX_GUESSES = int(os.getenv('MAX_GUESSES', MAX_GUESSES))

    # Terminal Settings
    SHOW_SUGGESTIONS = _env_flag('SHOW_SUGGESTIONS', 'True')
    ESCDELAY_MS = int(os.getenv('ESCDELAY_MS', 25))

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')
    LOG_TO_FILE = _env_flag('LOG_TO_FILE', 'True')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = 'DEBUG'


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    LOG_TO_FILE = False


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': ProductionConfig
}


def get_config(name=None):
    """Return the config class named by `name` or the LINGO_ENV variable."""
    key = name or os.getenv('LINGO_ENV', 'default')
    try:
        return config[key]
    except KeyError:
        raise ValueError(f"Unknown configuration '{key}'. Expected one of: {', '.join(sorted(config))}")
