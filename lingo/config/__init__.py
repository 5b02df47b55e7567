"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: runtime configuration (environment-based)
- game_settings.py: game rules and constants
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config, get_config
from .game_settings import WORD_LENGTH, MAX_GUESSES, SUGGESTION_LIMIT, EMBEDDED_WORD_LIST

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config', 'get_config',
    # Game rules
    'WORD_LENGTH', 'MAX_GUESSES', 'SUGGESTION_LIMIT', 'EMBEDDED_WORD_LIST'
]
