"""
Configuration Package

Contains all configuration-related files and settings.

This package separates three types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, constants and the word list
- theme.py: Colour palettes served to clients
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    WORD_LIST, WORD_SET, WORD_LENGTH, MAX_ATTEMPTS,
    validate_word_list_integrity, get_word_statistics
)
from .theme import GAME_COLORS, get_theme

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LIST', 'WORD_SET', 'WORD_LENGTH', 'MAX_ATTEMPTS',
    'validate_word_list_integrity', 'get_word_statistics',
    # Theme
    'GAME_COLORS', 'get_theme'
]
