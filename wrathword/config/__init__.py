"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: runtime configuration (environment-based)
- game_settings.py: game rules, constants and word-list loading
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    VALID_LENGTHS, DEFAULT_LENGTH, DEFAULT_MAX_ROWS, is_valid_length,
    load_word_lists, validate_word_list_integrity, get_word_statistics
)

__all__ = [
    # Runtime configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'VALID_LENGTHS', 'DEFAULT_LENGTH', 'DEFAULT_MAX_ROWS', 'is_valid_length',
    'load_word_lists', 'validate_word_list_integrity', 'get_word_statistics'
]
