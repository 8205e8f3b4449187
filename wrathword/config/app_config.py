"""
Runtime Configuration

Storage backend, word files and logging, read from the environment (and a
.env file when present). Game rules live in game_settings.py.
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env (if present)
load_dotenv()

_CONFIG_DIR = os.path.dirname(os.path.abspath(__file__))


class Config:
    """Base configuration class with all settings."""

    # Word files (board defaults are game rules, see game_settings.py)
    WORDS_DIR = os.getenv('WORDS_DIR', os.path.join(_CONFIG_DIR, 'words'))

    # Storage Settings ("memory", "file" or "mongo")
    STORAGE_BACKEND = os.getenv('STORAGE_BACKEND', 'file').lower()
    STATE_DIR = os.getenv('STATE_DIR', '.wrathword')

    # Database Settings
    MONGO_URI = os.getenv('MONGO_URI')
    MONGO_DB = os.getenv('MONGO_DB', 'wrathword')

    # Player scope for stored keys (unset = shared keys)
    PLAYER_ID = os.getenv('PLAYER_ID') or None

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR') or None


class DevelopmentConfig(Config):
    """Development configuration."""
    LOG_LEVEL = 'DEBUG'


class ProductionConfig(Config):
    """Production configuration."""
    STORAGE_BACKEND = os.getenv('STORAGE_BACKEND', 'mongo').lower()


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    STORAGE_BACKEND = 'memory'
    LOG_DIR = None


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
