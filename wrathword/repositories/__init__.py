"""
Repositories Package

Collaborator contracts of the game engine and their implementations.
"""

from .interfaces import WordList, GameRepository, CompletionRepository, StatsRepository
from .word_list import StaticWordList
from .memory_store import InMemoryGameRepository, InMemoryCompletionRepository, InMemoryStatsRepository
from .file_store import (
    JsonFileStore, JsonFileGameRepository, JsonFileCompletionRepository, JsonFileStatsRepository
)
from .mongo_store import (
    MongoGameRepository, MongoCompletionRepository, MongoStatsRepository, connect_database
)

__all__ = [
    'WordList', 'GameRepository', 'CompletionRepository', 'StatsRepository',
    'StaticWordList',
    'InMemoryGameRepository', 'InMemoryCompletionRepository', 'InMemoryStatsRepository',
    'JsonFileStore', 'JsonFileGameRepository', 'JsonFileCompletionRepository', 'JsonFileStatsRepository',
    'MongoGameRepository', 'MongoCompletionRepository', 'MongoStatsRepository', 'connect_database'
]
