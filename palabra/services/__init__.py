"""
Services Package

Contains all business logic and service classes.
"""

from .game_service import GameService, get_game_service, initialize_game_service
from .stats_service import (
    StatsService, StatsStore, MemoryStatsStore, JsonFileStatsStore, MongoStatsStore,
    create_stats_store, get_stats_service, initialize_stats_service
)
from .scoring import InvalidInput, classify, update_disabled

__all__ = [
    'GameService', 'get_game_service', 'initialize_game_service',
    'StatsService', 'StatsStore', 'MemoryStatsStore', 'JsonFileStatsStore', 'MongoStatsStore',
    'create_stats_store', 'get_stats_service', 'initialize_stats_service',
    'InvalidInput', 'classify', 'update_disabled'
]
