import os
import random
import tempfile

# Keep test logs out of the working tree; read when palabra.config is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='palabra-logs-'))

import pytest

from palabra import create_app
from palabra.config import TestingConfig
from palabra.services.game_service import GameService, initialize_game_service
from palabra.services.stats_service import MemoryStatsStore, StatsService, initialize_stats_service

TEST_WORDS = [
    'perro', 'gatos', 'verde', 'mundo', 'débil', 'señor',
    'papel', 'pasta', 'salir', 'playa', 'héroe', 'leche',
]


@pytest.fixture
def stats_service():
    return StatsService(MemoryStatsStore())


@pytest.fixture
def game_service(stats_service):
    return GameService(stats_service=stats_service, word_list=TEST_WORDS, rng=random.Random(7))


@pytest.fixture
def services():
    stats = initialize_stats_service(MemoryStatsStore())
    game = initialize_game_service(stats, word_list=TEST_WORDS, max_attempts=6)
    return game, stats


@pytest.fixture
def app(services):
    app, socketio = create_app(TestingConfig)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
