"""
Stats Service

Persists the win/loss record behind a small storage interface so the game
logic never touches a concrete backend.
"""

import json
import os
import tempfile
import threading
from typing import Optional

from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..models.stats import Stats
from ..utils.game_logger import game_logger

STATS_KEY = 'wordle_stats'


class StatsStore:
    """Read/write interface for the stats record."""

    def read(self) -> Stats:
        raise NotImplementedError

    def write(self, stats: Stats) -> None:
        raise NotImplementedError


class MemoryStatsStore(StatsStore):
    """Keeps the record in process memory."""

    def __init__(self, stats: Optional[Stats] = None):
        self._stats = stats.to_dict() if stats else None

    def read(self) -> Stats:
        if self._stats is None:
            return Stats()
        return Stats.from_dict(self._stats)

    def write(self, stats: Stats) -> None:
        self._stats = stats.to_dict()


class JsonFileStatsStore(StatsStore):
    """
    Keeps the record in a JSON file as {STATS_KEY: {"wins": .., "losses": ..}}.

    Other keys already in the file are preserved on write. Writes go to a
    temporary file that replaces the real one, so a failed write leaves the
    previous record intact. An empty file reads as no record.
    """

    def __init__(self, path: str):
        self.path = path

    def _load(self) -> dict:
        if not os.path.exists(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            content = f.read()
        if not content.strip():
            return {}
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ValueError(f"Stats file {self.path} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Stats file {self.path} must contain a JSON object")
        return data

    def read(self) -> Stats:
        record = self._load().get(STATS_KEY)
        if not record:
            return Stats()
        return Stats.from_dict(record)

    def write(self, stats: Stats) -> None:
        data = self._load()
        data[STATS_KEY] = stats.to_dict()
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".stats-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise


class MongoStatsStore(StatsStore):
    """Keeps the record as a single document in a MongoDB collection."""

    def __init__(self, collection):
        self.collection = collection

    @classmethod
    def from_uri(cls, mongo_uri: str, db_name: str = 'wordle_game') -> "MongoStatsStore":
        """
        Connects to MongoDB and returns a store on the `stats` collection.

        Raises:
            Exception: If the server does not answer a ping
        """
        client = MongoClient(mongo_uri, server_api=ServerApi('1'))
        try:
            client.admin.command('ping')
            game_logger.logger.info("Successfully connected to MongoDB for stats storage")
        except Exception as e:
            game_logger.logger.error(f"MongoDB connection error: {e}")
            client.close()
            raise
        return cls(client[db_name].stats)

    def read(self) -> Stats:
        document = self.collection.find_one({'_id': STATS_KEY})
        if not document:
            return Stats()
        return Stats.from_dict(document)

    def write(self, stats: Stats) -> None:
        self.collection.replace_one(
            {'_id': STATS_KEY},
            {'_id': STATS_KEY, **stats.to_dict()},
            upsert=True
        )


def create_stats_store(config) -> StatsStore:
    """
    Builds the stats store named by config.STATS_BACKEND.

    Args:
        config: Configuration class or object

    Raises:
        ValueError: If the backend is unknown or Mongo has no URI
    """
    backend = (getattr(config, 'STATS_BACKEND', 'memory') or 'memory').lower()

    if backend == 'memory':
        return MemoryStatsStore()
    if backend == 'file':
        return JsonFileStatsStore(config.STATS_FILE)
    if backend == 'mongo':
        if not config.MONGO_URI:
            raise ValueError("STATS_BACKEND is 'mongo' but MONGO_URI is not configured")
        return MongoStatsStore.from_uri(config.MONGO_URI, config.MONGO_DB)

    raise ValueError(f"Unknown stats backend: {backend}")


class StatsService:
    """
    Reads and updates the win/loss record through an injected StatsStore.
    """

    def __init__(self, store: StatsStore):
        self.store = store
        self._lock = threading.Lock()

    def get_stats(self) -> Stats:
        return self.store.read()

    def record_result(self, won: bool) -> Stats:
        """
        Adds one win or one loss to the stored record.

        Returns:
            The updated record
        """
        with self._lock:
            stats = self.store.read()
            updated = Stats(
                wins=stats.wins + (1 if won else 0),
                losses=stats.losses + (0 if won else 1)
            )
            self.store.write(updated)
        return updated


# Global service instance
_stats_service = None


def get_stats_service() -> Optional[StatsService]:
    """Get the global stats service instance."""
    return _stats_service


def initialize_stats_service(store: StatsStore) -> StatsService:
    """Initialize the global stats service instance."""
    global _stats_service
    _stats_service = StatsService(store)
    return _stats_service
