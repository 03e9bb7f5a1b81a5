"""Overlay source loaders.

Each loader produces a plain knowledge tree or None when its source has no
usable data. Loaders never raise: I/O errors, malformed content and missing
records are all reported as None.
"""
import asyncio
import json
import os
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from ..app.config import Config
from ..utils.logger import get_logger
from .csv_overlay import parse_csv_overlay, reject_json_constant
from .merge import is_plain_object

logger = get_logger()

Tree = Dict[str, Any]


class OverlayLoader(ABC):
    source: str = "overlay"

    @abstractmethod
    async def load(self) -> Optional[Tree]:
        """Return the overlay tree, or None when not available."""
        ...


@dataclass
class CacheSlot:
    value: Optional[Tree]
    expires_at: float

    def is_fresh(self, now: float) -> bool:
        return now < self.expires_at


def _fetch_from_database() -> Optional[Tree]:
    from ..data.database import SessionLocal
    from ..data.overlay_store import fetch_active_overlay

    db = SessionLocal()
    try:
        return fetch_active_overlay(db)
    finally:
        db.close()


class DatabaseOverlayLoader(OverlayLoader):
    """Loads the active overlay record, memoized in a single TTL slot.

    A found overlay is kept for ``ttl`` seconds, a miss (no active record or
    a failed query) for the shorter ``miss_ttl``.
    """

    source = "database"

    def __init__(
        self,
        fetch: Optional[Callable[[], Optional[Tree]]] = None,
        ttl: Optional[float] = None,
        miss_ttl: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._fetch = fetch or _fetch_from_database
        self.ttl = Config.OVERLAY_CACHE_TTL_SEC if ttl is None else ttl
        self.miss_ttl = Config.OVERLAY_MISS_TTL_SEC if miss_ttl is None else miss_ttl
        self._clock = clock
        self._slot = CacheSlot(value=None, expires_at=float("-inf"))

    @property
    def is_warm(self) -> bool:
        return self._slot.is_fresh(self._clock())

    async def load(self) -> Optional[Tree]:
        now = self._clock()
        slot = self._slot
        if slot.is_fresh(now):
            logger.debug("Database overlay cache hit")
            return slot.value

        logger.debug("Database overlay cache miss, querying active overlay")
        try:
            value = await asyncio.to_thread(self._fetch)
        except Exception as e:
            logger.debug(f"Database overlay query failed: {e}")
            value = None

        if value is not None and not is_plain_object(value):
            logger.debug("Database overlay is not an object, ignoring it")
            value = None

        ttl = self.ttl if value is not None else self.miss_ttl
        self._slot = CacheSlot(value=value, expires_at=now + ttl)
        return value

    def invalidate(self) -> None:
        logger.debug("Database overlay cache invalidated")
        self._slot = CacheSlot(value=None, expires_at=float("-inf"))


class JsonFileLoader(OverlayLoader):
    source = "json-file"

    def __init__(self, path: Optional[str] = None):
        self.path = path or os.path.join(Config.KNOWLEDGE_DOCS_DIR, Config.KNOWLEDGE_JSON_FILE)

    def _read(self) -> Optional[Tree]:
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f, parse_constant=reject_json_constant)
        if not is_plain_object(data):
            logger.debug(f"{self.path} does not hold a JSON object, ignoring it")
            return None
        return data

    async def load(self) -> Optional[Tree]:
        try:
            return await asyncio.to_thread(self._read)
        except FileNotFoundError:
            logger.debug(f"No JSON knowledge overlay at {self.path}")
        except Exception as e:
            logger.debug(f"Could not load JSON knowledge overlay {self.path}: {e}")
        return None


class CsvFileLoader(OverlayLoader):
    source = "csv-file"

    def __init__(self, path: Optional[str] = None):
        self.path = path or os.path.join(Config.KNOWLEDGE_DOCS_DIR, Config.KNOWLEDGE_CSV_FILE)

    def _read(self) -> Optional[Tree]:
        with open(self.path, "r", encoding="utf-8", newline="") as f:
            tree = parse_csv_overlay(f.read())
        return tree or None

    async def load(self) -> Optional[Tree]:
        try:
            return await asyncio.to_thread(self._read)
        except FileNotFoundError:
            logger.debug(f"No CSV knowledge overlay at {self.path}")
        except Exception as e:
            logger.debug(f"Could not load CSV knowledge overlay {self.path}: {e}")
        return None
