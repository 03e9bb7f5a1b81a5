"""Knowledge builder: composes the baseline tree with every overlay layer.

Precedence, lowest to highest: static baseline, database overlay, JSON file
overlay, CSV file overlay. A layer whose loader reports no data is skipped,
so the worst case is the bare baseline.
"""
import asyncio
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional

from ..app.config import Config
from ..utils.logger import get_logger
from .loaders import CacheSlot, CsvFileLoader, DatabaseOverlayLoader, JsonFileLoader, OverlayLoader
from .merge import deep_merge
from .static_knowledge import STATIC_KNOWLEDGE

logger = get_logger()

Tree = Dict[str, Any]


@dataclass(frozen=True)
class OverlayLayer:
    source: str
    rank: int
    tree: Tree


def compose_knowledge(baseline: Tree, layers: Iterable[OverlayLayer]) -> Tree:
    composed = deep_merge({}, baseline)
    for layer in sorted(layers, key=lambda l: l.rank):
        composed = deep_merge(composed, layer.tree)
    return composed


class KnowledgeBuilder:
    """Builds and caches the composed knowledge tree.

    The composed tree is a shared snapshot: callers must treat it as
    read-only. It is reused while both the builder slot and the database
    loader's cache are fresh; ``invalidate()`` drops both.
    """

    def __init__(
        self,
        baseline: Optional[Tree] = None,
        database_loader: Optional[DatabaseOverlayLoader] = None,
        json_loader: Optional[OverlayLoader] = None,
        csv_loader: Optional[OverlayLoader] = None,
        ttl: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.baseline = STATIC_KNOWLEDGE if baseline is None else baseline
        self.database_loader = database_loader or DatabaseOverlayLoader(clock=clock)
        self.json_loader = json_loader or JsonFileLoader()
        self.csv_loader = csv_loader or CsvFileLoader()
        self.ttl = Config.KNOWLEDGE_CACHE_TTL_SEC if ttl is None else ttl
        self._clock = clock
        self._slot = CacheSlot(value=None, expires_at=float("-inf"))
        self._layers: List[OverlayLayer] = []

    @property
    def loaders(self) -> List[OverlayLoader]:
        # precedence order, lowest first
        return [self.database_loader, self.json_loader, self.csv_loader]

    @property
    def last_layers(self) -> List[OverlayLayer]:
        return list(self._layers)

    async def build_layers(self) -> List[OverlayLayer]:
        loaders = self.loaders
        results = await asyncio.gather(*(loader.load() for loader in loaders), return_exceptions=True)

        layers = []
        for rank, (loader, result) in enumerate(zip(loaders, results), start=1):
            if isinstance(result, BaseException):
                logger.warning(f"Knowledge layer '{loader.source}' failed ({result}), treating it as empty")
                continue
            if result is None:
                logger.warning(f"Knowledge layer '{loader.source}' not available, treating it as empty")
                continue
            layers.append(OverlayLayer(source=loader.source, rank=rank, tree=result))
        return layers

    async def build_knowledge(self, force_refresh: bool = False) -> Tree:
        now = self._clock()
        slot = self._slot
        if not force_refresh and slot.is_fresh(now) and self.database_loader.is_warm:
            logger.debug("Composed knowledge cache hit")
            return slot.value

        layers = await self.build_layers()
        composed = compose_knowledge(self.baseline, layers)
        self._layers = layers
        self._slot = CacheSlot(value=composed, expires_at=now + self.ttl)
        logger.debug(f"Composed knowledge rebuilt from {[l.source for l in layers] or ['baseline']}")
        return composed

    def invalidate(self) -> None:
        self._slot = CacheSlot(value=None, expires_at=float("-inf"))
        self.database_loader.invalidate()


_builder: Optional[KnowledgeBuilder] = None


def get_knowledge_builder() -> KnowledgeBuilder:
    global _builder
    if _builder is None:
        _builder = KnowledgeBuilder()
    return _builder
