"""Keeps the food list in step with the dashboard filters."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from food_catalog.adapters.catalog_client import CatalogClient
from food_catalog.domain.catalog import FilterSnapshot, Food, FoodQuery
from food_catalog.domain.errors import CatalogError, ErrorHandler
from food_catalog.services.filters import FilterState

_logger = logging.getLogger(__name__)


def _log_error(exc: BaseException) -> None:
    _logger.warning("Food fetch failed: %s", exc)


@dataclass
class FoodSyncController:
    """Re-queries foods whenever the filters change.

    Every fetch gets a sequence number. Only the response of the most
    recently issued fetch may replace ``foods``; older responses and
    older failures are dropped. A failure of the latest fetch escapes the
    task and is handed to ``on_error`` while ``foods`` keeps its last
    successfully loaded value.
    """

    client: CatalogClient
    filters: FilterState
    on_error: ErrorHandler = _log_error
    foods: list[Food] = field(default_factory=list)
    _latest_seq: int = 0
    _tasks: set[asyncio.Task[None]] = field(default_factory=set, repr=False)
    _unsubscribe: Callable[[], None] | None = field(default=None, repr=False)

    @property
    def started(self) -> bool:
        return self._unsubscribe is not None

    @property
    def latest_seq(self) -> int:
        return self._latest_seq

    def start(self) -> None:
        """Subscribe to the filters and fetch foods for the initial state."""
        if self.started:
            return
        self._unsubscribe = self.filters.subscribe(self._on_filters_changed)
        self._on_filters_changed(self.filters.snapshot())

    def stop(self) -> None:
        """Stop reacting to filter changes; in-flight fetches still settle."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    async def wait_idle(self) -> None:
        """Wait until no food fetch is in flight."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def _on_filters_changed(self, snapshot: FilterSnapshot) -> None:
        query = FoodQuery.from_filters(snapshot)
        self._latest_seq += 1
        seq = self._latest_seq
        _logger.debug("Issuing food fetch seq=%s params=%s", seq, query.as_params())
        task = asyncio.get_running_loop().create_task(self._load(seq, query))
        self._tasks.add(task)
        task.add_done_callback(self._finish)

    async def _load(self, seq: int, query: FoodQuery) -> None:
        try:
            foods = await self.client.list_foods(query.as_params())
        except CatalogError:
            if seq != self._latest_seq:
                _logger.debug("Ignoring failure of superseded food fetch seq=%s", seq)
                return
            raise
        if seq != self._latest_seq:
            _logger.debug(
                "Discarding stale food response seq=%s (latest=%s)",
                seq,
                self._latest_seq,
            )
            return
        self.foods = list(foods)
        _logger.debug("Loaded %s foods for seq=%s", len(self.foods), seq)

    def _finish(self, task: "asyncio.Task[None]") -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            self.on_error(exc)
