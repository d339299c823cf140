"""Loads the category list once per session."""

import asyncio
import logging
from dataclasses import dataclass, field

from food_catalog.adapters.catalog_client import CatalogClient
from food_catalog.domain.catalog import Category
from food_catalog.domain.errors import ErrorHandler

_logger = logging.getLogger(__name__)


def _log_error(exc: BaseException) -> None:
    _logger.warning("Category load failed: %s", exc)


@dataclass
class CategoryLoader:
    """Issues a single unconditional category read."""

    client: CatalogClient
    on_error: ErrorHandler = _log_error
    categories: list[Category] = field(default_factory=list)
    _task: asyncio.Task[None] | None = field(default=None, repr=False)

    @property
    def started(self) -> bool:
        return self._task is not None

    def start(self) -> None:
        """Schedule the category read; later calls do nothing."""
        if self._task is not None:
            return
        self._task = asyncio.get_running_loop().create_task(self.load())
        self._task.add_done_callback(self._finish)

    async def load(self) -> None:
        """Fetch categories and replace the collection in full."""
        categories = await self.client.list_categories()
        self.categories = list(categories)
        _logger.debug("Loaded %s categories", len(self.categories))

    async def wait_idle(self) -> None:
        """Wait for the category read to settle."""
        if self._task is not None:
            await asyncio.gather(self._task, return_exceptions=True)

    def _finish(self, task: "asyncio.Task[None]") -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            self.on_error(exc)
