"""Dashboard service: the surface the view binding talks to."""

import asyncio
import logging
from dataclasses import dataclass, field

from food_catalog.adapters.catalog_client import CatalogClient
from food_catalog.domain.catalog import Category, FilterSnapshot, Food
from food_catalog.services.categories import CategoryLoader
from food_catalog.services.filters import FilterState
from food_catalog.services.navigation import Navigator
from food_catalog.services.sync import FoodSyncController

_logger = logging.getLogger(__name__)


@dataclass
class DashboardService:
    """Application service for the catalog dashboard.

    Forwards user intents into the filter state, exposes the category and
    food collections read-only, and acts as the error boundary for catalog
    reads: failures are logged and recorded while the collections keep their
    last good value. A food fetch error lasts until the filters change; a
    category load error lasts for the session.
    """

    client: CatalogClient
    navigator: Navigator
    filters: FilterState = field(default_factory=FilterState)
    category_error: BaseException | None = None
    food_error: BaseException | None = None
    category_loader: CategoryLoader = field(init=False)
    food_sync: FoodSyncController = field(init=False)

    def __post_init__(self) -> None:
        self.category_loader = CategoryLoader(
            client=self.client, on_error=self._report_category_error
        )
        self.food_sync = FoodSyncController(
            client=self.client, filters=self.filters, on_error=self._report_food_error
        )

    @property
    def last_error(self) -> BaseException | None:
        """Most relevant read failure to show, food errors first."""
        return self.food_error or self.category_error

    @property
    def categories(self) -> list[Category]:
        return list(self.category_loader.categories)

    @property
    def foods(self) -> list[Food]:
        return list(self.food_sync.foods)

    @property
    def search_text(self) -> str:
        return self.filters.search_text

    @property
    def selected_category(self) -> int | None:
        return self.filters.selected_category

    def is_selected(self, category_id: int) -> bool:
        """Return True when the category should render highlighted."""
        return self.filters.selected_category == category_id

    def start(self) -> None:
        """Load categories and the unfiltered food list, once per session."""
        if self.food_sync.started:
            return
        _logger.info("Starting dashboard")
        self.category_loader.start()
        self.food_sync.start()

    def stop(self) -> None:
        """Stop refetching foods on filter changes."""
        self.food_sync.stop()

    async def wait_until_settled(self) -> None:
        """Wait for every in-flight catalog read to finish."""
        await asyncio.gather(
            self.category_loader.wait_idle(), self.food_sync.wait_idle()
        )

    def on_search_text_changed(self, text: str) -> None:
        before = self.filters.snapshot()
        self.filters.set_search_text(text)
        self._clear_food_error_if_changed(before)

    def on_category_tapped(self, category_id: int) -> None:
        before = self.filters.snapshot()
        self.filters.select_category(category_id)
        self._clear_food_error_if_changed(before)

    def on_food_tapped(self, food_id: int) -> None:
        """Open the food detail view; filters and collections are untouched."""
        self.navigator.navigate_to_food_details(food_id)

    def on_logout(self) -> None:
        self.navigator.navigate_to_home()

    def _clear_food_error_if_changed(self, before: FilterSnapshot) -> None:
        # a new food fetch was issued only if the filters moved
        if self.filters.snapshot() != before:
            self.food_error = None

    def _report_category_error(self, exc: BaseException) -> None:
        _logger.warning("Category load failed: %s: %s", type(exc).__name__, exc)
        self.category_error = exc

    def _report_food_error(self, exc: BaseException) -> None:
        _logger.warning("Food fetch failed: %s: %s", type(exc).__name__, exc)
        self.food_error = exc
