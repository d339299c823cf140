"""Dashboard filter state: search text and the selected category."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from food_catalog.domain.catalog import FilterSnapshot

_logger = logging.getLogger(__name__)

FilterListener = Callable[[FilterSnapshot], None]


@dataclass
class FilterState:
    """Holds the filters driving food queries and notifies subscribers.

    An empty ``search_text`` means no text filter and a ``None``
    ``selected_category`` means no category filter. At most one category
    is ever selected.
    """

    search_text: str = ""
    selected_category: int | None = None
    _listeners: list[FilterListener] = field(default_factory=list, repr=False)

    def snapshot(self) -> FilterSnapshot:
        """Return the current filters as an immutable value."""
        return FilterSnapshot(
            search_text=self.search_text,
            selected_category=self.selected_category,
        )

    def subscribe(self, listener: FilterListener) -> Callable[[], None]:
        """Register a listener called after every filter change."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_search_text(self, text: str) -> None:
        """Replace the search text; an empty string clears the text filter."""
        if text == self.search_text:
            return
        self.search_text = text
        self._notify()

    def select_category(self, category_id: int) -> None:
        """Select a category, or clear the selection if it is already selected."""
        if self.selected_category == category_id:
            self.selected_category = None
        else:
            self.selected_category = category_id
        self._notify()

    def _notify(self) -> None:
        snapshot = self.snapshot()
        _logger.debug(
            "Filters changed: search_text=%r selected_category=%s",
            snapshot.search_text,
            snapshot.selected_category,
        )
        for listener in list(self._listeners):
            listener(snapshot)
