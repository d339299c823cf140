"""Navigation collaborator used by the dashboard."""

from dataclasses import dataclass, field
from typing import Protocol

FOOD_DETAILS_ROUTE = "FoodDetails"
HOME_ROUTE = "Home"


class Navigator(Protocol):
    """Interface for moving between screens."""

    def navigate_to_food_details(self, food_id: int) -> None:
        """Open the detail view of a food."""

    def navigate_to_home(self) -> None:
        """Leave the dashboard for the home screen."""


@dataclass(frozen=True)
class Route:
    """A navigation target with its parameters."""

    name: str
    params: dict[str, int] = field(default_factory=dict)


@dataclass
class RouteNavigator(Navigator):
    """Navigator that records requested routes in order."""

    history: list[Route] = field(default_factory=list)

    @property
    def current(self) -> Route | None:
        return self.history[-1] if self.history else None

    def navigate_to_food_details(self, food_id: int) -> None:
        self.history.append(Route(name=FOOD_DETAILS_ROUTE, params={"id": food_id}))

    def navigate_to_home(self) -> None:
        self.history.append(Route(name=HOME_ROUTE))
