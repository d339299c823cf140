"""Domain models for the food catalog."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict


class Category(BaseModel):
    """A food category shown in the category slider."""

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    image_url: str


class Food(BaseModel):
    """A food entry returned by the catalog."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    description: str
    price: float
    thumbnail_url: str


@dataclass(frozen=True)
class FilterSnapshot:
    """Point-in-time value of the dashboard filters."""

    search_text: str = ""
    selected_category: int | None = None


@dataclass(frozen=True)
class FoodQuery:
    """Parameters for a food listing read, omitting absent filters."""

    q: str | None = None
    category: int | None = None

    @classmethod
    def from_filters(cls, snapshot: FilterSnapshot) -> "FoodQuery":
        """Derive query parameters from the current filters."""
        return cls(
            q=snapshot.search_text or None,
            category=snapshot.selected_category,
        )

    def as_params(self) -> dict[str, str | int]:
        """Return the minimal parameter mapping sent to the catalog."""
        params: dict[str, str | int] = {}
        if self.q:
            params["q"] = self.q
        if self.category is not None:
            params["category"] = self.category
        return params
