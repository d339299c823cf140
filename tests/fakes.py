"""In-memory fakes shared by the test suite."""

import asyncio
from dataclasses import dataclass, field

from food_catalog.adapters.catalog_client import CatalogClient
from food_catalog.domain.catalog import Category, Food
from food_catalog.domain.errors import CatalogError


def make_food(food_id: int, name: str, price: float = 10.0) -> Food:
    return Food(
        id=food_id,
        name=name,
        description=f"{name} description",
        price=price,
        thumbnail_url=f"https://cdn.test/foods/{food_id}.png",
    )


def make_category(category_id: int, title: str) -> Category:
    return Category(
        id=category_id,
        title=title,
        image_url=f"https://cdn.test/categories/{category_id}.png",
    )


def params_key(params: dict[str, str | int]) -> tuple[tuple[str, str | int], ...]:
    return tuple(sorted(params.items()))


@dataclass
class FakeCatalogClient(CatalogClient):
    """Fake catalog client with per-query responses.

    Food responses are keyed by the sorted query parameters. A key listed in
    ``gated`` blocks until ``release`` is called for it, which lets tests
    control the order in which responses arrive.
    """

    categories: list[Category] = field(default_factory=list)
    foods_by_params: dict[tuple, list[Food]] = field(default_factory=dict)
    default_foods: list[Food] = field(default_factory=list)
    category_error: CatalogError | None = None
    food_errors: dict[tuple, CatalogError] = field(default_factory=dict)
    gated: set[tuple] = field(default_factory=set)
    category_calls: int = 0
    food_calls: list[dict[str, str | int]] = field(default_factory=list)
    _gates: dict[tuple, asyncio.Event] = field(default_factory=dict)

    async def list_categories(self) -> list[Category]:
        self.category_calls += 1
        await asyncio.sleep(0)
        if self.category_error is not None:
            raise self.category_error
        return list(self.categories)

    async def list_foods(self, params: dict[str, str | int]) -> list[Food]:
        self.food_calls.append(dict(params))
        key = params_key(params)
        if key in self.gated:
            await self._gate(key).wait()
        else:
            await asyncio.sleep(0)
        if key in self.food_errors:
            raise self.food_errors[key]
        return list(self.foods_by_params.get(key, self.default_foods))

    def release(self, params: dict[str, str | int]) -> None:
        self._gate(params_key(params)).set()

    def _gate(self, key: tuple) -> asyncio.Event:
        if key not in self._gates:
            self._gates[key] = asyncio.Event()
        return self._gates[key]
