"""Serialization of dashboard state for HTTP responses."""

from food_catalog.domain.catalog import Category, Food
from food_catalog.services.dashboard import DashboardService
from food_catalog.services.navigation import Route

EMPTY_FOODS_MESSAGE = "Nenhum prato encontrado."


def format_price(value: float, currency_symbol: str = "R$") -> str:
    """Format a price as ``R$ 1.234,50``."""
    formatted = f"{value:,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{currency_symbol} {formatted}"


def present_category(category: Category, selected: bool) -> dict[str, object]:
    return {**category.model_dump(), "is_selected": selected}


def present_food(food: Food, currency_symbol: str) -> dict[str, object]:
    return {
        **food.model_dump(),
        "formatted_price": format_price(food.price, currency_symbol),
    }


def present_dashboard(
    service: DashboardService, currency_symbol: str
) -> dict[str, object]:
    """Return the current dashboard view."""
    foods = service.foods
    error = service.last_error
    error_view = None
    if error is not None:
        error_view = {"type": type(error).__name__, "message": str(error)}
    return {
        "search_text": service.search_text,
        "selected_category": service.selected_category,
        "categories": [
            present_category(category, service.is_selected(category.id))
            for category in service.categories
        ],
        "foods": [present_food(food, currency_symbol) for food in foods],
        "foods_empty_message": None if foods else EMPTY_FOODS_MESSAGE,
        "error": error_view,
    }


def present_route(route: Route | None) -> dict[str, object]:
    if route is None:
        return {"route": None, "params": {}}
    return {"route": route.name, "params": dict(route.params)}
