"""Shared test fixtures."""

import pytest

from food_catalog.config import Settings
from food_catalog.containers import AppContainer
from food_catalog.services.dashboard import DashboardService
from food_catalog.services.navigation import RouteNavigator
from tests.fakes import FakeCatalogClient, make_category, make_food


@pytest.fixture
def settings() -> Settings:
    return Settings(
        catalog_base_url="https://catalog.test",
        price_currency_symbol="R$",
        environment="test",
    )


@pytest.fixture
def catalog_client() -> FakeCatalogClient:
    return FakeCatalogClient(
        categories=[make_category(1, "Massas"), make_category(3, "Sopas")],
        default_foods=[make_food(1, "Ao molho", 19.9), make_food(2, "Veggie", 21.9)],
        foods_by_params={
            (("q", "pizza"),): [make_food(7, "Pizza", 35.0)],
            (("category", 3),): [make_food(4, "Creme de abóbora", 12.5)],
        },
    )


@pytest.fixture
def navigator() -> RouteNavigator:
    return RouteNavigator()


@pytest.fixture
def container(
    settings: Settings,
    catalog_client: FakeCatalogClient,
    navigator: RouteNavigator,
) -> AppContainer:
    dashboard_service = DashboardService(client=catalog_client, navigator=navigator)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        catalog_client=catalog_client,
        navigator=navigator,
        dashboard_service=dashboard_service,
        close_resources=close_resources,
    )
