"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from food_catalog.adapters.catalog_client import CatalogClient, HttpxCatalogClient
from food_catalog.config import Settings
from food_catalog.services.dashboard import DashboardService
from food_catalog.services.navigation import RouteNavigator


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_client: CatalogClient
    navigator: RouteNavigator
    dashboard_service: DashboardService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    catalog_client = HttpxCatalogClient.create(
        base_url=resolved_settings.catalog_base_url,
        timeout_seconds=resolved_settings.catalog_timeout_seconds,
    )
    navigator = RouteNavigator()
    dashboard_service = DashboardService(client=catalog_client, navigator=navigator)

    async def close_resources() -> None:
        await catalog_client.close()

    return AppContainer(
        settings=resolved_settings,
        catalog_client=catalog_client,
        navigator=navigator,
        dashboard_service=dashboard_service,
        close_resources=close_resources,
    )
