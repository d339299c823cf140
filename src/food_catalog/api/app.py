"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from pydantic import BaseModel

from food_catalog.api.presenters import present_dashboard, present_route
from food_catalog.app_logging import configure_logging
from food_catalog.containers import AppContainer


class SearchUpdate(BaseModel):
    """Request body for a search text change."""

    text: str = ""


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(debug=container.settings.debug)
    logger = logging.getLogger(__name__)
    currency_symbol = container.settings.price_currency_symbol

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.container.dashboard_service.start()
        yield
        app.state.container.dashboard_service.stop()
        try:
            await app.state.container.dashboard_service.wait_until_settled()
        finally:
            await app.state.container.close_resources()
        logger.info("Dashboard stopped")

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    def _container(request: Request) -> AppContainer:
        return request.app.state.container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/dashboard")
    async def dashboard(request: Request) -> dict[str, object]:
        """Return the current filters and both collections."""
        service = _container(request).dashboard_service
        await service.wait_until_settled()
        return present_dashboard(service, currency_symbol)

    @app.put("/dashboard/search")
    async def update_search(
        update: SearchUpdate, request: Request
    ) -> dict[str, object]:
        """Replace the search text and return the refreshed view."""
        service = _container(request).dashboard_service
        service.on_search_text_changed(update.text)
        await service.wait_until_settled()
        return present_dashboard(service, currency_symbol)

    @app.post("/dashboard/categories/{category_id}/toggle")
    async def toggle_category(category_id: int, request: Request) -> dict[str, object]:
        """Select the category, or clear it when already selected."""
        service = _container(request).dashboard_service
        service.on_category_tapped(category_id)
        await service.wait_until_settled()
        return present_dashboard(service, currency_symbol)

    @app.post("/dashboard/foods/{food_id}/open")
    async def open_food(food_id: int, request: Request) -> dict[str, object]:
        """Navigate to the detail view of a food."""
        state_container = _container(request)
        state_container.dashboard_service.on_food_tapped(food_id)
        return present_route(state_container.navigator.current)

    @app.post("/dashboard/logout")
    async def logout(request: Request) -> dict[str, object]:
        """Navigate back to the home screen."""
        state_container = _container(request)
        state_container.dashboard_service.on_logout()
        return present_route(state_container.navigator.current)

    return app
