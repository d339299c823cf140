"""Tests for container wiring."""

import asyncio

from food_catalog.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)
    assert container.dashboard_service.navigator is container.navigator
    assert container.dashboard_service.client is container.catalog_client
    asyncio.run(container.close_resources())
