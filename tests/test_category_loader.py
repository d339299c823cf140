"""Tests for the category loader."""

import asyncio

from food_catalog.domain.errors import NetworkError
from food_catalog.services.categories import CategoryLoader
from tests.fakes import FakeCatalogClient, make_category


def test_loader_fetches_categories_once() -> None:
    categories = [make_category(1, "Massas"), make_category(2, "Carnes")]
    client = FakeCatalogClient(categories=categories)
    loader = CategoryLoader(client=client)

    async def scenario() -> None:
        loader.start()
        loader.start()
        await loader.wait_idle()

    asyncio.run(scenario())

    assert client.category_calls == 1
    assert loader.categories == categories


def test_failed_load_leaves_categories_empty() -> None:
    errors: list[BaseException] = []
    client = FakeCatalogClient(
        categories=[make_category(1, "Massas")],
        category_error=NetworkError("unreachable"),
    )
    loader = CategoryLoader(client=client, on_error=errors.append)

    async def scenario() -> None:
        loader.start()
        await loader.wait_idle()

    asyncio.run(scenario())

    assert loader.categories == []
    assert isinstance(errors[0], NetworkError)
