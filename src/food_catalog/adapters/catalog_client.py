"""Remote catalog API client."""

import logging
from dataclasses import dataclass
from typing import Protocol, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from food_catalog.domain.catalog import Category, Food
from food_catalog.domain.errors import (
    MalformedResponseError,
    NetworkError,
    ServerError,
)

_logger = logging.getLogger(__name__)

_CATEGORIES = TypeAdapter(list[Category])
_FOODS = TypeAdapter(list[Food])

T = TypeVar("T")


class CatalogClient(Protocol):
    """Interface for catalog read queries."""

    async def list_categories(self) -> list[Category]:
        """Return the full category set."""

    async def list_foods(self, params: dict[str, str | int]) -> list[Food]:
        """Return foods matching the given query parameters."""


@dataclass
class HttpxCatalogClient(CatalogClient):
    """HTTPX-backed catalog client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15.0

    @classmethod
    def create(
        cls, base_url: str, timeout_seconds: float = 15.0
    ) -> "HttpxCatalogClient":
        """Create a catalog client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def list_categories(self) -> list[Category]:
        """Fetch every category."""
        payload = await self._get("/categories")
        return _parse(_CATEGORIES, payload, "categories")

    async def list_foods(self, params: dict[str, str | int]) -> list[Food]:
        """Fetch foods filtered by ``q`` and ``category``."""
        payload = await self._get("/foods", params=params)
        return _parse(_FOODS, payload, "foods")

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _get(
        self, path: str, params: dict[str, str | int] | None = None
    ) -> object:
        url = f"{self.base_url}{path}"
        try:
            response = await self.http_client.get(
                url, params=params, timeout=self.timeout_seconds
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise ServerError(exc.response.status_code) from exc
        except httpx.DecodingError as exc:
            raise MalformedResponseError(f"{path} body could not be decoded") from exc
        except httpx.RequestError as exc:
            raise NetworkError(f"Catalog request to {url} failed: {exc}") from exc
        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponseError(f"{path} did not return JSON") from exc


def _parse(adapter: TypeAdapter[list[T]], payload: object, what: str) -> list[T]:
    """Validate a raw payload against the expected list shape."""
    try:
        items = adapter.validate_python(payload)
    except ValidationError as exc:
        _logger.debug("Rejected %s payload: %s", what, exc)
        raise MalformedResponseError(f"Unexpected {what} payload") from exc
    return items
