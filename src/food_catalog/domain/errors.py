"""Errors raised while reading the remote catalog."""

from collections.abc import Callable


class CatalogError(Exception):
    """Base class for catalog read failures."""


class NetworkError(CatalogError):
    """The catalog service could not be reached."""


class ServerError(CatalogError):
    """The catalog service answered with a non-success status."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        super().__init__(message or f"Catalog service returned HTTP {status_code}")
        self.status_code = status_code


class MalformedResponseError(CatalogError):
    """The catalog response did not match the expected shape."""


ErrorHandler = Callable[[BaseException], None]
