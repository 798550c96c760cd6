"""Error kinds raised by the catalog client and validation layer."""
from typing import Dict, Optional

from domain.constants import NETWORK_ERROR_MESSAGE


class CatalogError(Exception):
    """Base class for everything a remote catalog call can fail with."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CatalogError):
    """Local, field-scoped failure. Never sent over the wire."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = {k: v for k, v in errors.items() if v}
        super().__init__("; ".join(self.errors.values()))


class NetworkError(CatalogError):
    def __init__(self, message: str = NETWORK_ERROR_MESSAGE, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class RemoteError(CatalogError):
    """Non-2xx HTTP response from a catalog service."""

    def __init__(self, status: int, body: str = "", message: Optional[str] = None):
        super().__init__(message or f"Error {status}")
        self.status = status
        self.body = body


class NotFoundError(RemoteError):
    """404 on a get-by-id request."""
