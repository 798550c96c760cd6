"""Async HTTP client for one remote catalog service.

A single attempt per call: no retries, no timeout, no circuit breaking. Failures
are raised as ``domain.errors`` types and left to the caller to surface.
"""
import json
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from domain.errors import NetworkError, NotFoundError, RemoteError, ValidationError
from services.catalogs import CatalogSchema
from services.validation import has_errors

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response) -> str:
    """Prefer the server-supplied message, then the raw body, then the status line."""
    body = response.text or ''
    parsed = True
    try:
        payload = json.loads(body) if body else None
    except ValueError:
        payload, parsed = None, False
    if isinstance(payload, dict):
        for key in ('message', 'title'):
            if payload.get(key):
                return str(payload[key])
    elif not parsed and body.strip():
        return body.strip()
    return f"Error {response.status_code}: {response.reason_phrase}"


class RemoteCatalogClient:
    """Client for one catalog service bound to ``schema.base_url``."""

    def __init__(self, schema: CatalogSchema, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.schema = schema
        self.base_url = schema.base_url.rstrip('/')
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self._transport, timeout=None)

    async def _send(self, method: str, url: str, body: Optional[Dict[str, Any]] = None) -> httpx.Response:
        logger.info(f"{method} {url}")
        try:
            async with self._client() as client:
                response = await client.request(method, url, json=body)
        except httpx.TransportError as e:
            logger.error(f"Transport failure on {method} {url}: {e}")
            raise NetworkError(cause=e) from e
        logger.info(f"{method} {url} -> {response.status_code}")
        return response

    async def list(self) -> List[Any]:
        response = await self._send('GET', self.base_url)
        if not response.is_success:
            logger.warning(f"List failed ({response.status_code}): {response.text}")
            raise RemoteError(response.status_code, response.text,
                              f"Error {response.status_code}: {response.text or response.reason_phrase}")
        try:
            payload = response.json()
        except ValueError:
            logger.warning(f"List returned a non-JSON body from {self.base_url}")
            return []
        if not isinstance(payload, list):
            return []
        return [self.schema.from_dict(item) for item in payload if isinstance(item, dict)]

    async def create(self, draft: Dict[str, Any]) -> Optional[Any]:
        """POST a validated draft. Returns the created record when the service echoes it."""
        errors = self.schema.validate_draft(draft)
        if has_errors(errors):
            raise ValidationError(errors)
        response = await self._send('POST', self.base_url, self.schema.to_wire(draft))
        if not response.is_success:
            message = _error_message(response)
            logger.warning(f"Create failed ({response.status_code}): {message}")
            raise RemoteError(response.status_code, response.text, message)
        try:
            payload = response.json()
        except ValueError:
            return None
        return self.schema.from_dict(payload) if isinstance(payload, dict) else None

    async def get_by_id(self, record_id: str) -> Any:
        url = f"{self.base_url}/{quote(str(record_id).strip(), safe='')}"
        response = await self._send('GET', url)
        if response.status_code == 404:
            raise NotFoundError(404, response.text, self.schema.not_found_message)
        if not response.is_success:
            message = _error_message(response)
            logger.warning(f"Lookup failed ({response.status_code}): {message}")
            raise RemoteError(response.status_code, response.text, message)
        try:
            payload = response.json()
        except ValueError as e:
            raise RemoteError(response.status_code, response.text,
                              f"Respuesta inválida del servicio ({response.status_code})") from e
        if not isinstance(payload, dict):
            raise RemoteError(response.status_code, response.text,
                              f"Respuesta inválida del servicio ({response.status_code})")
        return self.schema.from_dict(payload)
