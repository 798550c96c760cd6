"""Lookup sub-view logic: fetch a single record by id."""
from __future__ import annotations
import logging
from typing import Any, Optional

from domain.errors import CatalogError, NotFoundError
from services.state import ManagerState, clear_failure_notice, notify
from services.validation import validate_lookup_id

logger = logging.getLogger(__name__)


async def submit(state: ManagerState, client) -> Optional[Any]:
    schema = client.schema
    lookup = state.lookup
    lookup.error = validate_lookup_id(lookup.record_id, schema.lookup_required_message)['record_id']
    if lookup.error:
        return None

    lookup.request_token += 1
    token = lookup.request_token
    try:
        record = await client.get_by_id(lookup.record_id.strip())
    except NotFoundError:
        if token == lookup.request_token:
            lookup.result = None
            notify(state, 'warning', schema.not_found_message)
        return None
    except CatalogError as e:
        if token == lookup.request_token:
            logger.error(f"Looking up {schema.singular} {lookup.record_id!r} failed: {e.message}")
            lookup.result = None
            notify(state, 'error', f"Error al consultar el {schema.singular}: {e.message}")
        return None

    if token != lookup.request_token:
        logger.info(f"Discarding stale {schema.singular} lookup response")
        return None
    lookup.result = record
    clear_failure_notice(state)
    return record
