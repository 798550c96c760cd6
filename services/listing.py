"""List sub-view logic: loading the collection and filtering it locally."""
from __future__ import annotations
import logging
from dataclasses import asdict
from typing import Any, List, Sequence

import pandas as pd

from domain.errors import CatalogError
from services.state import ListPhase, ListState, ManagerState, clear_failure_notice, notify

logger = logging.getLogger(__name__)


def filter_records(query: str, records: Sequence[Any], schema) -> List[Any]:
    """Case-insensitive substring match over the schema's search fields.

    A blank query returns every record; order is always preserved.
    """
    if not query or not query.strip():
        return list(records)
    needle = query.lower()
    return [r for r in records
            if r is not None and any(needle in (f or '').lower() for f in schema.search_fields(r))]


def begin_refresh(listing: ListState) -> int:
    listing.phase = ListPhase.LOADING
    listing.needs_refresh = False
    listing.request_token += 1
    return listing.request_token


async def refresh(state: ManagerState, client) -> ListPhase:
    """Fetch the collection. Failures become a notification, never an exception."""
    listing = state.listing
    token = begin_refresh(listing)
    try:
        records = await client.list()
    except CatalogError as e:
        if token != listing.request_token:
            return listing.phase
        logger.error(f"Fetching {client.schema.plural} failed: {e.message}")
        listing.records = []
        listing.phase = ListPhase.IDLE
        notify(state, 'error', f"Error al obtener {client.schema.plural}: {e.message}")
        return listing.phase
    if token != listing.request_token:
        logger.info(f"Discarding stale {client.schema.plural} list response")
        return listing.phase
    listing.records = list(records)
    listing.phase = ListPhase.LOADED if listing.records else ListPhase.EMPTY
    clear_failure_notice(state)
    return listing.phase


def clear_query(listing: ListState):
    listing.query = ''


def visible(listing: ListState, schema) -> List[Any]:
    return filter_records(listing.query, listing.records, schema)


def summary(listing: ListState, schema) -> str:
    return f"Mostrando {len(visible(listing, schema))} de {len(listing.records)} {schema.plural}"


def records_to_frame(records: Sequence[Any]) -> pd.DataFrame:
    """Tabular view of the loaded records for the list's table mode."""
    rows = [asdict(r) for r in records]
    return pd.DataFrame(rows)
