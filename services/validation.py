"""Form validation for catalog drafts.

Every validator is a pure function of the field values (and the injected
``now``) that returns a mapping of field name -> error message. An empty
string means the field is valid, so the mapping always carries every field of
the form and can be rendered directly next to each input.
"""
from __future__ import annotations
import datetime as dt
from typing import Any, Dict, Optional

from domain.constants import (
    UUID_RE, MSG_FUTURE_DATE, MSG_INVALID_UUID,
    MSG_GIVEN_NAME_REQUIRED, MSG_FAMILY_NAME_REQUIRED, MSG_BIRTH_DATE_REQUIRED,
    MSG_TITLE_REQUIRED, MSG_PUBLICATION_DATE_REQUIRED, MSG_AUTHOR_ID_REQUIRED,
)
from domain.models import parse_wire_date


def validate_required(value: Any, message: str) -> str:
    if value is None or not str(value).strip():
        return message
    return ''


def validate_past_date(value: Any, required_message: str, now: Optional[dt.datetime] = None) -> str:
    """Reject missing dates and dates strictly after ``now`` (evaluated per call)."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return required_message
    parsed = parse_wire_date(value)
    if parsed is None:
        return required_message
    now = now or dt.datetime.now()
    if parsed > now.date():
        return MSG_FUTURE_DATE
    return ''


def validate_uuid(value: Any, required_message: str) -> str:
    text = '' if value is None else str(value).strip()
    if not text:
        return required_message
    if not UUID_RE.match(text):
        return MSG_INVALID_UUID
    return ''


def validate_author_draft(draft: Dict[str, Any], now: Optional[dt.datetime] = None) -> Dict[str, str]:
    return {
        'given_name': validate_required(draft.get('given_name'), MSG_GIVEN_NAME_REQUIRED),
        'family_name': validate_required(draft.get('family_name'), MSG_FAMILY_NAME_REQUIRED),
        'birth_date': validate_past_date(draft.get('birth_date'), MSG_BIRTH_DATE_REQUIRED, now),
    }


def validate_book_draft(draft: Dict[str, Any], now: Optional[dt.datetime] = None) -> Dict[str, str]:
    return {
        'title': validate_required(draft.get('title'), MSG_TITLE_REQUIRED),
        'publication_date': validate_past_date(draft.get('publication_date'), MSG_PUBLICATION_DATE_REQUIRED, now),
        'author_id': validate_uuid(draft.get('author_id'), MSG_AUTHOR_ID_REQUIRED),
    }


def validate_lookup_id(value: Any, required_message: str) -> Dict[str, str]:
    # Lookup ids only need to be present; the service decides what exists.
    return {'record_id': validate_required(value, required_message)}


def has_errors(errors: Dict[str, str]) -> bool:
    return any(errors.values())
