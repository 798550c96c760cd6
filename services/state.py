"""Per-catalog view state and the transitions between sub-views.

Each entity manager (authors, books) owns one ``ManagerState`` tree. Nothing in
here touches Streamlit, so handlers can be driven directly from tests.
"""
from __future__ import annotations
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from domain.constants import SUCCESS_DISMISS_SECONDS


class SubView(Enum):
    LIST = 'listar'
    CREATE = 'crear'
    LOOKUP = 'consultar'


class ListPhase(Enum):
    IDLE = 'idle'
    LOADING = 'loading'
    LOADED = 'loaded'
    EMPTY = 'empty'


@dataclass
class ListState:
    phase: ListPhase = ListPhase.IDLE
    records: List[Any] = field(default_factory=list)
    query: str = ''
    needs_refresh: bool = True
    request_token: int = 0


@dataclass
class FormState:
    values: Dict[str, Any] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)
    submitting: bool = False


@dataclass
class LookupState:
    record_id: str = ''
    result: Optional[Any] = None
    error: str = ''
    request_token: int = 0


@dataclass
class Notification:
    kind: str  # success | error | warning
    message: str
    expires_at: Optional[float] = None

    def is_active(self, now: Optional[float] = None) -> bool:
        if self.expires_at is None:
            return True
        return (now if now is not None else time.time()) < self.expires_at


@dataclass
class ManagerState:
    catalog_key: str
    active: SubView = SubView.LIST
    listing: ListState = field(default_factory=ListState)
    form: FormState = field(default_factory=FormState)
    lookup: LookupState = field(default_factory=LookupState)
    notification: Optional[Notification] = None


def new_manager_state(schema) -> ManagerState:
    return ManagerState(catalog_key=schema.key, form=FormState(values=schema.empty_draft()))


def select_subview(state: ManagerState, target: SubView) -> ManagerState:
    """Switch the active sub-view. Entering the list always schedules a refresh."""
    if target is SubView.LIST:
        state.listing.needs_refresh = True
    state.active = target
    return state


def show_details(state: ManagerState, record_id: Any) -> ManagerState:
    state.lookup.record_id = '' if record_id is None else str(record_id)
    state.lookup.error = ''
    return select_subview(state, SubView.LOOKUP)


def back_to_list(state: ManagerState) -> ManagerState:
    state.lookup.result = None
    return select_subview(state, SubView.LIST)


def notify(state: ManagerState, kind: str, message: str, transient: bool = False,
           now: Optional[float] = None) -> Notification:
    expires_at = None
    if transient:
        expires_at = (now if now is not None else time.time()) + SUCCESS_DISMISS_SECONDS
    state.notification = Notification(kind=kind, message=message, expires_at=expires_at)
    return state.notification


def active_notification(state: ManagerState, now: Optional[float] = None) -> Optional[Notification]:
    """Current notification, dropping it once a transient one has expired."""
    n = state.notification
    if n is not None and not n.is_active(now):
        state.notification = None
        return None
    return n


def dismiss_notification(state: ManagerState):
    state.notification = None


def clear_failure_notice(state: ManagerState):
    """Drop a lingering error or warning once a later call succeeds; transient ones run out on their own."""
    n = state.notification
    if n is not None and n.expires_at is None:
        dismiss_notification(state)
