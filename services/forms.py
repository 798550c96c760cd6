"""Create sub-view logic: validate the draft, post it, report the outcome."""
from __future__ import annotations
import datetime as dt
import logging
from typing import Optional

from domain.errors import CatalogError, ValidationError
from services.state import FormState, ManagerState, SubView, notify, select_subview
from services.validation import has_errors

logger = logging.getLogger(__name__)


def clear(form: FormState, schema):
    form.values = schema.empty_draft()
    form.errors = {}


async def submit(state: ManagerState, client, now: Optional[dt.datetime] = None) -> bool:
    """Run the create flow for the current draft.

    Invalid drafts stop before any request is made and keep their inline errors.
    On success the form is reset, a transient confirmation is shown and the
    manager moves back to the list. On failure the draft is left untouched so
    the user can correct it.
    """
    schema = client.schema
    form = state.form
    form.errors = schema.validate_draft(form.values, now)
    if has_errors(form.errors):
        return False

    form.submitting = True
    try:
        await client.create(dict(form.values))
    except ValidationError as e:
        form.errors.update(e.errors)
        return False
    except CatalogError as e:
        logger.error(f"Creating {schema.singular} failed: {e.message}")
        notify(state, 'error', f"Ocurrió un error al crear el {schema.singular}: {e.message}")
        return False
    finally:
        form.submitting = False

    clear(form, schema)
    notify(state, 'success', schema.created_message, transient=True)
    select_subview(state, SubView.LIST)
    return True
