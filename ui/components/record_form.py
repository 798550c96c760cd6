import datetime as dt
import streamlit as st
from typing import Optional

from services.state import FormState
from .base import field_error

_MIN_DATE = dt.date(1000, 1, 1)
_MAX_DATE = dt.date(2100, 12, 31)


def widget_key(key_prefix: str, field_name: str) -> str:
    return f"{key_prefix}_{field_name}"


def reset_widgets(schema, key_prefix: str):
    """Drop widget values so the next render reseeds them from the form state."""
    for f in schema.form_fields:
        st.session_state.pop(widget_key(key_prefix, f.name), None)


def render(schema, form: FormState, key_prefix: str) -> Optional[str]:
    """
    Renders the create form for a catalog and binds its values into ``form``.

    Args:
        schema (CatalogSchema): The catalog whose fields are rendered.
        form (FormState): Draft values and per-field errors for this manager.
        key_prefix (str): A unique prefix for Streamlit widget keys.

    Returns:
        str: "submit" or "clear" when a form button was pressed, otherwise None.
    """
    # Seed widgets that Streamlit dropped while the tab was hidden.
    for f in schema.form_fields:
        k = widget_key(key_prefix, f.name)
        if k not in st.session_state:
            st.session_state[k] = form.values.get(f.name)

    with st.form(f"form_{key_prefix}"):
        for f in schema.form_fields:
            k = widget_key(key_prefix, f.name)
            if f.kind == 'date':
                st.date_input(f.label, min_value=_MIN_DATE, max_value=_MAX_DATE,
                              format="YYYY-MM-DD", key=k)
            else:
                st.text_input(f.label, placeholder=f.placeholder, key=k)
            field_error(form.errors.get(f.name, ''))

        c1, c2 = st.columns(2)
        submit_label = "Creando..." if form.submitting else f"Crear {schema.singular_title}"
        submitted = c1.form_submit_button(submit_label, type="primary", disabled=form.submitting)
        cleared = c2.form_submit_button("Limpiar")

    if submitted or cleared:
        form.values = {f.name: st.session_state.get(widget_key(key_prefix, f.name))
                       for f in schema.form_fields}
    if submitted:
        return "submit"
    if cleared:
        return "clear"
    return None
