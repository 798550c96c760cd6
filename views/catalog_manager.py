"""Renders one entity manager (List / Create / Lookup) for a catalog.

All behaviour lives in ``services``; this module only binds Streamlit widgets to
the per-catalog ``ManagerState`` kept in ``st.session_state``.
"""
import datetime as dt
from urllib.parse import urlparse

import streamlit as st

from services import forms, listing, lookup
from services.catalog_client import RemoteCatalogClient
from services.state import (
    ManagerState, SubView, new_manager_state, select_subview,
    show_details, back_to_list, active_notification,
)
from ui.components import author_card, book_card, author_details, book_details, record_form
from utils import aio


def subview_labels(schema):
    return {
        SubView.LIST: f"Listar {schema.label}",
        SubView.CREATE: f"Crear {schema.singular_title}",
        SubView.LOOKUP: schema.lookup_tab_label,
    }


def get_state(schema) -> ManagerState:
    key = f"{schema.key}_manager"
    if key not in st.session_state:
        st.session_state[key] = new_manager_state(schema)
    return st.session_state[key]


def _render_notification(state: ManagerState):
    n = active_notification(state)
    if n is None:
        return
    render = {'success': st.success, 'warning': st.warning}.get(n.kind, st.error)
    render(n.message)


def _render_list(schema, state: ManagerState, client: RemoteCatalogClient):
    st.subheader(f"Lista de {schema.label}")
    lst = state.listing

    if lst.needs_refresh:
        with st.spinner(f"Cargando {schema.plural}..."):
            aio.run(listing.refresh(state, client))
        _render_notification(state)

    query_key = f"{schema.key}_query"
    if query_key not in st.session_state:
        st.session_state[query_key] = lst.query

    def _on_query():
        lst.query = st.session_state[query_key]

    def _on_clear():
        listing.clear_query(lst)
        st.session_state[query_key] = ''

    c1, c2, c3 = st.columns([6, 1, 1])
    c1.text_input("Buscar", placeholder=schema.search_placeholder, key=query_key,
                  on_change=_on_query, label_visibility="collapsed")
    c2.button("Limpiar", key=f"{schema.key}_clear_query", on_click=_on_clear, disabled=not lst.query)
    if c3.button("Actualizar", key=f"{schema.key}_refresh"):
        lst.needs_refresh = True
        st.rerun()

    shown = listing.visible(lst, schema)
    if not shown:
        if lst.query:
            st.info(f'No se encontraron {schema.plural} con "{lst.query}"')
            st.button("Mostrar todos", key=f"{schema.key}_show_all", on_click=_on_clear)
        else:
            st.info(f"No se encontraron {schema.plural}")
            if st.button("Intentar nuevamente", key=f"{schema.key}_retry"):
                lst.needs_refresh = True
                st.rerun()
        return

    st.caption(listing.summary(lst, schema))

    def _on_details(record_id):
        show_details(state, record_id)
        st.session_state.pop(f"{schema.key}_lookup_id", None)

    if st.toggle("Tabla", key=f"{schema.key}_table_mode"):
        st.dataframe(listing.records_to_frame(shown), use_container_width=True, hide_index=True)
        return

    card = author_card if schema.key == 'autores' else book_card
    cols = st.columns(3)
    for i, record in enumerate(shown):
        with cols[i % 3]:
            card(record, _on_details, key=f"{schema.key}_details_{i}")


def _render_create(schema, state: ManagerState, client: RemoteCatalogClient):
    st.subheader(f"Crear Nuevo {schema.singular_title}")
    prefix = f"{schema.key}_form"
    action = record_form.render(schema, state.form, key_prefix=prefix)
    if action == "clear":
        forms.clear(state.form, schema)
        record_form.reset_widgets(schema, prefix)
        st.rerun()
    elif action == "submit":
        with st.spinner("Creando..."):
            created = aio.run(forms.submit(state, client))
        if created:
            record_form.reset_widgets(schema, prefix)
        st.rerun()


def _render_lookup(schema, state: ManagerState, client: RemoteCatalogClient):
    st.subheader(schema.lookup_tab_label)
    lk = state.lookup
    id_key = f"{schema.key}_lookup_id"
    if id_key not in st.session_state:
        st.session_state[id_key] = lk.record_id

    st.text_input(schema.lookup_label, placeholder=schema.lookup_placeholder, key=id_key)
    lk.record_id = st.session_state[id_key] or ''
    if lk.error:
        st.markdown(f"<div class='field-error'>{lk.error}</div>", unsafe_allow_html=True)

    c1, c2 = st.columns(2)
    if c1.button(f"Buscar {schema.singular_title}", key=f"{schema.key}_lookup_submit",
                 type="primary"):
        with st.spinner("Buscando..."):
            aio.run(lookup.submit(state, client))
        st.rerun()
    if c2.button("Volver a la lista", key=f"{schema.key}_back"):
        back_to_list(state)
        st.rerun()

    if lk.result is not None:
        (author_details if schema.key == 'autores' else book_details)(lk.result)


def render(schema):
    """Entry point used by the section views in ``views.authors`` / ``views.books``."""
    state = get_state(schema)
    client = RemoteCatalogClient(schema)
    labels = subview_labels(schema)

    nav_key = f"{schema.key}_subview"
    st.session_state[nav_key] = state.active

    def _on_nav():
        select_subview(state, st.session_state[nav_key])

    st.radio("Sección", list(SubView), format_func=labels.get, key=nav_key,
             horizontal=True, on_change=_on_nav, label_visibility="collapsed")

    if not (state.active is SubView.LIST and state.listing.needs_refresh):
        _render_notification(state)

    if state.active is SubView.LIST:
        _render_list(schema, state, client)
    elif state.active is SubView.CREATE:
        _render_create(schema, state, client)
    else:
        _render_lookup(schema, state, client)

    st.markdown("---")
    host = urlparse(schema.base_url).netloc
    st.caption(f"Microservicio: {host} | © {dt.date.today().year} Gestión de {schema.label}")
