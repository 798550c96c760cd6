import asyncio
import datetime as dt

import httpx

from domain import constants as C
from services import forms, listing
from services.catalog_client import RemoteCatalogClient
from services.catalogs import AUTHORS, BOOKS
from services.state import SubView, new_manager_state

NOW = dt.datetime(2024, 6, 15, 9, 30)


def test_create_author_scenario(authors_service):
    state = new_manager_state(AUTHORS)
    state.active = SubView.CREATE
    state.form.values = {'given_name': 'Ana', 'family_name': 'Lopez', 'birth_date': '2000-01-01'}
    client = RemoteCatalogClient(AUTHORS, transport=authors_service.transport)

    assert asyncio.run(forms.submit(state, client, NOW)) is True

    assert state.form.values == AUTHORS.empty_draft()
    assert state.form.errors == {}
    assert state.form.submitting is False
    assert state.active is SubView.LIST
    assert state.listing.needs_refresh is True
    assert state.notification.kind == 'success'
    assert state.notification.message == '¡Autor creado exitosamente!'
    assert state.notification.expires_at is not None

    asyncio.run(listing.refresh(state, client))
    names = [(a.given_name, a.family_name) for a in state.listing.records]
    assert ('Ana', 'Lopez') in names
    post = next(r for r in authors_service.requests if r.method == 'POST')
    assert b'"fechaNacimiento":"2000-01-01T00:00:00.000Z"' in post.content.replace(b' ', b'')


def test_empty_title_issues_no_request(books_service):
    state = new_manager_state(BOOKS)
    state.active = SubView.CREATE
    state.form.values = {'title': '', 'publication_date': dt.date(2001, 1, 1),
                         'author_id': '123e4567-e89b-12d3-a456-426614174000'}
    client = RemoteCatalogClient(BOOKS, transport=books_service.transport)

    assert asyncio.run(forms.submit(state, client, NOW)) is False

    assert state.form.errors['title'] == C.MSG_TITLE_REQUIRED
    assert books_service.requests == []
    assert state.active is SubView.CREATE
    assert state.notification is None


def test_remote_failure_keeps_draft_for_correction():
    state = new_manager_state(BOOKS)
    state.active = SubView.CREATE
    draft = {'title': 'Rayuela', 'publication_date': '1963-06-28',
             'author_id': '123e4567-e89b-12d3-a456-426614174000'}
    state.form.values = dict(draft)
    transport = httpx.MockTransport(lambda r: httpx.Response(400, json={'message': 'Autor inexistente'}))
    client = RemoteCatalogClient(BOOKS, transport=transport)

    assert asyncio.run(forms.submit(state, client, NOW)) is False

    assert state.form.values == draft
    assert state.form.submitting is False
    assert state.active is SubView.CREATE
    assert state.notification.kind == 'error'
    assert state.notification.message == 'Ocurrió un error al crear el libro: Autor inexistente'


def test_clear_resets_values_and_errors():
    state = new_manager_state(AUTHORS)
    state.form.values = {'given_name': 'x', 'family_name': '', 'birth_date': None}
    state.form.errors = {'family_name': C.MSG_FAMILY_NAME_REQUIRED}
    forms.clear(state.form, AUTHORS)
    assert state.form.values == {'given_name': '', 'family_name': '', 'birth_date': None}
    assert state.form.errors == {}
