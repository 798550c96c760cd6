import json
import uuid

import httpx
import pytest


class FakeCatalogService:
    """In-memory stand-in for a remote catalog service, served through httpx.MockTransport."""

    def __init__(self, id_field, items=None, list_status=200):
        self.id_field = id_field
        self.items = list(items or [])
        self.list_status = list_status
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        tail = request.url.path.rstrip('/').rsplit('/', 1)[-1]
        if request.method == 'POST':
            payload = json.loads(request.content)
            payload[self.id_field] = str(uuid.uuid4())
            self.items.append(payload)
            return httpx.Response(201, json=payload)
        if tail in ('Autor', 'LibroMaterial'):
            if self.list_status != 200:
                return httpx.Response(self.list_status, text="Internal Server Error")
            return httpx.Response(200, json=self.items)
        match = next((i for i in self.items if str(i.get(self.id_field)) == tail), None)
        if match is None:
            return httpx.Response(404)
        return httpx.Response(200, json=match)

    @property
    def transport(self):
        return httpx.MockTransport(self.handler)


@pytest.fixture
def authors_service():
    return FakeCatalogService('autorLibroId', [
        {'autorLibroId': '0b9e7a52-1c1f-4a57-8d5d-3a9a3e2b1f10', 'nombre': 'Gabriel',
         'apellido': 'García Márquez', 'fechaNacimiento': '1927-03-06T00:00:00'},
        {'autorLibroId': '5f3c2d1e-9a8b-4c7d-b6e5-f4a3b2c1d0e9', 'nombre': 'Isabel',
         'apellido': 'Allende', 'fechaNacimiento': '1942-08-02T00:00:00'},
    ])


@pytest.fixture
def books_service():
    return FakeCatalogService('libroMaterialId', [
        {'libroMaterialId': '7d1a3c55-0f2e-4b9a-a1c2-9e8d7c6b5a40', 'titulo': 'Cien años de soledad',
         'fechaPublicacion': '1967-05-30T00:00:00Z', 'autorLibro': '0b9e7a52-1c1f-4a57-8d5d-3a9a3e2b1f10'},
    ])
