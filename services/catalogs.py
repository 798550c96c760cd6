"""Catalog definitions: everything that differs between the authors and books managers.

Both entity managers run the same list/create/lookup logic; a ``CatalogSchema``
supplies the endpoint, wire mapping, validation and labels for one of them.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from domain import constants as C
from domain.models import (
    AuthorRecord, BookRecord,
    author_from_dict, book_from_dict, author_draft_to_wire, book_draft_to_wire,
)
from services.validation import validate_author_draft, validate_book_draft


@dataclass(frozen=True)
class FieldSpec:
    name: str
    label: str
    kind: str = 'text'  # text | date
    placeholder: str = ''


@dataclass(frozen=True)
class CatalogSchema:
    key: str
    label: str
    singular: str
    singular_title: str
    base_url: str
    from_dict: Callable[[Dict[str, Any]], Any]
    to_wire: Callable[[Dict[str, Any]], Dict[str, Any]]
    validate_draft: Callable[..., Dict[str, str]]
    search_fields: Callable[[Any], List[str]]
    form_fields: List[FieldSpec] = field(default_factory=list)
    lookup_label: str = ''
    lookup_placeholder: str = ''
    lookup_required_message: str = ''
    lookup_tab_label: str = ''
    search_placeholder: str = ''

    @property
    def plural(self) -> str:
        return self.label.lower()

    def empty_draft(self) -> Dict[str, Any]:
        return {f.name: (None if f.kind == 'date' else '') for f in self.form_fields}

    @property
    def created_message(self) -> str:
        return f"¡{self.singular_title} creado exitosamente!"

    @property
    def not_found_message(self) -> str:
        return f"{self.singular_title} no encontrado"


def _author_search_fields(record: AuthorRecord) -> List[str]:
    return [record.given_name, record.family_name, str(record.id)]


def _book_search_fields(record: BookRecord) -> List[str]:
    return [record.title, str(record.id)]


AUTHORS = CatalogSchema(
    key='autores',
    label='Autores',
    singular='autor',
    singular_title='Autor',
    base_url=C.AUTHORS_BASE_URL,
    from_dict=author_from_dict,
    to_wire=author_draft_to_wire,
    validate_draft=validate_author_draft,
    search_fields=_author_search_fields,
    form_fields=[
        FieldSpec('given_name', 'Nombre *', placeholder='Nombre del autor'),
        FieldSpec('family_name', 'Apellido *', placeholder='Apellido del autor'),
        FieldSpec('birth_date', 'Fecha de Nacimiento *', kind='date'),
    ],
    lookup_label='ID del Autor *',
    lookup_placeholder='Ingresa el ID del autor',
    lookup_required_message=C.MSG_AUTHOR_ID_REQUIRED,
    lookup_tab_label='Buscar Autor por UUID',
    search_placeholder='Buscar por nombre, apellido o ID...',
)

BOOKS = CatalogSchema(
    key='libros',
    label='Libros',
    singular='libro',
    singular_title='Libro',
    base_url=C.BOOKS_BASE_URL,
    from_dict=book_from_dict,
    to_wire=book_draft_to_wire,
    validate_draft=validate_book_draft,
    search_fields=_book_search_fields,
    form_fields=[
        FieldSpec('title', 'Título *', placeholder='Título del libro'),
        FieldSpec('publication_date', 'Fecha de Publicación *', kind='date'),
        FieldSpec('author_id', 'UUID del Autor *',
                  placeholder='Ej: 123e4567-e89b-12d3-a456-426614174000'),
    ],
    lookup_label='ID del Libro *',
    lookup_placeholder='Ingresa el ID del libro',
    lookup_required_message=C.MSG_BOOK_ID_REQUIRED,
    lookup_tab_label='Consultar Libro',
    search_placeholder='Buscar por título o ID...',
)

CATALOGS = {AUTHORS.key: AUTHORS, BOOKS.key: BOOKS}
