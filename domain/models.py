from dataclasses import dataclass
from typing import Dict, Optional, Any
import datetime as _dt


def parse_wire_date(value: Any) -> Optional[_dt.date]:
    """Lenient ISO date/timestamp parsing; returns None when absent or unparseable."""
    if isinstance(value, _dt.datetime):
        return value.date()
    if isinstance(value, _dt.date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        return _dt.datetime.fromisoformat(text.replace('Z', '+00:00')).date()
    except ValueError:
        pass
    try:
        return _dt.date.fromisoformat(text[:10])
    except ValueError:
        return None


def to_wire_timestamp(value: _dt.date) -> str:
    # Calendar dates are sent as UTC midnight, millisecond precision.
    return f"{value.isoformat()}T00:00:00.000Z"


def _text(d: Dict[str, Any], key: str) -> str:
    v = d.get(key)
    return '' if v is None else str(v)


@dataclass
class AuthorRecord:
    id: str
    given_name: str
    family_name: str
    birth_date: Optional[_dt.date] = None

    @property
    def display_name(self) -> str:
        return f"{self.given_name} {self.family_name}".strip()

    @property
    def initials(self) -> str:
        return f"{self.given_name[:1]}{self.family_name[:1]}".upper()


@dataclass
class BookRecord:
    id: str
    title: str
    publication_date: Optional[_dt.date] = None
    author_id: str = ''

    @property
    def display_name(self) -> str:
        return self.title


def author_from_dict(d: Dict[str, Any]) -> AuthorRecord:
    """Build an AuthorRecord from the authors service payload, ignoring unknown keys."""
    return AuthorRecord(
        id=_text(d, 'autorLibroId'),
        given_name=_text(d, 'nombre'),
        family_name=_text(d, 'apellido'),
        birth_date=parse_wire_date(d.get('fechaNacimiento')),
    )


def book_from_dict(d: Dict[str, Any]) -> BookRecord:
    return BookRecord(
        id=_text(d, 'libroMaterialId'),
        title=_text(d, 'titulo'),
        publication_date=parse_wire_date(d.get('fechaPublicacion')),
        author_id=_text(d, 'autorLibro'),
    )


def author_draft_to_wire(draft: Dict[str, Any]) -> Dict[str, Any]:
    """Serialize a validated author draft into the POST body."""
    return {
        'nombre': draft['given_name'].strip(),
        'apellido': draft['family_name'].strip(),
        'fechaNacimiento': to_wire_timestamp(parse_wire_date(draft['birth_date'])),
    }


def book_draft_to_wire(draft: Dict[str, Any]) -> Dict[str, Any]:
    return {
        'titulo': draft['title'].strip(),
        'fechaPublicacion': to_wire_timestamp(parse_wire_date(draft['publication_date'])),
        'autorLibro': draft['author_id'].strip(),
    }
