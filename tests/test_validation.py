import datetime as dt

import pytest

from domain import constants as C
from services.validation import (
    validate_author_draft, validate_book_draft, validate_lookup_id, validate_uuid, has_errors,
)

NOW = dt.datetime(2024, 6, 15, 12, 0, 0)
VALID_UUID = '123e4567-e89b-12d3-a456-426614174000'


def author(**overrides):
    draft = {'given_name': 'Ana', 'family_name': 'Lopez', 'birth_date': dt.date(2000, 1, 1)}
    draft.update(overrides)
    return draft


def book(**overrides):
    draft = {'title': 'Rayuela', 'publication_date': dt.date(1963, 6, 28), 'author_id': VALID_UUID}
    draft.update(overrides)
    return draft


def test_valid_author_draft_has_no_errors():
    errors = validate_author_draft(author(), NOW)
    assert not has_errors(errors)
    assert set(errors) == {'given_name', 'family_name', 'birth_date'}


@pytest.mark.parametrize("field,blank,message", [
    ('given_name', '   ', C.MSG_GIVEN_NAME_REQUIRED),
    ('family_name', '', C.MSG_FAMILY_NAME_REQUIRED),
    ('birth_date', None, C.MSG_BIRTH_DATE_REQUIRED),
])
def test_missing_author_field_flags_only_that_field(field, blank, message):
    errors = validate_author_draft(author(**{field: blank}), NOW)
    assert errors[field] == message
    assert [k for k, v in errors.items() if v] == [field]


@pytest.mark.parametrize("field,blank,message", [
    ('title', ' \t', C.MSG_TITLE_REQUIRED),
    ('publication_date', '', C.MSG_PUBLICATION_DATE_REQUIRED),
    ('author_id', '', C.MSG_AUTHOR_ID_REQUIRED),
])
def test_missing_book_field_flags_only_that_field(field, blank, message):
    errors = validate_book_draft(book(**{field: blank}), NOW)
    assert errors[field] == message
    assert [k for k, v in errors.items() if v] == [field]


def test_future_dates_are_rejected_even_when_everything_else_is_valid():
    tomorrow = NOW.date() + dt.timedelta(days=1)
    assert validate_author_draft(author(birth_date=tomorrow), NOW)['birth_date'] == C.MSG_FUTURE_DATE
    assert validate_book_draft(book(publication_date=tomorrow.isoformat()), NOW)['publication_date'] == C.MSG_FUTURE_DATE


def test_future_date_rejected_alongside_other_errors():
    errors = validate_author_draft(author(given_name='', birth_date=dt.date(2999, 1, 1)), NOW)
    assert errors['birth_date'] == C.MSG_FUTURE_DATE
    assert errors['given_name'] == C.MSG_GIVEN_NAME_REQUIRED


def test_today_is_not_in_the_future():
    assert validate_author_draft(author(birth_date=NOW.date()), NOW)['birth_date'] == ''


def test_now_is_evaluated_per_call():
    # Without an injected clock the real current time is used.
    far_future = dt.date.today() + dt.timedelta(days=400)
    assert validate_author_draft(author(birth_date=far_future))['birth_date'] == C.MSG_FUTURE_DATE


@pytest.mark.parametrize("value", [
    VALID_UUID,
    VALID_UUID.upper(),
    '00000000-0000-0000-0000-000000000000',
])
def test_uuid_pattern_accepts_canonical_form(value):
    assert validate_uuid(value, C.MSG_AUTHOR_ID_REQUIRED) == ''


@pytest.mark.parametrize("value", [
    '123e4567e89b12d3a456426614174000',
    '{123e4567-e89b-12d3-a456-426614174000}',
    '123e4567-e89b-12d3-a456-42661417400',
    'g23e4567-e89b-12d3-a456-426614174000',
    'autor-1',
])
def test_uuid_pattern_rejects_other_strings(value):
    assert validate_uuid(value, C.MSG_AUTHOR_ID_REQUIRED) == C.MSG_INVALID_UUID


def test_lookup_id_only_needs_presence():
    assert validate_lookup_id('42', C.MSG_BOOK_ID_REQUIRED) == {'record_id': ''}
    assert validate_lookup_id('  ', C.MSG_BOOK_ID_REQUIRED) == {'record_id': C.MSG_BOOK_ID_REQUIRED}
