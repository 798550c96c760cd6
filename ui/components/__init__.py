"""
This package provides a collection of reusable UI components for the Streamlit application.

It is organized into several modules, each containing a specific category of components:
- `base`: CSS injection and small formatting helpers.
- `cards`: Record summary cards for the list and detail panels for the lookup.
- `record_form`: The create form shared by every catalog.

By importing the components here, we provide a single, consistent access point
for the rest of the application (`from ui import components`).
"""

from .base import (
    inject_base_css,
    format_date,
    field_error,
)

from .cards import (
    author_card,
    book_card,
    author_details,
    book_details,
)

from . import record_form
