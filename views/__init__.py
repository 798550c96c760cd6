"""View modules for manual routing.

This project uses a custom router in `app.py` instead of Streamlit's automatic
multi-page system. Each catalog section lives under `views/` and exposes a
`view()` function; the shared List / Create / Lookup rendering is in
`views.catalog_manager`.

Add any new section as a module with a `view()` callable and register it in
`PAGE_REGISTRY` inside `app.py`.
"""
