import logging
import datetime as dt

import streamlit as st

from domain.constants import BRAND_NAME
from ui.components import inject_base_css

# Import the page rendering functions from the section modules
from views import authors, books

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

DEFAULT_PAGE = "autores"

# --- Page Registry ---
# Maps a page key (also the ?page= query value) to its label and rendering function.
PAGE_REGISTRY = {
    "autores": {
        "label": "Autores",
        "render_func": authors.view,
    },
    "libros": {
        "label": "Libros",
        "render_func": books.view,
    },
}


def resolve_page(raw) -> str:
    """Map a ?page= value to a registry key; anything unknown falls back to the authors section."""
    key = (raw or '').strip().strip('/').lower() if isinstance(raw, str) else ''
    return key if key in PAGE_REGISTRY else DEFAULT_PAGE


def main():
    """
    Main application router.

    The sidebar selects one of the two catalog sections. The selection is kept
    in the ``page`` query parameter so a section can be opened directly by URL.
    """
    st.set_page_config(page_title=BRAND_NAME, layout="wide")
    inject_base_css()

    st.sidebar.title(BRAND_NAME)

    page_keys = list(PAGE_REGISTRY.keys())
    if 'navigation_radio' not in st.session_state:
        st.session_state.navigation_radio = resolve_page(st.query_params.get('page'))

    selected_page_key = st.sidebar.radio(
        "Navegación",
        page_keys,
        format_func=lambda k: PAGE_REGISTRY[k]["label"],
        key="navigation_radio",
    )
    st.query_params['page'] = selected_page_key

    # --- Page Rendering ---
    PAGE_REGISTRY[selected_page_key]["render_func"]()

    # --- Footer ---
    st.sidebar.markdown("---")
    st.sidebar.caption(
        f"{BRAND_NAME} | {dt.datetime.now().strftime('%H:%M:%S')}"
    )


if __name__ == "__main__":
    main()
