import streamlit as st

from services.catalogs import BOOKS
from views import catalog_manager


def view():
    st.header("Gestión de Libros")
    catalog_manager.render(BOOKS)
