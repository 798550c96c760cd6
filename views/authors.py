import streamlit as st

from services.catalogs import AUTHORS
from views import catalog_manager


def view():
    st.header("Gestión de Autores")
    catalog_manager.render(AUTHORS)
