import streamlit as st
from typing import Callable

from domain.models import AuthorRecord, BookRecord
from .base import inject_base_css, format_date


def author_card(author: AuthorRecord, on_details: Callable[[str], None], key: str):
    """
    Displays a summary card for one author with a "Ver detalles" action.
    """
    inject_base_css()
    with st.container(border=True):
        c1, c2 = st.columns([1, 4])
        c1.markdown(f"<div class='avatar'>{author.initials or '?'}</div>", unsafe_allow_html=True)
        with c2:
            st.markdown(f"**{author.display_name or 'N/A'}**")
            st.write(f"**Nacimiento:** {format_date(author.birth_date)}")
            st.markdown(f"<div class='record-id'>ID: {author.id}</div>", unsafe_allow_html=True)
        st.button("Ver detalles", key=key, on_click=on_details, args=(author.id,))


def book_card(book: BookRecord, on_details: Callable[[str], None], key: str):
    inject_base_css()
    with st.container(border=True):
        st.markdown(f"**{book.title or 'N/A'}**")
        st.write(f"**Publicación:** {format_date(book.publication_date)}")
        st.markdown(f"<div class='record-id'>Autor ID: {book.author_id or '—'}</div>", unsafe_allow_html=True)
        st.button("Ver detalles", key=key, on_click=on_details, args=(book.id,))


def author_details(author: AuthorRecord):
    inject_base_css()
    with st.container(border=True):
        c1, c2 = st.columns([1, 5])
        c1.markdown(f"<div class='avatar large'>{author.initials or '?'}</div>", unsafe_allow_html=True)
        with c2:
            st.subheader(author.display_name or 'N/A')
            st.markdown(f"<div class='record-id'>ID: {author.id}</div>", unsafe_allow_html=True)
        st.write(f"**Fecha de Nacimiento:** {format_date(author.birth_date)}")


def book_details(book: BookRecord):
    inject_base_css()
    with st.container(border=True):
        st.subheader("Detalles del Libro")
        st.write(f"**Título:** {book.title}")
        st.write(f"**Fecha Publicación:** {format_date(book.publication_date)}")
        st.write(f"**Autor ID:** {book.author_id or '—'}")
        st.markdown(f"<div class='record-id'>ID: {book.id}</div>", unsafe_allow_html=True)
