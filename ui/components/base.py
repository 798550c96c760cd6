import datetime as dt
from typing import Optional

import streamlit as st

PRIMARY_ACCENT = "#2563EB"  # blue-600
RED = "#DC2626"  # red-600
CHIP_BG = "#374151"


def inject_base_css():
    if getattr(inject_base_css, "_applied", False):
        return
    inject_base_css._applied = True
    st.markdown(
        f"""
        <style>
        .avatar {{
            display:inline-flex; align-items:center; justify-content:center;
            width:44px; height:44px; border-radius:50%;
            background:{PRIMARY_ACCENT}; color:#F9FAFB; font-weight:700; font-size:16px;
        }}
        .avatar.large {{width:64px; height:64px; font-size:22px;}}
        .badge {{
            display:inline-block; padding:2px 8px; border-radius:12px;
            font-size:12px; line-height:16px; font-weight:600;
            background:{CHIP_BG}; color:#F9FAFB; margin-right:4px;
        }}
        .record-id {{font-family:monospace; font-size:12px; color:#6B7280; word-break:break-all;}}
        .field-error {{color:{RED}; font-size:13px; margin-top:-6px;}}
        </style>
        """,
        unsafe_allow_html=True,
    )


def format_date(value: Optional[dt.date]) -> str:
    return value.strftime("%d/%m/%Y") if value else "—"


def field_error(message: str):
    if message:
        st.markdown(f"<div class='field-error'>{message}</div>", unsafe_allow_html=True)
