"""
Adoption request table rows.
"""

import streamlit as st
from typing import Callable, Optional

from models import AdoptionRequestRecord

STATUS_BADGES = {
    "PENDING": "🟡 Pending",
    "APPROVED": "🟢 Approved",
    "REJECTED": "🔴 Rejected",
    "CANCELLED": "⚪ Cancelled",
}


def status_badge(status: Optional[str]) -> str:
    return STATUS_BADGES.get((status or "").upper(), status or "Unknown")


def render_request_header(columns: list[str]):
    cols = st.columns([2, 2, 3, 2, 2])
    for col, title in zip(cols, columns):
        with col:
            st.markdown(f"**{title}**")


def render_request_row(
    request: AdoptionRequestRecord,
    who: str,
    actions: list[tuple[str, Callable[[AdoptionRequestRecord], None]]],
    key_prefix: str,
):
    """
    Render one adoption request with its action buttons.

    Args:
        request: The request to show
        who: Text for the second column (animal or requester)
        actions: (label, callback) pairs; empty for no actions
        key_prefix: Widget key prefix, unique per page
    """
    col_date, col_who, col_note, col_status, col_actions = st.columns([2, 2, 3, 2, 2])
    with col_date:
        st.markdown((request.created_at or "")[:10] or "-")
    with col_who:
        st.markdown(who or "-")
    with col_note:
        st.markdown(request.note or "")
    with col_status:
        st.markdown(status_badge(request.status))
    with col_actions:
        for label, callback in actions:
            if st.button(label, key=f"{key_prefix}_{label}_{request.id}", use_container_width=True):
                callback(request)
