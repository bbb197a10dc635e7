"""
Page navigation helpers.

The animal a page is about travels in the `?id=` query parameter when the
page is opened from a link, or in session state when opened from a button.
"""

from typing import Optional

import streamlit as st

SELECTED_ANIMAL_KEY = "selected_animal_id"
EDIT_ANIMAL_KEY = "edit_animal_id"


def go_to(page: Optional[str]):
    """Switch page if an action returned a target; otherwise rerun in place."""
    if page:
        st.switch_page(page)
    else:
        st.rerun()


def open_animal_page(page: str, animal_id: Optional[int]):
    st.session_state[SELECTED_ANIMAL_KEY] = animal_id
    st.switch_page(page)


def open_editor(page: str, animal_id: Optional[int] = None):
    """Open the edit page for an animal, or for a new one when animal_id is None."""
    st.session_state[EDIT_ANIMAL_KEY] = animal_id
    st.switch_page(page)


def _query_id() -> Optional[int]:
    raw = st.query_params.get("id")
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def selected_animal_id() -> Optional[int]:
    query_id = _query_id()
    if query_id is not None:
        return query_id
    return st.session_state.get(SELECTED_ANIMAL_KEY)


def edit_animal_id() -> Optional[int]:
    query_id = _query_id()
    if query_id is not None:
        return query_id
    return st.session_state.get(EDIT_ANIMAL_KEY)


CURRENT_PAGE_KEY = "current_page"


def is_page_entry(page: str) -> bool:
    """
    True on the first run after arriving at `page` from another page.

    Pages reload their data on entry, so lists changed elsewhere in the
    session are never shown stale.
    """
    entered = st.session_state.get(CURRENT_PAGE_KEY) != page
    st.session_state[CURRENT_PAGE_KEY] = page
    return entered
