"""
Animal listing filter sidebar component.
"""

import streamlit as st
from typing import Callable, Optional

from models import AnimalFilters, CategoryRecord
from models.filters import (
    AGE_GROUP_OPTIONS,
    GENDER_OPTIONS,
    SIZE_OPTIONS,
    SORT_DIRECTION_LABELS,
    SORT_KEY_LABELS,
)

ANY = "Any"


def _select_api_value(label: str, options: dict[str, str], current: Optional[str]) -> Optional[str]:
    """Selectbox over display labels that returns the API value (None for Any)."""
    labels = [ANY] + list(options)
    values = [None] + list(options.values())
    index = values.index(current) if current in values else 0
    chosen = st.selectbox(label, labels, index=index)
    return options.get(chosen)


def render_filter_sidebar(
    filters: AnimalFilters,
    categories: list[CategoryRecord],
    on_apply: Callable[[AnimalFilters], None],
    on_clear: Callable[[], None],
):
    """
    Render the filter form in the sidebar.

    Args:
        filters: Current filter state, used for the initial widget values
        categories: Categories for the category select box
        on_apply: Callback with the new filter values when "Search" is clicked
        on_clear: Callback when "Clear filters" is clicked
    """
    with st.sidebar:
        st.markdown("### Find a friend")

        with st.form("animal_filters"):
            q = st.text_input("Search", value=filters.q or "", placeholder="Name or description")

            category_ids = [None] + [c.id for c in categories]
            category_names = {c.id: c.name for c in categories}
            category_id = st.selectbox(
                "Category",
                category_ids,
                index=category_ids.index(filters.category_id) if filters.category_id in category_ids else 0,
                format_func=lambda cid: ANY if cid is None else category_names.get(cid, str(cid)),
            )

            gender = _select_api_value("Gender", GENDER_OPTIONS, filters.gender)
            size = _select_api_value("Size", SIZE_OPTIONS, filters.size)
            age_group = _select_api_value("Age", AGE_GROUP_OPTIONS, filters.age_group)
            only_available = st.checkbox("Only animals still looking for a home", value=filters.only_available)

            st.markdown("**Sort**")
            sort_keys = list(SORT_KEY_LABELS)
            sort_by = st.selectbox(
                "Sort by",
                sort_keys,
                index=sort_keys.index(filters.sort_by) if filters.sort_by in sort_keys else 0,
                format_func=SORT_KEY_LABELS.get,
            )
            directions = list(SORT_DIRECTION_LABELS)
            sort_order = st.radio(
                "Order",
                directions,
                index=directions.index(filters.sort_order) if filters.sort_order in directions else 0,
                format_func=SORT_DIRECTION_LABELS.get,
                horizontal=True,
            )

            if st.form_submit_button("Search", type="primary", use_container_width=True):
                on_apply(AnimalFilters(
                    q=q.strip() or None,
                    category_id=category_id,
                    gender=gender,
                    size=size,
                    age_group=age_group,
                    only_available=only_available,
                    sort_by=sort_by,
                    sort_order=sort_order,
                ))

        if st.button("Clear filters", use_container_width=True):
            on_clear()
