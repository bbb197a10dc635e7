"""
Animals View - public listing of animals with filters and sorting.
"""

import streamlit as st

from config.auth import get_session
from controllers.animal_list_controller import AnimalListController
from controllers.base import Page
from models import AnimalFilters
from services.animal_service import AnimalService
from services.api_client import get_api_client
from services.catalog_service import CatalogService
from views.components.animal_card import render_animal_card
from views.components.layout import render_page_chrome
from views.components.navigation import is_page_entry, open_animal_page
from views.components.sidebar import render_filter_sidebar

GRID_COLUMNS = 3


class AnimalsView:
    """View for the Browse Animals page."""

    def __init__(self):
        self.session = get_session()
        client = get_api_client()
        self.controller = AnimalListController(
            self.session,
            AnimalService(client),
            CatalogService(client),
        )

    def render(self):
        """Main render method."""
        if is_page_entry(Page.BROWSE):
            with st.spinner("Loading animals..."):
                self.controller.load_categories()
                self.controller.load()

        render_page_chrome(self.session, self.controller)
        st.title("Animals looking for a home")

        render_filter_sidebar(
            filters=self.controller.filters,
            categories=self.controller.categories,
            on_apply=self._apply_filters,
            on_clear=self._clear_filters,
        )

        self._render_grid()

    def _render_grid(self):
        animals = self.controller.animals
        if not self.controller.is_loaded():
            if st.button("Try again"):
                with st.spinner("Loading animals..."):
                    self.controller.load()
                st.rerun()
            return

        if not animals:
            st.info("No animals match your filters.")
            return

        st.caption(f"{len(animals)} animal{'s' if len(animals) != 1 else ''}")
        for start in range(0, len(animals), GRID_COLUMNS):
            cols = st.columns(GRID_COLUMNS)
            for col, animal in zip(cols, animals[start:start + GRID_COLUMNS]):
                with col:
                    render_animal_card(
                        animal,
                        image_url=self.controller.resolve_image(animal.image),
                        on_open=lambda animal_id: open_animal_page(Page.ANIMAL_DETAILS, animal_id),
                        key_prefix="browse",
                    )

    def _apply_filters(self, filters: AnimalFilters):
        c = self.controller
        c.set_query(filters.q)
        c.set_category(filters.category_id)
        c.set_gender(filters.gender)
        c.set_size(filters.size)
        c.set_age_group(filters.age_group)
        c.set_only_available(filters.only_available)
        c.set_sort(filters.sort_by, filters.sort_order)
        with st.spinner("Searching..."):
            c.apply_filters()
        st.rerun()

    def _clear_filters(self):
        with st.spinner("Loading animals..."):
            self.controller.clear_filters()
        st.rerun()
