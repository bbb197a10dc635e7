"""
Breed Admin View - manage breeds, filtered by category.
"""

import streamlit as st

from config.auth import get_session, require_admin
from controllers.base import Page
from controllers.breed_admin_controller import BreedAdminController
from services.api_client import get_api_client
from services.catalog_service import CatalogService
from views.components.layout import render_page_chrome
from views.components.navigation import is_page_entry


class BreedAdminView:
    """View for the breed management page."""

    def __init__(self):
        self.session = get_session()
        self.controller = BreedAdminController(self.session, CatalogService(get_api_client()))

    def render(self):
        """Main render method."""
        require_admin(self.session)
        if is_page_entry(Page.ADMIN_BREEDS):
            self.controller.start_create()
            with st.spinner("Loading breeds..."):
                self.controller.reload()

        render_page_chrome(self.session, self.controller)
        st.title("Breeds")

        self._render_filter()

        col_list, col_form = st.columns([3, 2])
        with col_list:
            self._render_delete_confirmation()
            self._render_list()
        with col_form:
            self._render_form()

    def _category_options(self) -> list:
        return [None] + [cat.id for cat in self.controller.categories]

    def _render_filter(self):
        c = self.controller
        options = self._category_options()
        current = c.filter_category_id
        chosen = st.selectbox(
            "Show breeds of",
            options,
            index=options.index(current) if current in options else 0,
            format_func=lambda cid: "All categories" if cid is None else c.category_name(cid),
        )
        if chosen != current:
            c.apply_category_filter(chosen)
            c.start_create()
            st.rerun()

    def _render_list(self):
        c = self.controller
        if not c.breeds:
            st.info("No breeds found.")
            return

        for breed in c.breeds:
            col_name, col_cat, col_edit, col_delete = st.columns([3, 2, 1, 1])
            with col_name:
                suffix = "" if breed.active in (True, None) else " *(inactive)*"
                st.markdown(f"{breed.name}{suffix}")
            with col_cat:
                st.caption(breed.category_name or c.category_name(breed.category_id))
            with col_edit:
                if st.button("Edit", key=f"breed_edit_{breed.id}"):
                    c.start_edit(breed)
                    st.rerun()
            with col_delete:
                if st.button("Delete", key=f"breed_delete_{breed.id}"):
                    c.confirm_delete(breed)
                    st.rerun()

    def _render_form(self):
        c = self.controller
        form = c.form
        st.markdown(f"### {'Edit breed' if c.editing else 'New breed'}")

        options = self._category_options()
        with st.form(f"breed_form_{form.id or 'new'}_{form.category_id}"):
            name = st.text_input("Name", value=form.name or "")
            category_id = st.selectbox(
                "Category",
                options,
                index=options.index(form.category_id) if form.category_id in options else 0,
                format_func=lambda cid: "Select..." if cid is None else c.category_name(cid),
            )
            sort_order = st.number_input("Sort order", value=form.sort_order or 0, step=1)
            active = st.checkbox("Active", value=form.active is not False)
            submitted = st.form_submit_button("Save", type="primary", use_container_width=True)

        if submitted:
            c.update_form(name=name, category_id=category_id, sort_order=int(sort_order), active=active)
            with st.spinner("Saving..."):
                c.save()
            st.rerun()

        if c.editing and st.button("New breed instead", use_container_width=True):
            c.start_create()
            st.rerun()

    def _render_delete_confirmation(self):
        c = self.controller
        if c.to_delete_id is None:
            return
        name = next((b.name for b in c.breeds if b.id == c.to_delete_id), f"#{c.to_delete_id}")
        st.warning(f"Delete breed **{name}**?")
        col_yes, col_no = st.columns(2)
        with col_yes:
            if st.button("Yes, delete", type="primary", use_container_width=True):
                c.delete_selected()
                st.rerun()
        with col_no:
            if st.button("Cancel", use_container_width=True):
                c.cancel_delete()
                st.rerun()
