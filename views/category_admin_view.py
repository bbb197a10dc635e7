"""
Category Admin View - manage animal categories.
"""

import streamlit as st

from config.auth import get_session, require_admin
from controllers.base import Page
from controllers.category_admin_controller import CategoryAdminController
from services.api_client import get_api_client
from services.catalog_service import CatalogService
from views.components.layout import render_page_chrome
from views.components.navigation import is_page_entry


class CategoryAdminView:
    """View for the category management page."""

    def __init__(self):
        self.session = get_session()
        self.controller = CategoryAdminController(self.session, CatalogService(get_api_client()))

    def render(self):
        """Main render method."""
        require_admin(self.session)
        if is_page_entry(Page.ADMIN_CATEGORIES):
            self.controller.start_create()
            with st.spinner("Loading categories..."):
                self.controller.reload()

        render_page_chrome(self.session, self.controller)
        st.title("Categories")

        col_list, col_form = st.columns([3, 2])
        with col_list:
            self._render_delete_confirmation()
            self._render_list()
        with col_form:
            self._render_form()

    def _render_list(self):
        c = self.controller
        if st.button("Reload"):
            c.reload()
            st.rerun()

        if not c.categories:
            st.info("No categories yet.")
            return

        for category in c.categories:
            col_name, col_order, col_edit, col_delete = st.columns([3, 1, 1, 1])
            with col_name:
                suffix = "" if category.active in (True, None) else " *(inactive)*"
                st.markdown(f"{category.name}{suffix}")
            with col_order:
                st.caption(str(category.sort_order) if category.sort_order is not None else "")
            with col_edit:
                if st.button("Edit", key=f"cat_edit_{category.id}"):
                    c.start_edit(category)
                    st.rerun()
            with col_delete:
                if st.button("Delete", key=f"cat_delete_{category.id}"):
                    c.confirm_delete(category)
                    st.rerun()

    def _render_form(self):
        c = self.controller
        form = c.form
        st.markdown(f"### {'Edit category' if c.editing else 'New category'}")

        with st.form(f"category_form_{form.id or 'new'}"):
            name = st.text_input("Name", value=form.name or "")
            sort_order = st.number_input("Sort order", value=form.sort_order or 0, step=1)
            active = st.checkbox("Active", value=form.active is not False)
            submitted = st.form_submit_button("Save", type="primary", use_container_width=True)

        if submitted:
            c.update_form(name=name, sort_order=int(sort_order), active=active)
            with st.spinner("Saving..."):
                c.save()
            st.rerun()

        if c.editing and st.button("New category instead", use_container_width=True):
            c.start_create()
            st.rerun()

    def _render_delete_confirmation(self):
        c = self.controller
        if c.to_delete_id is None:
            return
        name = next((x.name for x in c.categories if x.id == c.to_delete_id), f"#{c.to_delete_id}")
        st.warning(f"Delete category **{name}**?")
        col_yes, col_no = st.columns(2)
        with col_yes:
            if st.button("Yes, delete", type="primary", use_container_width=True):
                c.delete_selected()
                st.rerun()
        with col_no:
            if st.button("Cancel", use_container_width=True):
                c.cancel_delete()
                st.rerun()
