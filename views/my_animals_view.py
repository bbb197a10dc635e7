"""
My Animals View - the animals the current user has listed.
"""

import streamlit as st

from config.auth import get_session, require_login
from config.settings import get_settings
from controllers.base import Page
from controllers.my_animals_controller import MyAnimalsController
from services.adoption_service import AdoptionService
from services.animal_service import AnimalService, resolve_image_url
from services.api_client import get_api_client
from views.components.layout import render_page_chrome
from views.components.navigation import is_page_entry, open_animal_page, open_editor


class MyAnimalsView:
    """View for the My Animals page."""

    def __init__(self):
        self.session = get_session()
        client = get_api_client()
        self.controller = MyAnimalsController(
            self.session,
            AnimalService(client),
            AdoptionService(client),
        )

    def render(self):
        """Main render method."""
        require_login(self.session)
        if is_page_entry(Page.MY_ANIMALS):
            with st.spinner("Loading your animals..."):
                self.controller.load()

        render_page_chrome(self.session, self.controller)

        col_title, col_add = st.columns([3, 1])
        with col_title:
            st.title("My Animals")
        with col_add:
            if st.button("+ Add animal", type="primary", use_container_width=True):
                open_editor(Page.EDIT_ANIMAL)

        self._render_delete_confirmation()

        animals = self.controller.animals
        if not animals:
            st.info("You haven't listed any animals yet.")
            return

        for animal in animals:
            self._render_row(animal)

    def _render_row(self, animal):
        c = self.controller
        with st.container(border=True):
            col_img, col_info, col_actions = st.columns([1, 3, 2])
            with col_img:
                image_url = resolve_image_url(animal.image, get_settings().uploads_base_url)
                if image_url:
                    st.image(image_url, use_container_width=True)
            with col_info:
                st.markdown(f"### {animal.name or 'Unnamed'}")
                st.caption(" · ".join(d for d in [animal.display_category, animal.display_breed] if d))
                pending = c.pending_count_for(animal.id)
                if animal.adopted:
                    st.success("Adopted")
                elif pending:
                    st.warning(f"{pending} pending request{'s' if pending != 1 else ''}")
                else:
                    st.caption("No pending requests")
            with col_actions:
                if st.button("View", key=f"mine_view_{animal.id}", use_container_width=True):
                    open_animal_page(Page.ANIMAL_DETAILS, animal.id)
                if st.button("Requests", key=f"mine_requests_{animal.id}", use_container_width=True):
                    open_animal_page(Page.ANIMAL_REQUESTS, animal.id)
                if st.button("Edit", key=f"mine_edit_{animal.id}", use_container_width=True):
                    open_editor(Page.EDIT_ANIMAL, animal.id)
                if st.button("Delete", key=f"mine_delete_{animal.id}", use_container_width=True):
                    c.confirm_delete(animal.id)
                    st.rerun()

    def _render_delete_confirmation(self):
        c = self.controller
        if c.to_delete_id is None:
            return
        name = next((a.name for a in c.animals if a.id == c.to_delete_id), f"#{c.to_delete_id}")
        st.warning(f"Delete **{name}** and all of its adoption requests?")
        col_yes, col_no = st.columns(2)
        with col_yes:
            if st.button("Yes, delete", type="primary", use_container_width=True):
                with st.spinner("Deleting..."):
                    c.delete_selected()
                st.rerun()
        with col_no:
            if st.button("Cancel", use_container_width=True):
                c.cancel_delete()
                st.rerun()
