"""
Animal Detail View - one animal, plus what the viewer can do with it.
"""

import streamlit as st

from config.auth import get_session
from config.settings import get_settings
from controllers.animal_detail_controller import AnimalDetailController
from controllers.base import Page
from services.adoption_service import AdoptionService
from services.animal_service import AnimalService, resolve_image_url
from services.api_client import get_api_client
from views.components.animal_card import render_animal_details
from views.components.layout import render_page_chrome
from views.components.navigation import (
    go_to,
    is_page_entry,
    open_animal_page,
    open_editor,
    selected_animal_id,
)
from views.components.request_row import status_badge


class AnimalDetailView:
    """View for the Animal Details page."""

    def __init__(self):
        self.session = get_session()
        client = get_api_client()
        self.controller = AnimalDetailController(
            self.session,
            AnimalService(client),
            AdoptionService(client),
        )

    def render(self):
        """Main render method."""
        animal_id = selected_animal_id()
        if is_page_entry(Page.ANIMAL_DETAILS):
            self.controller.load(animal_id)
        else:
            self.controller.ensure_loaded(animal_id)

        render_page_chrome(self.session, self.controller)

        animal = self.controller.animal
        if animal is None:
            st.page_link(Page.BROWSE, label="← Back to all animals")
            return

        render_animal_details(animal, self._image_url(animal.image))
        st.markdown("---")

        if not self.session.is_logged_in():
            st.info("Log in to send an adoption request.")
            st.page_link(Page.LOGIN, label="Log in")
        elif self.controller.is_owner:
            self._render_owner_panel()
        else:
            self._render_requester_panel()

    def _image_url(self, path):
        return resolve_image_url(path, get_settings().uploads_base_url)

    def _render_owner_panel(self):
        c = self.controller
        st.markdown("### Your listing")
        st.metric("Adoption requests", c.request_count)

        col1, col2, col3 = st.columns(3)
        with col1:
            if st.button("View requests", use_container_width=True):
                open_animal_page(Page.ANIMAL_REQUESTS, c.animal.id)
        with col2:
            if st.button("Edit", use_container_width=True):
                open_editor(Page.EDIT_ANIMAL, c.animal.id)
        with col3:
            if st.button("Delete", use_container_width=True):
                c.confirm_delete()
                st.rerun()

        if c.is_delete_pending():
            st.warning(f"Delete **{c.animal.name}** and all of its adoption requests?")
            col_yes, col_no = st.columns(2)
            with col_yes:
                if st.button("Yes, delete", type="primary", use_container_width=True):
                    with st.spinner("Deleting..."):
                        target = c.delete_animal()
                    go_to(target)
            with col_no:
                if st.button("Cancel", use_container_width=True):
                    c.cancel_delete()
                    st.rerun()

    def _render_requester_panel(self):
        c = self.controller
        if c.animal.adopted and not c.has_sent_request:
            st.info("This animal has already found a home.")
            return

        if not c.has_sent_request:
            st.markdown("### Adopt this animal")
            with st.form("send_request"):
                note = st.text_area("A note for the owner", placeholder="Tell them about your home")
                if st.form_submit_button("Send adoption request", type="primary"):
                    with st.spinner("Sending..."):
                        c.send_request(note)
                    st.rerun()
            return

        request = c.existing_request
        st.markdown("### Your adoption request")
        st.markdown(f"**Status:** {status_badge(request.status)}")

        with st.form("update_request"):
            note = st.text_area("Your note", value=c.note)
            col1, col2 = st.columns(2)
            with col1:
                update = st.form_submit_button("Update note", disabled=not c.can_cancel())
            with col2:
                cancel = st.form_submit_button("Cancel request", disabled=not c.can_cancel())

        if update:
            with st.spinner("Saving..."):
                c.update_note(note)
            st.rerun()
        if cancel:
            with st.spinner("Cancelling..."):
                target = c.cancel_request()
            go_to(target)
