"""
Animal Requests View - an owner approving or rejecting requests for one
of their animals.
"""

import streamlit as st

from config.auth import get_session, require_login
from controllers.animal_requests_controller import AnimalRequestsController
from controllers.base import Page
from models import is_actionable
from services.adoption_service import AdoptionService
from services.api_client import get_api_client
from views.components.layout import render_page_chrome
from views.components.navigation import is_page_entry, selected_animal_id
from views.components.request_row import render_request_header, render_request_row


class AnimalRequestsView:
    """View for the Animal Requests page."""

    def __init__(self):
        self.session = get_session()
        self.controller = AnimalRequestsController(self.session, AdoptionService(get_api_client()))

    def render(self):
        """Main render method."""
        require_login(self.session)
        animal_id = selected_animal_id()
        if is_page_entry(Page.ANIMAL_REQUESTS):
            with st.spinner("Loading requests..."):
                self.controller.load(animal_id)
        else:
            self.controller.ensure_loaded(animal_id)

        render_page_chrome(self.session, self.controller)
        st.title("Adoption requests")
        st.page_link(Page.MY_ANIMALS, label="← Back to my animals")

        requests = self.controller.requests
        if not requests:
            st.info("No adoption requests for this animal yet.")
            return

        animal_name = requests[0].animal_name
        if animal_name:
            st.markdown(f"### {animal_name}")

        self._render_decision_panel()

        render_request_header(["Date", "From", "Note", "Status", ""])
        for request in requests:
            who = request.requester_name or request.requester_email or "-"
            if request.requester_email and request.requester_name:
                who = f"{request.requester_name}  \n{request.requester_email}"
            actions = [("Review", self._select)] if is_actionable(request.status) else []
            render_request_row(request, who, actions, key_prefix="owner")

    def _select(self, request):
        self.controller.select(request.id)
        st.rerun()

    def _render_decision_panel(self):
        c = self.controller
        request = c.selected_request
        if request is None:
            return
        with st.container(border=True):
            st.markdown(f"**Request from {request.requester_name or request.requester_email}**")
            if request.note:
                st.markdown(f"> {request.note}")
            col_approve, col_reject, col_cancel = st.columns(3)
            with col_approve:
                if st.button("Approve", type="primary", use_container_width=True):
                    with st.spinner("Approving..."):
                        c.approve()
                    st.rerun()
            with col_reject:
                if st.button("Reject", use_container_width=True):
                    with st.spinner("Rejecting..."):
                        c.reject()
                    st.rerun()
            with col_cancel:
                if st.button("Close", use_container_width=True):
                    c.clear_selection()
                    st.rerun()
