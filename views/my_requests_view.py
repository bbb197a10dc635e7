"""
My Requests View - adoption requests the current user has sent.
"""

import streamlit as st

from config.auth import get_session, require_login
from controllers.base import Page
from controllers.my_requests_controller import MyRequestsController
from services.adoption_service import AdoptionService
from services.api_client import get_api_client
from views.components.layout import render_page_chrome
from views.components.navigation import is_page_entry, open_animal_page
from views.components.request_row import render_request_header, render_request_row


class MyRequestsView:
    """View for the My Requests page."""

    def __init__(self):
        self.session = get_session()
        self.controller = MyRequestsController(self.session, AdoptionService(get_api_client()))

    def render(self):
        """Main render method."""
        require_login(self.session)
        if is_page_entry(Page.MY_REQUESTS):
            with st.spinner("Loading your requests..."):
                self.controller.load()

        render_page_chrome(self.session, self.controller)
        st.title("My adoption requests")

        requests = self.controller.requests
        if not requests:
            if self.controller.is_loaded():
                st.info("You haven't sent any adoption requests yet.")
                st.page_link(Page.BROWSE, label="Browse animals")
            return

        render_request_header(["Date", "Animal", "Note", "Status", ""])
        for request in requests:
            actions = [("Open", self._open)]
            if self.controller.can_delete(request):
                actions.append(("Withdraw", self._delete))
            render_request_row(request, request.animal_name or f"#{request.animal_id}", actions, "mine")

    def _open(self, request):
        open_animal_page(Page.ANIMAL_DETAILS, request.animal_id)

    def _delete(self, request):
        with st.spinner("Withdrawing..."):
            self.controller.delete_request(request.id)
        st.rerun()
