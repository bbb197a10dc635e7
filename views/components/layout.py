"""
Shared page chrome: account sidebar and messages.
"""

from config.auth import SessionContext
from controllers.auth_controller import AuthController
from controllers.base import ViewStateController
from services.api_client import get_api_client
from services.auth_service import AuthService
from views.components.messages import render_messages
from views.components.navigation import go_to
from views.components.sidebar.account import render_account_sidebar


def _logout(session: SessionContext):
    controller = AuthController(session, AuthService(get_api_client()))
    go_to(controller.logout())


def render_page_chrome(session: SessionContext, controller: ViewStateController):
    """
    Render the sidebar and any pending messages.

    Call at the top of render(): messages queued by the previous run's
    actions are shown once, then cleared.
    """
    render_account_sidebar(
        display_name=session.display_name,
        is_logged_in=session.is_logged_in(),
        is_admin=session.is_admin(),
        on_logout=lambda: _logout(session),
    )
    render_messages(controller.pop_flash_messages())
    render_messages(controller.pop_messages())
