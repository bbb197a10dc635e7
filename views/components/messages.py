"""
Page and flash message rendering.
"""

import streamlit as st

from controllers.base import Message, Severity

_RENDERERS = {
    Severity.INFO: st.info,
    Severity.SUCCESS: st.success,
    Severity.WARNING: st.warning,
    Severity.ERROR: st.error,
}


def render_messages(messages: list[Message]):
    """Show each message with the st.* call matching its severity."""
    for message in messages:
        _RENDERERS.get(message.severity, st.info)(message.text)
