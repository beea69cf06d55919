"""
RevU.ai - Streamlit editor and review dashboard
"""

import streamlit as st

from revu.config import get_settings
from revu.logging_config import get_logger, setup_logging
from revu.ui.client import ReviewClient
from revu.ui.state import ReviewSession

setup_logging()
logger = get_logger(__name__)

st.set_page_config(page_title="RevU.ai", layout="wide", page_icon="🔀")


def get_session() -> ReviewSession:
    """One ReviewSession per browser tab, kept across reruns."""
    if "review_session" not in st.session_state:
        settings = get_settings()
        client = ReviewClient(settings.review_api_url, timeout=settings.ui_request_timeout)
        st.session_state.review_session = ReviewSession(client)
        logger.info("Editor session started", review_api_url=settings.review_api_url)
    return st.session_state.review_session


session = get_session()
state = session.state

st.title("RevU.ai")

editor_col, side_col = st.columns([2, 1], gap="large")

# Editor
with editor_col:
    name_col, lang_col = st.columns([4, 1])
    name_col.markdown("`main.js`")
    lang_col.caption("JavaScript")

    code = st.text_area(
        "Code",
        key="code_input",
        height=320,
        placeholder="Paste your code here…",
        label_visibility="collapsed",
    )
    session.update_code(code)

    st.caption(f"{len(state.line_numbers)} lines")
    if state.code:
        st.code(state.code, language="javascript", line_numbers=True)


def start_review(request_changes: bool = False) -> None:
    """Button callback: mark the review outstanding so the next run renders it loading."""
    session.update_code(st.session_state.get("code_input", ""))
    session.begin_review(request_changes=request_changes)


# Review actions
with side_col:
    st.subheader("Review Actions")

    st.button(
        "👍 Approve",
        key="approve",
        type="primary" if state.approved is True else "secondary",
        on_click=session.approve,
    )
    st.button(
        "👎 Request Changes",
        key="request_changes",
        type="primary" if state.approved is False else "secondary",
        disabled=state.loading,
        on_click=start_review,
        kwargs={"request_changes": True},
    )
    st.button(
        state.review_button_label,
        key="review_code",
        disabled=state.loading,
        on_click=start_review,
    )

    if state.show_spinner:
        with st.spinner("Reviewing..."):
            session.finish_review()
        st.rerun()

    if state.show_review:
        with st.container(border=True):
            st.subheader("AI Review")
            st.markdown(state.review)

# Approval popup
if state.show_popup:
    with st.container(border=True):
        st.success(
            "**Thank you for using RevU.ai**\n\n"
            "Your approval has been recorded successfully."
        )
        st.button("Close", key="close_popup", on_click=session.close_popup)
