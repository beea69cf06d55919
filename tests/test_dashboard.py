"""
Tests for the Streamlit dashboard.

Each test puts its own ReviewSession into session state before the first run,
so the page talks to a stub (or a closed port) instead of a live proxy.
"""

from streamlit.testing.v1 import AppTest

from revu.models import REVIEW_FAILED_MESSAGE
from revu.ui.client import ReviewClient
from revu.ui.state import ReviewSession

DASHBOARD = "../revu/ui/dashboard.py"


class RequestNeverCompleted(Exception):
    """Stops a script run while the review request is outstanding."""


def start_dashboard(session: ReviewSession = None) -> AppTest:
    at = AppTest.from_file(DASHBOARD, default_timeout=30)
    if session is not None:
        at.session_state["review_session"] = session
    return at.run()


class TestDashboardRendering:
    """Test suite for the initial page."""

    def test_dashboard_renders(self):
        """Test that the page renders with the idle review button."""
        at = start_dashboard()

        assert not at.exception
        assert at.title[0].value == "RevU.ai"
        button = at.button(key="review_code")
        assert button.label == "Review Code"
        assert not button.disabled


class TestApprovePopup:
    """Test suite for the approval popup."""

    def test_approve_shows_popup_and_close_hides_it(self, make_stub_client):
        """Test that approving shows the popup without calling the proxy, and Close hides it."""
        client = make_stub_client()
        at = start_dashboard(ReviewSession(client))

        at.button(key="approve").click().run()

        assert not at.exception
        assert "approval has been recorded" in at.success[0].value
        assert client.calls == []

        at.button(key="close_popup").click().run()

        assert len(at.success) == 0


class TestReviewFlow:
    """Test suite for Review Code and Request Changes on the page."""

    def test_buttons_disabled_while_request_in_flight(self, make_stub_client):
        """Test that the run making the request shows the loading label and disabled buttons."""
        client = make_stub_client(error=RequestNeverCompleted())
        at = start_dashboard(ReviewSession(client))

        at.button(key="review_code").click().run()

        # The run stopped inside the request, so the tree is the in-flight render
        assert len(client.calls) == 1
        button = at.button(key="review_code")
        assert button.label == "Reviewing..."
        assert button.disabled
        assert at.button(key="request_changes").disabled

    def test_successful_review_rendered_as_markdown(self, make_stub_client, sample_review):
        """Test that the review appears under the AI Review heading."""
        client = make_stub_client()
        at = start_dashboard(ReviewSession(client))

        at.text_area(key="code_input").input("var x = 1")
        at.button(key="review_code").click().run()

        assert not at.exception
        assert client.calls == ["var x = 1"]
        assert "AI Review" in [heading.value for heading in at.subheader]
        assert at.markdown[-1].value == sample_review
        button = at.button(key="review_code")
        assert button.label == "Review Code"
        assert not button.disabled

    def test_request_changes_makes_one_request(self, make_stub_client, sample_review):
        """Test that Request Changes fetches exactly one review and renders it."""
        client = make_stub_client()
        at = start_dashboard(ReviewSession(client))

        at.button(key="request_changes").click().run()

        assert not at.exception
        assert len(client.calls) == 1
        assert at.markdown[-1].value == sample_review

    def test_unreachable_proxy_shows_fallback(self):
        """Test that a closed proxy port shows the fallback message without crashing."""
        client = ReviewClient("http://127.0.0.1:9", timeout=5)
        at = start_dashboard(ReviewSession(client))

        at.button(key="review_code").click().run()

        assert not at.exception
        assert at.markdown[-1].value == REVIEW_FAILED_MESSAGE
