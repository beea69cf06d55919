"""
Editor Session State

Owns the editor's local state and the three review actions. Kept free of
Streamlit so the behaviour can be exercised directly.

A review runs in two steps so a UI can render the loading state in between:
begin_review() marks the request as outstanding and finish_review() makes the
call. review_code() and request_changes() do both at once.
"""

from typing import Protocol

from revu.logging_config import get_logger
from revu.models import REVIEW_FAILED_MESSAGE, EditorState
from revu.ui.client import ReviewClientError

logger = get_logger(__name__)


class SupportsReview(Protocol):
    def request_review(self, code: str) -> str: ...


class ReviewSession:
    """
    One user's editor session.

    At most one review is in flight: begin_review() refuses while
    the loading flag is set.
    """

    def __init__(self, client: SupportsReview):
        self.client = client
        self.state = EditorState()

    def update_code(self, code: str) -> None:
        self.state.code = code

    def begin_review(self, request_changes: bool = False) -> bool:
        """
        Mark a review as outstanding.

        Args:
            request_changes: Also mark the code as rejected until the review returns

        Returns:
            False if a review is already in flight
        """
        if self.state.loading:
            logger.debug("Review already in progress")
            return False

        self.state.loading = True
        if request_changes:
            self.state.approved = False
        return True

    def finish_review(self) -> None:
        """Fetch the outstanding review, falling back to a fixed message on failure."""
        if not self.state.loading:
            return

        try:
            self.state.review = self.client.request_review(self.state.code)
        except ReviewClientError as e:
            logger.warning("Showing fallback review message", error=str(e))
            self.state.review = REVIEW_FAILED_MESSAGE
        finally:
            self.state.loading = False
            # Rejected only for the duration of the review call
            if self.state.approved is False:
                self.state.approved = None

    def review_code(self) -> None:
        if self.begin_review():
            self.finish_review()

    def request_changes(self) -> None:
        if self.begin_review(request_changes=True):
            self.finish_review()

    def approve(self) -> None:
        """Record approval locally and show the thank-you popup."""
        self.state.approved = True
        self.state.show_popup = True
        logger.info("Code approved", code_length=len(self.state.code))

    def close_popup(self) -> None:
        self.state.show_popup = False
