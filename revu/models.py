"""
Data Models Module

This module defines the Pydantic models shared by the review proxy and the editor UI.

Design Decisions:
- The code and review texts are opaque strings, never parsed
- UI state is a plain mutable model so the Streamlit session can hold it
"""

from typing import List, Optional

from pydantic import BaseModel, Field

REVIEW_FAILED_MESSAGE = "Failed to get review. Please try again."


# =============================================================================
# Wire Models
# =============================================================================

class ReviewRequest(BaseModel):
    """Body of a review request sent to the proxy."""
    code: str = Field(description="Source code to review")


# =============================================================================
# Editor UI Models
# =============================================================================

class EditorState(BaseModel):
    """
    Local state of one editor session.

    Attributes:
        code: Text currently in the editor
        approved: None while undecided, True once approved,
            False while changes are being requested
        review: Markdown returned by the last review (or the fallback message)
        loading: True exactly while a review request is outstanding
        show_popup: Whether the approval popup is visible
    """
    code: str = ""
    approved: Optional[bool] = None
    review: str = ""
    loading: bool = False
    show_popup: bool = False

    @property
    def line_numbers(self) -> List[int]:
        """Line numbers shown in the editor gutter."""
        return list(range(1, len(self.code.split("\n")) + 1))

    @property
    def review_button_label(self) -> str:
        return "Reviewing..." if self.loading else "Review Code"

    @property
    def show_spinner(self) -> bool:
        return self.loading

    @property
    def show_review(self) -> bool:
        """Review panel is visible when idle and there is something to show."""
        return not self.loading and bool(self.review)
