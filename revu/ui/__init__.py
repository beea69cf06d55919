"""
Editor UI Package

- client: HTTP client for the review proxy
- state: editor session state and review actions
- dashboard: Streamlit page
"""

from revu.ui.client import ReviewClient, ReviewClientError
from revu.ui.state import ReviewSession

__all__ = [
    "ReviewClient",
    "ReviewClientError",
    "ReviewSession",
]
