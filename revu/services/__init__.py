"""
Services Package

This package contains the service modules for the review proxy:
- ai_engine: forwards code to the AI vendor and returns its review
"""

from revu.services.ai_engine import AIReviewError, ReviewEngine, get_review_engine

__all__ = [
    "AIReviewError",
    "ReviewEngine",
    "get_review_engine",
]
