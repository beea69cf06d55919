"""
API Package

HTTP routes of the review proxy:
- handler: the code review endpoint
"""

from revu.api.handler import router

__all__ = ["router"]
