"""
RevU.ai - AI Code Reviewer

Paste source code, get a markdown review from a hosted language model,
and approve or request changes from a small web UI.
"""

__version__ = "1.0.0"
__author__ = "RevU Team"
