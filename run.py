"""
Review Proxy Runner

This script is the entry point for running the review proxy.
Use: python run.py
"""

import uvicorn

from revu.config import get_settings


def main():
    """Run the review proxy with uvicorn."""
    settings = get_settings()

    uvicorn.run(
        "revu.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        access_log=settings.log_requests
    )


if __name__ == "__main__":
    main()
