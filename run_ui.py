"""Launcher for the Streamlit editor UI.

Usage:
    python run_ui.py

The review proxy (python run.py) should already be running at REVIEW_API_URL.
"""

import subprocess
import sys
from pathlib import Path

DASHBOARD_PATH = Path(__file__).resolve().parent / "revu" / "ui" / "dashboard.py"


def main() -> None:
    """Launch Streamlit on the dashboard, exiting with its status on failure."""
    if not DASHBOARD_PATH.exists():
        print(f"Dashboard not found at {DASHBOARD_PATH}.")
        sys.exit(1)

    cmd = [sys.executable, "-m", "streamlit", "run", str(DASHBOARD_PATH)]
    try:
        subprocess.check_call(cmd)
    except subprocess.CalledProcessError as e:
        print("Failed to start Streamlit:", e)
        sys.exit(e.returncode)


if __name__ == "__main__":
    main()
