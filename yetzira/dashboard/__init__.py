"""Yetzira Dashboard -- Streamlit web UI (optional ``dashboard`` extra).

Same projection as the terminal monitor: never computes anything the core
does not, only displays it.
"""

from yetzira.dashboard.app import create_dashboard

__all__ = ["create_dashboard"]
