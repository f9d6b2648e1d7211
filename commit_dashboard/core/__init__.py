"""Core configuration for the commit history dashboard."""

from .config import CONFIG, TABLEAU10, DashboardConfig

__all__ = ["CONFIG", "TABLEAU10", "DashboardConfig"]
