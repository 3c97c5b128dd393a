"""Freckle KPI reporting tools."""

__version__ = "0.1.0"
