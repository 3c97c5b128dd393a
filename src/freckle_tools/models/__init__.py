"""Data models for Freckle API responses."""

from .schemas import (
    Participant,
    TimeEntry,
    Invoice,
    Project,
)

__all__ = [
    "Participant",
    "TimeEntry",
    "Invoice",
    "Project",
]
