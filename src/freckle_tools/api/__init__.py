"""Freckle and Librato API modules."""

from .client import FreckleClient
from .librato import LibratoClient
from .projects import ProjectsAPI

__all__ = [
    "FreckleClient",
    "LibratoClient",
    "ProjectsAPI",
]
