"""Projects API module."""

from __future__ import annotations

import logging
from typing import Iterator

from pydantic import ValidationError

from ..exceptions import APIResponseError
from ..models import Project, TimeEntry
from .client import FreckleClient

log = logging.getLogger(__name__)


class ProjectsAPI:
    """API for querying projects and their time entries."""

    def __init__(self, client: FreckleClient):
        self.client = client

    def iter_all(self) -> Iterator[Project]:
        """Yield every project, fetching pages lazily."""
        for page in self.client.iter_pages("projects"):
            for project_data in page:
                try:
                    yield Project.from_api(project_data)
                except (KeyError, ValidationError) as e:
                    raise APIResponseError(f"Unexpected project record: {e}") from e

    def list_all(self) -> list[Project]:
        """List all projects (paginated automatically)."""
        return list(self.iter_all())

    def iter_entries(self, project_id: int) -> Iterator[TimeEntry]:
        """Yield every time entry logged on a project."""
        for page in self.client.iter_pages(f"projects/{project_id}/entries"):
            for entry_data in page:
                try:
                    yield TimeEntry.from_api(entry_data)
                except (KeyError, ValidationError) as e:
                    raise APIResponseError(f"Unexpected entry record: {e}") from e

    def get_entries(self, project_id: int) -> list[TimeEntry]:
        """List all time entries of a project (paginated automatically)."""
        entries = list(self.iter_entries(project_id))
        log.debug("Project %s has %d entries", project_id, len(entries))
        return entries
