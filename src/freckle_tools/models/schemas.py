"""Pydantic models for Freckle API responses."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class Participant(BaseModel):
    """A Freckle user who logs time."""

    id: int
    email: str = ""
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @property
    def display_name(self) -> str:
        """Combined display name."""
        return f"{self.first_name or ''} {self.last_name or ''}".strip() or self.email or "Unknown"


class TimeEntry(BaseModel):
    """A time entry record."""

    id: int
    date: Optional[str] = None  # YYYY-MM-DD, checked when bucketed
    minutes: int = 0
    billable: bool = True
    user: Participant

    @classmethod
    def from_api(cls, data: dict) -> "TimeEntry":
        """Create a TimeEntry from API response data."""
        return cls(
            id=data["id"],
            date=data.get("date"),
            minutes=data.get("minutes") or 0,
            billable=data.get("billable", True),
            user=Participant(**data["user"]),
        )


class Invoice(BaseModel):
    """An invoice embedded in a project record."""

    id: Optional[int] = None
    invoice_date: Optional[str] = None  # YYYY-MM-DD, checked when bucketed
    total_amount: Decimal = Decimal("0")


class Project(BaseModel):
    """A project with its logged minute totals and invoices."""

    id: int
    name: str
    billable_minutes: int = 0
    unbillable_minutes: int = 0
    invoiced_minutes: int = 0
    invoices: list[Invoice] = []

    @classmethod
    def from_api(cls, data: dict) -> "Project":
        """Create a Project from API response data."""
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            billable_minutes=data.get("billable_minutes") or 0,
            unbillable_minutes=data.get("unbillable_minutes") or 0,
            invoiced_minutes=data.get("invoiced_minutes") or 0,
            invoices=[Invoice(**i) for i in data.get("invoices") or []],
        )
