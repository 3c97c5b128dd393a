"""Project-level KPIs and the per-period project breakdown."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from ..models import Project, TimeEntry
from .invoices import InvoicePeriodKpi, get_invoice_kpis_per_period, get_invoiced_total
from .participants import ParticipantKpi, get_participant_kpis, get_participants_per_period
from .periods import Period

MINUTES_PER_HOUR = Decimal(60)


def safe_rate(amount: Decimal, hours: Decimal) -> Optional[Decimal]:
    """Amount per hour, or None when there are no hours."""
    if hours == 0:
        return None
    return amount / hours


@dataclass
class ProjectKpi:
    """A project together with the time entries logged on it."""

    project: Project
    entries: list[TimeEntry] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.project.name

    @property
    def billable_minutes(self) -> int:
        return self.project.billable_minutes

    @property
    def unbillable_minutes(self) -> int:
        return self.project.unbillable_minutes

    @property
    def invoiced_minutes(self) -> int:
        return self.project.invoiced_minutes

    @property
    def invoiced_total(self) -> Decimal:
        return get_invoiced_total(self.project.invoices)

    @property
    def invoiced_hours(self) -> Decimal:
        return Decimal(self.invoiced_minutes) / MINUTES_PER_HOUR

    @property
    def invoiced_hourly_rate(self) -> Optional[Decimal]:
        return safe_rate(self.invoiced_total, self.invoiced_hours)

    @property
    def billable_hours(self) -> Decimal:
        return Decimal(self.billable_minutes) / MINUTES_PER_HOUR

    @property
    def hourly_rate(self) -> Optional[Decimal]:
        return safe_rate(self.invoiced_total, self.billable_hours)

    @property
    def unbillable_hours(self) -> Decimal:
        return Decimal(self.unbillable_minutes) / MINUTES_PER_HOUR

    @property
    def participants(self) -> list[ParticipantKpi]:
        """Project-wide participants, most active first."""
        return get_participant_kpis(self.entries)


@dataclass
class ProjectPeriodKpi:
    """What happened on a project during one period."""

    project_name: str
    period: Period
    invoice: InvoicePeriodKpi
    participants: list[ParticipantKpi] = field(default_factory=list)

    @property
    def billable_minutes(self) -> int:
        return sum(p.billable_minutes for p in self.participants)

    @property
    def unbillable_minutes(self) -> int:
        return sum(p.unbillable_minutes for p in self.participants)


def get_project_kpis_per_period(kpi: ProjectKpi, granularity: str) -> list[ProjectPeriodKpi]:
    """
    Break a project down by period.

    Invoices and logged time are joined on the period key. A period with
    invoices but no time gets no participants, a period with time but no
    invoices gets a zero amount.

    Args:
        kpi: Project with its entries
        granularity: "month" or "year"

    Returns:
        One ProjectPeriodKpi per period with any activity, oldest period first

    Raises:
        ParseError: if an invoice or entry date is malformed
    """
    invoices = get_invoice_kpis_per_period(kpi.project.invoices, granularity)
    participants = get_participants_per_period(kpi.entries, granularity)

    merged: dict[int, ProjectPeriodKpi] = {}
    for invoice in invoices:
        merged[invoice.period.key] = ProjectPeriodKpi(
            project_name=kpi.name,
            period=invoice.period,
            invoice=invoice,
        )

    for bucket in participants:
        existing = merged.get(bucket.period.key)
        if existing is None:
            merged[bucket.period.key] = ProjectPeriodKpi(
                project_name=kpi.name,
                period=bucket.period,
                invoice=InvoicePeriodKpi(bucket.period),
                participants=bucket.participants,
            )
        else:
            existing.participants = bucket.participants

    return [merged[key] for key in sorted(merged)]
