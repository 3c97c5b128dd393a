"""Flatten KPIs into named gauges for a metrics backend."""

from __future__ import annotations

from dataclasses import dataclass

from ..models import Participant
from .participants import ParticipantKpi
from .projects import ProjectKpi, ProjectPeriodKpi

BASE_NAME = "FreckleAPI"
CAT_PROJECTS = "projects"
CAT_PARTICIPANTS = "participants"
CAT_PERIOD_PARTICIPANTS = {
    "month": "monthlyParticipants",
    "year": "yearlyParticipants",
}

_REPLACED = {" ": "-", "/": "-", "\\": "-"}
_STRIPPED = "#()"


@dataclass
class Gauge:
    """One named measurement tagged with a source."""

    name: str
    source: str
    value: float

    def to_dict(self) -> dict:
        return {"name": self.name, "source": self.source, "value": self.value}


def sanitize_metric_name(s: str) -> str:
    """Replace spaces and slashes with '-', drop '#', '(' and ')'."""
    for old, new in _REPLACED.items():
        s = s.replace(old, new)
    for char in _STRIPPED:
        s = s.replace(char, "")
    return s


def participant_metric_name(participant: Participant) -> str:
    if participant.first_name or participant.last_name:
        name = f"{participant.first_name or ''}-{participant.last_name or ''}"
    else:
        name = participant.email or str(participant.id)
    return sanitize_metric_name(name)


def project_gauges(kpi: ProjectKpi) -> list[Gauge]:
    """Whole-project minute and amount gauges, sourced by project name."""
    source = sanitize_metric_name(kpi.name)
    prefix = f"{BASE_NAME}.{CAT_PROJECTS}"
    return [
        Gauge(f"{prefix}.UnbillableMinutes", source, float(kpi.unbillable_minutes)),
        Gauge(f"{prefix}.BillableMinutes", source, float(kpi.billable_minutes)),
        Gauge(f"{prefix}.InvoicedMinutes", source, float(kpi.invoiced_minutes)),
        Gauge(f"{prefix}.InvoicedAmount", source, float(kpi.invoiced_total)),
    ]


def participant_gauges(p: ParticipantKpi, prefix: str, source: str) -> list[Gauge]:
    name = participant_metric_name(p.participant)
    source = sanitize_metric_name(source)
    return [
        Gauge(f"{prefix}.UnbillableMinutes.{name}", source, float(p.unbillable_minutes)),
        Gauge(f"{prefix}.BillableMinutes.{name}", source, float(p.billable_minutes)),
    ]


def project_period_gauges(pp: ProjectPeriodKpi, prefix: str) -> list[Gauge]:
    """Per-period gauges, sourced by the period label."""
    project = sanitize_metric_name(pp.project_name)
    source = pp.period.label
    return [
        Gauge(f"{prefix}.InvoicedAmount.{project}", source, float(pp.invoice.amount)),
        Gauge(f"{prefix}.UnbillableMinutes.{project}", source, float(pp.unbillable_minutes)),
        Gauge(f"{prefix}.BillableMinutes.{project}", source, float(pp.billable_minutes)),
    ]


def collect_gauges(
    kpi: ProjectKpi,
    periods: list[ProjectPeriodKpi],
    granularity: str,
) -> list[Gauge]:
    """All gauges for one project report."""
    gauges = project_gauges(kpi)

    participants_prefix = f"{BASE_NAME}.{CAT_PARTICIPANTS}"
    for p in kpi.participants:
        gauges.extend(participant_gauges(p, participants_prefix, kpi.name))

    period_prefix = f"{BASE_NAME}.{CAT_PERIOD_PARTICIPANTS[granularity]}"
    for pp in periods:
        gauges.extend(project_period_gauges(pp, period_prefix))

    return gauges
