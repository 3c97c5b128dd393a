"""Plain-text and JSON rendering of project KPI reports."""

from __future__ import annotations

from decimal import Decimal
from typing import Callable, Optional

import click

from ..kpi.participants import ParticipantKpi
from ..kpi.projects import ProjectKpi, ProjectPeriodKpi

NOT_AVAILABLE = "N/A"


def percent(part: int, whole: int) -> Optional[Decimal]:
    """Share of ``whole`` in percent, None when ``whole`` is zero."""
    if whole == 0:
        return None
    return Decimal(part) / Decimal(whole) * 100


def fmt_optional(value: Optional[Decimal], fmt: str = ".1f") -> str:
    if value is None:
        return NOT_AVAILABLE
    return format(value, fmt)


def _to_float(value: Optional[Decimal]) -> Optional[float]:
    return float(value) if value is not None else None


def format_project(kpi: ProjectKpi) -> str:
    """One-line project totals."""
    return (
        f"{kpi.name} total invoiced : ${kpi.invoiced_total:.2f}, "
        f"{kpi.invoiced_hours:.1f}h ({fmt_optional(kpi.invoiced_hourly_rate)}$/h) - "
        f"Billable : {kpi.billable_hours:.1f}h ({fmt_optional(kpi.hourly_rate)}$/h) - "
        f"Unbillable : {kpi.unbillable_hours:.1f}h"
    )


def format_participant(p: ParticipantKpi) -> str:
    return (
        f"{p.participant.email} Billable : {p.billable_hours:.1f}h - "
        f"Unbillable : {p.unbillable_hours:.1f}h"
    )


def format_participant_verbose(p: ParticipantKpi, kpi: ProjectKpi) -> str:
    """Participant hours with their share of the project's hours."""
    billable_share = percent(p.billable_minutes, kpi.billable_minutes)
    unbillable_share = percent(p.unbillable_minutes, kpi.unbillable_minutes)
    return (
        f"{p.participant.email} "
        f"Billable : {p.billable_hours:.1f}h ({fmt_optional(billable_share)} %) - "
        f"Unbillable : {p.unbillable_hours:.1f}h ({fmt_optional(unbillable_share)} %)"
    )


def format_period(pp: ProjectPeriodKpi) -> str:
    return f"{pp.period.label} ${pp.invoice.amount:.2f} invoiced"


def print_project_report(
    kpi: ProjectKpi,
    periods: list[ProjectPeriodKpi],
    granularity: str,
    echo: Callable[[str], None] = click.echo,
) -> None:
    """Print totals, ranked participants and the per-period breakdown."""
    echo(format_project(kpi))
    for p in kpi.participants:
        echo(f"\t{format_participant_verbose(p, kpi)}")

    echo(f"\n\tbreakdown per {granularity}")
    for pp in periods:
        echo(f"\t\t{format_period(pp)}")
        for p in pp.participants:
            echo(f"\t\t\t{format_participant(p)}")


def _participant_dict(p: ParticipantKpi) -> dict:
    return {
        "id": p.participant.id,
        "name": p.participant.display_name,
        "email": p.participant.email,
        "billable_minutes": p.billable_minutes,
        "unbillable_minutes": p.unbillable_minutes,
    }


def build_report_document(kpi: ProjectKpi, periods: list[ProjectPeriodKpi], granularity: str) -> dict:
    """JSON-serialisable version of a project report."""
    return {
        "project": kpi.name,
        "id": kpi.project.id,
        "invoiced_total": float(kpi.invoiced_total),
        "invoiced_hours": float(kpi.invoiced_hours),
        "invoiced_hourly_rate": _to_float(kpi.invoiced_hourly_rate),
        "billable_hours": float(kpi.billable_hours),
        "hourly_rate": _to_float(kpi.hourly_rate),
        "unbillable_hours": float(kpi.unbillable_hours),
        "participants": [_participant_dict(p) for p in kpi.participants],
        "granularity": granularity,
        "periods": [
            {
                "period": pp.period.label,
                "start": pp.period.start.isoformat(),
                "invoiced_amount": float(pp.invoice.amount),
                "participants": [_participant_dict(p) for p in pp.participants],
            }
            for pp in periods
        ],
    }
