"""KPI aggregation over Freckle projects, entries and invoices."""

from .invoices import InvoicePeriodKpi, get_invoice_kpis_per_period, get_invoiced_total
from .participants import (
    ParticipantKpi,
    ParticipantsPeriod,
    get_participant_kpis,
    get_participants_per_period,
    rank_participants,
)
from .periods import GRANULARITIES, Period, get_period, parse_date
from .projects import ProjectKpi, ProjectPeriodKpi, get_project_kpis_per_period

__all__ = [
    "GRANULARITIES",
    "InvoicePeriodKpi",
    "ParticipantKpi",
    "ParticipantsPeriod",
    "Period",
    "ProjectKpi",
    "ProjectPeriodKpi",
    "get_invoice_kpis_per_period",
    "get_invoiced_total",
    "get_participant_kpis",
    "get_participants_per_period",
    "get_period",
    "get_project_kpis_per_period",
    "parse_date",
    "rank_participants",
]
