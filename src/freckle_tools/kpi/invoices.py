"""Invoice amounts per period."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from ..models import Invoice
from .periods import Period, get_period


@dataclass
class InvoicePeriodKpi:
    """Total invoiced over one period."""

    period: Period
    amount: Decimal = Decimal("0")


def get_invoiced_total(invoices: Iterable[Invoice]) -> Decimal:
    """Grand total of all invoice amounts."""
    return sum((invoice.total_amount for invoice in invoices), Decimal("0"))


def get_invoice_kpis_per_period(
    invoices: Iterable[Invoice],
    granularity: str,
) -> list[InvoicePeriodKpi]:
    """
    Sum invoice amounts per period.

    Args:
        invoices: Invoices of a single project
        granularity: "month" or "year"

    Returns:
        One InvoicePeriodKpi per invoiced period, oldest period first

    Raises:
        ParseError: if an invoice date is malformed
    """
    per_period: dict[int, InvoicePeriodKpi] = {}
    for invoice in invoices:
        period = get_period(invoice.invoice_date, granularity)
        kpi = per_period.get(period.key)
        if kpi is None:
            kpi = per_period[period.key] = InvoicePeriodKpi(period)
        kpi.amount += invoice.total_amount

    return [per_period[key] for key in sorted(per_period)]
