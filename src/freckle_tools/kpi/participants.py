"""Per-participant billable/unbillable aggregation."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable

from ..models import Participant, TimeEntry
from .periods import Period, get_period


@dataclass
class ParticipantKpi:
    """A participant enriched with the minutes they logged in some scope."""

    participant: Participant
    billable_minutes: int = 0
    unbillable_minutes: int = 0

    @property
    def total_minutes(self) -> int:
        return self.billable_minutes + self.unbillable_minutes

    @property
    def billable_hours(self) -> Decimal:
        return Decimal(self.billable_minutes) / Decimal(60)

    @property
    def unbillable_hours(self) -> Decimal:
        return Decimal(self.unbillable_minutes) / Decimal(60)

    def add(self, entry: TimeEntry) -> None:
        """Fold one entry into the totals."""
        if entry.billable:
            self.billable_minutes += entry.minutes
        else:
            self.unbillable_minutes += entry.minutes


@dataclass
class ParticipantsPeriod:
    """Ranked participants for one period."""

    period: Period
    participants: list[ParticipantKpi] = field(default_factory=list)


def _ranking_key(p: ParticipantKpi) -> tuple[int, int]:
    # Most minutes first, then lowest participant id.
    return (-p.total_minutes, p.participant.id)


def rank_participants(participants: Iterable[ParticipantKpi]) -> list[ParticipantKpi]:
    """Sort participants descending by total minutes, ties by participant id."""
    return sorted(participants, key=_ranking_key)


def _fold(entries: Iterable[TimeEntry]) -> list[ParticipantKpi]:
    by_participant: dict[int, ParticipantKpi] = {}
    for entry in entries:
        kpi = by_participant.get(entry.user.id)
        if kpi is None:
            kpi = by_participant[entry.user.id] = ParticipantKpi(entry.user)
        kpi.add(entry)
    return rank_participants(by_participant.values())


def get_participant_kpis(entries: Iterable[TimeEntry]) -> list[ParticipantKpi]:
    """
    Aggregate entries into one ParticipantKpi per participant.

    Args:
        entries: Time entries of a single project

    Returns:
        Participants ranked by total minutes, most active first
    """
    return _fold(entries)


def get_participants_per_period(
    entries: Iterable[TimeEntry],
    granularity: str,
) -> list[ParticipantsPeriod]:
    """
    Aggregate entries per participant within each period.

    Args:
        entries: Time entries of a single project
        granularity: "month" or "year"

    Returns:
        One ParticipantsPeriod per period with activity, oldest period first

    Raises:
        ParseError: if an entry date is malformed
    """
    periods: dict[int, Period] = {}
    buckets: dict[int, list[TimeEntry]] = {}
    for entry in entries:
        period = get_period(entry.date, granularity)
        periods.setdefault(period.key, period)
        buckets.setdefault(period.key, []).append(entry)

    return [
        ParticipantsPeriod(period=periods[key], participants=_fold(buckets[key]))
        for key in sorted(buckets)
    ]
