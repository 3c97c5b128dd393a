"""Unit tests for participant aggregation."""

import random

import pytest

from freckle_tools.exceptions import ParseError
from freckle_tools.kpi.participants import (
    ParticipantKpi,
    get_participant_kpis,
    get_participants_per_period,
    rank_participants,
)
from freckle_tools.models import Participant


def totals(kpis):
    return {p.participant.id: (p.billable_minutes, p.unbillable_minutes) for p in kpis}


class TestGetParticipantKpis:
    """Tests for get_participant_kpis()."""

    def test_empty_input(self):
        assert get_participant_kpis([]) == []

    def test_minutes_are_split_by_billable_flag(self, make_entry, alice, bob):
        entries = [
            make_entry(alice, "2016-01-05", 60, True),
            make_entry(alice, "2016-01-06", 15, False),
            make_entry(alice, "2016-01-07", 45, True),
            make_entry(bob, "2016-01-05", 30, False),
        ]

        kpis = get_participant_kpis(entries)

        assert totals(kpis) == {1: (105, 15), 2: (0, 30)}

    def test_minutes_are_conserved(self, make_entry, alice, bob):
        """Summed kpis equal summed entries, partitioned by billable flag."""
        rng = random.Random(42)
        entries = [
            make_entry(rng.choice([alice, bob]), "2016-01-01", rng.randint(0, 240), rng.random() < 0.5)
            for _ in range(50)
        ]

        kpis = get_participant_kpis(entries)

        assert sum(p.billable_minutes for p in kpis) == sum(e.minutes for e in entries if e.billable)
        assert sum(p.unbillable_minutes for p in kpis) == sum(e.minutes for e in entries if not e.billable)

    def test_order_independent(self, make_entry, alice, bob):
        entries = [
            make_entry(alice, "2016-01-05", 60, True),
            make_entry(bob, "2016-01-06", 20, False),
            make_entry(alice, "2016-01-07", 10, False),
            make_entry(bob, "2016-01-08", 90, True),
        ]
        shuffled = list(entries)
        random.Random(7).shuffle(shuffled)

        assert totals(get_participant_kpis(entries)) == totals(get_participant_kpis(shuffled))
        assert get_participant_kpis(entries) == get_participant_kpis(list(reversed(entries)))

    def test_ranked_descending_by_total_minutes(self, make_entry, alice, bob):
        entries = [
            make_entry(alice, "2016-01-05", 60, True),
            make_entry(bob, "2016-01-05", 50, True),
            make_entry(bob, "2016-01-06", 20, False),
        ]

        kpis = get_participant_kpis(entries)

        assert [p.participant.id for p in kpis] == [2, 1]


class TestRankParticipants:
    """Tests for rank_participants()."""

    def test_ties_broken_by_participant_id(self):
        first = ParticipantKpi(Participant(id=9, email="z@example.com"), 30, 30)
        second = ParticipantKpi(Participant(id=3, email="a@example.com"), 60, 0)
        third = ParticipantKpi(Participant(id=5, email="m@example.com"), 0, 60)

        ranked = rank_participants([first, second, third])

        assert [p.participant.id for p in ranked] == [3, 5, 9]


class TestGetParticipantsPerPeriod:
    """Tests for get_participants_per_period()."""

    def test_month_breakdown(self, sample_entries):
        """alice/bob scenario splits into January and February."""
        periods = get_participants_per_period(sample_entries, "month")

        assert [p.period.label for p in periods] == ["2016-01", "2016-02"]
        assert totals(periods[0].participants) == {1: (60, 0), 2: (90, 0)}
        assert [p.participant.id for p in periods[0].participants] == [2, 1]
        assert totals(periods[1].participants) == {1: (0, 30)}

    def test_year_breakdown(self, sample_entries):
        periods = get_participants_per_period(sample_entries, "year")

        assert len(periods) == 1
        assert periods[0].period.key == 2016
        assert totals(periods[0].participants) == {1: (60, 30), 2: (90, 0)}

    def test_periods_sorted_ascending(self, make_entry, alice):
        entries = [
            make_entry(alice, "2017-01-02", 10),
            make_entry(alice, "2015-12-30", 10),
            make_entry(alice, "2016-06-15", 10),
        ]

        periods = get_participants_per_period(entries, "month")

        assert [p.period.key for p in periods] == [201512, 201606, 201701]

    def test_empty_input(self):
        assert get_participants_per_period([], "month") == []

    def test_bad_date_aborts(self, make_entry, alice):
        entries = [
            make_entry(alice, "2016-01-05", 60),
            make_entry(alice, "05/01/2016", 60),
        ]

        with pytest.raises(ParseError):
            get_participants_per_period(entries, "month")
