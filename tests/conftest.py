"""Shared pytest fixtures for Freckle tools tests."""

from decimal import Decimal

import pytest

from freckle_tools.config import Config, Settings
from freckle_tools.models import Invoice, Participant, Project, TimeEntry

API_URL = "https://api.test/v2"

ALICE = {"id": 1, "email": "alice@example.com", "first_name": "Alice", "last_name": "Smith"}
BOB = {"id": 2, "email": "bob@example.com", "first_name": "Bob", "last_name": "Jones (contractor)"}


@pytest.fixture
def mock_config():
    """Create mock application config without Librato credentials."""
    return Config(app_token="test_app_token", api_url=API_URL, settings=Settings())


@pytest.fixture
def librato_config():
    """Create mock application config with Librato credentials."""
    return Config(
        app_token="test_app_token",
        api_url=API_URL,
        librato_account="ops@example.com",
        librato_token="librato_token",
        settings=Settings(),
    )


@pytest.fixture
def alice():
    return Participant(**ALICE)


@pytest.fixture
def bob():
    return Participant(**BOB)


@pytest.fixture
def make_entry():
    """Factory for TimeEntry models."""
    counter = iter(range(1, 10_000))

    def _make(user: Participant, date: str, minutes: int, billable: bool = True) -> TimeEntry:
        return TimeEntry(id=next(counter), date=date, minutes=minutes, billable=billable, user=user)

    return _make


@pytest.fixture
def sample_entries(make_entry, alice, bob):
    """Entries spanning two months for two participants."""
    return [
        make_entry(alice, "2016-01-05", 60, True),
        make_entry(alice, "2016-02-05", 30, False),
        make_entry(bob, "2016-01-10", 90, True),
    ]


@pytest.fixture
def sample_invoices():
    """Invoices in January and March 2016."""
    return [
        Invoice(id=11, invoice_date="2016-01-15", total_amount=Decimal("500.00")),
        Invoice(id=12, invoice_date="2016-01-20", total_amount=Decimal("250.00")),
        Invoice(id=13, invoice_date="2016-03-01", total_amount=Decimal("100.00")),
    ]


@pytest.fixture
def sample_project(sample_invoices):
    return Project(
        id=100,
        name="Alpha",
        billable_minutes=150,
        unbillable_minutes=30,
        invoiced_minutes=120,
        invoices=sample_invoices,
    )


def entry_payload(entry_id: int, user: dict, date: str, minutes: int, billable: bool = True) -> dict:
    """Raw API representation of an entry."""
    return {
        "id": entry_id,
        "date": date,
        "user": user,
        "billable": billable,
        "minutes": minutes,
        "description": "work #api",
    }


def project_payload(project_id: int, name: str, **overrides) -> dict:
    """Raw API representation of a project."""
    data = {
        "id": project_id,
        "name": name,
        "billable_minutes": 0,
        "unbillable_minutes": 0,
        "invoiced_minutes": 0,
        "enabled": True,
        "invoices": [],
    }
    data.update(overrides)
    return data


@pytest.fixture
def payloads():
    """Builders for raw API payloads."""

    class Payloads:
        alice = ALICE
        bob = BOB
        entry = staticmethod(entry_payload)
        project = staticmethod(project_payload)

    return Payloads
