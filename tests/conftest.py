"""
Shared fixtures for timesheet tests.
"""

from datetime import date

import pytest

from timesheet.domain.models import Client, Entry, Person, Project


@pytest.fixture
def acme():
    return Client(name="Acme", slug="acme")


@pytest.fixture
def globex():
    return Client(name="Globex", slug="globex")


@pytest.fixture
def alpha(acme):
    return Project(name="Alpha", slug="alpha", client=acme)


@pytest.fixture
def beta(acme):
    return Project(name="Beta", slug="beta", client=acme)


@pytest.fixture
def gamma(globex):
    return Project(name="Gamma", slug="gamma", client=globex)


@pytest.fixture
def bob():
    return Person(name="Bob", slug="bob")


@pytest.fixture
def carol():
    return Person(name="Carol", slug="carol")


@pytest.fixture
def make_entry(bob, alpha):
    """Factory for entries; person and project default to Bob on Alpha."""

    def _make(day: str, hours, person=None, project=None):
        return Entry(
            date=date.fromisoformat(day),
            hours=hours,
            person=person or bob,
            project=project or alpha
        )

    return _make
