"""Report service assembling the person, project and client views.
Thin call sites over EntryAggregator plus the all-time client rollups.
"""

import logging
from collections import defaultdict
from operator import attrgetter
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple

from timesheet.domain.models.client import Client
from timesheet.domain.models.entry import Entry, Hours
from timesheet.domain.models.project import Project
from timesheet.domain.services.aggregation_service import (
    EntryAggregator,
    WeekEntries,
    WeekReport,
    by_person,
    by_project,
    sum_hours,
)

logger = logging.getLogger(__name__)


class PersonHours(NamedTuple):
    name: str
    hours: Hours


class ProjectRollup(NamedTuple):
    """A project with the hours each person spent on it."""

    project: Project
    people: List[PersonHours]


class ProjectHours(NamedTuple):
    name: str
    slug: str
    hours: Hours


class ReportService:
    """
    Domain service producing report shapes from resolved entries.
    Callers scope the entries (one person, one project, one client) beforehand.
    """

    def __init__(self, aggregator: Optional[EntryAggregator] = None):
        self.aggregator = aggregator or EntryAggregator()

    def person_report(self, entries: Iterable[Entry]) -> List[WeekReport]:
        """Weekly rows of ``(date, project, hours)`` for one person."""
        return self.aggregator.aggregate(entries, by_project)

    def project_report(self, entries: Iterable[Entry]) -> List[WeekReport]:
        """Weekly rows of ``(date, person, hours)`` for one project."""
        return self.aggregator.aggregate(entries, by_person)

    def client_report(self, entries: Iterable[Entry]) -> List[WeekReport]:
        """
        Weekly rows of ``(date, person, hours)`` for one client.
        The entries are the union of the client's projects' entries.
        """
        return self.aggregator.aggregate(entries, by_person)

    def index_report(self, entries: Iterable[Entry]) -> List[WeekEntries]:
        """Unsummed entries grouped by week, newest first."""
        return self.aggregator.index(entries)

    def client_rollup(self, entries: Iterable[Entry]) -> Dict[str, List[ProjectRollup]]:
        """
        All-time hours per project and person, keyed by client name.

        Projects are ordered by name and people by name within a project.
        """
        by_project_person: Dict[Project, Dict[str, List[Hours]]] = defaultdict(lambda: defaultdict(list))
        for entry in entries:
            by_project_person[entry.project][entry.person.name].append(entry.hours)

        rollup: Dict[str, List[ProjectRollup]] = defaultdict(list)
        for project in sorted(by_project_person, key=attrgetter("name", "slug")):
            people = [
                PersonHours(name, sum_hours(hours))
                for name, hours in sorted(by_project_person[project].items())
            ]
            rollup[project.client.name].append(ProjectRollup(project, people))

        logger.debug("Rolled up %d project(s)", len(by_project_person))
        return dict(rollup)

    def total_project_hours(
        self,
        entries: Iterable[Entry],
        client: Optional[Client] = None
    ) -> List[ProjectHours]:
        """Hours per project ordered by project name, optionally for one client."""
        hours_by_project: Dict[Tuple[str, str], List[Hours]] = defaultdict(list)
        for entry in entries:
            if client is not None and entry.project.client != client:
                continue
            hours_by_project[(entry.project.name, entry.project.slug)].append(entry.hours)

        return [
            ProjectHours(name, slug, sum_hours(hours))
            for (name, slug), hours in sorted(hours_by_project.items())
        ]

    def total_client_hours(self, project_rows: Iterable[ProjectHours]) -> Hours:
        """Grand total of per-project hour rows."""
        return sum_hours(row.hours for row in project_rows)

    def project_options(self, projects: Iterable[Project]) -> List[Tuple[str, str]]:
        """``("Client / Project", slug)`` pairs ordered by client then project name."""
        ordered = sorted(projects, key=lambda p: (p.client.name, p.name))
        return [(project.display_name, project.slug) for project in ordered]
