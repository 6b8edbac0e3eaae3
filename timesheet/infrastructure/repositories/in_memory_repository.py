"""
Timesheet repository implementation over in-process lists.
Used for local runs and tests; a database adapter implements the same port.
"""

from typing import Dict, Iterable, List, Optional

from timesheet.domain.models.client import Client
from timesheet.domain.models.entry import Entry
from timesheet.domain.models.person import Person
from timesheet.domain.models.project import Project
from timesheet.domain.repositories.timesheet_repository import TimesheetRepository


class InMemoryTimesheetRepository(TimesheetRepository):
    """In-memory implementation of the timesheet repository."""

    def __init__(
        self,
        entries: Iterable[Entry] = (),
        people: Iterable[Person] = (),
        projects: Iterable[Project] = ()
    ):
        self.entries: List[Entry] = []
        self.people: Dict[str, Person] = {}
        self.projects: Dict[str, Project] = {}
        self.clients: Dict[str, Client] = {}

        for person in people:
            self.add_person(person)
        for project in projects:
            self.add_project(project)
        for entry in entries:
            self.add_entry(entry)

    def add_person(self, person: Person) -> Person:
        self.people[person.slug] = person
        return person

    def add_project(self, project: Project) -> Project:
        self.projects[project.slug] = project
        self.clients[project.client.slug] = project.client
        return project

    def add_entry(self, entry: Entry) -> Entry:
        """Store an entry, registering its person and project."""
        if entry.id is None:
            entry = Entry(
                date=entry.date,
                hours=entry.hours,
                person=entry.person,
                project=entry.project,
                id=len(self.entries) + 1
            )
        self.add_person(entry.person)
        self.add_project(entry.project)
        self.entries.append(entry)
        return entry

    async def list_entries(self) -> List[Entry]:
        by_project = sorted(self.entries, key=lambda e: e.project.name)
        return sorted(by_project, key=lambda e: e.date, reverse=True)

    async def list_projects(self) -> List[Project]:
        return list(self.projects.values())

    async def find_person(self, slug: str) -> Optional[Person]:
        return self.people.get(slug)

    async def find_project(self, slug: str) -> Optional[Project]:
        return self.projects.get(slug)

    async def find_client(self, slug: str) -> Optional[Client]:
        return self.clients.get(slug)

    async def entries_for_person(self, slug: str) -> List[Entry]:
        return [entry for entry in self.entries if entry.person.slug == slug]

    async def entries_for_project(self, slug: str) -> List[Entry]:
        return [entry for entry in self.entries if entry.project.slug == slug]

    async def entries_for_client(self, slug: str) -> List[Entry]:
        return [entry for entry in self.entries if entry.project.client.slug == slug]
