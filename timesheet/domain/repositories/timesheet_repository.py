"""Timesheet repository interface.
Defines the contract through which resolved records reach the report services.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from timesheet.domain.models.client import Client
from timesheet.domain.models.entry import Entry
from timesheet.domain.models.person import Person
from timesheet.domain.models.project import Project


class TimesheetRepository(ABC):
    """
    Repository interface for timesheet records.
    Every entry returned carries its person, project and client already joined.
    """

    @abstractmethod
    async def list_entries(self) -> List[Entry]:
        """
        List all entries, most recent date first, then by project name.
        """
        pass

    @abstractmethod
    async def list_projects(self) -> List[Project]:
        """List all projects with their clients."""
        pass

    @abstractmethod
    async def find_person(self, slug: str) -> Optional[Person]:
        """
        Find a person by slug.
        Returns None if not found.
        """
        pass

    @abstractmethod
    async def find_project(self, slug: str) -> Optional[Project]:
        """
        Find a project by slug.
        Returns None if not found.
        """
        pass

    @abstractmethod
    async def find_client(self, slug: str) -> Optional[Client]:
        """
        Find a client by slug.
        Returns None if not found.
        """
        pass

    @abstractmethod
    async def entries_for_person(self, slug: str) -> List[Entry]:
        """Find all entries logged by a person."""
        pass

    @abstractmethod
    async def entries_for_project(self, slug: str) -> List[Entry]:
        """Find all entries logged against a project."""
        pass

    @abstractmethod
    async def entries_for_client(self, slug: str) -> List[Entry]:
        """Find all entries logged against any of a client's projects."""
        pass
