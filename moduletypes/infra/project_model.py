"""
Project model infrastructure for moduletypes.

The project model is the host collaborator that owns modules, their
facets and their external-system provenance. Classification code only
talks to the ProjectModel interface, so any host (an IDE bridge, a build
server, a snapshot file) can be plugged in or mocked for testing.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, Iterator, Optional, Tuple
import logging

from ..domain import Module, Facet, ExternalSystemId, ModuleRecord

logger = logging.getLogger(__name__)


class ProjectModel(ABC):
    """Read-only view of a host's modules."""

    @abstractmethod
    def get_facets(self, module: Module) -> Iterable[Facet]:
        """Return the facets attached to a module."""

    @abstractmethod
    def is_external_system_aware(self, system_id: ExternalSystemId, module: Module) -> bool:
        """Return True if the module was imported by / is managed by the given system."""

    @abstractmethod
    def modules(self) -> Iterable[Module]:
        """Enumerate the modules known to the host."""


class InMemoryProjectModel(ProjectModel):
    """
    Project model backed by a dictionary of ModuleRecords.

    Unknown modules have no facets and no external system.

    Example:
        model = InMemoryProjectModel([
            ModuleRecord.create("app", ["Android"], "GRADLE"),
        ])
        model.is_external_system_aware(GRADLE_SYSTEM_ID, Module("app"))  # True
    """

    def __init__(self, records: Optional[Iterable[ModuleRecord]] = None):
        self._records: Dict[Module, ModuleRecord] = {}
        for record in records or ():
            self.add(record)

    def add(self, record: ModuleRecord) -> None:
        """Add or replace a module record."""
        if record.module in self._records:
            logger.debug(f"Replacing duplicate module record: {record.module.name}")
        self._records[record.module] = record

    def get_record(self, module: Module) -> Optional[ModuleRecord]:
        return self._records.get(module)

    def get_facets(self, module: Module) -> Tuple[Facet, ...]:
        record = self._records.get(module)
        return record.facets if record else ()

    def is_external_system_aware(self, system_id: ExternalSystemId, module: Module) -> bool:
        record = self._records.get(module)
        if record is None or record.external_system is None:
            return False
        return record.external_system == system_id.id

    def modules(self) -> Iterator[Module]:
        return iter(list(self._records))

    def records(self) -> Iterator[ModuleRecord]:
        return iter(list(self._records.values()))

    def __contains__(self, module: object) -> bool:
        return module in self._records

    def __len__(self) -> int:
        return len(self._records)
