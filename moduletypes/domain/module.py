"""
Module domain objects for moduletypes.

A host project model (an IDE, a build server, an exported snapshot) owns
the modules of a project. moduletypes only ever reads them:

- Module: opaque handle naming a module
- Facet: named marker attached to a module ("Android", "Kotlin", ...)
- ExternalSystemId: identifier of the build tool that imported a module
- ModuleRecord: the host's snapshot of one module
- ModuleClassification: answers computed for one module

All objects are immutable value objects.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Dict, Any, Iterable


@dataclass(frozen=True)
class Module:
    """
    Handle for a module in the host project model.

    Only the name is significant; two handles with the same name refer
    to the same module.
    """
    name: str

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Module name must be a non-empty string")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Facet:
    """A named marker attached to a module by the host tooling."""
    name: str
    type_id: Optional[str] = None

    @classmethod
    def parse(cls, value: Any) -> 'Facet':
        """
        Build a Facet from a snapshot value.

        Accepts either a bare name ("Android") or a mapping with
        ``name`` and optional ``type_id`` keys.
        """
        if isinstance(value, Facet):
            return value
        if isinstance(value, str):
            return cls(name=value)
        if isinstance(value, dict) and isinstance(value.get('name'), str):
            type_id = value.get('type_id')
            return cls(name=value['name'], type_id=str(type_id) if type_id is not None else None)
        raise ValueError(f"Invalid facet: {value!r}")

    def to_dict(self) -> Dict[str, Any]:
        if self.type_id is None:
            return {'name': self.name}
        return {'name': self.name, 'type_id': self.type_id}


@dataclass(frozen=True)
class ExternalSystemId:
    """
    Identifier of an external build system (Gradle, Kobalt, ...).

    Equality is by ``id`` only, compared exactly.
    """
    id: str
    readable_name: Optional[str] = field(default=None, compare=False)

    def __str__(self) -> str:
        return self.id


GRADLE_SYSTEM_ID = ExternalSystemId("GRADLE", "Gradle")
KOBALT_SYSTEM_ID = ExternalSystemId("KOBALT", "Kobalt")


@dataclass(frozen=True)
class ModuleRecord:
    """
    Host snapshot of a single module.

    Attributes:
        module: Module handle
        facets: Facets attached to the module (order not significant)
        external_system: Id of the external system managing the module, if any
    """
    module: Module
    facets: Tuple[Facet, ...] = ()
    external_system: Optional[str] = None

    @classmethod
    def create(
        cls,
        name: str,
        facets: Iterable[Any] = (),
        external_system: Optional[str] = None
    ) -> 'ModuleRecord':
        """Convenience constructor taking plain names."""
        return cls(
            module=Module(name),
            facets=tuple(Facet.parse(f) for f in facets),
            external_system=external_system or None
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ModuleRecord':
        """
        Create from a snapshot dictionary.

        Raises:
            ValueError: If the dictionary is not a valid module entry
        """
        name = data.get('name')
        if not isinstance(name, str) or not name.strip():
            raise ValueError("Module entry requires a non-empty 'name'")

        facets = data.get('facets') or []
        if not isinstance(facets, list):
            raise ValueError(f"Module '{name}': 'facets' must be a list")

        external_system = data.get('external_system')
        if external_system is not None and not isinstance(external_system, str):
            raise ValueError(f"Module '{name}': 'external_system' must be a string")

        return cls.create(name, facets, external_system)

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            'name': self.module.name,
            'facets': [f.name if f.type_id is None else f.to_dict() for f in self.facets],
        }
        if self.external_system:
            d['external_system'] = self.external_system
        return d


@dataclass(frozen=True)
class ModuleClassification:
    """Classification answers for one module."""
    module: Module
    is_android_gradle: bool = False
    is_gradle: bool = False
    is_kobalt: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSONL output."""
        return {
            'module': self.module.name,
            'android_gradle': self.is_android_gradle,
            'gradle': self.is_gradle,
            'kobalt': self.is_kobalt,
        }
