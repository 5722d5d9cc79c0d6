"""
Infrastructure layer for moduletypes.

Contains abstractions for external systems:
- ProjectModel: Host project model interface (facets, external systems)
- InMemoryProjectModel: Dictionary-backed host used by the CLI and tests
- ProjectFile: JSON/YAML/TOML project snapshot files

These provide clean interfaces that can be mocked for testing.
"""

from .project_model import ProjectModel, InMemoryProjectModel
from .project_file import ProjectFile

__all__ = [
    'ProjectModel',
    'InMemoryProjectModel',
    'ProjectFile',
]
