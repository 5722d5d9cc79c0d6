"""
Domain layer for moduletypes.

Contains pure domain objects with no I/O or side effects:
- Module: Handle naming a project module
- Facet: Named marker attached to a module
- ExternalSystemId: Build tool that imported a module
- ModuleRecord: Host snapshot of one module
- ModuleClassification: Classification answers for one module
"""

from .module import (
    Module,
    Facet,
    ExternalSystemId,
    ModuleRecord,
    ModuleClassification,
    GRADLE_SYSTEM_ID,
    KOBALT_SYSTEM_ID,
)

__all__ = [
    'Module',
    'Facet',
    'ExternalSystemId',
    'ModuleRecord',
    'ModuleClassification',
    'GRADLE_SYSTEM_ID',
    'KOBALT_SYSTEM_ID',
]
