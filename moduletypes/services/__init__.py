"""
Service layer for moduletypes.

Contains business logic that queries the project model:
- ModuleTypeManager: Interface for module type queries
- ModuleClassifier: Implementation over an injected ProjectModel

Services are the primary API for commands to use.
"""

from .module_type_service import ModuleTypeManager, ModuleClassifier, ANDROID_FACET_NAME

__all__ = [
    'ModuleTypeManager',
    'ModuleClassifier',
    'ANDROID_FACET_NAME',
]
