"""
moduletypes - Classify project modules by build system.

Given a host project model (facets attached to modules and the external
build system that imported each one), moduletypes answers whether a
module is an Android Gradle module, a Gradle module or a Kobalt module.

Quick Start:
    import moduletypes

    model = moduletypes.InMemoryProjectModel([
        moduletypes.ModuleRecord.create("app", ["Android"], "GRADLE"),
    ])
    classifier = moduletypes.ModuleClassifier(model)

    classifier.is_android_gradle_module(moduletypes.Module("app"))  # True
    classifier.is_kobalt_module(moduletypes.Module("app"))          # False

    # Or from a snapshot file
    model = moduletypes.ProjectFile("project.yaml").load_model()
    for result in moduletypes.ModuleClassifier(model).classify_all():
        print(result.to_dict())

Domain Objects:
    Module - Handle naming a project module
    Facet - Named marker attached to a module
    ExternalSystemId - Build tool that imported a module
    ModuleRecord - Host snapshot of one module
    ModuleClassification - Classification answers for one module

Services:
    ModuleTypeManager - Interface for module type queries
    ModuleClassifier - Implementation over an injected ProjectModel
"""

__version__ = "0.1.0"

# Domain objects
from .domain import (
    Module,
    Facet,
    ExternalSystemId,
    ModuleRecord,
    ModuleClassification,
    GRADLE_SYSTEM_ID,
    KOBALT_SYSTEM_ID,
)

# Infrastructure
from .infra import ProjectModel, InMemoryProjectModel, ProjectFile

# Services
from .services import ModuleTypeManager, ModuleClassifier

# Configuration
from .config import load_config, save_config

__all__ = [
    # Version
    "__version__",
    # Domain objects
    "Module",
    "Facet",
    "ExternalSystemId",
    "ModuleRecord",
    "ModuleClassification",
    "GRADLE_SYSTEM_ID",
    "KOBALT_SYSTEM_ID",
    # Infrastructure
    "ProjectModel",
    "InMemoryProjectModel",
    "ProjectFile",
    # Services
    "ModuleTypeManager",
    "ModuleClassifier",
    # Configuration
    "load_config",
    "save_config",
]
