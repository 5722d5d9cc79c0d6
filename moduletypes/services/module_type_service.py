"""
Module type service for moduletypes.

Answers which kind of build a module belongs to: Gradle, Kobalt, or
Android-on-Gradle. Queries are pure reads over the injected project
model; any exception raised by the host propagates unchanged.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, Optional
import logging

from ..domain import (
    Module,
    ExternalSystemId,
    ModuleClassification,
    GRADLE_SYSTEM_ID,
    KOBALT_SYSTEM_ID,
)
from ..exit_codes import ConfigError
from ..infra import ProjectModel

logger = logging.getLogger(__name__)

ANDROID_FACET_NAME = "Android"


def _setting(section: Dict[str, Any], key: str, default: str) -> str:
    value = section.get(key)
    return default if value is None else str(value)


class ModuleTypeManager(ABC):
    """Interface for module type queries."""

    @abstractmethod
    def is_android_gradle_module(self, module: Module) -> bool:
        """True if the module is an Android module imported from Gradle."""

    @abstractmethod
    def is_gradle_module(self, module: Module) -> bool:
        """True if the module is managed by Gradle."""

    @abstractmethod
    def is_kobalt_module(self, module: Module) -> bool:
        """True if the module is managed by Kobalt."""

    def classify(self, module: Module) -> ModuleClassification:
        """Evaluate all module type queries for one module."""
        return ModuleClassification(
            module=module,
            is_android_gradle=self.is_android_gradle_module(module),
            is_gradle=self.is_gradle_module(module),
            is_kobalt=self.is_kobalt_module(module),
        )


class ModuleClassifier(ModuleTypeManager):
    """
    ModuleTypeManager over a ProjectModel.

    Example:
        classifier = ModuleClassifier(project_model)
        if classifier.is_android_gradle_module(Module("app")):
            ...
    """

    def __init__(
        self,
        project_model: ProjectModel,
        android_facet_name: str = ANDROID_FACET_NAME,
        gradle_system_id: ExternalSystemId = GRADLE_SYSTEM_ID,
        kobalt_system_id: ExternalSystemId = KOBALT_SYSTEM_ID
    ):
        """
        Initialize ModuleClassifier.

        Args:
            project_model: Host project model to query
            android_facet_name: Facet name marking Android modules (matched exactly)
            gradle_system_id: External system id for Gradle
            kobalt_system_id: External system id for Kobalt

        Raises:
            ValueError: If the Gradle and Kobalt ids are the same
        """
        if gradle_system_id == kobalt_system_id:
            raise ValueError(
                f"Gradle and Kobalt must use different system ids, both are '{gradle_system_id.id}'"
            )
        self.project_model = project_model
        self.android_facet_name = android_facet_name
        self.gradle_system_id = gradle_system_id
        self.kobalt_system_id = kobalt_system_id

    @classmethod
    def from_config(
        cls,
        project_model: ProjectModel,
        config: Optional[Dict[str, Any]] = None
    ) -> 'ModuleClassifier':
        """
        Create a classifier from the 'classifier' configuration section.

        Raises:
            ConfigError: If the section names the same id for Gradle and Kobalt
        """
        section = (config or {}).get('classifier', {})
        facet_name = _setting(section, 'android_facet_name', ANDROID_FACET_NAME)
        gradle_id = _setting(section, 'gradle_system_id', GRADLE_SYSTEM_ID.id)
        kobalt_id = _setting(section, 'kobalt_system_id', KOBALT_SYSTEM_ID.id)
        try:
            return cls(
                project_model,
                android_facet_name=facet_name,
                gradle_system_id=ExternalSystemId(gradle_id, GRADLE_SYSTEM_ID.readable_name),
                kobalt_system_id=ExternalSystemId(kobalt_id, KOBALT_SYSTEM_ID.readable_name),
            )
        except ValueError as e:
            raise ConfigError(f"Invalid classifier configuration: {e}") from e

    def has_android_facet(self, module: Module) -> bool:
        for facet in self.project_model.get_facets(module):
            if facet.name == self.android_facet_name:
                return True
        return False

    def is_managed_by(self, module: Module, system_id: ExternalSystemId) -> bool:
        return self.project_model.is_external_system_aware(system_id, module)

    def is_android_gradle_module(self, module: Module) -> bool:
        return self.has_android_facet(module) and self.is_gradle_module(module)

    def is_gradle_module(self, module: Module) -> bool:
        return self.is_managed_by(module, self.gradle_system_id)

    def is_kobalt_module(self, module: Module) -> bool:
        return self.is_managed_by(module, self.kobalt_system_id)

    def classify_all(self) -> Iterator[ModuleClassification]:
        """Classify every module known to the project model, in host order."""
        for module in self.project_model.modules():
            result = self.classify(module)
            logger.debug(f"Classified {module.name}: {result.to_dict()}")
            yield result
