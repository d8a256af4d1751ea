"""Validation rules for devcontainer.json requirements.

The module-level functions are pure checks returning what is missing; the
rule classes wrap them for the framework and raise on failure.
"""

import logging

from ..config import Requirements
from ..errors import MissingExtensionsError, MissingFeaturesError, MissingTasksError
from ..models.devcontainer import DevcontainerContent
from .framework import ValidationRule

logger = logging.getLogger(__name__)

REQUIRED_TASKS = ("build", "test", "run")


def validate_extensions(content: DevcontainerContent, required_extensions: list[str]) -> list[str]:
    """Return required extensions with no case-insensitive match in ``content``.

    Order and casing of ``required_extensions`` are preserved.
    """
    configured = {ext.lower() for ext in content.extensions}
    return [required for required in required_extensions if required.lower() not in configured]


def validate_tasks(content: DevcontainerContent) -> str | None:
    """Check that build, test and run tasks are declared as strings.

    Returns:
        An error message, or None when all three tasks are present
    """
    tasks = content.tasks
    if tasks is None:
        return "'tasks' property is missing"

    missing_tasks = [task for task in REQUIRED_TASKS if not isinstance(tasks.get(task), str)]
    if missing_tasks:
        return f"Missing or invalid required tasks: {', '.join(missing_tasks)}"

    return None


def validate_features(content: DevcontainerContent, required_features: list[str]) -> list[str]:
    """Return required feature names that are not keys of ``content.features``."""
    if not required_features:
        return []
    configured = content.features or {}
    return [required for required in required_features if required not in configured]


class ExtensionsRule(ValidationRule):
    """Validate that required VS Code extensions are configured."""

    @property
    def name(self) -> str:
        return "extensions"

    def check(self, content: DevcontainerContent, requirements: Requirements) -> None:
        missing = validate_extensions(content, requirements.extensions)
        logger.debug(f"Checked {len(requirements.extensions)} extensions, {len(missing)} missing")
        if missing:
            raise MissingExtensionsError(missing)


class TasksRule(ValidationRule):
    """Validate that build, test and run tasks are declared."""

    @property
    def name(self) -> str:
        return "tasks"

    def applies(self, requirements: Requirements) -> bool:
        return requirements.validate_tasks

    def check(self, content: DevcontainerContent, requirements: Requirements) -> None:
        error = validate_tasks(content)
        if error:
            raise MissingTasksError(error)


class FeaturesRule(ValidationRule):
    """Validate that required devcontainer features are declared."""

    @property
    def name(self) -> str:
        return "features"

    def applies(self, requirements: Requirements) -> bool:
        return bool(requirements.features)

    def check(self, content: DevcontainerContent, requirements: Requirements) -> None:
        missing = validate_features(content, requirements.features)
        if missing:
            raise MissingFeaturesError(missing)
