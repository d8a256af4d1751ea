"""Validation layer for devcontainer.json files.

Rules are evaluated in a fixed order (extensions, tasks, features) and the
first failing rule ends the run.
"""

from .framework import (
    SUCCESS_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
    ValidationFramework,
    ValidationResult,
    ValidationRule,
    ValidationStatus,
    validate_devcontainer,
)
from .rules import (
    REQUIRED_TASKS,
    ExtensionsRule,
    FeaturesRule,
    TasksRule,
    validate_extensions,
    validate_features,
    validate_tasks,
)

__all__ = [
    "SUCCESS_MESSAGE",
    "UNKNOWN_ERROR_MESSAGE",
    "ValidationFramework",
    "ValidationResult",
    "ValidationRule",
    "ValidationStatus",
    "validate_devcontainer",
    "REQUIRED_TASKS",
    "ExtensionsRule",
    "FeaturesRule",
    "TasksRule",
    "validate_extensions",
    "validate_features",
    "validate_tasks",
]
