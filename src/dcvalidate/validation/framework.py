"""Core validation framework for devcontainer.json files.

Rules run in a fixed order against one parsed document. The first failure
ends the run, so a result always carries exactly one message.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from ..config import Requirements
from ..errors import DevcontainerValidationError
from ..models.devcontainer import DevcontainerContent
from ..parser.devcontainer import DevcontainerParser

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "All validations passed successfully"
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"


class ValidationStatus(str, Enum):
    """Validation status."""
    PASS = "pass"
    FAIL = "fail"


@dataclass
class ValidationResult:
    """Outcome of one validation run."""
    status: ValidationStatus
    message: str
    kind: str | None = None
    rule: str | None = None
    missing: list[str] = field(default_factory=list)
    path: str | None = None
    counters: dict[str, int] = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return self.status == ValidationStatus.PASS

    @property
    def exit_code(self) -> int:
        """Exit code for CI: 0 = pass, 1 = fail."""
        return 0 if self.passed else 1

    def increment_counter(self, name: str, value: int = 1) -> None:
        """Increment a counter."""
        self.counters[name] = self.counters.get(name, 0) + value

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "status": self.status.value,
            "exit_code": self.exit_code,
            "message": self.message,
            "kind": self.kind,
            "rule": self.rule,
            "missing": self.missing,
            "path": self.path,
            "counters": self.counters,
        }


class ValidationRule(ABC):
    """Base class for validation rules."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Rule name for identification."""
        pass

    def applies(self, requirements: Requirements) -> bool:
        """Whether the rule runs for the given requirements."""
        return True

    @abstractmethod
    def check(self, content: DevcontainerContent, requirements: Requirements) -> None:
        """Execute validation rule.

        Args:
            content: Structurally valid devcontainer document
            requirements: Caller-supplied requirements

        Raises:
            DevcontainerValidationError: If the document violates the rule
        """
        pass


class ValidationFramework:
    """Runs the load, parse and rule pipeline for one devcontainer.json."""

    def __init__(self, requirements: Requirements | None = None):
        self.requirements = requirements or Requirements()
        self.rules: list[ValidationRule] = []

    def add_rule(self, rule: ValidationRule) -> None:
        """Add a validation rule."""
        self.rules.append(rule)

    def create_default_rules(self) -> None:
        """Register extensions, tasks and features rules in that order."""
        from .rules import ExtensionsRule, FeaturesRule, TasksRule

        self.add_rule(ExtensionsRule())
        self.add_rule(TasksRule())
        self.add_rule(FeaturesRule())

    def check(self, content: DevcontainerContent, result: ValidationResult | None = None) -> None:
        """Apply the registered rules to an already loaded document.

        Raises:
            DevcontainerValidationError: From the first rule that fails
        """
        for rule in self.rules:
            if not rule.applies(self.requirements):
                logger.debug(f"Skipping rule: {rule.name}")
                continue
            logger.debug(f"Executing rule: {rule.name}")
            try:
                rule.check(content, self.requirements)
            except DevcontainerValidationError as e:
                e.rule = rule.name
                raise
            if result is not None:
                result.increment_counter("rules_passed")

    def validate(self, devcontainer_path: str | Path) -> ValidationResult:
        """Validate the devcontainer.json at ``devcontainer_path``.

        Never raises; every failure is folded into the returned result.

        Returns:
            ValidationResult with status and a single message
        """
        path = str(devcontainer_path)
        result = ValidationResult(status=ValidationStatus.PASS, message=SUCCESS_MESSAGE, path=path)

        logger.info(f"Starting validation of {path}")
        logger.info(f"Running {len(self.rules)} validation rules")

        try:
            content = DevcontainerParser.parse_devcontainer(path)
            self.check(content, result)
        except DevcontainerValidationError as e:
            logger.info(f"Validation failed: {e.message}")
            result.status = ValidationStatus.FAIL
            result.message = e.message
            result.kind = e.kind
            result.rule = e.rule
            result.missing = list(getattr(e, "missing", []))
        except Exception as e:
            logger.error(f"Unexpected error validating {path}: {e}", exc_info=True)
            result.status = ValidationStatus.FAIL
            result.message = str(e) or UNKNOWN_ERROR_MESSAGE
            result.kind = "unknown"

        logger.info(f"Validation completed with status: {result.status.value}")

        return result


def validate_devcontainer(devcontainer_path: str | Path, requirements: Requirements | None = None) -> ValidationResult:
    """Validate one file with the default rule set."""
    framework = ValidationFramework(requirements)
    framework.create_default_rules()
    return framework.validate(devcontainer_path)
