"""Error taxonomy for devcontainer validation runs.

Every failure surfaces as exactly one message. The ``kind`` attribute names the
category so callers can branch without matching on message text.
"""

from pathlib import Path


class DevcontainerValidationError(Exception):
    """Base class for all validation failures."""

    kind = "unknown"
    rule: str | None = None

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DevcontainerNotFoundError(DevcontainerValidationError):
    """Raised when the configuration path does not exist."""

    kind = "not-found"

    def __init__(self, path: str | Path):
        self.path = str(path)
        super().__init__(f"devcontainer.json not found at {self.path}")


class MalformedSourceError(DevcontainerValidationError):
    """Raised when the file cannot be parsed as JSON."""

    kind = "malformed-source"

    def __init__(self, detail: str, path: str | Path | None = None):
        self.path = str(path) if path is not None else None
        self.detail = detail
        super().__init__(f"Invalid JSON in devcontainer.json: {detail}")


class InvalidStructureError(DevcontainerValidationError):
    """Raised when the parsed document does not have the expected shape."""

    kind = "invalid-structure"

    def __init__(self):
        super().__init__("Invalid devcontainer.json structure")


class MissingExtensionsError(DevcontainerValidationError):
    kind = "missing-extensions"

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(f"Missing required extensions: {', '.join(self.missing)}")


class MissingTasksError(DevcontainerValidationError):
    kind = "missing-tasks"


class MissingFeaturesError(DevcontainerValidationError):
    kind = "missing-features"

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(f"Missing required features: {', '.join(self.missing)}")
