"""Models for devcontainer.json content and its structural type guard."""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dcvalidate.errors import InvalidStructureError

logger = logging.getLogger(__name__)


class VSCodeSettings(BaseModel):
    """The ``customizations.vscode`` block."""
    extensions: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow", frozen=True)


class VSCodeCustomizations(BaseModel):
    """Tool-specific customizations; only the VS Code block is typed."""
    vscode: VSCodeSettings

    model_config = ConfigDict(extra="allow", frozen=True)


class DevcontainerContent(BaseModel):
    """A devcontainer.json document that passed the structural check.

    Every attribute is optional. ``None`` means the key was absent from the
    file, which is distinct from an empty list or mapping.
    """
    customizations: VSCodeCustomizations | None = None
    tasks: dict[str, str] | None = None
    features: dict[str, dict[str, Any] | list[Any] | None] | None = None

    model_config = ConfigDict(extra="allow", frozen=True)

    @field_validator("tasks", "features", mode="before")
    @classmethod
    def index_arrays(cls, v):
        if isinstance(v, list):
            return _as_entries(v)
        return v

    @property
    def extensions(self) -> list[str]:
        """Configured extension identifiers, empty when none are declared."""
        if self.customizations is None:
            return []
        return list(self.customizations.vscode.extensions)

    @classmethod
    def from_parsed(cls, data: object) -> "DevcontainerContent":
        """Build a document from an untyped tree, checking its shape first.

        Raises:
            InvalidStructureError: If the tree does not pass ``is_devcontainer_content``
        """
        if not is_devcontainer_content(data):
            raise InvalidStructureError()
        return cls.model_validate(data)


def _as_entries(value: object) -> dict | None:
    """Key/value view of a JSON object or array; arrays are keyed by index."""
    if isinstance(value, dict):
        return value
    if isinstance(value, list):
        return {str(index): item for index, item in enumerate(value)}
    return None


def is_devcontainer_content(obj: object) -> bool:
    """Return True if ``obj`` has the shape of a devcontainer document.

    ``customizations`` is only checked when present: a document without it is
    accepted and treated as having no extensions, but a present
    ``customizations`` must carry ``vscode.extensions`` as a list.
    ``tasks`` and ``features`` may be objects or arrays; feature values may
    be objects, arrays or ``null``.
    """
    if not isinstance(obj, dict):
        logger.debug(f"Root is {type(obj).__name__}, expected object")
        return False

    if "customizations" in obj:
        customizations = obj["customizations"]
        if not isinstance(customizations, dict):
            return False
        vscode = customizations.get("vscode")
        if not isinstance(vscode, dict) or "extensions" not in vscode:
            logger.debug("customizations present without vscode.extensions")
            return False
        extensions = vscode["extensions"]
        if not isinstance(extensions, list):
            return False
        if not all(isinstance(ext, str) for ext in extensions):
            return False

    if "tasks" in obj:
        tasks = _as_entries(obj["tasks"])
        if tasks is None:
            return False
        for name, value in tasks.items():
            if not isinstance(value, str):
                logger.debug(f"Task {name!r} has non-string value")
                return False

    if "features" in obj:
        features = _as_entries(obj["features"])
        if features is None:
            return False
        for name, value in features.items():
            if value is not None and not isinstance(value, (dict, list)):
                logger.debug(f"Feature {name!r} is not an object")
                return False

    return True
