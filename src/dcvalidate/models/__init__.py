"""Pydantic data models for devcontainer documents."""

from dcvalidate.models.devcontainer import (
    DevcontainerContent,
    VSCodeCustomizations,
    VSCodeSettings,
    is_devcontainer_content,
)

__all__ = [
    "DevcontainerContent",
    "VSCodeCustomizations",
    "VSCodeSettings",
    "is_devcontainer_content",
]
