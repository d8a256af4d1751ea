"""Parser modules for devcontainer configuration files."""

from dcvalidate.parser.devcontainer import (
    DEFAULT_DEVCONTAINER_PATH,
    DevcontainerParser,
    strip_json_comments,
)

__all__ = [
    "DEFAULT_DEVCONTAINER_PATH",
    "DevcontainerParser",
    "strip_json_comments",
]
