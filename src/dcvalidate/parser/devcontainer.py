"""devcontainer.json reader: comment stripping, JSON parsing and shape check."""

import json
import logging
import re
from pathlib import Path

from dcvalidate.errors import DevcontainerNotFoundError, MalformedSourceError
from dcvalidate.models.devcontainer import DevcontainerContent

logger = logging.getLogger(__name__)

DEFAULT_DEVCONTAINER_PATH = ".devcontainer/devcontainer.json"

# Not string-aware: "//" inside a quoted value is stripped too.
_LINE_COMMENT = re.compile(r"//[^\r\n]*")


def strip_json_comments(text: str) -> str:
    """Remove ``//`` line comments, keeping line breaks.

    Examples:
        >>> strip_json_comments('{"a": 1} // comment\\n{"b": 2}')
        '{"a": 1} \\n{"b": 2}'
    """
    return _LINE_COMMENT.sub("", text)


class DevcontainerParser:
    """Parser for devcontainer.json files."""

    @staticmethod
    def parse_text(text: str) -> object:
        """Strip comments and parse as JSON, returning the untyped tree.

        Raises:
            MalformedSourceError: If the cleaned text is not valid JSON
        """
        try:
            return json.loads(strip_json_comments(text))
        except json.JSONDecodeError as e:
            raise MalformedSourceError(str(e))

    @classmethod
    def parse_devcontainer(cls, devcontainer_file: str | Path) -> DevcontainerContent:
        """Read, parse and structurally validate a devcontainer.json file.

        Args:
            devcontainer_file: Path to the configuration file

        Returns:
            DevcontainerContent: Typed document

        Raises:
            DevcontainerNotFoundError: If the path does not exist
            MalformedSourceError: If the file is not valid JSON after comment stripping
            InvalidStructureError: If the parsed data has the wrong shape
        """
        devcontainer_file = Path(devcontainer_file)
        if not devcontainer_file.exists():
            raise DevcontainerNotFoundError(devcontainer_file)

        logger.debug(f"Reading {devcontainer_file}")
        # Undecodable bytes become U+FFFD rather than failing the read
        text = devcontainer_file.read_text(encoding="utf-8", errors="replace")

        try:
            parsed = cls.parse_text(text)
        except MalformedSourceError as e:
            e.path = str(devcontainer_file)
            raise

        return DevcontainerContent.from_parsed(parsed)
