"""Configuration management for dcvalidate using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from dcvalidate.parser.devcontainer import DEFAULT_DEVCONTAINER_PATH

CONFIG_FILE_NAME = ".dcvalidate.json"

DEFAULT_EXTENSIONS = [
    "GitHub.codespaces",
    "github.vscode-github-actions",
    "GitHub.copilot",
    "GitHub.copilot-chat",
    "github.copilot-workspace",
    "GitHub.vscode-pull-request-github",
    "GitHub.remotehub",
    "GitHub.vscode-codeql",
]


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


def parse_list(value: str | None) -> list[str]:
    """Split a comma-separated string into trimmed, non-empty items.

    Examples:
        >>> parse_list(" GitHub.copilot , ms-python.python")
        ['GitHub.copilot', 'ms-python.python']
        >>> parse_list("")
        []
    """
    if not value:
        return []
    # Blank items are dropped so "a,b," or "a,,b" never yields an empty requirement
    return [item.strip() for item in value.split(",") if item.strip()]


def _normalize_list(value: str | list[str] | None) -> list[str] | None:
    if value is None:
        return None
    if isinstance(value, str):
        return parse_list(value)
    return [item.strip() for item in value if item.strip()]


class Requirements(BaseModel):
    """Caller-supplied requirements a devcontainer.json is checked against."""
    extensions: list[str] = Field(
        alias="requiredExtensions", default_factory=lambda: list(DEFAULT_EXTENSIONS)
    )
    features: list[str] = Field(alias="requiredFeatures", default_factory=list)
    validate_tasks: bool = Field(alias="validateTasks", default=False)

    @field_validator("extensions", "features", mode="before")
    @classmethod
    def split_comma_separated(cls, v):
        if isinstance(v, str):
            return parse_list(v)
        return v

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True)


class ValidatorConfig(BaseModel):
    """Complete dcvalidate configuration model."""
    devcontainer_path: str = Field(alias="devcontainerPath", default=DEFAULT_DEVCONTAINER_PATH)
    requirements: Requirements = Field(default_factory=Requirements)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("devcontainer_path")
    @classmethod
    def validate_devcontainer_path(cls, v):
        if not v.strip():
            raise ValueError("devcontainer_path must not be empty")
        return v

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def with_overrides(
        self,
        devcontainer_path: str | Path | None = None,
        extensions: str | list[str] | None = None,
        features: str | list[str] | None = None,
        validate_tasks: bool | None = None,
        log_level: LogLevel | str | None = None,
    ) -> "ValidatorConfig":
        """Return a copy with every non-None argument taking precedence."""
        requirement_updates = {}
        if extensions is not None:
            requirement_updates["extensions"] = _normalize_list(extensions)
        if features is not None:
            requirement_updates["features"] = _normalize_list(features)
        if validate_tasks is not None:
            requirement_updates["validate_tasks"] = validate_tasks

        updates = {}
        if devcontainer_path is not None:
            updates["devcontainer_path"] = str(devcontainer_path)
        if requirement_updates:
            updates["requirements"] = self.requirements.model_copy(update=requirement_updates)
        if log_level is not None:
            updates["logging"] = LoggingConfig(level=LogLevel(log_level))

        return self.model_copy(update=updates)


def load_config(config_path: str | Path | None = None) -> ValidatorConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .dcvalidate.json

    Returns:
        ValidatorConfig: Loaded and validated configuration

    Raises:
        ValueError: If configuration is invalid
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)

    if config_path and config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = json.load(f)
            if not isinstance(config_data, dict):
                raise ValueError(f"Config file {config_path} must contain a JSON object")
            return ValidatorConfig(**config_data)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {config_path}: {e}")
        except ValidationError as e:
            raise ValueError(f"Failed to load config from {config_path}: {e}")
        except OSError as e:
            raise ValueError(f"Failed to read config file {config_path}: {e}")
    else:
        return create_default_config()


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .dcvalidate.json by searching up the directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def create_default_config() -> ValidatorConfig:
    """Create default configuration: the default extension list, no task or feature checks."""
    return ValidatorConfig()
