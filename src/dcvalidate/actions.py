"""GitHub Actions integration: step inputs, workflow commands and outputs."""

import logging
import os
from pathlib import Path

from dcvalidate.config import ValidatorConfig, create_default_config

logger = logging.getLogger(__name__)


def _input_env_name(name: str) -> str:
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(name: str, required: bool = False) -> str:
    """Read a step input from the environment, trimmed.

    Raises:
        ValueError: If ``required`` and the input is empty or unset
    """
    value = os.environ.get(_input_env_name(name), "").strip()
    if required and not value:
        raise ValueError(f"Input required and not supplied: {name}")
    return value


def _first_input(*names: str) -> str:
    for name in names:
        value = get_input(name)
        if value:
            return value
    return ""


def config_from_inputs(base: ValidatorConfig | None = None) -> ValidatorConfig:
    """Build a configuration from action inputs layered over ``base``.

    ``required-extensions`` wins over the older ``extensions-list`` name, and
    likewise ``required-features`` over ``features-list``. Only the literal
    string ``"true"`` enables task validation.
    """
    base = base or create_default_config()

    extensions = _first_input("required-extensions", "extensions-list")
    features = _first_input("required-features", "features-list")
    devcontainer_path = get_input("devcontainer-path")
    raw_validate_tasks = get_input("validate-tasks")
    validate_tasks = raw_validate_tasks == "true" if raw_validate_tasks else None

    debug = os.environ.get("RUNNER_DEBUG") == "1"

    return base.with_overrides(
        devcontainer_path=devcontainer_path or None,
        extensions=extensions or None,
        features=features or None,
        validate_tasks=validate_tasks,
        log_level="debug" if debug else None,
    )


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def error_command(message: str) -> str:
    """Format an ``::error::`` workflow command."""
    return f"::error::{escape_data(message)}"


def set_output(name: str, value: str) -> bool:
    """Append ``name=value`` to the step output file.

    Returns:
        False when ``GITHUB_OUTPUT`` is not set (not running in Actions)
    """
    output_file = os.environ.get("GITHUB_OUTPUT")
    if not output_file:
        logger.debug(f"GITHUB_OUTPUT not set, dropping output {name}")
        return False

    with open(Path(output_file), "a", encoding="utf-8") as f:
        f.write(f"{name}={value}\n")
    return True
