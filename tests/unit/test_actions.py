"""Unit tests for the GitHub Actions integration."""

import pytest

from dcvalidate.actions import (
    config_from_inputs,
    error_command,
    escape_data,
    get_input,
    set_output,
)
from dcvalidate.config import DEFAULT_EXTENSIONS, Requirements, ValidatorConfig

INPUT_VARS = [
    "INPUT_REQUIRED-EXTENSIONS",
    "INPUT_EXTENSIONS-LIST",
    "INPUT_REQUIRED-FEATURES",
    "INPUT_FEATURES-LIST",
    "INPUT_DEVCONTAINER-PATH",
    "INPUT_VALIDATE-TASKS",
    "RUNNER_DEBUG",
    "GITHUB_OUTPUT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in INPUT_VARS:
        monkeypatch.delenv(name, raising=False)


class TestGetInput:
    """Test reading step inputs."""

    def test_reads_and_trims(self, monkeypatch):
        monkeypatch.setenv("INPUT_DEVCONTAINER-PATH", "  path/devcontainer.json \n")
        assert get_input("devcontainer-path") == "path/devcontainer.json"

    def test_name_is_upper_cased_with_spaces_replaced(self, monkeypatch):
        monkeypatch.setenv("INPUT_MY_INPUT", "value")
        assert get_input("my input") == "value"

    def test_missing_optional_input_is_empty(self):
        assert get_input("devcontainer-path") == ""

    def test_missing_required_input_raises(self):
        with pytest.raises(ValueError, match="Input required and not supplied: extensions-list"):
            get_input("extensions-list", required=True)


class TestConfigFromInputs:
    """Test building configuration from action inputs."""

    def test_no_inputs_keeps_defaults(self):
        config = config_from_inputs()
        assert config.devcontainer_path == ".devcontainer/devcontainer.json"
        assert config.requirements.extensions == DEFAULT_EXTENSIONS
        assert config.requirements.features == []
        assert config.requirements.validate_tasks is False

    def test_all_inputs(self, monkeypatch):
        monkeypatch.setenv("INPUT_REQUIRED-EXTENSIONS", "GitHub.Copilot, GitHub.CodeQL")
        monkeypatch.setenv("INPUT_REQUIRED-FEATURES", "node")
        monkeypatch.setenv("INPUT_DEVCONTAINER-PATH", "dev/devcontainer.json")
        monkeypatch.setenv("INPUT_VALIDATE-TASKS", "true")

        config = config_from_inputs()

        assert config.requirements.extensions == ["GitHub.Copilot", "GitHub.CodeQL"]
        assert config.requirements.features == ["node"]
        assert config.devcontainer_path == "dev/devcontainer.json"
        assert config.requirements.validate_tasks is True

    def test_legacy_input_names(self, monkeypatch):
        monkeypatch.setenv("INPUT_EXTENSIONS-LIST", "a.b")
        monkeypatch.setenv("INPUT_FEATURES-LIST", "docker")

        config = config_from_inputs()

        assert config.requirements.extensions == ["a.b"]
        assert config.requirements.features == ["docker"]

    def test_required_name_wins_over_legacy(self, monkeypatch):
        monkeypatch.setenv("INPUT_REQUIRED-EXTENSIONS", "new.one")
        monkeypatch.setenv("INPUT_EXTENSIONS-LIST", "old.one")

        assert config_from_inputs().requirements.extensions == ["new.one"]

    @pytest.mark.parametrize("value", ["false", "True", "yes", "1"])
    def test_only_literal_true_enables_tasks(self, monkeypatch, value):
        monkeypatch.setenv("INPUT_VALIDATE-TASKS", value)
        assert config_from_inputs().requirements.validate_tasks is False

    def test_inputs_layer_over_base(self, monkeypatch):
        base = ValidatorConfig(requirements=Requirements(extensions=["base.ext"], validate_tasks=True))
        monkeypatch.setenv("INPUT_REQUIRED-FEATURES", "node")

        config = config_from_inputs(base)

        assert config.requirements.extensions == ["base.ext"]
        assert config.requirements.validate_tasks is True
        assert config.requirements.features == ["node"]

    def test_runner_debug_enables_debug_logging(self, monkeypatch):
        monkeypatch.setenv("RUNNER_DEBUG", "1")
        assert config_from_inputs().logging.level == "debug"


class TestWorkflowCommands:
    """Test workflow command formatting and outputs."""

    def test_escape_data(self):
        assert escape_data("50% done\r\nnext") == "50%25 done%0D%0Anext"

    def test_error_command(self):
        assert error_command("Missing required extensions: a") == "::error::Missing required extensions: a"

    def test_set_output_without_env(self):
        assert set_output("valid", "true") is False

    def test_set_output_appends(self, monkeypatch, tmp_path):
        output_file = tmp_path / "output"
        output_file.write_text("existing=1\n", encoding="utf-8")
        monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))

        assert set_output("valid", "false") is True
        assert output_file.read_text(encoding="utf-8") == "existing=1\nvalid=false\n"
