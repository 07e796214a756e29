"""Unit tests for config_template module."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from src.catalog.runtime.config.config_template import (
    apply_environment_overrides,
    load_templated_yaml,
    substitute_env_vars,
)


class TestSubstituteEnvVars:
    """Test cases for substitute_env_vars function."""

    def test_substitute_simple_env_var(self):
        with patch.dict(os.environ, {"TEST_VAR": "test_value"}):
            assert substitute_env_vars("${TEST_VAR}") == "test_value"

    def test_substitute_env_var_in_text(self):
        with patch.dict(os.environ, {"HOST": "localhost", "PORT": "8080"}):
            text = "Server running at http://${HOST}:${PORT}/api"
            result = substitute_env_vars(text)
            assert result == "Server running at http://localhost:8080/api"

    def test_substitute_env_var_with_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("${MISSING_VAR:-default_value}") == "default_value"

    def test_substitute_env_var_with_default_when_set(self):
        with patch.dict(os.environ, {"PRESENT_VAR": "actual_value"}):
            assert substitute_env_vars("${PRESENT_VAR:-default_value}") == "actual_value"

    def test_substitute_env_var_with_empty_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("${MISSING_VAR:-}") == ""

    def test_default_may_contain_colons(self):
        with patch.dict(os.environ, {}, clear=True):
            result = substitute_env_vars("${DATABASE_URL:-sqlite:///./catalog.db}")
            assert result == "sqlite:///./catalog.db"

    def test_substitute_required_env_var_missing(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(
                ValueError, match="Required environment variable MISSING_VAR not set"
            ):
                substitute_env_vars("${MISSING_VAR}")

    def test_substitute_required_with_custom_message(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="SECRET: please set it"):
                substitute_env_vars("${SECRET:?please set it}")

    def test_text_without_placeholders_is_unchanged(self):
        assert substitute_env_vars("plain: value") == "plain: value"


class TestEnvironmentOverrides:
    def test_prefixed_variables_override_plain_ones(self):
        with patch.dict(
            os.environ,
            {"DATABASE_URL": "sqlite:///dev.db", "TEST_DATABASE_URL": "sqlite://"},
            clear=True,
        ):
            overridden = apply_environment_overrides("test")

            assert overridden == ["DATABASE_URL"]
            assert os.environ["DATABASE_URL"] == "sqlite://"

    def test_other_environments_are_ignored(self):
        with patch.dict(
            os.environ, {"PRODUCTION_LOG_LEVEL": "ERROR"}, clear=True
        ):
            assert apply_environment_overrides("development") == []
            assert "LOG_LEVEL" not in os.environ


class TestLoadTemplatedYaml:
    def _write(self, tmp_path: Path, content: str) -> Path:
        path = tmp_path / "config.yaml"
        path.write_text(content)
        return path

    def test_load_valid_config(self, tmp_path: Path):
        path = self._write(
            tmp_path,
            """
config:
  app:
    environment: test
    port: ${APP_PORT:-9000}
  database:
    url: ${DATABASE_URL}
  logging:
    level: DEBUG
""",
        )
        with patch.dict(os.environ, {"DATABASE_URL": "sqlite://"}, clear=True):
            config = load_templated_yaml(path)

        assert config.app.environment == "test"
        assert config.app.port == 9000
        assert config.database.url == "sqlite://"
        assert config.logging.level == "DEBUG"

    def test_missing_sections_use_defaults(self, tmp_path: Path):
        path = self._write(tmp_path, "config:\n  app:\n    port: 8123\n")

        with patch.dict(os.environ, {}, clear=True):
            config = load_templated_yaml(path)

        assert config.app.port == 8123
        assert config.database.url == "sqlite:///./catalog.db"

    def test_empty_file_is_rejected(self, tmp_path: Path):
        path = self._write(tmp_path, "")

        with pytest.raises(ValueError, match="Failed to parse YAML"):
            load_templated_yaml(path)

    def test_invalid_yaml_is_rejected(self, tmp_path: Path):
        path = self._write(tmp_path, "config: [unclosed")

        with pytest.raises(ValueError, match="Error parsing YAML"):
            load_templated_yaml(path)

    def test_invalid_values_are_rejected(self, tmp_path: Path):
        path = self._write(tmp_path, "config:\n  app:\n    port: not-a-port\n")

        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="Invalid configuration"):
                load_templated_yaml(path)

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_templated_yaml(tmp_path / "absent.yaml")

    def test_repository_config_file_loads(self):
        """The config.yaml shipped with the project is valid."""
        path = Path(__file__).parents[3] / "config.yaml"

        with patch.dict(os.environ, {}, clear=True):
            config = load_templated_yaml(path)

        assert config.app.title == "Onion Architecture API"
        assert config.database.url == "sqlite:///./catalog.db"
        assert not config.logging.file
        assert config.app.environment == "development"
        assert config.app.port == 8000

    def test_repository_config_file_needs_no_environment(self):
        """Only value lines carry placeholders, and all of them have defaults."""
        path = Path(__file__).parents[3] / "config.yaml"

        for line in path.read_text().splitlines():
            if line.lstrip().startswith("#"):
                assert "${" not in line
            elif "${" in line:
                assert ":-" in line
