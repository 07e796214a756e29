"""Tests for the command-line interface."""

from unittest.mock import patch

from sqlalchemy import create_engine, inspect
from typer.testing import CliRunner

from src.catalog.cli import app
from src.catalog.runtime.config.config_data import ConfigData, DatabaseConfig
from src.catalog.runtime.context import with_context

runner = CliRunner()


class TestCli:
    def test_init_db_creates_tables(self, tmp_path):
        url = f"sqlite:///{tmp_path}/cli.db"

        with with_context(ConfigData(database=DatabaseConfig(url=url))):
            result = runner.invoke(app, ["init-db"])

        assert result.exit_code == 0, result.output
        assert "Database initialized" in result.output
        engine = create_engine(url)
        try:
            assert "products" in inspect(engine).get_table_names()
        finally:
            engine.dispose()

    def test_serve_uses_configured_defaults(self):
        with patch("uvicorn.run") as run:
            result = runner.invoke(app, ["serve", "--port", "8765"])

        assert result.exit_code == 0, result.output
        run.assert_called_once()
        kwargs = run.call_args.kwargs
        assert run.call_args.args[0] == "src.catalog.api.http.app:app"
        assert kwargs["port"] == 8765
        assert kwargs["reload"] is False
