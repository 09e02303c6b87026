"""Tests for the ``serve`` command; Flask's server is never started."""

import pytest
from click.testing import CliRunner
from flask import Flask

from dropshop.infrastructure.cli.main import cli


@pytest.fixture
def run_calls(monkeypatch):
    calls = []

    def fake_run(self, **kwargs):
        calls.append((self, kwargs))

    monkeypatch.setattr(Flask, "run", fake_run)
    return calls


class TestServe:

    def test_defaults(self, run_calls):
        result = CliRunner().invoke(cli, ["serve"], env={"PORT": None, "HOST": None})
        assert result.exit_code == 0
        _, kwargs = run_calls[0]
        assert kwargs["port"] == 3000
        assert kwargs["host"] == "0.0.0.0"

    def test_options_override_environment(self, run_calls):
        result = CliRunner().invoke(
            cli,
            ["serve", "--port", "8000", "--admin-key", "k", "--initial-stock", "3"],
            env={"PORT": "9000"},
        )
        assert result.exit_code == 0
        app, kwargs = run_calls[0]
        assert kwargs["port"] == 8000

        client = app.test_client()
        assert client.get("/api/stock").get_json() == {"stock": 3}
        assert client.get("/admin?key=k").status_code == 200
        assert client.get("/admin?key=secret").status_code == 401

    def test_fallback_key_is_reported(self, run_calls, caplog):
        CliRunner().invoke(cli, ["serve"], env={"ADMIN_KEY": None})
        assert "ADMIN_KEY is not set" in caplog.text

    def test_bad_port_is_a_clean_error(self, run_calls):
        result = CliRunner().invoke(cli, ["serve"], env={"PORT": "abc"})
        assert result.exit_code == 1
        assert "PORT must be an integer" in result.output
        assert run_calls == []
