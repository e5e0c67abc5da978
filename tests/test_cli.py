"""Tests for the recipe-scraper CLI."""

from __future__ import annotations

import json
from unittest.mock import patch

from typer.testing import CliRunner

from cli.main import app
from backend.scraper.errors import FetchError
from backend.scraper.models import RecipeResponse, RecipeStep

runner = CliRunner()


def test_scrape_prints_pretty_json():
    canned = RecipeResponse(
        title="Toast",
        ingredients=["bread", "butter"],
        steps=[RecipeStep(number=1, instruction="Toast the bread.")],
    )
    with patch("backend.scraper.scrape_recipe", return_value=canned) as mock_scrape:
        result = runner.invoke(app, ["scrape", "--url", "https://example.com/toast"])

    assert result.exit_code == 0
    mock_scrape.assert_called_once_with("https://example.com/toast")
    assert json.loads(result.stdout) == {
        "title": "Toast",
        "ingredients": ["bread", "butter"],
        "steps": [{"step_number": 1, "instruction": "Toast the bread."}],
    }
    assert '\n    "title": "Toast"' in result.stdout


def test_scrape_error_exits_nonzero():
    with patch(
        "backend.scraper.scrape_recipe",
        return_value=RecipeResponse.failure(FetchError.message),
    ):
        result = runner.invoke(app, ["scrape", "--url", "https://unreachable.example.com/"])

    assert result.exit_code == 1
    assert json.loads(result.stdout)["error"] == FetchError.message


def test_serve_uses_configured_port(monkeypatch):
    monkeypatch.setattr("backend.config.settings.port", 9191)
    monkeypatch.setattr("backend.config.settings.host", "127.0.0.1")
    with patch("uvicorn.run") as mock_run:
        result = runner.invoke(app, ["serve"])

    assert result.exit_code == 0
    mock_run.assert_called_once()
    args, kwargs = mock_run.call_args
    assert args == ("backend.api.app:app",)
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 9191


def test_serve_port_option_overrides_settings():
    with patch("uvicorn.run") as mock_run:
        result = runner.invoke(app, ["serve", "--port", "5000"])

    assert result.exit_code == 0
    assert mock_run.call_args.kwargs["port"] == 5000
