"""Unit tests for the CLI — command registration and envelope routing.

Exercises the ``route`` command against JSON Lines files via
typer.testing.CliRunner.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from crashbridge import __version__
from crashbridge.cli.app import app
from crashbridge.cli.commands.route import EnvelopeFileError, load_envelopes
from crashbridge.models.events import (
    CRASHLYTICS_ORIGIN,
    EVENT_NAME_KEY,
    EVENT_ORIGIN_KEY,
    EVENT_PARAMS_KEY,
)

runner = CliRunner()


def _write_lines(path: Path, lines: list[object]) -> Path:
    path.write_text("\n".join(json.dumps(line) for line in lines) + "\n", encoding="utf-8")
    return path


class TestCliApp:
    def test_help_flag(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "route" in result.output

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestLoadEnvelopes:
    def test_skips_blank_lines_and_keeps_null(self, tmp_path):
        path = tmp_path / "events.jsonl"
        path.write_text('{"name": "a"}\n\nnull\n', encoding="utf-8")

        assert load_envelopes(path) == [{"name": "a"}, None]

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "events.jsonl"
        path.write_text("not json\n", encoding="utf-8")

        with pytest.raises(EnvelopeFileError, match="line 1: invalid JSON"):
            load_envelopes(path)

    def test_non_object_line(self, tmp_path):
        path = _write_lines(tmp_path / "events.jsonl", [{"name": "a"}, [1, 2]])

        with pytest.raises(EnvelopeFileError, match="line 2"):
            load_envelopes(path)


class TestRouteCommand:
    def test_routes_each_envelope(self, tmp_path):
        path = _write_lines(
            tmp_path / "events.jsonl",
            [
                {EVENT_NAME_KEY: "crash", EVENT_PARAMS_KEY: {EVENT_ORIGIN_KEY: CRASHLYTICS_ORIGIN}},
                {EVENT_NAME_KEY: "purchase", EVENT_PARAMS_KEY: {EVENT_ORIGIN_KEY: "app"}},
                {EVENT_NAME_KEY: "bare", EVENT_PARAMS_KEY: None},
                None,
                {},
            ],
        )

        result = runner.invoke(app, ["route", str(path)])

        assert result.exit_code == 0, result.output
        assert "crashlytics=1 breadcrumb=2 dropped=2" in result.output

    def test_invalid_file_exits_with_error(self, tmp_path):
        path = tmp_path / "events.jsonl"
        path.write_text("{broken\n", encoding="utf-8")

        result = runner.invoke(app, ["route", str(path)])

        assert result.exit_code == 1
        assert "Invalid envelope file" in result.output

    def test_missing_file_is_rejected(self, tmp_path):
        result = runner.invoke(app, ["route", str(tmp_path / "missing.jsonl")])
        assert result.exit_code != 0

    def test_unknown_log_level_exits_with_error(self, tmp_path):
        path = _write_lines(tmp_path / "events.jsonl", [{EVENT_NAME_KEY: "a"}])

        result = runner.invoke(app, ["route", str(path), "--log-level", "bogus"])

        assert result.exit_code == 1
        assert "Invalid log level" in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)

    def test_lowercase_log_level_is_accepted(self, tmp_path):
        path = _write_lines(tmp_path / "events.jsonl", [{EVENT_NAME_KEY: "a"}])

        result = runner.invoke(app, ["route", str(path), "--log-level", "debug"])

        assert result.exit_code == 0, result.output
