"""``crashbridge route`` — replay recorded envelopes through the listener.

Reads JSON Lines where each line is one connector envelope (``null`` for
a callback without extras), routes them through a
``CrashlyticsAnalyticsListener`` wired to recording receivers, and prints
where each event went.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from crashbridge.analytics.listener import CrashlyticsAnalyticsListener
from crashbridge.config import config
from crashbridge.models.events import (
    RouteTarget,
    extract_name,
    extract_origin,
    extract_params,
)

console = Console()


class EnvelopeFileError(ValueError):
    """Raised when an envelope file line cannot be loaded."""


class RecordingReceiver:
    """Receiver that keeps every event it is given."""

    def __init__(self) -> None:
        self.events: list[tuple[str, Mapping[str, Any]]] = []

    def on_event(self, name: str, params: Mapping[str, Any]) -> None:
        self.events.append((name, params))


def load_envelopes(path: Path) -> list[dict[str, Any] | None]:
    """Parse a JSON Lines envelope file.  Blank lines are skipped."""
    envelopes: list[dict[str, Any] | None] = []
    for lineno, line in enumerate(path.read_text(encoding="utf-8").splitlines(), 1):
        if not line.strip():
            continue
        try:
            data = json.loads(line)
        except json.JSONDecodeError as exc:
            raise EnvelopeFileError(f"line {lineno}: invalid JSON: {exc}") from exc
        if data is not None and not isinstance(data, dict):
            raise EnvelopeFileError(
                f"line {lineno}: envelope must be an object or null, "
                f"got {type(data).__name__}"
            )
        envelopes.append(data)
    return envelopes


def _configure_logging(level: str) -> None:
    """Install a Rich log handler at *level*.

    Raises
    ------
    ValueError
        If *level* is not a known logging level name.
    """
    if not isinstance(logging.getLevelName(level.upper()), int):
        raise ValueError(f"Unknown log level: {level!r}")
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def route_cmd(
    events_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="JSON Lines file of envelopes."
    ),
    log_level: str = typer.Option(
        None, "--log-level", "-l", help="Log level (defaults to CRASHBRIDGE_LOG_LEVEL)."
    ),
) -> None:
    """Route each envelope in EVENTS_FILE and show the receiving side."""
    try:
        _configure_logging(log_level or config.log_level)
    except ValueError as exc:
        console.print(f"[red]Invalid log level:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    try:
        envelopes = load_envelopes(events_file)
    except EnvelopeFileError as exc:
        console.print(f"[red]Invalid envelope file:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    crash_receiver = RecordingReceiver()
    breadcrumb_receiver = RecordingReceiver()
    listener = CrashlyticsAnalyticsListener()
    listener.set_crashlytics_origin_event_receiver(crash_receiver)
    listener.set_breadcrumb_event_receiver(breadcrumb_receiver)

    table = Table(title=f"Routing: {events_file.name}")
    table.add_column("#", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Origin")
    table.add_column("Target")

    styles = {
        RouteTarget.CRASHLYTICS: "[magenta]crashlytics[/magenta]",
        RouteTarget.BREADCRUMB: "[green]breadcrumb[/green]",
        RouteTarget.DROPPED: "[dim]dropped[/dim]",
    }

    for index, envelope in enumerate(envelopes):
        target = listener.route(envelope)
        name = extract_name(envelope) or "-"
        origin = extract_origin(extract_params(envelope)) or "-"
        table.add_row(str(index), name, origin, styles[target])

    console.print(table)
    console.print(
        f"crashlytics={len(crash_receiver.events)} "
        f"breadcrumb={len(breadcrumb_receiver.events)} "
        f"dropped={len(envelopes) - len(crash_receiver.events) - len(breadcrumb_receiver.events)}"
    )
