"""Main Typer application — registers all CLI commands.

Entry point: ``crashbridge`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import typer

from crashbridge.cli.commands.route import route_cmd

app = typer.Typer(
    name="crashbridge",
    help="crashbridge: analytics event routing for crash reporting.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

app.command(name="route", help="Route recorded envelopes and show where they land.")(
    route_cmd
)


@app.command(name="version", help="Show the crashbridge version.")
def version_cmd() -> None:
    """Print the installed crashbridge version."""
    from rich.console import Console

    from crashbridge import __version__

    Console().print(f"crashbridge {__version__}")


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
