"""crashbridge CLI — Typer-based command-line interface.

Provides the ``crashbridge`` command for replaying recorded analytics
envelopes through the listener and inspecting where each one lands.

All output uses Rich for formatted terminal display.
"""
