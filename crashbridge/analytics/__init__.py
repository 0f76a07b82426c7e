"""Receiver and logger protocols for analytics events.

Receivers are called by ``CrashlyticsAnalyticsListener`` once it has
decided where an event belongs.  Loggers push events into the analytics
backend (or a stand-in while it is unavailable).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class AnalyticsEventReceiver(Protocol):
    """Accepts a routed analytics event.

    *params* is never ``None``; missing parameters arrive as an empty
    mapping.
    """

    def on_event(self, name: str, params: Mapping[str, Any]) -> None:
        ...


@runtime_checkable
class AnalyticsEventLogger(Protocol):
    """Logs an analytics event."""

    def log_event(self, name: str, params: Mapping[str, Any]) -> None:
        ...


__all__ = ["AnalyticsEventReceiver", "AnalyticsEventLogger"]
