"""Analytics connector boundary.

The connector is owned by the analytics SDK; crashbridge only depends on
the shape described here.  Any object with matching methods works.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class AnalyticsConnectorListener(Protocol):
    """Receives every analytics event logged under a registered origin."""

    def on_message_triggered(
        self, id: int, extras: Mapping[str, Any] | None
    ) -> None:
        ...


class AnalyticsConnectorHandle(Protocol):
    """Handle returned by a successful listener registration."""

    def unregister(self) -> None:
        ...

    def register_event_names(self, names: Iterable[str]) -> None:
        ...


@runtime_checkable
class AnalyticsConnector(Protocol):
    """The live analytics backend.

    ``register_analytics_connector_listener`` returns ``None`` (or any
    falsy value) when the registration is refused, e.g. because the
    analytics SDK is not fully set up.
    """

    def register_analytics_connector_listener(
        self, origin: str, listener: AnalyticsConnectorListener
    ) -> AnalyticsConnectorHandle | None:
        ...

    def log_event(
        self, origin: str, name: str, params: Mapping[str, Any]
    ) -> None:
        ...
