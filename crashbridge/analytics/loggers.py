"""Analytics event loggers.

- ``UnavailableAnalyticsEventLogger`` — default while analytics is absent.
- ``CrashlyticsOriginAnalyticsEventLogger`` — logs straight to the
  connector under the crash-reporting origin.
- ``BlockingAnalyticsEventLogger`` — wraps another logger and waits a
  bounded time for the logged event to come back through the listener,
  so the event is recorded before a crashing process goes away.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import Any

from crashbridge.analytics import AnalyticsEventLogger
from crashbridge.connector import AnalyticsConnector
from crashbridge.models.events import APP_EXCEPTION_EVENT_NAME, CRASHLYTICS_ORIGIN

logger = logging.getLogger(__name__)


class UnavailableAnalyticsEventLogger:
    """Logger used while the analytics connector is unavailable."""

    def log_event(self, name: str, params: Mapping[str, Any]) -> None:
        logger.debug(
            "Skipping logging analytics event %s: analytics is unavailable", name
        )


class CrashlyticsOriginAnalyticsEventLogger:
    """Logs events to the connector tagged with the ``"clx"`` origin."""

    def __init__(self, connector: AnalyticsConnector) -> None:
        self._connector = connector

    def log_event(self, name: str, params: Mapping[str, Any]) -> None:
        self._connector.log_event(CRASHLYTICS_ORIGIN, name, params)


class BlockingAnalyticsEventLogger:
    """Logger and crash-origin receiver that waits for the event round trip.

    ``log_event`` delegates to *base_logger* and then blocks for up to
    *timeout* seconds, until ``on_event`` sees the app-exception event
    come back from the connector.  Calls to ``log_event`` are serialized.

    Parameters
    ----------
    base_logger:
        The logger that actually records the event.
    timeout:
        Maximum wait in seconds.  Expiry is logged, not raised.
    """

    def __init__(self, base_logger: AnalyticsEventLogger, timeout: float) -> None:
        self._base_logger = base_logger
        self._timeout = timeout
        self._lock = threading.Lock()
        self._received: threading.Event | None = None

    def log_event(self, name: str, params: Mapping[str, Any]) -> None:
        with self._lock:
            logger.debug("Logging event %s to analytics", name)
            received = threading.Event()
            self._received = received
            try:
                self._base_logger.log_event(name, params)

                logger.debug("Awaiting app exception callback from analytics")
                if received.wait(self._timeout):
                    logger.debug("App exception callback received from analytics")
                else:
                    logger.warning(
                        "Timeout exceeded while awaiting app exception callback "
                        "from analytics"
                    )
            finally:
                self._received = None

    def on_event(self, name: str, params: Mapping[str, Any]) -> None:
        received = self._received
        if received is not None and name == APP_EXCEPTION_EVENT_NAME:
            received.set()
