"""AnalyticsDeferredProxy — analytics wiring that upgrades once available.

Crash reporting starts before the analytics connector is guaranteed to
exist.  The proxy hands out a logger and a breadcrumb source right away;
both delegate, at call time, to whatever is current.  That is the
injected defaults until the deferred connector resolves and accepts a
listener registration, and the real connector-backed implementations
afterwards.  A connector that never resolves, or refuses registration,
leaves the defaults in place permanently.  That is a steady state, not
an error.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import Any

from crashbridge.analytics import AnalyticsEventLogger
from crashbridge.analytics.breadcrumb_receiver import BreadcrumbAnalyticsEventReceiver
from crashbridge.analytics.listener import CrashlyticsAnalyticsListener
from crashbridge.analytics.loggers import (
    BlockingAnalyticsEventLogger,
    CrashlyticsOriginAnalyticsEventLogger,
    UnavailableAnalyticsEventLogger,
)
from crashbridge.breadcrumbs import (
    BreadcrumbHandler,
    BreadcrumbSource,
    DisabledBreadcrumbSource,
)
from crashbridge.config import config
from crashbridge.connector import (
    AnalyticsConnector,
    AnalyticsConnectorHandle,
    AnalyticsConnectorListener,
)
from crashbridge.deferred import Deferred, Provider
from crashbridge.models.events import CRASHLYTICS_ORIGIN, LEGACY_CRASH_ANALYTICS_ORIGIN

logger = logging.getLogger(__name__)


class _DeferredEventLogger:
    """Logger facade that forwards to the proxy's current logger."""

    def __init__(self, proxy: AnalyticsDeferredProxy) -> None:
        self._proxy = proxy

    def log_event(self, name: str, params: Mapping[str, Any]) -> None:
        self._proxy._analytics_event_logger.log_event(name, params)


class _DeferredBreadcrumbSource:
    """Breadcrumb source facade that forwards to the proxy's current source."""

    def __init__(self, proxy: AnalyticsDeferredProxy) -> None:
        self._proxy = proxy

    def register_breadcrumb_handler(
        self, handler: BreadcrumbHandler | None
    ) -> None:
        self._proxy._register_breadcrumb_handler(handler)


class AnalyticsDeferredProxy:
    """Defers analytics wiring until the connector becomes available.

    Parameters
    ----------
    analytics_connector_deferred:
        Called once, here in the constructor, with a handler that receives
        a provider of the ``AnalyticsConnector``.
    breadcrumb_source:
        Breadcrumb source used until the connector is wired up.  Defaults
        to ``DisabledBreadcrumbSource``.
    analytics_event_logger:
        Logger used until the connector is wired up.  Defaults to
        ``UnavailableAnalyticsEventLogger``.
    blocking_timeout:
        Seconds the connector-backed logger waits for each event to come
        back.  Defaults to ``config.blocking_timeout``.
    """

    def __init__(
        self,
        analytics_connector_deferred: Deferred[AnalyticsConnector],
        breadcrumb_source: BreadcrumbSource | None = None,
        analytics_event_logger: AnalyticsEventLogger | None = None,
        *,
        blocking_timeout: float | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._breadcrumb_source: BreadcrumbSource = (
            breadcrumb_source if breadcrumb_source is not None else DisabledBreadcrumbSource()
        )
        self._analytics_event_logger: AnalyticsEventLogger = (
            analytics_event_logger
            if analytics_event_logger is not None
            else UnavailableAnalyticsEventLogger()
        )
        self._blocking_timeout = (
            blocking_timeout if blocking_timeout is not None else config.blocking_timeout
        )
        self._pending_handler: BreadcrumbHandler | None = None
        self._resolving = False
        self._wired = False

        analytics_connector_deferred(self._on_connector_available)

    # ------------------------------------------------------------------
    # Public accessors
    # ------------------------------------------------------------------

    def get_deferred_breadcrumb_source(self) -> BreadcrumbSource:
        return _DeferredBreadcrumbSource(self)

    def get_analytics_event_logger(self) -> AnalyticsEventLogger:
        return _DeferredEventLogger(self)

    @property
    def is_connected(self) -> bool:
        """Whether the connector has been wired up."""
        return self._wired

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _register_breadcrumb_handler(self, handler: BreadcrumbHandler | None) -> None:
        with self._lock:
            # The real receiver holds a single handler, so only the latest
            # one registered against the disabled default is replayed.
            if isinstance(self._breadcrumb_source, DisabledBreadcrumbSource):
                self._pending_handler = handler
            self._breadcrumb_source.register_breadcrumb_handler(handler)

    def _on_connector_available(self, provider: Provider[AnalyticsConnector]) -> None:
        logger.debug("AnalyticsConnector now available.")
        with self._lock:
            if self._wired or self._resolving:
                logger.debug("AnalyticsConnector already wired up or resolving; ignoring")
                return
            self._resolving = True

        listener = CrashlyticsAnalyticsListener()
        try:
            connector = provider()
            handle = _subscribe_to_analytics_events(connector, listener)
        except Exception:
            with self._lock:
                self._resolving = False
            raise
        if not handle:
            with self._lock:
                self._resolving = False
            logger.warning(
                "Could not register Firebase Analytics listener; "
                "a newer version of the Analytics SDK may be required."
            )
            return

        breadcrumb_receiver = BreadcrumbAnalyticsEventReceiver()
        blocking_logger = BlockingAnalyticsEventLogger(
            CrashlyticsOriginAnalyticsEventLogger(connector), self._blocking_timeout
        )

        with self._lock:
            if self._pending_handler is not None:
                breadcrumb_receiver.register_breadcrumb_handler(self._pending_handler)
                self._pending_handler = None

            listener.set_breadcrumb_event_receiver(breadcrumb_receiver)
            listener.set_crashlytics_origin_event_receiver(blocking_logger)

            self._breadcrumb_source = breadcrumb_receiver
            self._analytics_event_logger = blocking_logger
            self._wired = True
            self._resolving = False

        logger.debug("Registered Firebase Analytics listener.")


def _subscribe_to_analytics_events(
    connector: AnalyticsConnector, listener: AnalyticsConnectorListener
) -> AnalyticsConnectorHandle | None:
    """Register *listener* under the crash origin, falling back to legacy."""
    handle = connector.register_analytics_connector_listener(
        CRASHLYTICS_ORIGIN, listener
    )
    if not handle:
        logger.debug(
            "Could not register AnalyticsConnectorListener with Crashlytics origin."
        )
        handle = connector.register_analytics_connector_listener(
            LEGACY_CRASH_ANALYTICS_ORIGIN, listener
        )
        if handle:
            logger.warning(
                "A new version of the Google Analytics for Firebase SDK is now "
                "available. For improved performance and compatibility with "
                "Crashlytics, please update to the latest version."
            )
    return handle
