"""CrashlyticsAnalyticsListener — routes connector callbacks by origin.

Events logged by the crash reporter itself (origin ``"clx"``) go to the
crash-origin receiver; everything else is a breadcrumb.  Each event goes
to at most one receiver.  Missing envelopes, names, or receivers drop the
event silently; nothing here raises back into the analytics SDK.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from crashbridge.analytics import AnalyticsEventReceiver
from crashbridge.models.events import (
    CRASHLYTICS_ORIGIN,
    RouteTarget,
    extract_name,
    extract_origin,
    extract_params,
)

logger = logging.getLogger(__name__)


class CrashlyticsAnalyticsListener:
    """Analytics connector listener that splits events between two receivers.

    Usage
    -----
    >>> listener = CrashlyticsAnalyticsListener()
    >>> listener.set_breadcrumb_event_receiver(breadcrumb_receiver)
    >>> listener.on_message_triggered(0, {"name": "purchase"})
    """

    def __init__(self) -> None:
        self._crashlytics_origin_receiver: AnalyticsEventReceiver | None = None
        self._breadcrumb_receiver: AnalyticsEventReceiver | None = None

    # ------------------------------------------------------------------
    # Receiver registration
    # ------------------------------------------------------------------

    def set_crashlytics_origin_event_receiver(
        self, receiver: AnalyticsEventReceiver | None
    ) -> None:
        """Replace the receiver for crash-origin events (``None`` unsets it)."""
        self._crashlytics_origin_receiver = receiver

    def set_breadcrumb_event_receiver(
        self, receiver: AnalyticsEventReceiver | None
    ) -> None:
        """Replace the receiver for all other events (``None`` unsets it)."""
        self._breadcrumb_receiver = receiver

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def on_message_triggered(
        self, id: int, extras: Mapping[str, Any] | None
    ) -> None:
        """Connector callback; *id* is not used for routing."""
        self.route(extras)

    def route(self, extras: Mapping[str, Any] | None) -> RouteTarget:
        """Deliver *extras* to the matching receiver and report the outcome.

        Returns ``RouteTarget.DROPPED`` when there is no envelope, no name,
        or no receiver registered for the event's origin.
        """
        if extras is None:
            logger.debug("Dropping analytics event with no extras")
            return RouteTarget.DROPPED

        name = extract_name(extras)
        if name is None:
            logger.debug("Dropping analytics event with no name")
            return RouteTarget.DROPPED

        params_raw = extract_params(extras)
        params: Mapping[str, Any] = params_raw if params_raw is not None else {}
        # Origin comes from the raw params; an absent mapping has no origin.
        origin = extract_origin(params_raw)

        if origin == CRASHLYTICS_ORIGIN:
            receiver = self._crashlytics_origin_receiver
            target = RouteTarget.CRASHLYTICS
        else:
            receiver = self._breadcrumb_receiver
            target = RouteTarget.BREADCRUMB

        if receiver is None:
            logger.debug("No %s receiver registered; dropping %s", target.value, name)
            return RouteTarget.DROPPED

        receiver.on_event(name, params)
        return target
