"""BreadcrumbAnalyticsEventReceiver — turns analytics events into breadcrumbs.

Each event is serialized as ``$A$:`` followed by a JSON object with
``name`` and ``parameters`` keys, then handed to the registered
breadcrumb handler.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from crashbridge.breadcrumbs import BreadcrumbHandler
from crashbridge.models.events import BREADCRUMB_PREFIX, AnalyticsEvent

logger = logging.getLogger(__name__)


def serialize_event(name: str, params: Mapping[str, Any]) -> str:
    """Return the JSON body of an analytics breadcrumb.

    Values that are not JSON-native are stringified.
    """
    event = AnalyticsEvent(name=name, parameters=dict(params))
    return json.dumps(event.model_dump(), default=str, separators=(",", ":"))


class BreadcrumbAnalyticsEventReceiver:
    """Analytics receiver that is also the live breadcrumb source."""

    def __init__(self) -> None:
        self._handler: BreadcrumbHandler | None = None

    def register_breadcrumb_handler(
        self, handler: BreadcrumbHandler | None
    ) -> None:
        self._handler = handler
        logger.debug("Registered breadcrumb handler: %r", handler)

    def on_event(self, name: str, params: Mapping[str, Any]) -> None:
        handler = self._handler
        if handler is None:
            return
        try:
            body = serialize_event(name, params)
        except (TypeError, ValueError) as exc:
            logger.warning("Unable to serialize analytics event %s: %s", name, exc)
            return
        handler.handle_breadcrumb(BREADCRUMB_PREFIX + body)
