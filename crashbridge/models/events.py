"""Analytics event envelopes — reserved keys, typed extraction, payload model.

Envelopes delivered by the analytics connector are loose key-value
mappings.  The helpers here pull each reserved field out with a type
check and return ``None`` on absence or mismatch, so routing can treat
every malformed field as a drop signal instead of an error.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

EVENT_NAME_KEY = "name"
EVENT_PARAMS_KEY = "params"
EVENT_ORIGIN_KEY = "_o"

CRASHLYTICS_ORIGIN = "clx"
LEGACY_CRASH_ANALYTICS_ORIGIN = "crash"

# Logged by the crash-origin logger; its round trip releases the blocking logger.
APP_EXCEPTION_EVENT_NAME = "_ae"

BREADCRUMB_PREFIX = "$A$:"


class RouteTarget(str, Enum):
    """Where the listener delivered an envelope."""

    CRASHLYTICS = "crashlytics"
    BREADCRUMB = "breadcrumb"
    DROPPED = "dropped"


class AnalyticsEvent(BaseModel):
    """A named analytics event and its parameters, as stored in a breadcrumb."""

    model_config = ConfigDict(frozen=True)

    name: str
    parameters: dict[str, Any] = {}


def extract_name(envelope: Mapping[str, Any] | None) -> str | None:
    """Return the event name, or ``None`` if absent or not a string."""
    if envelope is None:
        return None
    name = envelope.get(EVENT_NAME_KEY)
    return name if isinstance(name, str) else None


def extract_params(envelope: Mapping[str, Any] | None) -> Mapping[str, Any] | None:
    """Return the params mapping, or ``None`` if absent or not a mapping."""
    if envelope is None:
        return None
    params = envelope.get(EVENT_PARAMS_KEY)
    return params if isinstance(params, Mapping) else None


def extract_origin(params: Mapping[str, Any] | None) -> str | None:
    """Return the origin tag from a params mapping, or ``None``."""
    if params is None:
        return None
    origin = params.get(EVENT_ORIGIN_KEY)
    return origin if isinstance(origin, str) else None
