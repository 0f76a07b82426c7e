"""crashbridge data models and reserved event keys."""

from crashbridge.models.events import (
    APP_EXCEPTION_EVENT_NAME,
    BREADCRUMB_PREFIX,
    CRASHLYTICS_ORIGIN,
    EVENT_NAME_KEY,
    EVENT_ORIGIN_KEY,
    EVENT_PARAMS_KEY,
    LEGACY_CRASH_ANALYTICS_ORIGIN,
    AnalyticsEvent,
    RouteTarget,
    extract_name,
    extract_origin,
    extract_params,
)

__all__ = [
    # keys
    "EVENT_NAME_KEY",
    "EVENT_PARAMS_KEY",
    "EVENT_ORIGIN_KEY",
    # origins
    "CRASHLYTICS_ORIGIN",
    "LEGACY_CRASH_ANALYTICS_ORIGIN",
    "APP_EXCEPTION_EVENT_NAME",
    "BREADCRUMB_PREFIX",
    # models
    "AnalyticsEvent",
    "RouteTarget",
    # extraction
    "extract_name",
    "extract_params",
    "extract_origin",
]
