"""Shared test fixtures for crashbridge."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any
from unittest.mock import MagicMock

import pytest

from crashbridge.analytics.listener import CrashlyticsAnalyticsListener
from crashbridge.models.events import EVENT_NAME_KEY, EVENT_ORIGIN_KEY, EVENT_PARAMS_KEY


class RecordingReceiver:
    """Receiver that records every (name, params) it is given."""

    def __init__(self) -> None:
        self.events: list[tuple[str, Mapping[str, Any]]] = []

    def on_event(self, name: str, params: Mapping[str, Any]) -> None:
        self.events.append((name, params))


class RecordingBreadcrumbHandler:
    """Breadcrumb handler that records every breadcrumb string."""

    def __init__(self) -> None:
        self.breadcrumbs: list[str] = []

    def handle_breadcrumb(self, breadcrumb: str) -> None:
        self.breadcrumbs.append(breadcrumb)


@pytest.fixture
def breadcrumb_receiver() -> RecordingReceiver:
    return RecordingReceiver()


@pytest.fixture
def crashlytics_receiver() -> RecordingReceiver:
    return RecordingReceiver()


@pytest.fixture
def listener(
    crashlytics_receiver: RecordingReceiver, breadcrumb_receiver: RecordingReceiver
) -> CrashlyticsAnalyticsListener:
    """A listener with both receivers registered."""
    listener = CrashlyticsAnalyticsListener()
    listener.set_crashlytics_origin_event_receiver(crashlytics_receiver)
    listener.set_breadcrumb_event_receiver(breadcrumb_receiver)
    return listener


@pytest.fixture
def breadcrumb_handler() -> RecordingBreadcrumbHandler:
    return RecordingBreadcrumbHandler()


@pytest.fixture
def connector() -> MagicMock:
    """A connector whose listener registrations succeed."""
    connector = MagicMock(name="analytics_connector")
    connector.register_analytics_connector_listener.return_value = MagicMock(
        name="connector_handle"
    )
    return connector


@pytest.fixture
def refusing_connector() -> MagicMock:
    """A connector that refuses every listener registration."""
    connector = MagicMock(name="refusing_connector")
    connector.register_analytics_connector_listener.return_value = None
    return connector


# ---------------------------------------------------------------------------
# Envelope factories
# ---------------------------------------------------------------------------


def make_event_envelope(
    name: str | None, params: Mapping[str, Any] | None
) -> dict[str, Any]:
    return {EVENT_NAME_KEY: name, EVENT_PARAMS_KEY: params}


def make_params(origin: str | None) -> dict[str, Any]:
    return {EVENT_ORIGIN_KEY: origin}


@pytest.fixture
def make_envelope() -> Callable[..., dict[str, Any]]:
    """Factory fixture: build an envelope with an optional origin."""

    def _factory(name: str = "event", origin: str | None = None) -> dict[str, Any]:
        params = make_params(origin) if origin is not None else None
        return make_event_envelope(name, params)

    return _factory
