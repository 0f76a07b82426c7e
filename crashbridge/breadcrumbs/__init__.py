"""Breadcrumb protocols and the disabled default source.

A breadcrumb source accepts a single ``BreadcrumbHandler`` and feeds it
serialized breadcrumb strings.  Until analytics is wired up, the
``DisabledBreadcrumbSource`` stands in and records nothing.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class BreadcrumbHandler(Protocol):
    """Consumes serialized breadcrumbs."""

    def handle_breadcrumb(self, breadcrumb: str) -> None:
        ...


@runtime_checkable
class BreadcrumbSource(Protocol):
    """Produces breadcrumbs for a registered handler."""

    def register_breadcrumb_handler(
        self, handler: BreadcrumbHandler | None
    ) -> None:
        """Install *handler* as the breadcrumb consumer (``None`` clears it)."""
        ...


class DisabledBreadcrumbSource:
    """Breadcrumb source used while analytics is unavailable."""

    def register_breadcrumb_handler(
        self, handler: BreadcrumbHandler | None
    ) -> None:
        logger.debug("Could not register handler for breadcrumb events.")


__all__ = ["BreadcrumbHandler", "BreadcrumbSource", "DisabledBreadcrumbSource"]
