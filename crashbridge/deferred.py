"""Deferred providers — values that may become available later.

A *deferred* is any callable accepting a handler.  The handler is called
at most once with a *provider* (a zero-argument callable yielding the
value) when the value becomes available, possibly from another thread.
``OptionalProvider.when_available`` is the canonical deferred.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Provider = Callable[[], T]
DeferredHandler = Callable[[Provider[T]], None]
Deferred = Callable[[DeferredHandler[T]], None]


class DeferredAlreadySetError(RuntimeError):
    """Raised when a provider is published a second time."""


class OptionalProvider(Generic[T]):
    """A provider slot that is published once and notifies waiting handlers.

    Handlers registered before ``set`` are queued and run, in registration
    order, when the provider is published.  Handlers registered afterwards
    run immediately on the calling thread.

    Usage
    -----
    >>> slot = OptionalProvider()
    >>> slot.when_available(lambda p: print(p()))
    >>> slot.set(lambda: "ready")
    ready
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._provider: Provider[T] | None = None
        self._pending: list[DeferredHandler[T]] = []

    @classmethod
    def of(cls, value: T) -> OptionalProvider[T]:
        """Return an already-resolved slot holding *value*."""
        slot: OptionalProvider[T] = cls()
        slot.set(lambda: value)
        return slot

    @property
    def is_available(self) -> bool:
        return self._provider is not None

    def when_available(self, handler: DeferredHandler[T]) -> None:
        """Run *handler* now if resolved, otherwise once ``set`` is called."""
        with self._lock:
            provider = self._provider
            if provider is None:
                self._pending.append(handler)
                return
        handler(provider)

    def set(self, provider: Provider[T]) -> None:
        """Publish *provider* and run every queued handler.

        Raises
        ------
        DeferredAlreadySetError
            If a provider was already published.
        """
        with self._lock:
            if self._provider is not None:
                raise DeferredAlreadySetError("provider can only be set once")
            self._provider = provider
            pending, self._pending = self._pending, []

        logger.debug("Provider published; notifying %d handler(s)", len(pending))
        for handler in pending:
            handler(provider)
