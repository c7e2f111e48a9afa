"""Multi-subscriber broadcast channel for zone notifications.

Subscribers receive events in emission order and never see events emitted
before they subscribed. A terminal ``fail`` or ``complete`` closes the
channel for every subscriber; later emissions are dropped. ``reject``
delivers a per-call error without closing anything.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class _Observer(Generic[T]):
    on_next: Callable[[T], None]
    on_error: Callable[[Exception], None] | None = None
    on_complete: Callable[[], None] | None = None


class Subscription:
    """Handle returned by ``Channel.subscribe``."""

    def __init__(self, channel: "Channel", observer: _Observer) -> None:
        self._channel = channel
        self._observer = observer

    def unsubscribe(self) -> None:
        """Stop receiving events. Safe to call more than once."""
        self._channel._remove(self._observer)


class Channel(Generic[T]):
    """Ordered broadcast of values of type ``T`` to registered callbacks."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._observers: list[_Observer[T]] = []
        self._closed = False

    @property
    def closed(self) -> bool:
        """Whether a terminal error or completion has been emitted."""
        return self._closed

    def subscribe(
        self,
        on_next: Callable[[T], None],
        on_error: Callable[[Exception], None] | None = None,
        on_complete: Callable[[], None] | None = None,
    ) -> Subscription:
        """Register callbacks for future events.

        Args:
            on_next: Called with each emitted value.
            on_error: Called with rejected or terminal errors.
            on_complete: Called once when the channel completes.

        Returns:
            Subscription that can be used to unsubscribe.
        """
        observer = _Observer(on_next, on_error, on_complete)
        if not self._closed:
            self._observers.append(observer)
        return Subscription(self, observer)

    def next(self, value: T) -> None:
        """Broadcast a value to every subscriber."""
        if self._closed:
            logger.debug("Dropping value on closed channel %s", self.name)
            return
        for observer in list(self._observers):
            observer.on_next(value)

    def reject(self, error: Exception) -> None:
        """Broadcast a recoverable error; the channel stays open."""
        if self._closed:
            logger.debug("Dropping error on closed channel %s", self.name)
            return
        logger.info("Channel %s rejected: %s", self.name, error)
        for observer in list(self._observers):
            if observer.on_error is not None:
                observer.on_error(error)

    def fail(self, error: Exception) -> None:
        """Broadcast a terminal error and close the channel."""
        if self._closed:
            return
        logger.warning("Channel %s failed: %s", self.name, error)
        observers = self._close()
        for observer in observers:
            if observer.on_error is not None:
                observer.on_error(error)

    def complete(self) -> None:
        """Close the channel normally."""
        if self._closed:
            return
        for observer in self._close():
            if observer.on_complete is not None:
                observer.on_complete()

    def _close(self) -> list[_Observer[T]]:
        self._closed = True
        observers, self._observers = self._observers, []
        return observers

    def _remove(self, observer: _Observer[T]) -> None:
        if observer in self._observers:
            self._observers.remove(observer)
