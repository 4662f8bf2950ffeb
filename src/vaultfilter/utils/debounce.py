"""Trailing-edge debouncing of a changing value."""

import threading
from typing import Any, Callable, Generic, Optional, Protocol, TypeVar

T = TypeVar("T")

DEFAULT_DELAY_MS = 200


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Anything that can run a callback later.

    An asyncio event loop satisfies this protocol.
    """

    def call_later(self, delay: float, callback: Callable[[], Any]) -> TimerHandle: ...


class ThreadingScheduler:
    """Scheduler backed by daemon ``threading.Timer`` instances."""

    def call_later(self, delay: float, callback: Callable[[], Any]) -> threading.Timer:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer


class Debouncer(Generic[T]):
    """Exposes a settled copy of a value that changes only after input pauses.

    Every ``set`` cancels the pending timer and arms a new one; the value
    settles ``delay_ms`` after the last update. The initial value is settled
    immediately. After ``dispose`` returns no pending or future update takes
    effect and ``on_settle`` is not called again.
    A delay of 0 settles synchronously.
    """

    def __init__(
        self,
        initial: T,
        delay_ms: int = DEFAULT_DELAY_MS,
        scheduler: Optional[Scheduler] = None,
        on_settle: Optional[Callable[[T], None]] = None,
    ):
        """Initialize the debouncer.

        Args:
            initial: Initial value, settled without delay
            delay_ms: Quiet period in milliseconds before a value settles
            scheduler: Timer source, defaults to ThreadingScheduler
            on_settle: Optional callback invoked with each newly settled value
        """
        if delay_ms < 0:
            raise ValueError(f"Debounce delay must not be negative, got {delay_ms}")
        self.delay_ms = delay_ms
        self._scheduler = scheduler if scheduler is not None else ThreadingScheduler()
        self._on_settle = on_settle
        # Reentrant so on_settle may call back into the debouncer
        self._lock = threading.RLock()
        self._value = initial
        self._latest = initial
        self._handle: Optional[TimerHandle] = None
        self._generation = 0
        self._disposed = False

    @property
    def value(self) -> T:
        """The settled value."""
        return self._value

    @property
    def pending(self) -> bool:
        """True while an update is waiting to settle."""
        return self._handle is not None

    @property
    def disposed(self) -> bool:
        return self._disposed

    def set(self, value: T) -> None:
        """Record a new input value and re-arm the timer."""
        with self._lock:
            if self._disposed or value == self._latest:
                return
            self._latest = value
            self._cancel_pending()
            self._generation += 1
            if self.delay_ms == 0:
                generation = None
            else:
                generation = self._generation
                self._handle = self._scheduler.call_later(
                    self.delay_ms / 1000, lambda: self._fire(generation)
                )
            if generation is None:
                self._settle(value)

    def settle_now(self, value: T) -> None:
        """Cancel any pending update and settle ``value`` immediately."""
        with self._lock:
            if self._disposed:
                return
            self._cancel_pending()
            self._generation += 1
            self._latest = value
            self._settle(value)

    def dispose(self) -> None:
        """Cancel the pending timer and ignore all later updates."""
        with self._lock:
            self._disposed = True
            self._cancel_pending()
            self._generation += 1

    def _cancel_pending(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, generation: int) -> None:
        with self._lock:
            # A superseded timer may still run if it was already executing.
            if self._disposed or generation != self._generation:
                return
            self._handle = None
            self._settle(self._latest)

    def _settle(self, value: T) -> None:
        # Caller holds the lock, so dispose() and settle_now() cannot interleave.
        if value == self._value:
            return
        self._value = value
        if self._on_settle is not None:
            self._on_settle(value)

    def __enter__(self) -> "Debouncer[T]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()
