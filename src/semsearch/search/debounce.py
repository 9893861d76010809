"""Call debouncing.

A :class:`Debouncer` delays a callback until its input has been quiet for
a fixed window. Every new call cancels the pending one, so only the last
arguments inside a burst are ever delivered.
"""

import threading
from collections.abc import Callable
from typing import Any

TimerFactory = Callable[[float, Callable[[], None]], threading.Timer]


class Debouncer:
    """Coalesce bursts of calls into a single delayed call.

    The callback runs on a timer thread, or on the caller's thread for
    :meth:`flush` and when the window is zero.
    """

    def __init__(
        self,
        wait_ms: int,
        callback: Callable[..., Any],
        *,
        timer_factory: TimerFactory = threading.Timer,
    ) -> None:
        """Initialize the debouncer.

        Args:
            wait_ms: Quiet window in milliseconds. 0 calls through immediately.
            callback: Function receiving the last call's arguments.
            timer_factory: Builds the timer; replaceable in tests.
        """
        if wait_ms < 0:
            raise ValueError(f"wait_ms must not be negative, got {wait_ms}")
        self.wait_ms = wait_ms
        self._callback = callback
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._pending: tuple[tuple[Any, ...], dict[str, Any]] | None = None
        self._generation = 0
        self.calls = 0
        self.deliveries = 0

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        """Schedule the callback, replacing any pending call."""
        with self._lock:
            self.calls += 1
            self._cancel_timer()
            if self.wait_ms == 0:
                self._pending = None
                immediate = True
            else:
                self._pending = (args, kwargs)
                generation = self._generation
                self._timer = self._timer_factory(
                    self.wait_ms / 1000, lambda: self._fire(generation)
                )
                self._timer.daemon = True
                self._timer.start()
                immediate = False

        if immediate:
            self._deliver(args, kwargs)

    @property
    def pending(self) -> bool:
        """Whether a call is waiting for the window to elapse."""
        with self._lock:
            return self._pending is not None

    def flush(self) -> bool:
        """Run the pending call now.

        Returns:
            True if a pending call was delivered.
        """
        with self._lock:
            pending = self._pending
            self._pending = None
            self._cancel_timer()
        if pending is None:
            return False
        self._deliver(*pending)
        return True

    def cancel(self) -> bool:
        """Drop the pending call.

        Returns:
            True if a pending call was dropped.
        """
        with self._lock:
            had_pending = self._pending is not None
            self._pending = None
            self._cancel_timer()
        return had_pending

    def dispose(self) -> None:
        """Cancel any pending call."""
        self.cancel()

    def _cancel_timer(self) -> None:
        # Caller holds the lock. Bumping the generation invalidates a timer
        # that has already started running.
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or self._pending is None:
                return
            pending = self._pending
            self._pending = None
            self._timer = None
        self._deliver(*pending)

    def _deliver(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        self.deliveries += 1
        self._callback(*args, **kwargs)
