"""Tests for the call debouncer."""

from collections.abc import Callable

import pytest

from semsearch.search.debounce import Debouncer


class FakeTimer:
    """Timer stand-in that only fires when told to."""

    def __init__(self, interval: float, function: Callable[[], None]) -> None:
        self.interval = interval
        self.function = function
        self.daemon = False
        self.started = False
        self.cancelled = False

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True


@pytest.fixture
def timers() -> list[FakeTimer]:
    return []


@pytest.fixture
def make_debouncer(timers: list[FakeTimer]) -> Callable[..., Debouncer]:
    def factory(interval: float, function: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(interval, function)
        timers.append(timer)
        return timer

    def make(wait_ms: int, callback: Callable[..., None]) -> Debouncer:
        return Debouncer(wait_ms, callback, timer_factory=factory)  # type: ignore[arg-type]

    return make


class TestDebouncer:
    """Tests for Debouncer."""

    def test_only_last_call_delivered(
        self, make_debouncer: Callable[..., Debouncer], timers: list[FakeTimer]
    ) -> None:
        """Test that a burst is coalesced into its last call."""
        received: list[str] = []
        debouncer = make_debouncer(200, received.append)

        debouncer("a")
        debouncer("ap")
        debouncer("apr")

        assert len(timers) == 3
        assert timers[0].cancelled and timers[1].cancelled
        assert timers[2].interval == pytest.approx(0.2)
        assert timers[2].daemon is True
        assert debouncer.pending is True

        timers[2].function()

        assert received == ["apr"]
        assert debouncer.pending is False
        assert debouncer.calls == 3
        assert debouncer.deliveries == 1

    def test_stale_timer_does_nothing(
        self, make_debouncer: Callable[..., Debouncer], timers: list[FakeTimer]
    ) -> None:
        """Test a superseded timer that fires anyway is ignored."""
        received: list[str] = []
        debouncer = make_debouncer(200, received.append)

        debouncer("old")
        debouncer("new")
        timers[0].function()

        assert received == []
        timers[1].function()
        assert received == ["new"]

    def test_flush(self, make_debouncer: Callable[..., Debouncer]) -> None:
        """Test delivering the pending call immediately."""
        received: list[str] = []
        debouncer = make_debouncer(200, received.append)

        debouncer("x")
        assert debouncer.flush() is True
        assert received == ["x"]
        assert debouncer.flush() is False

    def test_cancel(
        self, make_debouncer: Callable[..., Debouncer], timers: list[FakeTimer]
    ) -> None:
        """Test dropping the pending call."""
        received: list[str] = []
        debouncer = make_debouncer(200, received.append)

        debouncer("x")
        assert debouncer.cancel() is True
        timers[0].function()

        assert received == []
        assert debouncer.pending is False
        assert debouncer.cancel() is False

    def test_zero_wait_calls_through(
        self, make_debouncer: Callable[..., Debouncer], timers: list[FakeTimer]
    ) -> None:
        """Test that a zero window delivers on the caller's thread."""
        received: list[str] = []
        debouncer = make_debouncer(0, received.append)

        debouncer("a")
        debouncer("b")

        assert received == ["a", "b"]
        assert timers == []

    def test_keyword_arguments(self, make_debouncer: Callable[..., Debouncer]) -> None:
        """Test keyword arguments are forwarded."""
        received: list[dict[str, str]] = []
        debouncer = make_debouncer(50, lambda **kw: received.append(kw))

        debouncer(query="qr")
        debouncer.flush()

        assert received == [{"query": "qr"}]

    def test_negative_wait(self) -> None:
        """Test that a negative window is rejected."""
        with pytest.raises(ValueError):
            Debouncer(-1, print)

    def test_real_timer_dispose(self) -> None:
        """Test disposing cancels a real pending timer."""
        received: list[str] = []
        debouncer = Debouncer(10_000, received.append)

        debouncer("x")
        assert debouncer.pending is True
        debouncer.dispose()

        assert debouncer.pending is False
        assert received == []
