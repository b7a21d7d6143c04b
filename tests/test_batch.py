"""
Tests for the sequential batch fetch and request pacing.

Tests cover:
- Partial failure accounting
- Universe-level failure
- Pacing between requests
- Cancellation
"""

import pytest
from unittest.mock import Mock

from ports import ErrorCode, FetchError, RateLimitError, RefreshError
from orchestration.batch import BatchFetchOrchestrator, SymbolStatus
from orchestration.pacing import IntervalPacer, NoPacing


# ============================================================================
# Fixtures
# ============================================================================


class FakeSource:
    """In-memory price source; values that are exceptions get raised."""

    source_name = "fake"

    def __init__(self, responses):
        self.responses = responses
        self.calls: list[str] = []

    def fetch_history(self, symbol):
        self.calls.append(symbol)
        response = self.responses[symbol]
        if isinstance(response, Exception):
            raise response
        return response


class FakeClock:
    """Monotonic clock advanced by sleep()."""

    def __init__(self):
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def five_symbols(make_history):
    """Five symbols where the third one fails."""
    closes = [100.0 + i for i in range(40)]
    responses = {s: make_history(s, closes) for s in ["A", "B", "D", "E"]}
    responses["C"] = RuntimeError("connection reset")
    return ["A", "B", "C", "D", "E"], responses


# ============================================================================
# Batch
# ============================================================================


class TestFetchAll:
    """Partial-failure tolerant sequential fetch."""

    def test_partial_failure(self, five_symbols):
        symbols, responses = five_symbols
        batch = BatchFetchOrchestrator(FakeSource(responses)).fetch_all(symbols)

        assert len(batch.histories) == 4
        assert "C" not in batch.histories
        assert batch.attempted == 5
        assert batch.succeeded == 4
        assert batch.failed == 1
        assert batch.failed_symbols == ["C"]
        assert "connection reset" in batch.results["C"].error

    def test_fetches_in_order(self, five_symbols):
        symbols, responses = five_symbols
        source = FakeSource(responses)
        BatchFetchOrchestrator(source).fetch_all(symbols)
        assert source.calls == symbols

    @pytest.mark.parametrize("error", [
        FetchError("fake", "HTTP 500"),
        RateLimitError(source="fake"),
        ValueError("bad payload"),
    ])
    def test_error_types_recorded(self, make_history, error):
        responses = {"OK": make_history("OK", [1.0] * 40), "BAD": error}
        batch = BatchFetchOrchestrator(FakeSource(responses)).fetch_all(["OK", "BAD"])

        assert batch.failed_symbols == ["BAD"]
        assert batch.results["BAD"].status == SymbolStatus.FAILED
        assert batch.results["OK"].bars == 40

    def test_error_code_recorded(self, make_history):
        responses = {"OK": make_history("OK", [1.0] * 40), "BAD": FetchError.from_http_error("fake", 404)}
        batch = BatchFetchOrchestrator(FakeSource(responses)).fetch_all(["OK", "BAD"])
        assert batch.results["BAD"].error_code == ErrorCode.HTTP_NOT_FOUND.value
        assert batch.results["OK"].error_code is None

    def test_empty_symbol_list(self):
        batch = BatchFetchOrchestrator(FakeSource({})).fetch_all([])
        assert batch.attempted == 0
        batch.raise_if_empty()

    def test_all_failed_raises_on_demand(self):
        responses = {s: FetchError("fake", "down") for s in ["A", "B"]}
        batch = BatchFetchOrchestrator(FakeSource(responses)).fetch_all(["A", "B"])

        assert batch.failed == 2
        with pytest.raises(RefreshError) as exc_info:
            batch.raise_if_empty()
        assert exc_info.value.failed_symbols == ["A", "B"]

    def test_partial_success_does_not_raise(self, five_symbols):
        symbols, responses = five_symbols
        BatchFetchOrchestrator(FakeSource(responses)).fetch_all(symbols).raise_if_empty()


class TestPacingInBatch:
    """Pacer gates every request."""

    def test_wait_before_each_request(self, five_symbols):
        symbols, responses = five_symbols
        pacer = Mock()
        BatchFetchOrchestrator(FakeSource(responses), pacer).fetch_all(symbols)
        assert pacer.wait.call_count == len(symbols)

    def test_single_symbol_never_sleeps(self, make_history):
        clock = FakeClock()
        pacer = IntervalPacer(0.2, clock=clock, sleep=clock.sleep)
        source = FakeSource({"A": make_history("A", [1.0] * 40)})
        BatchFetchOrchestrator(source, pacer).fetch_all(["A"])
        assert clock.sleeps == []

    def test_every_gap_between_request_starts_is_paced(self, make_history):
        clock = FakeClock()
        starts: list[float] = []
        source = FakeSource({s: make_history(s, [1.0] * 40) for s in ["A", "B", "C"]})
        original = source.fetch_history

        def timed_fetch(symbol):
            starts.append(clock.now)
            clock.now += 0.01
            return original(symbol)

        source.fetch_history = timed_fetch
        pacer = IntervalPacer(0.2, clock=clock, sleep=clock.sleep)
        BatchFetchOrchestrator(source, pacer).fetch_all(["A", "B", "C"])

        gaps = [later - earlier for earlier, later in zip(starts, starts[1:])]
        assert gaps == [pytest.approx(0.2), pytest.approx(0.2)]


class TestCancel:
    """Stop issuing requests after the in-flight one."""

    def test_cancel_mid_batch(self, five_symbols):
        symbols, responses = five_symbols
        source = FakeSource(responses)
        orchestrator = BatchFetchOrchestrator(source)

        original = source.fetch_history

        def fetch_then_cancel(symbol):
            if symbol == "B":
                orchestrator.cancel()
            return original(symbol)

        source.fetch_history = fetch_then_cancel
        batch = orchestrator.fetch_all(symbols)

        assert batch.cancelled is True
        assert source.calls == ["A", "B"]
        assert set(batch.histories) == {"A", "B"}
        assert batch.attempted == 2
        assert batch.results["E"].status == SymbolStatus.SKIPPED
        assert batch.failed == 0

    def test_new_batch_resets_cancel(self, five_symbols):
        symbols, responses = five_symbols
        orchestrator = BatchFetchOrchestrator(FakeSource(responses))
        orchestrator.cancel()
        batch = orchestrator.fetch_all(symbols)
        assert batch.succeeded == 4


# ============================================================================
# Pacers
# ============================================================================


class TestIntervalPacer:
    """Minimum interval between requests."""

    def test_first_wait_is_free(self):
        clock = FakeClock()
        IntervalPacer(0.2, clock=clock, sleep=clock.sleep).wait()
        assert clock.sleeps == []

    def test_sleeps_remaining_interval(self):
        clock = FakeClock()
        pacer = IntervalPacer(0.2, clock=clock, sleep=clock.sleep)
        pacer.wait()
        clock.now += 0.05
        pacer.wait()
        assert clock.sleeps == [pytest.approx(0.15)]

    def test_no_sleep_when_request_was_slow(self):
        clock = FakeClock()
        pacer = IntervalPacer(0.2, clock=clock, sleep=clock.sleep)
        pacer.wait()
        clock.now += 1.0
        pacer.wait()
        assert clock.sleeps == []

    def test_interval_measured_from_last_release(self):
        clock = FakeClock()
        pacer = IntervalPacer(0.2, clock=clock, sleep=clock.sleep)
        pacer.wait()
        pacer.wait()
        pacer.wait()
        assert clock.sleeps == [pytest.approx(0.2), pytest.approx(0.2)]

    def test_negative_interval_rejected(self):
        with pytest.raises(ValueError):
            IntervalPacer(-1.0)

    def test_no_pacing(self):
        assert NoPacing().wait() is None
