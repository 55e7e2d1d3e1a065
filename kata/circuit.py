"""A circuit breaker that stops calling an operation after repeated failures."""

from __future__ import annotations

import argparse
import dataclasses
import sys
import threading
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, TypeVar

T = TypeVar("T")

DEFAULT_MAX_REQUESTS = 1
DEFAULT_INTERVAL = 60.0
DEFAULT_TIMEOUT = 30.0
DEFAULT_FAILURE_THRESHOLD = 5


class State(Enum):
    """The state of a circuit breaker."""

    CLOSED = 0
    OPEN = 1
    HALF_OPEN = 2

    def __str__(self) -> str:
        return _STATE_LABELS[self]


_STATE_LABELS = {
    State.CLOSED: "Closed",
    State.OPEN: "Open",
    State.HALF_OPEN: "Half-Open",
}


@dataclass
class Metrics:
    """Counters kept by a circuit breaker."""

    requests: int = 0
    successes: int = 0
    failures: int = 0
    consecutive_failures: int = 0
    last_failure_time: Optional[float] = None


def _default_ready_to_trip(metrics: Metrics) -> bool:
    return metrics.consecutive_failures >= DEFAULT_FAILURE_THRESHOLD


@dataclass
class Config:
    """Settings of a circuit breaker; durations are in seconds.

    A zero ``max_requests``, ``interval`` or ``timeout`` means the default.
    """

    max_requests: int = DEFAULT_MAX_REQUESTS
    interval: float = DEFAULT_INTERVAL
    timeout: float = DEFAULT_TIMEOUT
    ready_to_trip: Optional[Callable[[Metrics], bool]] = field(default=None)
    on_state_change: Optional[Callable[[str, State, State], None]] = None

    def __post_init__(self) -> None:
        if self.max_requests < 0:
            raise ValueError(f"max_requests must not be negative: {self.max_requests}")
        if self.interval < 0:
            raise ValueError(f"interval must not be negative: {self.interval}")
        if self.timeout < 0:
            raise ValueError(f"timeout must not be negative: {self.timeout}")
        if self.max_requests == 0:
            self.max_requests = DEFAULT_MAX_REQUESTS
        if self.interval == 0:
            self.interval = DEFAULT_INTERVAL
        if self.timeout == 0:
            self.timeout = DEFAULT_TIMEOUT
        if self.ready_to_trip is None:
            self.ready_to_trip = _default_ready_to_trip


class CircuitBreakerError(Exception):
    """Base class of the errors a circuit breaker raises itself."""


class CircuitOpenError(CircuitBreakerError):
    """The circuit is open and the call was refused."""

    def __init__(self, message: str = "circuit breaker is open") -> None:
        super().__init__(message)


class TooManyRequestsError(CircuitBreakerError):
    """The half-open circuit already admitted its maximum of trial calls."""

    def __init__(self, message: str = "too many requests in half-open state") -> None:
        super().__init__(message)


class OperationCancelledError(CircuitBreakerError):
    """The call was cancelled before the operation ran."""

    def __init__(self, message: str = "operation cancelled") -> None:
        super().__init__(message)


class CircuitBreaker:
    """Run operations while guarding against a failing dependency."""

    def __init__(
        self,
        config: Optional[Config] = None,
        *,
        name: str = "circuit-breaker",
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.name = name
        self.config = config if config is not None else Config()
        self._clock = clock
        self._state = State.CLOSED
        self._metrics = Metrics()
        self._last_state_change = clock()
        self._half_open_requests = 0
        self._lock = threading.RLock()

    def call(
        self,
        operation: Callable[[], T],
        cancel: Optional[threading.Event] = None,
    ) -> T:
        """Run ``operation`` through the breaker and return its result.

        Raises ``OperationCancelledError`` if ``cancel`` is set, the breaker's
        own errors when the call is refused, and whatever ``operation`` raises.
        """
        if cancel is not None and cancel.is_set():
            raise OperationCancelledError()
        self._admit()
        try:
            result = operation()
        except Exception:
            with self._lock:
                self._record_failure()
            raise
        with self._lock:
            self._record_success()
        return result

    @property
    def state(self) -> State:
        """The current state."""
        with self._lock:
            return self._state

    @property
    def metrics(self) -> Metrics:
        """A snapshot of the current metrics."""
        with self._lock:
            return dataclasses.replace(self._metrics)

    def _admit(self) -> None:
        with self._lock:
            if self._state is State.CLOSED:
                return
            if self._state is State.OPEN:
                if self._clock() - self._last_state_change >= self.config.timeout:
                    self._set_state(State.HALF_OPEN)
                    return
                raise CircuitOpenError()
            if self._half_open_requests >= self.config.max_requests:
                raise TooManyRequestsError()
            self._half_open_requests += 1

    def _set_state(self, new_state: State) -> None:
        if self._state is new_state:
            return
        previous = self._state
        self._state = new_state
        self._last_state_change = self._clock()
        if new_state is State.CLOSED:
            self._metrics = Metrics()
        if new_state in (State.CLOSED, State.HALF_OPEN):
            self._half_open_requests = 0
        if self.config.on_state_change is not None:
            self.config.on_state_change(self.name, previous, new_state)

    def _record_success(self) -> None:
        self._metrics.requests += 1
        self._metrics.successes += 1
        self._metrics.consecutive_failures = 0
        if self._state is State.HALF_OPEN:
            self._set_state(State.CLOSED)
        now = self._clock()
        if now - self._last_state_change >= self.config.interval:
            self._metrics = Metrics()
            self._last_state_change = now

    def _record_failure(self) -> None:
        self._metrics.requests += 1
        self._metrics.failures += 1
        self._metrics.consecutive_failures += 1
        self._metrics.last_failure_time = self._clock()
        if self._state is State.HALF_OPEN:
            self._set_state(State.OPEN)
            return
        assert self.config.ready_to_trip is not None
        if self.config.ready_to_trip(dataclasses.replace(self._metrics)):
            self._set_state(State.OPEN)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show a circuit breaker handling one success and one failure."""
    parser = argparse.ArgumentParser(description="Circuit breaker demonstration.")
    parser.parse_args(argv)

    print("Circuit Breaker Pattern Example")

    def report(name: str, from_state: State, to_state: State) -> None:
        print(f"Circuit breaker {name}: {from_state} -> {to_state}")

    config = Config(
        max_requests=3,
        interval=60.0,
        timeout=10.0,
        ready_to_trip=lambda m: m.consecutive_failures >= 3,
        on_state_change=report,
    )
    breaker = CircuitBreaker(config)

    def succeed() -> Any:
        return "success"

    def fail() -> Any:
        raise RuntimeError("simulated failure")

    for operation in (succeed, fail):
        try:
            result, error = breaker.call(operation), None
        except Exception as exc:  # noqa: BLE001 - shown to the user
            result, error = None, exc
        print(f"Result: {result}, Error: {error}")

    print(f"Current state: {breaker.state}")
    print(f"Current metrics: {breaker.metrics}")
    return 0


if __name__ == "__main__":
    sys.exit(main())