"""
Wall-clock timing for backend dispatch.

A Timer is entered once around a whole operation and records named
sections inside it. The backend stores timer.result() on the Result
envelope.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Context-managed timer with named sections.

    Usage:
        with Timer() as timer:
            with timer.section('rref'):
                reduced = gauss_jordan(a)
        timer.result()
        # {'total_seconds': 0.0002, 'rref': 0.00015}

    Re-entering a section name adds to its previous time. The total is
    fixed on exit, even when the block raises.
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._entered_at: float | None = None
        self._total: float | None = None

    def __enter__(self) -> 'Timer':
        if self._entered_at is not None:
            raise RuntimeError("Timer is not reentrant")
        self._entered_at = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._total = time.perf_counter() - self._entered_at

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block under name."""
        if self._entered_at is None:
            raise RuntimeError(f"section {name!r} used outside 'with Timer()'")
        start = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = (
                self._sections.get(name, 0.0) + time.perf_counter() - start
            )

    def result(self) -> dict[str, float]:
        """
        Total and per-section seconds.

        Raises:
            RuntimeError: If the timed block has not finished
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before the timed block finished")
        return {'total_seconds': self._total, **self._sections}
