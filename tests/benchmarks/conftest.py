"""conftest.py for benchmarks.

Async benchmarks share one session-scoped event loop so that loop
start-up is not part of the measured time.
"""

from __future__ import annotations

import asyncio

import pytest
import structlog


@pytest.fixture(scope="session", autouse=True)
def quiet_structlog():
    """Drop log events below WARNING so gateway logging is not measured as I/O."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(30))
    yield
    structlog.reset_defaults()


@pytest.fixture(scope="session")
def bench_loop():
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


@pytest.fixture(scope="session")
def run_async(bench_loop):
    """Run a coroutine to completion on the shared loop.

    Usage inside a benchmark::

        def test_something(benchmark, run_async):
            benchmark(lambda: run_async(make_coroutine()))
    """

    def _run(coro):
        return bench_loop.run_until_complete(coro)

    return _run
