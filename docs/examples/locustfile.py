"""Locust load-test: log-viewer search traffic mix.

Simulates the request pattern of the log-viewer UI: mostly first-page
searches, some free-text / date-range searches and a share of
"load more" requests that page with ``searchAfter``.

Run with::

    pip install -e '.[load]'
    locust -f docs/examples/locustfile.py --host=http://127.0.0.1:3030

Headless::

    locust -f docs/examples/locustfile.py \\
        --host=http://127.0.0.1:3030 \\
        --users=50 --spawn-rate=5 \\
        --run-time=60s --headless

Endpoints exercised
-------------------
GET /health/ready   – readiness probe (not counted in mix)
GET /api/v1/logs    – search, optionally paging with searchAfter

Metrics to watch
----------------
- p50, p95, p99 latency per request name
- Error rate (anything other than 200)
"""

from __future__ import annotations

import json
import random
from datetime import date, timedelta

from locust import HttpUser, between, task

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

LATEST_WEIGHT = 6
FILTERED_WEIGHT = 3
PAGING_WEIGHT = 2

PAGE_SIZE = 50

_TERMS: list[str] = ["error", "timeout", "\"connection reset\"", "level:warn", "disk* -debug"]


def _date_window() -> tuple[str, str]:
    end = date.today() - timedelta(days=random.randint(0, 7))
    start = end - timedelta(days=random.randint(0, 3))
    return start.isoformat(), end.isoformat()


# ---------------------------------------------------------------------------
# User behaviour
# ---------------------------------------------------------------------------


class LogViewerUser(HttpUser):
    """Simulates an operator browsing logs in the UI.

    Wait between 0.5 s and 2 s between requests to model reading time.
    """

    wait_time = between(0.5, 2.0)

    def on_start(self) -> None:
        """Probe readiness before the test starts; abort if unavailable."""
        self._cursor: list | None = None
        resp = self.client.get("/health/ready", name="/health/ready [probe]")
        if resp.status_code != 200:
            self.environment.runner.quit()

    @task(LATEST_WEIGHT)
    def latest(self) -> None:
        """Newest entries first, no filter."""
        self._search({"size": PAGE_SIZE}, name="/api/v1/logs [latest]")

    @task(FILTERED_WEIGHT)
    def filtered(self) -> None:
        """Free-text query over a date window."""
        start, end = _date_window()
        params = {
            "size": PAGE_SIZE,
            "query": random.choice(_TERMS),
            "startDate": start,
            "endDate": end,
            "order": random.choice(["asc", "desc"]),
        }
        self._search(params, name="/api/v1/logs [filtered]")

    @task(PAGING_WEIGHT)
    def load_more(self) -> None:
        """Next page after the last hit seen."""
        if self._cursor is None:
            self.latest()
            return
        params = {"size": PAGE_SIZE, "searchAfter": json.dumps(self._cursor)}
        self._search(params, name="/api/v1/logs [searchAfter]")

    def _search(self, params: dict, name: str) -> None:
        with self.client.get("/api/v1/logs", params=params, name=name, catch_response=True) as resp:
            if resp.status_code != 200:
                resp.failure(f"Unexpected status: {resp.status_code}")
                return
            hits = resp.json()
            self._cursor = hits[-1]["sort"] if hits else None
