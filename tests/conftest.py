"""
Pytest configuration and fixtures.
"""

import json
import sys
from pathlib import Path

import httpx
import pytest

# Add project root
sys.path.insert(0, str(Path(__file__).parent.parent))

from timecamp_mcp import config


class FakeTimeCamp:
    """In-memory stand-in for the TimeCamp API, served through httpx.MockTransport."""

    def __init__(self, base_url: str = config.BASE_URL):
        self.prefix = httpx.URL(base_url).path.rstrip("/")
        self.routes = {}
        self.requests = []

    def respond(self, method, path, status=200, json=None, text=None):
        self.routes[(method, path)] = (status, json, text)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path[len(self.prefix):]
        if (request.method, path) not in self.routes:
            return httpx.Response(404, text="Not Found")
        status, body, text = self.routes[(request.method, path)]
        if text is not None:
            return httpx.Response(status, text=text)
        return httpx.Response(status, json=body)

    @property
    def transport(self):
        return httpx.MockTransport(self.handle)

    def sent(self, method):
        return [r for r in self.requests if r.method == method]

    def body(self, method):
        """JSON body of the last ``method`` request."""
        return json.loads(self.sent(method)[-1].content)


@pytest.fixture
def timecamp():
    return FakeTimeCamp()


@pytest.fixture
def api(timecamp):
    from timecamp_mcp.timecamp import TimeCampAPI
    return TimeCampAPI("test-token", transport=timecamp.transport)


@pytest.fixture
def fixed_today(monkeypatch):
    """Pin "today" for the 30-day lookback window."""
    from datetime import date
    from timecamp_mcp import timecamp as timecamp_module

    day = date(2025, 6, 21)
    monkeypatch.setattr(timecamp_module, "today", lambda: day)
    return day


@pytest.fixture
def entry_row():
    """One entry the way TimeCamp returns it from GET /entries."""
    return {
        "id": 12345,
        "duration": "5400",
        "user_id": "42",
        "user_name": "Jane",
        "task_id": "77",
        "task_note": "",
        "last_modify": "2025-06-21 10:30:12",
        "date": "2025-06-21",
        "start_time": "09:00:00",
        "end_time": "10:30:00",
        "locked": "0",
        "name": "Client work",
        "addons_external_id": "",
        "billable": 1,
        "invoiceId": "0",
        "color": "#34C644",
        "description": "emails & org",
        "tags": [],
        "hasEntryLocationHistory": False,
    }
