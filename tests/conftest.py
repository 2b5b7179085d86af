import sys, pathlib

import pytest

# Ensure project src directory is on path for tests
PROJECT_ROOT = pathlib.Path(__file__).parent.parent
SRC = PROJECT_ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def fixed_user_agent(monkeypatch):
    # fake-useragent may reach for remote data; keep tests offline
    import sources.arcgis

    monkeypatch.setattr(sources.arcgis, "get_user_agent", lambda: "pytest-agent")


class StubResponse:
    def __init__(self, status_code=200, payload=None, raise_on_json=None):
        self.status_code = status_code
        self._payload = payload
        self._raise_on_json = raise_on_json

    def json(self):
        if self._raise_on_json is not None:
            raise self._raise_on_json
        return self._payload


class StubSession:
    """Answers ArcGIS queries from a {country code: response or exception} map."""

    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        code = params["where"].split("'")[1]
        outcome = self.responses[code]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def feature(day, confirmed, deaths=0, delta=0):
    """ArcGIS feature for 2020-<day> at midnight UTC, e.g. day='04-01'."""
    from datetime import datetime, timezone

    month, dom = (int(x) for x in day.split("-"))
    ts = int(datetime(2020, month, dom, tzinfo=timezone.utc).timestamp() * 1000)
    return {
        "attributes": {
            "OBJECTID": ts,
            "Confirmed": confirmed,
            "Delta_Confirmed": delta,
            "Deaths": deaths,
            "Last_Update": ts,
        }
    }


@pytest.fixture
def stub_response():
    return StubResponse


@pytest.fixture
def stub_session():
    return StubSession


@pytest.fixture
def make_feature():
    return feature
