import pytest
import requests


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=None):
        self.payload = payload
        self.status_code = status_code
        self.text = text

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        if self.text is not None:
            raise ValueError(f"Expecting value: {self.text[:20]!r}")
        return self.payload


def indicator_payload(*values):
    """World Bank style payload: paging block, then one observation per value."""
    obs = [
        {"indicator": {"id": "SH.MED.PHYS.ZS", "value": "Physicians (per 1,000 people)"},
         "country": {"id": "IN", "value": "India"},
         "date": str(2023 - i), "value": v}
        for i, v in enumerate(values)
    ]
    return [{"page": 1, "pages": 1, "per_page": 50, "total": len(obs)}, obs]


@pytest.fixture
def fake_get(monkeypatch):
    """Route requests.get to a canned response or exception and record the calls."""
    calls = []

    def install(result):
        def _get(url, **kwargs):
            calls.append((url, kwargs))
            if isinstance(result, Exception):
                raise result
            return result
        monkeypatch.setattr(requests, "get", _get)
        return calls

    return install
