from pathlib import Path

import requests
from streamlit.testing.v1 import AppTest

DASHBOARD = str(Path(__file__).resolve().parents[1] / "ui" / "dashboard.py")


class _Reply:
    ok = True

    def json(self):
        return []


def test_shortlist_uses_the_threshold_it_displays(monkeypatch):
    calls = []

    def fake_request(method, url, **kwargs):
        calls.append((method, url, kwargs))
        return _Reply()

    monkeypatch.setenv("SHORTLIST_THRESHOLD", "65")
    monkeypatch.setattr(requests, "request", fake_request)

    at = AppTest.from_file(DASHBOARD, default_timeout=30).run()

    assert not at.exception
    shortlist_calls = [kw for _, url, kw in calls if url.endswith("/api/shortlisted")]
    assert shortlist_calls == [{"params": {"threshold": 65}, "timeout": 90}]
    assert any("score ≥ 65" in md.value for md in at.markdown)
