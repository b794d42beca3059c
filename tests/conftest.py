import fitz  # PyMuPDF
import pytest
import requests
from fastapi.testclient import TestClient

from app import create_app
from config import Settings
from store import CandidateStore, make_engine


def make_pdf(text: str) -> bytes:
    doc = fitz.open()
    page = doc.new_page()
    if text:
        page.insert_text((72, 72), text, fontsize=11)
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def settings(tmp_path):
    return Settings(
        base_dir=str(tmp_path),
        database_url=f"sqlite:///{tmp_path / 'test.db'}",
    )


@pytest.fixture
def store(settings):
    s = CandidateStore(make_engine(settings.resolved_database_url))
    s.create_tables()
    return s


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


class FakeResponse:
    def __init__(self, body, status_code=200):
        self._body = body
        self.status_code = status_code

    def json(self):
        if isinstance(self._body, Exception):
            raise self._body
        return self._body

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")
