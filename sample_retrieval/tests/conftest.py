from __future__ import annotations

from typing import Iterable, List, Union

import pytest
import requests

from sample_retrieval.config import Settings

SAMPLE_XML = (
    '<SAMPLE alias="S1">'
    "<SAMPLE_NAME><TAXON_ID>9606</TAXON_ID>"
    "<SCIENTIFIC_NAME>Homo sapiens</SCIENTIFIC_NAME></SAMPLE_NAME>"
    "<SAMPLE_ATTRIBUTES><SAMPLE_ATTRIBUTE><TAG>collection_date</TAG>"
    "<VALUE>2020</VALUE></SAMPLE_ATTRIBUTE></SAMPLE_ATTRIBUTES>"
    "</SAMPLE>"
)


def make_response(status_code: int, body: str = "", url: str = "http://test/") -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    response.url = url
    response.reason = "Test"
    return response


class FakeSession:
    """Stand-in for ``requests.Session`` replaying scripted outcomes."""

    def __init__(self, outcomes: Iterable[Union[requests.Response, Exception]]):
        self.outcomes: List[Union[requests.Response, Exception]] = list(outcomes)
        self.calls: List[dict] = []
        self.closed = False

    def get(self, url: str, **kwargs) -> requests.Response:
        self.calls.append({"url": url, **kwargs})
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> "FakeSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


@pytest.fixture
def settings(monkeypatch) -> Settings:
    for name in ("SAMPLE_RETRIEVAL_TEST_MODE", "SAMPLE_RETRIEVAL_WEBIN_USERNAME"):
        monkeypatch.delenv(name, raising=False)
    return Settings(
        _env_file=None,
        webin_rest_uri="https://submit.example.org/api/",
        webin_rest_test_uri="https://submit-test.example.org/api/",
        webin_username="Webin-1",
        webin_password="secret",
        retry_max_attempts=3,
        retry_backoff_multiplier=0,
        retry_backoff_max=0,
    )


@pytest.fixture
def sample_xml() -> str:
    return SAMPLE_XML


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def install_session(monkeypatch):
    """Route ``SampleXmlClient`` requests through a ``FakeSession``."""
    from sample_retrieval.clients.sample_xml import SampleXmlClient

    def _install(*outcomes: Union[requests.Response, Exception]) -> FakeSession:
        session = FakeSession(outcomes)
        monkeypatch.setattr(SampleXmlClient, "new_session", lambda self: session)
        return session

    return _install
