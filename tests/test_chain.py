import pytest
import requests

from config import Settings
from conftest import FakeResponse
from errors import ScoringUnavailable, ValidationError
from matching.chain import HeuristicScorer, ScoringChain, build_scoring_chain
from matching.scorer import heuristic_score

RESUME = "Jane Roe\nSkills: Python, Docker\n6 years of experience"
JD = "Senior Python engineer, Docker, 5 years experience"

GROQ_URL = "https://llm.test/chat"
ENDPOINT_URL = "https://scoring.test/score"


def _groq_reply(content):
    return FakeResponse({"choices": [{"message": {"content": content}}]})


class Recorder:
    """Stands in for requests.post; answers per URL and records every call."""

    def __init__(self, **answers):
        self.answers = answers
        self.calls = []

    def __call__(self, url, **kwargs):
        self.calls.append((url, kwargs))
        answer = self.answers[{GROQ_URL: "groq", ENDPOINT_URL: "endpoint"}[url]]
        if isinstance(answer, Exception):
            raise answer
        return answer

    def urls(self):
        return [url for url, _ in self.calls]


@pytest.fixture
def full_settings():
    return Settings(groq_api_key="k", groq_api_url=GROQ_URL, scoring_api_url=ENDPOINT_URL)


def test_no_remote_config_resolves_via_heuristic():
    chain = build_scoring_chain(Settings())
    assert chain.sources == ["heuristic"]

    result = chain.score(RESUME, JD)
    expected_score, expected_text = heuristic_score(RESUME, JD)
    assert result.source == "heuristic"
    assert result.score == expected_score
    assert result.justification == f"{expected_text}\n\n[Source: heuristic]"


def test_chain_order_from_settings(full_settings):
    assert build_scoring_chain(full_settings).sources == ["generative", "endpoint", "heuristic"]
    assert build_scoring_chain(Settings(scoring_api_url=ENDPOINT_URL)).sources == ["endpoint", "heuristic"]


def test_generative_wins_and_skips_the_rest(monkeypatch, full_settings):
    post = Recorder(groq=_groq_reply('Sure! Here you go:\n```json\n{"score": 81.6, "justification": "Strong {Python} fit."}\n```'))
    monkeypatch.setattr(requests, "post", post)

    result = build_scoring_chain(full_settings).score(RESUME, JD)

    assert result.source == "generative"
    assert result.score == 82
    assert result.justification == "Strong {Python} fit.\n\n[Source: generative]"
    assert post.urls() == [GROQ_URL]
    _, kwargs = post.calls[0]
    assert kwargs["headers"]["Authorization"] == "Bearer k"
    assert kwargs["timeout"] == 30


def test_generative_garbage_falls_to_endpoint(monkeypatch, full_settings):
    post = Recorder(
        groq=_groq_reply("I think this candidate is a 7/10."),
        endpoint=FakeResponse({"score": 64, "justification": "Remote says ok"}),
    )
    monkeypatch.setattr(requests, "post", post)

    result = build_scoring_chain(full_settings).score(RESUME, JD)

    assert result.source == "endpoint"
    assert result.score == 64
    assert post.urls() == [GROQ_URL, ENDPOINT_URL]
    _, kwargs = post.calls[1]
    assert kwargs["json"] == {"resumeText": RESUME, "jobDescription": JD}
    assert kwargs["timeout"] == 30


@pytest.mark.parametrize(
    "endpoint_answer",
    [
        FakeResponse({"score": "90", "justification": "string score"}),
        FakeResponse({"score": True, "justification": "bool score"}),
        FakeResponse({"score": 90}),
        FakeResponse(ValueError("not json")),
        FakeResponse({"error": "boom"}, status_code=500),
        requests.Timeout("timed out"),
        requests.ConnectionError("refused"),
    ],
)
def test_endpoint_failures_fall_to_heuristic(monkeypatch, endpoint_answer):
    post = Recorder(endpoint=endpoint_answer)
    monkeypatch.setattr(requests, "post", post)

    result = build_scoring_chain(Settings(scoring_api_url=ENDPOINT_URL)).score(RESUME, JD)

    assert result.source == "heuristic"
    assert result.score == heuristic_score(RESUME, JD)[0]
    assert post.urls() == [ENDPOINT_URL]  # no retry


def test_generative_network_error_is_absorbed(monkeypatch):
    monkeypatch.setattr(requests, "post", Recorder(groq=requests.ConnectionError("down")))
    result = build_scoring_chain(Settings(groq_api_key="k", groq_api_url=GROQ_URL)).score(RESUME, JD)
    assert result.source == "heuristic"


def test_out_of_range_winner_fails_the_request(monkeypatch):
    post = Recorder(endpoint=FakeResponse({"score": 150, "justification": "too keen"}))
    monkeypatch.setattr(requests, "post", post)

    with pytest.raises(ScoringUnavailable):
        build_scoring_chain(Settings(scoring_api_url=ENDPOINT_URL)).score(RESUME, JD)


def test_empty_justification_fails_the_request():
    class Blank:
        name = "blank"

        def attempt(self, resume_text, job_description):
            return 50, "   "

    with pytest.raises(ScoringUnavailable):
        ScoringChain([Blank(), HeuristicScorer()]).score(RESUME, JD)


def test_exhausted_chain_is_unavailable():
    class Nothing:
        name = "nothing"

        def attempt(self, resume_text, job_description):
            return None

    with pytest.raises(ScoringUnavailable):
        ScoringChain([Nothing()]).score(RESUME, JD)


@pytest.mark.parametrize("resume,jd", [("", JD), (RESUME, "   "), (None, JD)])
def test_blank_inputs_are_rejected(resume, jd):
    with pytest.raises(ValidationError):
        build_scoring_chain(Settings()).score(resume, jd)


@pytest.mark.parametrize("remote_score,expected", [(72.5, 73), (73.5, 74), (72.4, 72), (0.5, 1)])
def test_remote_half_scores_round_up(monkeypatch, remote_score, expected):
    post = Recorder(endpoint=FakeResponse({"score": remote_score, "justification": "fine"}))
    monkeypatch.setattr(requests, "post", post)

    result = build_scoring_chain(Settings(scoring_api_url=ENDPOINT_URL)).score(RESUME, JD)

    assert result.source == "endpoint"
    assert result.score == expected
