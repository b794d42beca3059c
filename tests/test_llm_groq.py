import pytest

from matching.llm_groq import extract_json_object
from matching.result import parse_score_payload


@pytest.mark.parametrize(
    "text,expected",
    [
        ('{"score": 70, "justification": "ok"}', {"score": 70, "justification": "ok"}),
        ('Result:\n{"score": 70, "justification": "ok"}\nThanks!', {"score": 70, "justification": "ok"}),
        ('```json\n{"a": {"b": [1, {"c": 2}]}}\n```', {"a": {"b": [1, {"c": 2}]}}),
        ('{"justification": "uses } and { inside", "score": 1}', {"justification": "uses } and { inside", "score": 1}),
        ('{"justification": "escaped \\" quote }", "score": 2}', {"justification": 'escaped " quote }', "score": 2}),
        ('first {not json} then {"score": 3, "justification": "x"}', {"score": 3, "justification": "x"}),
        ('{"score": 1, "justification": "a"} {"score": 2, "justification": "b"}', {"score": 1, "justification": "a"}),
        ('{"bad": {"score": 1, "justification": "inner"}, oops} {"score": 2, "justification": "outer"}', {"score": 2, "justification": "outer"}),
    ],
)
def test_extract_json_object(text, expected):
    assert extract_json_object(text) == expected


@pytest.mark.parametrize("text", ["", "no braces", "{unterminated", "}{", None])
def test_extract_json_object_nothing(text):
    assert extract_json_object(text) is None


@pytest.mark.parametrize(
    "payload,expected",
    [
        ({"score": 70, "justification": "ok"}, (70.0, "ok")),
        ({"score": 70.5, "justification": ""}, (70.5, "")),
        ({"score": "70", "justification": "ok"}, None),
        ({"score": False, "justification": "ok"}, None),
        ({"score": 70, "justification": 5}, None),
        ([70, "ok"], None),
        (None, None),
    ],
)
def test_parse_score_payload(payload, expected):
    assert parse_score_payload(payload) == expected
