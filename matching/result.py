import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Optional, Tuple

SOURCE_GENERATIVE = "generative"
SOURCE_ENDPOINT = "endpoint"
SOURCE_HEURISTIC = "heuristic"


@dataclass(frozen=True)
class ScoreResult:
    score: int
    justification: str
    source: str


def parse_score_payload(payload: Any) -> Optional[Tuple[float, str]]:
    """(score, justification) if payload has a numeric score and a string justification."""
    if not isinstance(payload, dict):
        return None
    score = payload.get("score")
    justification = payload.get("justification")
    if isinstance(score, bool) or not isinstance(score, Real):
        return None
    if not isinstance(justification, str):
        return None
    return float(score), justification


def round_half_up(value: float) -> int:
    """Nearest integer; halves go up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))
