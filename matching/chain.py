"""
Scoring fallback chain.

Strategies are tried in a fixed order; the first one returning a structurally
valid (score, justification) wins and the rest are skipped. A strategy that
raises or returns None is logged and skipped, never retried. The local
heuristic always answers, so the chain always terminates with a result.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Sequence, Tuple

from config import Settings
from errors import ScoringUnavailable, ValidationError

from .catalogue import DEFAULT_CATALOGUE, ScoringCatalogue
from .endpoint import EndpointScorer
from .llm_groq import GroqScorer
from .result import SOURCE_HEURISTIC, ScoreResult, round_half_up
from .scorer import heuristic_score

logger = logging.getLogger(__name__)


class ScoringStrategy(Protocol):
    name: str

    def attempt(self, resume_text: str, job_description: str) -> Optional[Tuple[float, str]]:
        ...


class HeuristicScorer:
    name = SOURCE_HEURISTIC

    def __init__(self, catalogue: ScoringCatalogue = DEFAULT_CATALOGUE):
        self.catalogue = catalogue

    def attempt(self, resume_text: str, job_description: str) -> Optional[Tuple[float, str]]:
        return heuristic_score(resume_text, job_description, self.catalogue)


class ScoringChain:
    def __init__(self, strategies: Sequence[ScoringStrategy]):
        if not strategies:
            raise ValueError("ScoringChain needs at least one strategy")
        self.strategies: List[ScoringStrategy] = list(strategies)

    @property
    def sources(self) -> List[str]:
        return [s.name for s in self.strategies]

    def score(self, resume_text: str, job_description: str) -> ScoreResult:
        if not (resume_text or "").strip() or not (job_description or "").strip():
            raise ValidationError("Resume text and job description are required")

        for strategy in self.strategies:
            try:
                result = strategy.attempt(resume_text, job_description)
            except Exception as e:
                logger.warning(f"Scoring strategy '{strategy.name}' failed: {e}")
                continue
            if result is None:
                logger.info(f"Scoring strategy '{strategy.name}' yielded nothing")
                continue
            return self._accept(strategy.name, *result)

        raise ScoringUnavailable("No scoring strategy produced a result")

    @staticmethod
    def _accept(source: str, score: float, justification: str) -> ScoreResult:
        if not isinstance(score, (int, float)) or not 0 <= score <= 100:
            logger.error(f"Source '{source}' returned out-of-range score {score!r}")
            raise ScoringUnavailable("Scoring produced an invalid result")
        if not isinstance(justification, str) or not justification.strip():
            logger.error(f"Source '{source}' returned an empty justification")
            raise ScoringUnavailable("Scoring produced an invalid result")

        logger.info(f"Scored via '{source}': {score}")
        tagged = f"{justification.strip()}\n\n[Source: {source}]"
        return ScoreResult(score=round_half_up(score), justification=tagged, source=source)


def build_scoring_chain(settings: Settings, catalogue: ScoringCatalogue = DEFAULT_CATALOGUE) -> ScoringChain:
    """Generative (if keyed) -> HTTP endpoint (if configured) -> heuristic."""
    strategies: List[ScoringStrategy] = []
    if settings.groq_api_key:
        strategies.append(
            GroqScorer(
                api_key=settings.groq_api_key,
                model=settings.model_name,
                url=settings.groq_api_url,
                timeout=settings.llm_timeout_seconds,
            )
        )
    if settings.scoring_api_url:
        strategies.append(EndpointScorer(settings.scoring_api_url, timeout=settings.scoring_timeout_seconds))
    strategies.append(HeuristicScorer(catalogue))
    return ScoringChain(strategies)
