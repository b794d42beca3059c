import logging
from typing import Optional, Tuple

import requests

from .result import SOURCE_ENDPOINT, parse_score_payload

logger = logging.getLogger(__name__)


class EndpointScorer:
    """POST {resumeText, jobDescription} to a configured scoring service."""

    name = SOURCE_ENDPOINT

    def __init__(self, url: str, timeout: int = 30):
        self.url = url
        self.timeout = timeout

    def attempt(self, resume_text: str, job_description: str) -> Optional[Tuple[float, str]]:
        response = requests.post(
            self.url,
            json={"resumeText": resume_text, "jobDescription": job_description},
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )
        response.raise_for_status()

        result = parse_score_payload(response.json())
        if result is None:
            logger.warning(f"Scoring endpoint {self.url} returned an unexpected body")
        return result
