import json
import logging
from typing import Any, Optional, Tuple

import requests

from .prompts import SYSTEM_PROMPT, USER_TEMPLATE
from .result import SOURCE_GENERATIVE, parse_score_payload

logger = logging.getLogger(__name__)


def extract_json_object(text: str) -> Optional[Any]:
    """
    Parse the first top-level {...} object embedded in free text.
    Braces inside JSON strings are ignored. Returns None when nothing parses.
    """
    text = text or ""
    start = text.find("{")
    while start != -1:
        next_start = start + 1
        depth = 0
        in_string = False
        escaped = False
        for i in range(start, len(text)):
            ch = text[i]
            if in_string:
                if escaped:
                    escaped = False
                elif ch == "\\":
                    escaped = True
                elif ch == '"':
                    in_string = False
            elif ch == '"':
                in_string = True
            elif ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    try:
                        return json.loads(text[start:i + 1])
                    except json.JSONDecodeError:
                        # skip the whole rejected object, not just its first brace
                        next_start = i + 1
                        break
        start = text.find("{", next_start)
    return None


class GroqScorer:
    """Resume/JD fit via a Groq (OpenAI-compatible) chat completion."""

    name = SOURCE_GENERATIVE

    def __init__(self, api_key: str, model: str, url: str, timeout: int = 30):
        self.api_key = api_key
        self.model = model
        self.url = url
        self.timeout = timeout

    def attempt(self, resume_text: str, job_description: str) -> Optional[Tuple[float, str]]:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": USER_TEMPLATE.format(jd=job_description, resume=resume_text)},
            ],
            "temperature": 0.2,
        }

        response = requests.post(self.url, headers=headers, json=payload, timeout=self.timeout)
        response.raise_for_status()
        raw = response.json()["choices"][0]["message"]["content"]

        result = parse_score_payload(extract_json_object(raw))
        if result is None:
            logger.warning("Groq reply had no usable {score, justification} object")
        return result
