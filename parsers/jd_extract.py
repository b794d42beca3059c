import re
from typing import Optional

MAX_ROLE_LENGTH = 80

TITLE_PATTERNS = [
    r"Job\s+Title\s*[:\-]\s*([A-Z][A-Za-z0-9 /&\-]{2,50})",
    r"Position\s*[:\-]\s*([A-Z][A-Za-z0-9 /&\-]{2,50})",
    r"Role\s*[:\-]\s*([A-Z][A-Za-z0-9 /&\-]{2,50})",
    r"We[’']?re\s+(?:seeking|hiring|looking\s+for)\s+an?\s+([A-Z][A-Za-z0-9 /&\-]{2,50})",
]

TITLE_FALLBACK = re.compile(
    r"\b((?:[A-Z][A-Za-z+#.]*\s+){0,3}(?:Engineer|Developer|Manager|Analyst|Scientist|Designer|Accountant|Nurse))\b"
)


def extract_role(text: str) -> Optional[str]:
    """Guess the advertised role title from a job description."""
    if not text:
        return None
    flat = re.sub(r"\s+", " ", text.replace("•", " ")).strip()

    for pattern in TITLE_PATTERNS:
        m = re.search(pattern, text, re.IGNORECASE)
        if m:
            title = m.group(1).strip(" -–:;,.")
            if title:
                return title[:MAX_ROLE_LENGTH]

    guess = TITLE_FALLBACK.search(flat)
    return guess.group(1).strip()[:MAX_ROLE_LENGTH] if guess else None
