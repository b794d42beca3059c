"""
Heuristic field extraction from plain résumé text.

Every extractor is independent, runs over the same text and never raises:
a field that cannot be found comes back as None (or an empty list).
"""

import re
from typing import Dict, List, Optional

from matching.catalogue import YEARS_EXPERIENCE_PATTERN

MAX_NAME_LENGTH = 80
MAX_SKILLS = 50
MAX_EDUCATION_LENGTH = 200

LABELED_FIRST_LINE = re.compile(r"^\s*(?:e-?mail|phone)\b", re.IGNORECASE)
NAME_FIELD = re.compile(r"^[^\S\n]*name[^\S\n]*:[^\S\n]*([^\n]*)", re.IGNORECASE | re.MULTILINE)

EMAIL_PATTERN = re.compile(
    r"[A-Za-z0-9._%+-]+@[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)*\.[A-Za-z]{2,}",
    re.IGNORECASE,
)

# Loose on purpose: any bare 7-digit run (e.g. an ID or a zip+ext) also
# matches. Do not tighten without checking existing records.
PHONE_PATTERN = re.compile(
    r"(?:\+\d{1,3}[\s.-]?)?(?:(?:\(\d{3}\)|\d{3})[\s.-]?)?\d{3}[\s.-]?\d{4}"
)

SKILLS_HEADER = re.compile(r"skills[^\S\n]*:", re.IGNORECASE)
LABEL_LINE = re.compile(r"^\s*[A-Za-z][A-Za-z /&()-]{0,40}:")
BULLETS = "•●▪◦*-"

DEGREE_PATTERN = re.compile(
    r"(?<![a-z])(bachelor|master|ph\.?\s?d|doctorate|mba|b\.?\s?sc|m\.?\s?sc|"
    r"b\.?\s?tech|m\.?\s?tech|associate degree|diploma)(?![a-z])",
    re.IGNORECASE,
)


def extract_name(text: str) -> Optional[str]:
    text = text or ""
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        if len(line) <= MAX_NAME_LENGTH and not LABELED_FIRST_LINE.match(line):
            return line
        break

    m = NAME_FIELD.search(text)
    if m:
        value = m.group(1).strip()
        if value:
            return value
    return None


def extract_email(text: str) -> Optional[str]:
    m = EMAIL_PATTERN.search(text or "")
    return m.group(0) if m else None


def extract_phone(text: str) -> Optional[str]:
    m = PHONE_PATTERN.search(text or "")
    return m.group(0).strip() if m else None


def extract_skills(text: str) -> List[str]:
    """Comma/line separated tokens of the first 'Skills:' section."""
    text = text or ""
    m = SKILLS_HEADER.search(text)
    if not m:
        return []

    lines = text[m.end():].split("\n")
    block = [lines[0]]
    for line in lines[1:]:
        if not line.strip() or LABEL_LINE.match(line):
            break
        block.append(line)

    skills = []
    for token in re.split(r"[,\n]", "\n".join(block)):
        token = token.strip().lstrip(BULLETS).strip()
        if token:
            skills.append(token)
        if len(skills) == MAX_SKILLS:
            break
    return skills


def extract_experience(text: str) -> Optional[str]:
    years = [float(y) for y in YEARS_EXPERIENCE_PATTERN.findall(text or "")]
    years = [y for y in years if 0 < y < 60]  # sanity check
    if not years:
        return None
    return f"{max(years):g} years"


def extract_education(text: str) -> Optional[str]:
    for line in (text or "").splitlines():
        if DEGREE_PATTERN.search(line):
            return line.strip()[:MAX_EDUCATION_LENGTH]
    return None


def extract_fields(text: str) -> Dict:
    return {
        "candidate_name": extract_name(text),
        "email": extract_email(text),
        "phone": extract_phone(text),
        "skills": extract_skills(text),
        "experience": extract_experience(text),
        "education": extract_education(text),
    }
