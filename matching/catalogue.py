"""
Keyword catalogue and constants for the heuristic scorer.

Treat this as a versioned table: changing any keyword, weight or cut-off
changes scores of already stored candidates, so bump `version` with it.
Keyword groups are tuples (not sets) so iteration order, and therefore the
justification text, is identical across processes.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, Tuple

# "5 years experience", "3+ yrs of experience", "7 years of professional experience"
YEARS_EXPERIENCE_PATTERN = re.compile(
    r"(\d+(?:\.\d+)?)\s*\+?\s*(?:years?|yrs?)\.?\s*(?:of\s+)?(?:[a-z-]+\s+)?(?:experience|exp)\b",
    re.IGNORECASE,
)

Keywords = Tuple[str, ...]

SKILL_CATEGORIES: Dict[str, Keywords] = {
    "programming_languages": (
        "python", "java", "javascript", "typescript", "c++", "c#", "golang", "rust",
        "ruby", "php", "swift", "kotlin", "scala", "perl",
    ),
    "web_frameworks": (
        "react", "angular", "vue", "django", "flask", "fastapi", "spring", "node.js",
        "express", "next.js", "html", "css", "rest api", "graphql",
    ),
    "data_ml": (
        "sql", "mysql", "postgresql", "mongodb", "redis", "pandas", "numpy", "spark",
        "hadoop", "tableau", "power bi", "machine learning", "deep learning",
        "tensorflow", "pytorch", "data analysis", "nlp",
    ),
    "cloud_devops": (
        "aws", "azure", "gcp", "docker", "kubernetes", "terraform", "jenkins",
        "ci/cd", "linux", "git", "ansible",
    ),
    "business": (
        "project management", "stakeholder management", "business analysis",
        "budgeting", "strategy", "operations", "crm", "salesforce", "sap", "excel",
        "agile", "scrum",
    ),
    "finance": (
        "accounting", "financial analysis", "financial modeling", "audit",
        "forecasting", "bookkeeping", "taxation", "gaap", "ifrs", "quickbooks",
    ),
    "healthcare": (
        "patient care", "clinical", "emr", "ehr", "hipaa", "nursing",
        "pharmacology", "medical terminology",
    ),
    "marketing_sales": (
        "seo", "sem", "content marketing", "social media", "digital marketing",
        "google analytics", "lead generation", "b2b", "sales", "branding",
    ),
    "design": (
        "figma", "sketch", "photoshop", "illustrator", "ui/ux", "user research",
        "wireframing", "prototyping",
    ),
    "soft_skills": (
        "communication", "leadership", "teamwork", "problem solving",
        "collaboration", "time management", "mentoring", "critical thinking",
        "adaptability", "presentation",
    ),
}

SENIORITY_KEYWORDS: Keywords = (
    "senior", "lead", "principal", "staff", "manager", "director", "architect",
    "head of", "junior", "entry level", "mid-level", "intern",
)

EDUCATION_KEYWORDS: Keywords = (
    "bachelor", "master", "phd", "ph.d", "doctorate", "mba", "degree", "b.sc",
    "m.sc", "b.tech", "m.tech", "university", "college",
)

CERTIFICATION_KEYWORDS: Keywords = (
    "certified", "certification", "certificate", "pmp", "cpa", "cfa", "cissp",
    "ccna", "license", "licensed",
)

DEGREE_KEYWORDS: Keywords = ("bachelor", "master", "phd", "mba")

FIELD_KEYWORDS: Keywords = (
    "computer science", "software engineering", "information technology",
    "data science", "statistics", "mathematics", "electrical engineering",
    "mechanical engineering", "business administration", "finance", "accounting",
    "economics", "marketing", "nursing", "psychology",
)

ROLE_TITLE_KEYWORDS: Keywords = (
    "developer", "engineer", "analyst", "designer", "scientist", "consultant",
    "accountant", "nurse", "administrator", "specialist", "recruiter",
)

PORTFOLIO_KEYWORDS: Keywords = ("portfolio", "github", "case study", "publications")

# (minimum score, label), highest first
SCORE_BANDS: Tuple[Tuple[int, str], ...] = (
    (85, "Outstanding match"),
    (70, "Strong match"),
    (55, "Good match"),
    (40, "Moderate match"),
    (25, "Partial match"),
    (0, "Limited alignment"),
)


@dataclass(frozen=True)
class ScoringCatalogue:
    version: str = "1"
    skill_categories: Dict[str, Keywords] = field(default_factory=lambda: dict(SKILL_CATEGORIES))
    seniority_keywords: Keywords = SENIORITY_KEYWORDS
    education_keywords: Keywords = EDUCATION_KEYWORDS
    certification_keywords: Keywords = CERTIFICATION_KEYWORDS
    degree_keywords: Keywords = DEGREE_KEYWORDS
    field_keywords: Keywords = FIELD_KEYWORDS
    role_title_keywords: Keywords = ROLE_TITLE_KEYWORDS
    portfolio_keywords: Keywords = PORTFOLIO_KEYWORDS
    score_bands: Tuple[Tuple[int, str], ...] = SCORE_BANDS

    # blend weights
    skill_weight: float = 0.5
    experience_weight: float = 0.2
    qualification_weight: float = 0.1

    # experience component (0-100 before weighting)
    years_met_points: int = 60
    years_partial_points: int = 30
    seniority_points: int = 10

    # qualification component (0-100 before weighting)
    education_points: int = 60
    certification_points: int = 40

    # flat bonuses outside the blend
    breadth_thresholds: Tuple[Tuple[int, int], ...] = ((5, 10), (3, 5))  # (categories, points)
    degree_field_points: int = 5
    role_match_points: int = 5
    portfolio_points: int = 3


DEFAULT_CATALOGUE = ScoringCatalogue()
