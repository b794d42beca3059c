"""
Deterministic keyword-overlap scorer used when no remote scorer answers.

score = 0.5 * skills + 0.2 * experience + 0.1 * qualifications + flat bonuses,
clamped to 0..100 and rounded. Pure function of its two texts and the
catalogue: no I/O, no clock, no randomness.
"""

import re
from functools import lru_cache
from typing import Dict, List, Optional, Tuple

from .catalogue import DEFAULT_CATALOGUE, YEARS_EXPERIENCE_PATTERN, Keywords, ScoringCatalogue
from .result import round_half_up


@lru_cache(maxsize=1024)
def _keyword_pattern(keyword: str) -> "re.Pattern[str]":
    # alnum boundaries so "java" skips "javascript" and "sql" skips "mysql"
    return re.compile(r"(?<![a-z0-9])" + re.escape(keyword) + r"(?![a-z0-9])")


def _present(keywords: Keywords, text: str) -> List[str]:
    return [kw for kw in keywords if _keyword_pattern(kw).search(text)]


def _years(text: str) -> List[float]:
    return [y for y in (float(v) for v in YEARS_EXPERIENCE_PATTERN.findall(text)) if 0 < y < 60]


def _fmt_years(value: Optional[float]) -> str:
    return "not stated" if value is None else f"{value:g} years"


def _band(score: int, catalogue: ScoringCatalogue) -> str:
    for minimum, label in catalogue.score_bands:
        if score >= minimum:
            return label
    return catalogue.score_bands[-1][1]


def skill_coverage(resume: str, jd: str, catalogue: ScoringCatalogue = DEFAULT_CATALOGUE) -> Dict[str, Tuple[List[str], List[str]]]:
    """category -> (required keywords, matched keywords); categories absent from the JD are skipped."""
    coverage = {}
    for category, keywords in catalogue.skill_categories.items():
        required = _present(keywords, jd)
        if required:
            coverage[category] = (required, [kw for kw in required if _keyword_pattern(kw).search(resume)])
    return coverage


def heuristic_score(
    resume_text: str,
    job_description: str,
    catalogue: ScoringCatalogue = DEFAULT_CATALOGUE,
) -> Tuple[int, str]:
    resume = (resume_text or "").lower()
    jd = (job_description or "").lower()

    # --- skills ---
    coverage = skill_coverage(resume, jd, catalogue)
    per_category = [100.0 * len(matched) / len(required) for required, matched in coverage.values()]
    skill_score = sum(per_category) / len(per_category) if per_category else 0.0

    # --- experience ---
    candidate_years = _years(resume)
    cand_years = max(candidate_years) if candidate_years else None
    required_years_all = _years(jd)
    req_years = required_years_all[0] if required_years_all else None

    if req_years is not None:
        meets = cand_years is not None and cand_years >= req_years
        years_points = catalogue.years_met_points if meets else catalogue.years_partial_points
    elif cand_years is not None:
        meets = True
        years_points = catalogue.years_met_points
    else:
        meets = False
        years_points = 0

    seniority = [kw for kw in _present(catalogue.seniority_keywords, jd) if _keyword_pattern(kw).search(resume)]
    experience_score = min(100, years_points + catalogue.seniority_points * len(seniority))

    # --- qualifications ---
    education = _present(catalogue.education_keywords, resume)
    certifications = _present(catalogue.certification_keywords, resume)
    qualification_score = min(
        100,
        (catalogue.education_points if education else 0)
        + (catalogue.certification_points if certifications else 0),
    )

    blended = (
        catalogue.skill_weight * skill_score
        + catalogue.experience_weight * experience_score
        + catalogue.qualification_weight * qualification_score
    )

    # --- flat bonuses ---
    bonuses: List[Tuple[str, int]] = []
    covered = sum(1 for _, matched in coverage.values() if matched)
    for threshold, points in sorted(catalogue.breadth_thresholds, reverse=True):
        if covered >= threshold:
            bonuses.append((f"Skill breadth ({covered} categories matched)", points))
            break

    degrees = [d for d in _present(catalogue.degree_keywords, jd) if _keyword_pattern(d).search(resume)]
    fields = [f for f in _present(catalogue.field_keywords, jd) if _keyword_pattern(f).search(resume)]
    if degrees and fields:
        bonuses.append((f"Degree and field match ({degrees[0]}, {fields[0]})", catalogue.degree_field_points))

    roles = [r for r in _present(catalogue.role_title_keywords, jd) if _keyword_pattern(r).search(resume)]
    if roles:
        bonuses.append((f"Direct role experience ({', '.join(roles)})", catalogue.role_match_points))

    portfolio = _present(catalogue.portfolio_keywords, resume)
    if portfolio:
        bonuses.append((f"Portfolio evidence ({', '.join(portfolio)})", catalogue.portfolio_points))

    total = blended + sum(points for _, points in bonuses)
    score = round_half_up(max(0.0, min(100.0, total)))

    # --- justification ---
    lines = [f"**Skill Match ({skill_score:.0f}%)**"]
    if coverage:
        for category, (required, matched) in coverage.items():
            label = category.replace("_", " ").title()
            found = ", ".join(matched) if matched else "none"
            lines.append(f"- {label}: {len(matched)}/{len(required)} matched ({found})")
    else:
        lines.append("- No catalogued skills found in the job description")

    lines.append("")
    lines.append(f"**Experience ({experience_score}%)**")
    if req_years is not None:
        verdict = "meets requirement" if meets else "below requirement"
        lines.append(f"- Candidate: {_fmt_years(cand_years)}; required: {_fmt_years(req_years)} ({verdict})")
    else:
        lines.append(f"- Candidate: {_fmt_years(cand_years)}; no requirement stated")
    lines.append(f"- Seniority signals: {', '.join(seniority) if seniority else 'none'}")

    lines.append("")
    lines.append(f"**Qualifications ({qualification_score}%)**")
    lines.append(f"- Education: {', '.join(education) if education else 'none found'}")
    lines.append(f"- Certifications: {', '.join(certifications) if certifications else 'none found'}")

    lines.append("")
    lines.append("**Bonuses**")
    if bonuses:
        lines.extend(f"- {reason}: +{points}" for reason, points in bonuses)
    else:
        lines.append("- None")

    lines.append("")
    lines.append(f"**Overall: {_band(score, catalogue)} ({score}/100)**")

    return score, "\n".join(lines)
