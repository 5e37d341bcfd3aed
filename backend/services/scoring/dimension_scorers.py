"""Per-dimension scorers: skills, experience, education, language.

Every scorer returns a value in [0, 1]. A dimension with no requirement
scores 1; a requirement the candidate data cannot answer (unknown years,
unknown education) scores 0.5.
"""

import re
from collections.abc import Sequence

from models.schemas.base import FrozenCamelModel
from models.schemas.candidate_profile import CandidateProfile
from services.scoring.keyword_matcher import KeywordMatcher, default_matcher, normalize_keyword

# Fraction of the skills score lost when every must-have skill is missing
MUST_HAVE_PENALTY_MULTIPLIER = 0.5

NO_REQUIREMENT_SCORE = 1.0
UNKNOWN_CANDIDATE_SCORE = 0.5


class SkillsMatch(FrozenCamelModel):
    """Matched/missing partition of the job skills plus the penalized score."""
    matched_skills: tuple[str, ...] = ()
    missing_skills: tuple[str, ...] = ()
    missing_must_have_skills: tuple[str, ...] = ()
    base_score: float = NO_REQUIREMENT_SCORE
    score: float = NO_REQUIREMENT_SCORE

    @property
    def has_must_have_penalty(self) -> bool:
        return bool(self.missing_must_have_skills)


class LanguageMatch(FrozenCamelModel):
    matched_languages: tuple[str, ...] = ()
    missing_languages: tuple[str, ...] = ()
    score: float = NO_REQUIREMENT_SCORE


def _dedupe_keywords(keywords: Sequence[str]) -> list[str]:
    """Drop repeated keywords (by normalized form), keeping first spelling."""
    seen: set[str] = set()
    unique = []
    for keyword in keywords:
        key = normalize_keyword(keyword)
        if key in seen:
            continue
        seen.add(key)
        unique.append(keyword)
    return unique


def score_skills(
    candidate_skills: Sequence[str],
    job_skills: Sequence[str],
    must_have_skills: Sequence[str] = (),
    matcher: KeywordMatcher = default_matcher,
) -> SkillsMatch:
    """Match job skills against the candidate and apply the must-have penalty."""
    if not job_skills:
        return SkillsMatch()

    matched: list[str] = []
    missing: list[str] = []
    for jd_skill in job_skills:
        if matcher.find_match(jd_skill, candidate_skills) is not None:
            matched.append(jd_skill)
        else:
            missing.append(jd_skill)

    must_haves = _dedupe_keywords(must_have_skills)
    missing_must_have = [
        skill for skill in must_haves
        if matcher.find_match(skill, candidate_skills) is None
    ]

    base_score = len(matched) / len(job_skills)
    score = base_score
    if missing_must_have:
        penalty = (len(missing_must_have) / len(must_haves)) * MUST_HAVE_PENALTY_MULTIPLIER
        score = max(0.0, base_score - penalty)

    return SkillsMatch(
        matched_skills=tuple(matched),
        missing_skills=tuple(missing),
        missing_must_have_skills=tuple(missing_must_have),
        base_score=base_score,
        score=score,
    )


def score_experience(candidate_years: float | None, required_years: float | None) -> float:
    if required_years is None or required_years <= 0:
        return NO_REQUIREMENT_SCORE
    if candidate_years is None or candidate_years < 0:
        return UNKNOWN_CANDIDATE_SCORE
    return min(1.0, candidate_years / required_years)


def score_education(candidate_level: int | None, required_level: int | None) -> float:
    if required_level is None or required_level <= 0:
        return NO_REQUIREMENT_SCORE
    if candidate_level is None or candidate_level <= 0:
        return UNKNOWN_CANDIDATE_SCORE
    return min(1.0, candidate_level / required_level)


def score_languages(
    candidate_languages: Sequence[str],
    required_languages: Sequence[str],
    matcher: KeywordMatcher = default_matcher,
) -> LanguageMatch:
    if not required_languages:
        return LanguageMatch()

    matched: list[str] = []
    missing: list[str] = []
    for required in required_languages:
        if any(matcher.languages_match(spoken, required) for spoken in candidate_languages):
            matched.append(required)
        else:
            missing.append(required)

    return LanguageMatch(
        matched_languages=tuple(matched),
        missing_languages=tuple(missing),
        score=len(matched) / len(required_languages),
    )


# ---------------------------------------------------------------------------
# Education level inference from degree names
# ---------------------------------------------------------------------------

DEGREE_PATTERNS: dict[int, list[str]] = {
    5: [r"ph\.?d", r"doctorate", r"doctoral"],
    4: [r"master(?:'?s)?", r"m\.?sc", r"mba"],
    3: [r"bachelor(?:'?s)?", r"b\.?sc", r"b\.?a"],
    2: [r"associate(?:'?s)?"],
    1: [r"high school", r"diploma"],
}

_DEGREE_COMPILED: dict[int, re.Pattern] = {
    _level: re.compile(rf"\b(?:{'|'.join(_patterns)})\b", re.IGNORECASE)
    for _level, _patterns in DEGREE_PATTERNS.items()
}


def infer_education_level(degree: str | None) -> int | None:
    """Map a free-text degree name to the 1-5 scale, highest level first."""
    if not degree:
        return None
    for level in sorted(_DEGREE_COMPILED, reverse=True):
        if _DEGREE_COMPILED[level].search(degree):
            return level
    return None


def highest_education_level(profile: CandidateProfile) -> int | None:
    """Highest explicit education level, else the highest inferred from degree names."""
    explicit = [e.level for e in profile.education if e.level is not None and e.level > 0]
    if explicit:
        return max(explicit)

    inferred = [
        level for level in (infer_education_level(e.degree) for e in profile.education)
        if level is not None
    ]
    return max(inferred) if inferred else None
