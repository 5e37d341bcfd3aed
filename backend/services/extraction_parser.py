"""Parse and sanitize the JSON produced by the AI extraction step.

The model is asked for a fixed schema but routinely returns markdown
fences, wrong types, or keywords that never appear in the résumé. This
module turns that output into an ExtractionPayload that the scoring
engine can consume: malformed fields become empty, hallucinated résumé
keywords are dropped, and keyword lists are capped.
"""

import json
import logging
import math
import re
from collections.abc import Mapping
from typing import Any

from config import settings
from models.responses import Suggestion
from models.schemas.candidate_profile import (
    CandidateProfile,
    EducationEntry,
    ExperienceEntry,
    LanguageSkill,
    PersonalInfo,
)
from models.schemas.extraction_payload import ExtractionPayload, ScoringWeightsPayload
from models.schemas.job_requirements import JobRequirements
from models.schemas.scoring_weights import WeightSignals

logger = logging.getLogger(__name__)

_PROFICIENCIES = {"native", "fluent", "intermediate", "basic"}
_PRIORITIES = {"high", "medium", "low"}
_JS_SUFFIX_RE = re.compile(r"\.js$")


class ExtractionPayloadError(ValueError):
    """The extraction output could not be read as a JSON object."""


def strip_code_fences(text: str) -> str:
    """Remove a surrounding ```json ... ``` block, if present."""
    text = text.strip()
    text = re.sub(r"^```(?:json)?\s*", "", text, flags=re.IGNORECASE)
    text = re.sub(r"\s*```$", "", text)
    return text.strip()


# ---------------------------------------------------------------------------
# Lenient field coercion: anything of the wrong type becomes empty
# ---------------------------------------------------------------------------

def _as_dict(value: Any) -> dict:
    return dict(value) if isinstance(value, Mapping) else {}


def _as_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


def _as_level(value: Any) -> int | None:
    number = _as_number(value)
    if number is None or not number.is_integer() or not 1 <= number <= 5:
        return None
    return int(number)


def _as_str_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, str) and v.strip()]


def _education(value: Any) -> list[EducationEntry]:
    entries = []
    for raw in value if isinstance(value, list) else []:
        if not isinstance(raw, Mapping):
            continue
        year = _as_number(raw.get("year"))
        entries.append(EducationEntry(
            degree=_as_str(raw.get("degree")),
            field=_as_str(raw.get("field")),
            institution=_as_str(raw.get("institution")),
            year=int(year) if year is not None else None,
            level=_as_level(raw.get("level")),
        ))
    return entries


def _experience(value: Any) -> list[ExperienceEntry]:
    entries = []
    for raw in value if isinstance(value, list) else []:
        if not isinstance(raw, Mapping):
            continue
        entries.append(ExperienceEntry(
            title=_as_str(raw.get("title")),
            company=_as_str(raw.get("company")),
            duration=_as_str(raw.get("duration")),
            years_of_experience=_as_number(raw.get("yearsOfExperience")),
            description=_as_str(raw.get("description")),
        ))
    return entries


def _languages(value: Any) -> list[LanguageSkill]:
    entries = []
    for raw in value if isinstance(value, list) else []:
        if isinstance(raw, str) and raw.strip():
            entries.append(LanguageSkill(language=raw))
        elif isinstance(raw, Mapping) and _as_str(raw.get("language")):
            proficiency = raw.get("proficiency")
            entries.append(LanguageSkill(
                language=raw["language"],
                proficiency=proficiency if proficiency in _PROFICIENCIES else None,
            ))
    return entries


def _profile(value: Any) -> CandidateProfile:
    raw = _as_dict(value)
    info = _as_dict(raw.get("personalInfo"))
    return CandidateProfile(
        personal_info=PersonalInfo(**{
            key: _as_str(info.get(key))
            for key in ("name", "email", "phone", "location", "linkedin", "portfolio")
        }),
        summary=_as_str(raw.get("summary")),
        skills=_as_str_list(raw.get("skills")),
        education=_education(raw.get("education")),
        experience=_experience(raw.get("experience")),
        languages=_languages(raw.get("languages")),
        total_years_experience=_as_number(raw.get("totalYearsExperience")),
    )


def _requirements(value: Any, must_have_keywords: list[str]) -> JobRequirements:
    raw = _as_dict(value)
    return JobRequirements(
        required_skills=_as_str_list(raw.get("requiredSkills")),
        preferred_skills=_as_str_list(raw.get("preferredSkills")),
        must_have_skills=must_have_keywords,
        required_years_experience=_as_number(raw.get("requiredYearsExperience")),
        required_education_level=_as_level(raw.get("requiredEducationLevel")),
        required_languages=_as_str_list(raw.get("requiredLanguages")),
    )


def _suggestions(value: Any) -> list[Suggestion]:
    suggestions = []
    for raw in value if isinstance(value, list) else []:
        if not isinstance(raw, Mapping) or not _as_str(raw.get("text")):
            continue
        priority = raw.get("priority")
        suggestions.append(Suggestion(
            category=_as_str(raw.get("category")) or "General",
            text=raw["text"],
            priority=priority if priority in _PRIORITIES else "medium",
        ))
    return suggestions[: settings.max_suggestions]


def _scoring_weights(value: Any) -> ScoringWeightsPayload:
    raw = _as_dict(value)
    signals_raw = _as_dict(raw.get("signals"))
    signals = None
    if signals_raw:
        signals = WeightSignals(**{
            name: signals_raw.get(alias) is True
            for name, alias in (
                ("is_experience_heavy", "isExperienceHeavy"),
                ("is_education_required", "isEducationRequired"),
                ("is_language_critical", "isLanguageCritical"),
                ("is_skills_heavy", "isSkillsHeavy"),
            )
        })
    return ScoringWeightsPayload(
        weights=raw.get("weights"),
        explanations=raw.get("explanations"),
        signals=signals,
    )


def filter_resume_keywords(keywords: list[str], resume_text: str) -> list[str]:
    """Keep only keywords that actually occur in the résumé text.

    A keyword also counts as present without its dots ("Node.js" vs
    "nodejs") or without a trailing ".js" ("React.js" vs "react").
    """
    resume_lower = resume_text.lower()
    kept = []
    for keyword in keywords:
        k = keyword.lower().strip()
        if not k:
            continue
        if (
            k in resume_lower
            or k.replace(".", "") in resume_lower
            or _JS_SUFFIX_RE.sub("", k) in resume_lower
        ):
            kept.append(keyword)
        else:
            logger.debug("Dropping résumé keyword not found in text: %s", keyword)
    return kept


def parse_extraction_payload(
    raw: str | Mapping[str, Any],
    resume_text: str | None = None,
) -> ExtractionPayload:
    """Parse extraction output (JSON text or an already-decoded object)."""
    if isinstance(raw, str):
        text = strip_code_fences(raw)
        if not text:
            raise ExtractionPayloadError("Extraction returned an empty response")
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ExtractionPayloadError(f"Extraction response is not valid JSON: {e}") from e
    else:
        data = raw

    if not isinstance(data, Mapping):
        raise ExtractionPayloadError(
            f"Extraction response must be a JSON object, got {type(data).__name__}"
        )

    cv_keywords = _as_str_list(data.get("cvKeywords"))
    if resume_text:
        cv_keywords = filter_resume_keywords(cv_keywords, resume_text)

    jd_keywords = _as_str_list(data.get("jdKeywords"))[: settings.max_jd_keywords]
    must_have = _as_str_list(data.get("mustHaveKeywords"))[: settings.max_must_have_keywords]

    return ExtractionPayload(
        jd_keywords=jd_keywords,
        cv_keywords=cv_keywords,
        must_have_keywords=must_have,
        scoring_weights=_scoring_weights(data.get("scoringWeights")),
        suggestions=_suggestions(data.get("suggestions")),
        extracted_profile=_profile(data.get("extractedProfile")),
        extracted_job_requirements=_requirements(data.get("extractedJobRequirements"), must_have),
    )
