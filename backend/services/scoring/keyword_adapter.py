"""Suitability from flat keyword lists.

The extraction step often returns flat keyword arrays rather than
structured profiles; this wraps them into the calculator's input models.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import field_validator

from models.schemas.base import CamelModel
from models.schemas.candidate_profile import CandidateProfile, EducationEntry, LanguageSkill
from models.schemas.job_requirements import JobRequirements
from models.schemas.suitability_result import SuitabilityResult
from services.scoring.calculator import calculate_suitability
from services.scoring.keyword_matcher import KeywordMatcher, default_matcher


class AdditionalScoringData(CamelModel):
    """Optional scalar data accompanying flat keyword lists."""
    candidate_years_experience: float | None = None
    required_years_experience: float | None = None
    candidate_education_level: int | None = None
    required_education_level: int | None = None
    candidate_languages: list[str] = []
    required_languages: list[str] = []
    # Left raw: the weight validator decides what is usable
    custom_weights: Any = None
    weight_explanations: Any = None

    @field_validator("candidate_languages", "required_languages", mode="before")
    @classmethod
    def _null_languages_as_empty(cls, value):
        return [] if value is None else value


def calculate_suitability_from_keywords(
    cv_keywords: Sequence[str],
    jd_keywords: Sequence[str],
    must_have_keywords: Sequence[str] = (),
    additional_data: AdditionalScoringData | Mapping[str, Any] | None = None,
    matcher: KeywordMatcher = default_matcher,
) -> SuitabilityResult:
    if additional_data is None:
        data = AdditionalScoringData()
    elif isinstance(additional_data, AdditionalScoringData):
        data = additional_data
    else:
        data = AdditionalScoringData.model_validate(additional_data)

    education = []
    if data.candidate_education_level is not None:
        education.append(EducationEntry(level=data.candidate_education_level))

    profile = CandidateProfile(
        skills=list(cv_keywords),
        education=education,
        languages=[LanguageSkill(language=name) for name in data.candidate_languages],
        total_years_experience=data.candidate_years_experience,
    )
    requirements = JobRequirements(
        required_skills=list(jd_keywords),
        preferred_skills=[],
        must_have_skills=list(must_have_keywords),
        required_years_experience=data.required_years_experience,
        required_education_level=data.required_education_level,
        required_languages=data.required_languages,
    )

    return calculate_suitability(
        profile,
        requirements,
        custom_weights=data.custom_weights,
        weight_explanations=data.weight_explanations,
        matcher=matcher,
    )
