"""Suitability calculator: weighted combination of the four dimension scores.

    overall = (w.skills * skills + w.experience * experience
               + w.language * language + w.education * education) * 100

rounded half-up to one decimal. The result carries the matched/missing
attribution needed to explain the score.
"""

import logging
import math
from collections.abc import Mapping
from typing import Any

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_requirements import JobRequirements
from models.schemas.scoring_weights import ScoringWeights, WeightExplanations
from models.schemas.suitability_result import SuitabilityResult, SuitabilitySubScores
from services.scoring.dimension_scorers import (
    highest_education_level,
    score_education,
    score_experience,
    score_languages,
    score_skills,
)
from services.scoring.keyword_matcher import KeywordMatcher, default_matcher
from services.scoring.weights import validate_weights

logger = logging.getLogger(__name__)


def round1(value: float) -> float:
    """Round half-up to one decimal place."""
    return math.floor(value * 10 + 0.5) / 10


def _as_explanations(explanations: Any) -> WeightExplanations | None:
    if isinstance(explanations, WeightExplanations):
        return explanations
    if not isinstance(explanations, Mapping):
        return None
    return WeightExplanations.model_validate(
        {k: v for k, v in explanations.items() if isinstance(v, str)}
    )


def calculate_suitability(
    profile: CandidateProfile,
    requirements: JobRequirements,
    custom_weights: ScoringWeights | Mapping[str, Any] | None = None,
    weight_explanations: WeightExplanations | Mapping[str, Any] | None = None,
    matcher: KeywordMatcher = default_matcher,
) -> SuitabilityResult:
    """Score how well a candidate fits a job. Deterministic and side-effect free."""
    weights = validate_weights(custom_weights)

    skills = score_skills(
        profile.skills,
        requirements.all_skills,
        requirements.must_have_skills,
        matcher=matcher,
    )
    experience_score = score_experience(
        profile.total_years_experience,
        requirements.required_years_experience,
    )
    education_score = score_education(
        highest_education_level(profile),
        requirements.required_education_level,
    )
    languages = score_languages(
        profile.language_names,
        requirements.required_languages,
        matcher=matcher,
    )

    sub_scores = SuitabilitySubScores(
        skills_score=skills.score,
        experience_score=experience_score,
        education_score=education_score,
        language_score=languages.score,
    )

    raw_overall = (
        weights.skills * sub_scores.skills_score
        + weights.experience * sub_scores.experience_score
        + weights.language * sub_scores.language_score
        + weights.education * sub_scores.education_score
    ) * 100
    overall_score = min(100.0, max(0.0, round1(raw_overall)))

    logger.debug(
        "Suitability %.1f (skills=%.3f experience=%.3f education=%.3f language=%.3f)",
        overall_score,
        sub_scores.skills_score,
        sub_scores.experience_score,
        sub_scores.education_score,
        sub_scores.language_score,
    )

    return SuitabilityResult(
        overall_score=overall_score,
        sub_scores=sub_scores,
        weights=weights,
        weight_explanations=_as_explanations(weight_explanations),
        matched_skills=skills.matched_skills,
        missing_skills=skills.missing_skills,
        missing_must_have_skills=skills.missing_must_have_skills,
        matched_languages=languages.matched_languages,
        missing_languages=languages.missing_languages,
        has_must_have_penalty=skills.has_must_have_penalty,
    )
