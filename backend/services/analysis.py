"""Analysis orchestration: extraction payload -> suitability -> dashboard response.

Flow:
    raw extraction JSON
      ├─ parse_extraction_payload()               → ExtractionPayload
      ├─ calculate_suitability_from_keywords()    → SuitabilityResult
      └─ _to_analysis_response()                  → AnalysisResponse

A payload that cannot be parsed yields a degraded response instead of an
error, so the dashboard can still render the application.
"""

import logging
import math
from collections.abc import Mapping
from typing import Any

from config import settings
from models.responses import (
    AnalysisIssue,
    AnalysisResponse,
    ScoreBreakdown,
    SkillGap,
    Suggestion,
)
from models.schemas.extraction_payload import ExtractionPayload
from models.schemas.suitability_result import SuitabilityResult
from services.extraction_parser import ExtractionPayloadError, parse_extraction_payload
from services.scoring import AdditionalScoringData, calculate_suitability_from_keywords
from services.scoring.dimension_scorers import highest_education_level
from services.scoring.keyword_matcher import normalize_keyword

logger = logging.getLogger(__name__)

DEFAULT_SUGGESTION = Suggestion(
    category="General",
    text="Resume looks good - consider tailoring keywords more closely to the job.",
    priority="medium",
)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _percent(score: float) -> int:
    return _round_half_up(score * 100)


def score_payload(payload: ExtractionPayload) -> SuitabilityResult:
    """Run the keyword adapter over a parsed extraction payload."""
    profile = payload.extracted_profile
    requirements = payload.extracted_job_requirements
    additional = AdditionalScoringData(
        candidate_years_experience=profile.total_years_experience,
        required_years_experience=requirements.required_years_experience,
        candidate_education_level=highest_education_level(profile),
        required_education_level=requirements.required_education_level,
        candidate_languages=profile.language_names,
        required_languages=requirements.required_languages,
        custom_weights=payload.scoring_weights.weights,
        weight_explanations=payload.scoring_weights.explanations,
    )
    return calculate_suitability_from_keywords(
        payload.cv_keywords,
        payload.jd_keywords,
        payload.must_have_keywords,
        additional,
    )


def _to_analysis_response(
    payload: ExtractionPayload, suitability: SuitabilityResult
) -> AnalysisResponse:
    sub = suitability.sub_scores
    must_have = {normalize_keyword(s) for s in suitability.missing_must_have_skills}
    missing_skills = [
        SkillGap(
            skill=skill,
            priority="Must-have" if normalize_keyword(skill) in must_have else "Required",
        )
        for skill in suitability.missing_skills[: settings.max_missing_skills_shown]
    ]

    return AnalysisResponse(
        overall_match=_round_half_up(suitability.overall_score),
        score_breakdown=ScoreBreakdown(
            skills_match=_percent(sub.skills_score),
            experience_match=_percent(sub.experience_score),
            education_match=_percent(sub.education_score),
            language_match=_percent(sub.language_score),
        ),
        ats_score=_percent(sub.skills_score),
        matched_skills=list(suitability.matched_skills[: settings.max_matched_skills_shown]),
        missing_skills=missing_skills,
        must_have_skills=payload.must_have_keywords,
        suggestions=payload.suggestions or [DEFAULT_SUGGESTION],
        jd_keywords=payload.jd_keywords,
        cv_keywords=payload.cv_keywords[: settings.max_cv_keywords_shown],
        weight_signals=payload.scoring_weights.signals,
        extracted_profile=payload.extracted_profile,
        extracted_job_requirements=payload.extracted_job_requirements,
        suitability=suitability,
    )


def _degraded_response(reason: str) -> AnalysisResponse:
    return AnalysisResponse(
        degraded=True,
        error_message=(
            "Analysis failed. Please check the AI service configuration or try again "
            "with a shorter job description."
        ),
        issues=[AnalysisIssue(type="ai_failure", severity="high", message=reason)],
        suggestions=[
            Suggestion(
                category="General",
                text="Ensure the AI service is reachable and try again.",
                priority="high",
            )
        ],
    )


def build_analysis(
    raw_extraction: str | Mapping[str, Any],
    resume_text: str | None = None,
) -> AnalysisResponse:
    """Score an extraction payload and shape it for the dashboard."""
    try:
        payload = parse_extraction_payload(raw_extraction, resume_text=resume_text)
    except ExtractionPayloadError as e:
        logger.error("Could not read extraction payload: %s", e)
        return _degraded_response("AI model returned an invalid response.")

    suitability = score_payload(payload)
    logger.info(
        "Analysis scored %.1f (%d/%d job keywords matched, must-have penalty=%s)",
        suitability.overall_score,
        len(suitability.matched_skills),
        len(payload.jd_keywords),
        suitability.has_must_have_penalty,
    )
    return _to_analysis_response(payload, suitability)
