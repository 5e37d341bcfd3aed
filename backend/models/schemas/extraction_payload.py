"""Structured output of the AI extraction step, after sanitizing."""

from typing import Any

from models.responses import Suggestion
from models.schemas.base import CamelModel
from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_requirements import JobRequirements
from models.schemas.scoring_weights import WeightSignals


class ScoringWeightsPayload(CamelModel):
    """Dynamic weights proposed by the extraction step.

    ``weights`` and ``explanations`` stay raw; the weight validator and the
    calculator decide what is usable.
    """
    weights: Any = None
    explanations: Any = None
    signals: WeightSignals | None = None


class ExtractionPayload(CamelModel):
    jd_keywords: list[str] = []
    cv_keywords: list[str] = []
    must_have_keywords: list[str] = []
    scoring_weights: ScoringWeightsPayload = ScoringWeightsPayload()
    suggestions: list[Suggestion] = []
    extracted_profile: CandidateProfile = CandidateProfile()
    extracted_job_requirements: JobRequirements = JobRequirements()
