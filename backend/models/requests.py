from typing import Any

from pydantic import Field

from models.schemas.base import CamelModel
from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_requirements import JobRequirements
from models.schemas.skill_demand import AnalyzedApplication
from services.scoring.keyword_adapter import AdditionalScoringData


class SuitabilityRequest(CamelModel):
    profile: CandidateProfile
    requirements: JobRequirements
    # Left raw: malformed weights fall back to defaults instead of a 422
    custom_weights: Any = None
    weight_explanations: Any = None


class KeywordSuitabilityRequest(CamelModel):
    cv_keywords: list[str]
    jd_keywords: list[str]
    must_have_keywords: list[str] = []
    additional_data: AdditionalScoringData | None = None


class AnalysisRequest(CamelModel):
    extraction: str | dict[str, Any] = Field(..., description="Raw JSON text or decoded object from the extraction step")
    resume_text: str | None = Field(None, description="Plain text resume, used to drop hallucinated keywords")


class SkillDemandRequest(CamelModel):
    applications: list[AnalyzedApplication] = []
