from typing import Literal

from models.schemas.base import CamelModel
from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_requirements import JobRequirements
from models.schemas.scoring_weights import WeightSignals
from models.schemas.suitability_result import SuitabilityResult

Priority = Literal["high", "medium", "low"]


class Suggestion(CamelModel):
    category: str = "General"
    text: str
    priority: Priority = "medium"


class SkillGap(CamelModel):
    skill: str
    priority: Literal["Must-have", "Required"] = "Required"


class AnalysisIssue(CamelModel):
    type: str
    severity: Literal["low", "medium", "high"] = "medium"
    message: str


class ScoreBreakdown(CamelModel):
    """Sub-scores as integer percentages for the dashboard bars."""
    skills_match: int = 0
    experience_match: int = 0
    education_match: int = 0
    language_match: int = 0


class AnalysisResponse(CamelModel):
    overall_match: int = 0
    score_breakdown: ScoreBreakdown = ScoreBreakdown()
    ats_score: int = 0
    matched_skills: list[str] = []
    missing_skills: list[SkillGap] = []
    must_have_skills: list[str] = []
    issues: list[AnalysisIssue] = []
    suggestions: list[Suggestion] = []
    jd_keywords: list[str] = []
    cv_keywords: list[str] = []
    weight_signals: WeightSignals | None = None
    extracted_profile: CandidateProfile = CandidateProfile()
    extracted_job_requirements: JobRequirements = JobRequirements()
    suitability: SuitabilityResult | None = None
    degraded: bool = False
    error_message: str = ""
