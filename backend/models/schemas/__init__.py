"""Pydantic contracts for the suitability engine."""

from models.schemas.candidate_profile import CandidateProfile, EducationEntry, LanguageSkill
from models.schemas.job_requirements import JobRequirements
from models.schemas.scoring_weights import (
    DEFAULT_WEIGHTS,
    ScoringWeights,
    WeightExplanations,
    WeightSignals,
)
from models.schemas.skill_demand import AnalyzedApplication, SkillDemand, SkillDemandReport
from models.schemas.suitability_result import SuitabilityResult, SuitabilitySubScores

__all__ = [
    "CandidateProfile",
    "EducationEntry",
    "LanguageSkill",
    "JobRequirements",
    "DEFAULT_WEIGHTS",
    "ScoringWeights",
    "WeightExplanations",
    "WeightSignals",
    "AnalyzedApplication",
    "SkillDemand",
    "SkillDemandReport",
    "SuitabilityResult",
    "SuitabilitySubScores",
]
