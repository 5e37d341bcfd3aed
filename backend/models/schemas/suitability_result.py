"""Engine output: composite fit score with full attribution."""

from models.schemas.base import FrozenCamelModel
from models.schemas.scoring_weights import ScoringWeights, WeightExplanations


class SuitabilitySubScores(FrozenCamelModel):
    skills_score: float  # 0.0-1.0
    experience_score: float  # 0.0-1.0
    education_score: float  # 0.0-1.0
    language_score: float  # 0.0-1.0


class SuitabilityResult(FrozenCamelModel):
    """Immutable result of one suitability calculation.

    Skill and language lists hold job-side strings with their original
    casing, in job order.
    """
    overall_score: float  # 0-100, one decimal
    sub_scores: SuitabilitySubScores
    weights: ScoringWeights
    weight_explanations: WeightExplanations | None = None
    matched_skills: tuple[str, ...] = ()
    missing_skills: tuple[str, ...] = ()
    missing_must_have_skills: tuple[str, ...] = ()
    matched_languages: tuple[str, ...] = ()
    missing_languages: tuple[str, ...] = ()
    has_must_have_penalty: bool = False
