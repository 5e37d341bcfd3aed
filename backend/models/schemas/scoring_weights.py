"""Scoring weights and their human-readable justifications."""

from models.schemas.base import CamelModel, FrozenCamelModel


class ScoringWeights(FrozenCamelModel):
    """Relative importance of the four scoring dimensions (sums to 1.0)."""
    skills: float
    experience: float
    education: float
    language: float

    @property
    def total(self) -> float:
        return self.skills + self.experience + self.education + self.language


DEFAULT_WEIGHTS = ScoringWeights(skills=0.50, experience=0.25, education=0.10, language=0.15)

WEIGHT_FIELDS: tuple[str, ...] = ("skills", "experience", "education", "language")


class WeightExplanations(FrozenCamelModel):
    """Why each weight was chosen. Informational only."""
    skills: str | None = None
    experience: str | None = None
    education: str | None = None
    language: str | None = None


class WeightSignals(CamelModel):
    """Job-description signals the extraction step used to pick weights."""
    is_experience_heavy: bool = False
    is_education_required: bool = False
    is_language_critical: bool = False
    is_skills_heavy: bool = False
