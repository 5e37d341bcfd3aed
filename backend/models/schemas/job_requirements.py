"""Job side of a suitability comparison."""

from pydantic import field_validator

from models.schemas.base import CamelModel


class JobRequirements(CamelModel):
    """Requirements extracted from a job description.

    Required and preferred skills are pooled for scoring; must-have skills
    carry an extra penalty when missing. A missing or zero requirement
    means the dimension is not constrained.
    """
    required_skills: list[str] = []
    preferred_skills: list[str] = []
    must_have_skills: list[str] = []
    required_years_experience: float | None = None
    required_education_level: int | None = None  # 1-5, same scale as EducationEntry.level
    required_languages: list[str] = []

    @field_validator(
        "required_skills", "preferred_skills", "must_have_skills", "required_languages",
        mode="before",
    )
    @classmethod
    def _null_list_as_empty(cls, value):
        return [] if value is None else value

    @property
    def all_skills(self) -> list[str]:
        return [*self.required_skills, *self.preferred_skills]
