"""Candidate profile: structured résumé data handed over by the extraction step."""

from typing import Literal

from pydantic import field_validator

from models.schemas.base import CamelModel

Proficiency = Literal["native", "fluent", "intermediate", "basic"]


class PersonalInfo(CamelModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    linkedin: str | None = None
    portfolio: str | None = None


class EducationEntry(CamelModel):
    """A single education entry."""
    degree: str | None = None  # free text, e.g. "MSc Computer Science"
    field: str | None = None
    institution: str | None = None
    year: int | None = None
    level: int | None = None  # 1=High School, 2=Associate, 3=Bachelor, 4=Master, 5=PhD


class ExperienceEntry(CamelModel):
    """A single work experience entry."""
    title: str | None = None
    company: str | None = None
    duration: str | None = None
    years_of_experience: float | None = None
    description: str | None = None


class LanguageSkill(CamelModel):
    language: str
    proficiency: Proficiency | None = None


class CandidateProfile(CamelModel):
    """Candidate side of a suitability comparison.

    Skills are kept exactly as the candidate wrote them; the keyword
    matcher deals with casing and punctuation.
    """
    personal_info: PersonalInfo | None = None
    summary: str | None = None
    skills: list[str] = []
    education: list[EducationEntry] = []
    experience: list[ExperienceEntry] = []
    languages: list[LanguageSkill] = []
    total_years_experience: float | None = None

    @field_validator("skills", "education", "experience", mode="before")
    @classmethod
    def _null_list_as_empty(cls, value):
        return [] if value is None else value

    @field_validator("languages", mode="before")
    @classmethod
    def _accept_plain_language_names(cls, value):
        if value is None:
            return []
        if isinstance(value, list):
            return [{"language": v} if isinstance(v, str) else v for v in value]
        return value

    @property
    def language_names(self) -> list[str]:
        return [entry.language for entry in self.languages]
