"""Skill demand across analysed job applications."""

from models.schemas.base import CamelModel, FrozenCamelModel


class AnalyzedApplication(CamelModel):
    """Keywords extracted for one analysed application."""
    id: str
    jd_keywords: list[str] = []
    cv_keywords: list[str] = []


class SkillDemand(FrozenCamelModel):
    skill: str
    count: int  # applications whose job description asks for the skill
    percent: int  # share of analysed applications, 0-100
    have: bool  # present among the candidate's CV keywords


class SkillDemandReport(FrozenCamelModel):
    """Ranked skill demand and the candidate's coverage of it.

    ``coverage_percent`` is computed over the ranked skills only, so it
    answers "how many of the most demanded skills do I have".
    """
    total_jobs: int = 0
    unique_skills: int = 0
    ranked: tuple[SkillDemand, ...] = ()
    covered_count: int = 0
    coverage_percent: int = 0
    top_skill: str | None = None
    missing_high_demand: tuple[SkillDemand, ...] = ()
