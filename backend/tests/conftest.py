"""Shared test configuration and fixtures."""

import pytest

from models.schemas.candidate_profile import CandidateProfile, EducationEntry, LanguageSkill
from models.schemas.job_requirements import JobRequirements


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "scenario: end-to-end scoring scenarios from the dashboard"
    )


@pytest.fixture
def fullstack_job() -> JobRequirements:
    return JobRequirements(
        required_skills=["React", "Node.js", "AWS"],
        must_have_skills=["React"],
    )


@pytest.fixture
def perfect_candidate() -> CandidateProfile:
    return CandidateProfile(
        skills=["React", "Node.js", "AWS", "PostgreSQL"],
        total_years_experience=6,
        education=[EducationEntry(degree="BSc Computer Science", level=3)],
        languages=[LanguageSkill(language="English", proficiency="native")],
    )
