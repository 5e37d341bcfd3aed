"""Tests for the suitability calculator."""

import json

import pytest
from pydantic import ValidationError

from models.schemas.candidate_profile import CandidateProfile, EducationEntry
from models.schemas.job_requirements import JobRequirements
from models.schemas.scoring_weights import DEFAULT_WEIGHTS, WeightExplanations
from models.schemas.suitability_result import SuitabilityResult
from services.scoring.calculator import calculate_suitability, round1
from services.scoring.keyword_matcher import KeywordMatcher


def _weighted_sum(result: SuitabilityResult) -> float:
    w, s = result.weights, result.sub_scores
    return (
        w.skills * s.skills_score
        + w.experience * s.experience_score
        + w.language * s.language_score
        + w.education * s.education_score
    )


class TestRound1:
    def test_rounds_half_up(self):
        assert round1(66.65) == pytest.approx(66.7)
        assert round1(12.25) == 12.3

    def test_whole_number(self):
        assert round1(100.0) == 100.0


@pytest.mark.scenario
class TestScenarios:
    def test_partial_match_without_penalty(self, fullstack_job):
        profile = CandidateProfile(skills=["react", "typescript"])
        result = calculate_suitability(profile, fullstack_job)

        assert result.matched_skills == ("React",)
        assert result.missing_skills == ("Node.js", "AWS")
        assert result.missing_must_have_skills == ()
        assert not result.has_must_have_penalty
        assert result.sub_scores.skills_score == pytest.approx(1 / 3, abs=1e-3)

    def test_missing_must_have(self, fullstack_job):
        profile = CandidateProfile(skills=["typescript"])
        result = calculate_suitability(profile, fullstack_job)

        assert result.missing_must_have_skills == ("React",)
        assert result.has_must_have_penalty
        assert result.sub_scores.skills_score == 0.0

    def test_perfect_match_is_exactly_100(self, perfect_candidate):
        job = JobRequirements(
            required_skills=["React", "AWS"],
            preferred_skills=["PostgreSQL"],
            must_have_skills=["React"],
            required_years_experience=5,
            required_education_level=3,
            required_languages=["English"],
        )
        result = calculate_suitability(perfect_candidate, job)

        assert result.weights == DEFAULT_WEIGHTS
        assert result.sub_scores.skills_score == 1.0
        assert result.sub_scores.experience_score == 1.0
        assert result.sub_scores.education_score == 1.0
        assert result.sub_scores.language_score == 1.0
        assert result.overall_score == 100.0

    def test_unknown_experience_is_half(self):
        job = JobRequirements(required_years_experience=5)
        assert calculate_suitability(CandidateProfile(), job).sub_scores.experience_score == 0.5

        veteran = CandidateProfile(total_years_experience=10)
        assert calculate_suitability(veteran, job).sub_scores.experience_score == 1.0


class TestNoRequirements:
    def test_empty_job_scores_full(self):
        result = calculate_suitability(CandidateProfile(skills=["cobol"]), JobRequirements())
        assert result.overall_score == 100.0
        assert result.matched_skills == ()
        assert result.missing_languages == ()


class TestComposition:
    def test_preferred_skills_are_pooled(self):
        profile = CandidateProfile(skills=["Docker"])
        job = JobRequirements(required_skills=["Python"], preferred_skills=["Docker"])
        result = calculate_suitability(profile, job)
        assert result.matched_skills == ("Docker",)
        assert result.missing_skills == ("Python",)
        assert result.sub_scores.skills_score == 0.5

    def test_education_inferred_from_degree(self):
        profile = CandidateProfile(education=[EducationEntry(degree="Master of Science")])
        job = JobRequirements(required_education_level=5)
        result = calculate_suitability(profile, job)
        assert result.sub_scores.education_score == pytest.approx(0.8)

    def test_languages_accept_plain_names(self):
        profile = CandidateProfile(languages=["English", "Greek"])
        job = JobRequirements(required_languages=["Greek", "French"])
        result = calculate_suitability(profile, job)
        assert result.matched_languages == ("Greek",)
        assert result.missing_languages == ("French",)
        assert result.sub_scores.language_score == 0.5

    @pytest.mark.parametrize(
        "weights",
        [
            None,
            {"skills": 0.7, "experience": 0.1, "education": 0.1, "language": 0.1},
            {"skills": 2, "experience": 0.1},
            {"skills": 0.3, "experience": 0.3, "education": 0.3, "language": 0.3},
        ],
    )
    def test_weighted_sum_identity(self, weights):
        profile = CandidateProfile(
            skills=["python", "sql"],
            total_years_experience=2,
            languages=["English"],
        )
        job = JobRequirements(
            required_skills=["Python", "SQL", "Airflow"],
            must_have_skills=["Airflow"],
            required_years_experience=4,
            required_education_level=3,
            required_languages=["English", "Dutch"],
        )
        result = calculate_suitability(profile, job, custom_weights=weights)
        assert result.overall_score / 100 == pytest.approx(_weighted_sum(result), abs=0.05 / 100 + 1e-9)
        assert 0.0 <= result.overall_score <= 100.0

    def test_custom_weights_change_score(self):
        profile = CandidateProfile(skills=["python"])
        job = JobRequirements(required_skills=["Python"], required_years_experience=10)
        skills_heavy = calculate_suitability(
            profile, job, {"skills": 0.9, "experience": 0.1, "education": 0.0, "language": 0.0}
        )
        experience_heavy = calculate_suitability(
            profile, job, {"skills": 0.1, "experience": 0.9, "education": 0.0, "language": 0.0}
        )
        assert skills_heavy.overall_score > experience_heavy.overall_score

    def test_removing_must_have_match_never_increases_overall(self, fullstack_job):
        with_react = calculate_suitability(CandidateProfile(skills=["React", "AWS"]), fullstack_job)
        without_react = calculate_suitability(CandidateProfile(skills=["AWS"]), fullstack_job)
        assert without_react.overall_score <= with_react.overall_score

    def test_explanations_echoed(self):
        explanations = {"skills": "Heavy stack requirements", "language": 42}
        result = calculate_suitability(
            CandidateProfile(), JobRequirements(), weight_explanations=explanations
        )
        assert result.weight_explanations == WeightExplanations(skills="Heavy stack requirements")

    def test_no_explanations(self):
        result = calculate_suitability(CandidateProfile(), JobRequirements())
        assert result.weight_explanations is None

    def test_custom_matcher(self):
        profile = CandidateProfile(skills=["k8s"])
        job = JobRequirements(required_skills=["Kubernetes"])
        assert calculate_suitability(profile, job).sub_scores.skills_score == 1.0
        no_aliases = calculate_suitability(profile, job, matcher=KeywordMatcher({}))
        assert no_aliases.sub_scores.skills_score == 0.0


class TestResultContract:
    def test_idempotent(self, perfect_candidate, fullstack_job):
        first = calculate_suitability(perfect_candidate, fullstack_job)
        second = calculate_suitability(perfect_candidate, fullstack_job)
        assert first == second
        assert first.model_dump_json() == second.model_dump_json()

    def test_result_is_frozen(self, perfect_candidate, fullstack_job):
        result = calculate_suitability(perfect_candidate, fullstack_job)
        with pytest.raises(ValidationError):
            result.overall_score = 0

    def test_json_is_camel_case_and_lossless(self, fullstack_job):
        result = calculate_suitability(CandidateProfile(skills=["react"]), fullstack_job)
        data = json.loads(result.model_dump_json(by_alias=True))

        assert isinstance(data["overallScore"], float)
        assert data["matchedSkills"] == ["React"]
        assert data["missingSkills"] == ["Node.js", "AWS"]
        assert data["hasMustHavePenalty"] is False
        assert set(data["subScores"]) == {
            "skillsScore", "experienceScore", "educationScore", "languageScore"
        }
        assert SuitabilityResult.model_validate(data) == result
