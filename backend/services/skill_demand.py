"""Skill demand aggregation over analysed applications.

Flow:
    applications (jd/cv keywords)
      ├─ canonicalize_skill()     → one display name per skill
      ├─ count demand per skill   → distinct application ids
      └─ rank + coverage          → SkillDemandReport

Canonical names come from the same alias table the scorer uses, so
"k8s" in one job description and "Kubernetes" in another count as the
same demanded skill.
"""

import logging
import math
from collections.abc import Iterable, Mapping

from config import settings
from models.schemas.skill_demand import AnalyzedApplication, SkillDemand, SkillDemandReport
from services.scoring.keyword_matcher import DEFAULT_ALIASES, normalize_keyword

logger = logging.getLogger(__name__)

# Display names for the alias table's canonical keys
DISPLAY_NAMES: Mapping[str, str] = {
    "javascript": "JavaScript",
    "typescript": "TypeScript",
    "react": "React",
    "node": "Node.js",
    "next": "Next.js",
    "vue": "Vue.js",
    "angular": "Angular",
    "python": "Python",
    "c++": "C++",
    "c#": "C#",
    "postgresql": "PostgreSQL",
    "mongodb": "MongoDB",
    "kubernetes": "Kubernetes",
    "aws": "AWS",
    "gcp": "GCP",
    "ci/cd": "CI/CD",
    "ml": "Machine Learning",
    "ai": "AI",
    "nlp": "NLP",
}

# Common skills outside the alias table that still need a fixed spelling
EXTRA_SKILLS: Mapping[str, tuple[str, ...]] = {
    "Docker": (),
    "Git": (),
    "GraphQL": (),
    "REST API": ("restapi", "rest"),
    "Tailwind CSS": ("tailwind",),
    "CSS": (),
    "HTML": (),
    "SQL": (),
    "Redux": (),
    "Prisma": (),
    "Supabase": (),
}


def _build_lookup() -> dict[str, str]:
    lookup: dict[str, str] = {}
    for canonical, alternatives in DEFAULT_ALIASES.items():
        display = DISPLAY_NAMES.get(canonical, canonical)
        for variant in (canonical, *alternatives, display):
            lookup[normalize_keyword(variant)] = display
    for display, alternatives in EXTRA_SKILLS.items():
        for variant in (display, *alternatives):
            lookup[normalize_keyword(variant)] = display
    lookup.pop("", None)
    return lookup


_CANONICAL_LOOKUP = _build_lookup()


def canonicalize_skill(skill: str) -> str:
    """Map a raw keyword to its display name.

    Unknown skills are capitalized ("kafka" -> "Kafka").
    """
    known = _CANONICAL_LOOKUP.get(normalize_keyword(skill))
    if known:
        return known
    text = skill.strip()
    return text[:1].upper() + text[1:].lower()


def _percent(part: int, whole: int) -> int:
    return math.floor(part / whole * 100 + 0.5)


def aggregate_skill_demand(applications: Iterable[AnalyzedApplication]) -> SkillDemandReport:
    """Rank skills by how many applications demand them and measure coverage."""
    applications = list(applications)
    total_jobs = len(applications)
    if not total_jobs:
        return SkillDemandReport()

    # canonical skill -> ids of applications asking for it, in first-seen order
    demand: dict[str, set[str]] = {}
    cv_skills: set[str] = set()
    for application in applications:
        for keyword in application.jd_keywords:
            if not keyword.strip():
                continue
            demand.setdefault(canonicalize_skill(keyword), set()).add(application.id)
        for keyword in application.cv_keywords:
            if keyword.strip():
                cv_skills.add(canonicalize_skill(keyword))

    ranked = sorted(
        (
            SkillDemand(
                skill=skill,
                count=len(ids),
                percent=_percent(len(ids), total_jobs),
                have=skill in cv_skills,
            )
            for skill, ids in demand.items()
        ),
        key=lambda entry: entry.count,
        reverse=True,
    )[: settings.max_demand_skills_ranked]

    covered = [entry for entry in ranked if entry.have]
    missing = [entry for entry in ranked if not entry.have]

    logger.info(
        "Skill demand over %d applications: %d unique skills, %d/%d top skills covered",
        total_jobs,
        len(demand),
        len(covered),
        len(ranked),
    )

    return SkillDemandReport(
        total_jobs=total_jobs,
        unique_skills=len(demand),
        ranked=tuple(ranked),
        covered_count=len(covered),
        coverage_percent=_percent(len(covered), len(ranked)) if ranked else 0,
        top_skill=ranked[0].skill if ranked else None,
        missing_high_demand=tuple(missing[: settings.max_missing_demand_skills]),
    )
