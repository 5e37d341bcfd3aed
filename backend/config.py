import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]
    debug: bool = False
    log_level: str = "INFO"
    rate_limit: str = "30/minute"

    # Limits applied to the AI extraction payload
    max_jd_keywords: int = 20
    max_must_have_keywords: int = 10
    max_suggestions: int = 6

    # Dashboard response trimming
    max_cv_keywords_shown: int = 15
    max_matched_skills_shown: int = 6
    max_missing_skills_shown: int = 10

    max_resume_text_length: int = 50000

    # Skill demand view
    max_demand_skills_ranked: int = 25
    max_missing_demand_skills: int = 10

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
