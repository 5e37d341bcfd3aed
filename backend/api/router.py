from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import (
    AnalysisRequest,
    KeywordSuitabilityRequest,
    SkillDemandRequest,
    SuitabilityRequest,
)
from models.responses import AnalysisResponse
from models.schemas.scoring_weights import DEFAULT_WEIGHTS
from models.schemas.skill_demand import SkillDemandReport
from models.schemas.suitability_result import SuitabilityResult
from services import analysis, skill_demand
from services.scoring import calculate_suitability, calculate_suitability_from_keywords

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "default_weights": DEFAULT_WEIGHTS.model_dump(),
    }


@router.post("/suitability", response_model=SuitabilityResult)
@limiter.limit(settings.rate_limit)
async def suitability(request: Request, body: SuitabilityRequest):
    return calculate_suitability(
        body.profile,
        body.requirements,
        custom_weights=body.custom_weights,
        weight_explanations=body.weight_explanations,
    )


@router.post("/suitability/keywords", response_model=SuitabilityResult)
@limiter.limit(settings.rate_limit)
async def suitability_from_keywords(request: Request, body: KeywordSuitabilityRequest):
    return calculate_suitability_from_keywords(
        body.cv_keywords,
        body.jd_keywords,
        body.must_have_keywords,
        body.additional_data,
    )


@router.post("/analysis", response_model=AnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze(request: Request, body: AnalysisRequest):
    if body.resume_text and len(body.resume_text) > settings.max_resume_text_length:
        raise HTTPException(
            status_code=400,
            detail=f"Resume text too long (max {settings.max_resume_text_length} chars)",
        )
    return analysis.build_analysis(body.extraction, resume_text=body.resume_text)


@router.post("/skills/demand", response_model=SkillDemandReport)
@limiter.limit(settings.rate_limit)
async def skills_demand(request: Request, body: SkillDemandRequest):
    return skill_demand.aggregate_skill_demand(body.applications)
