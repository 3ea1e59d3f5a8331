from __future__ import annotations

from fastapi import APIRouter

from resume_drafts.core.config import settings
from resume_drafts.recommend import get_template_recommendations
from resume_drafts.schemas.resume import TemplateRecommendationsRequest, TemplateRecommendationsResponse

router = APIRouter()


@router.post("/templates/recommendations", response_model=TemplateRecommendationsResponse)
async def templates_recommendations(payload: TemplateRecommendationsRequest):
    limit = payload.limit or settings.recommendation_limit
    recommendations = get_template_recommendations(payload.profile, payload.templates)
    return TemplateRecommendationsResponse(recommendations=recommendations[:limit])
