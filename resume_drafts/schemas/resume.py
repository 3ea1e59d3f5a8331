from __future__ import annotations

from pydantic import BaseModel, Field

from .draft import ResumeBuilderData
from .profile import UserProfile
from .recommendation import RecommendationResult
from .template import ResumeTemplate


class DraftValidation(BaseModel):
    is_valid: bool
    missing_fields: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class GenerateDraftRequest(BaseModel):
    profile: UserProfile | None = None
    template: ResumeTemplate | None = None
    target_industry: str | None = Field(default=None, max_length=200)
    strategy_override: str | None = Field(default=None, max_length=100)


class GenerateFromStoreRequest(BaseModel):
    template_id: str = Field(min_length=1, max_length=200)
    target_industry: str | None = Field(default=None, max_length=200)
    strategy_override: str | None = Field(default=None, max_length=100)


class GenerateDraftResponse(BaseModel):
    draft: ResumeBuilderData
    strategy_name: str
    confidence: float = Field(ge=0.0, le=1.0)
    reasons: list[str] = Field(default_factory=list)
    validation: DraftValidation


class StrategyScoresRequest(BaseModel):
    profile: UserProfile | None = None


class StrategyScoreItem(BaseModel):
    strategy_name: str
    confidence: float = Field(ge=0.0, le=1.0)
    reasons: list[str] = Field(default_factory=list)


class StrategyScoresResponse(BaseModel):
    scores: list[StrategyScoreItem] = Field(default_factory=list)


class MergeDraftRequest(BaseModel):
    current: ResumeBuilderData
    draft: ResumeBuilderData
    sections: list[str] = Field(default_factory=list, max_length=20)


class TemplateRecommendationsRequest(BaseModel):
    profile: UserProfile | None = None
    templates: list[ResumeTemplate] = Field(default_factory=list, max_length=500)
    limit: int | None = Field(default=None, ge=1, le=500)


class TemplateRecommendationsResponse(BaseModel):
    recommendations: list[RecommendationResult] = Field(default_factory=list)
