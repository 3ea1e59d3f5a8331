from .draft import (
    BuilderSettings,
    Education,
    Experience,
    PersonalInfo,
    Project,
    ResumeBuilderData,
    Skill,
)
from .profile import UserProfile
from .recommendation import RecommendationResult, ScoreBreakdown, TemplateScore
from .resume import (
    DraftValidation,
    GenerateDraftRequest,
    GenerateDraftResponse,
    GenerateFromStoreRequest,
    MergeDraftRequest,
    StrategyScoreItem,
    StrategyScoresRequest,
    StrategyScoresResponse,
    TemplateRecommendationsRequest,
    TemplateRecommendationsResponse,
)
from .template import ResumeTemplate, StarterData, StarterSettings, TemplateSettings, TemplateTargeting

__all__ = [
    "BuilderSettings",
    "Education",
    "Experience",
    "PersonalInfo",
    "Project",
    "ResumeBuilderData",
    "Skill",
    "UserProfile",
    "RecommendationResult",
    "ScoreBreakdown",
    "TemplateScore",
    "DraftValidation",
    "GenerateDraftRequest",
    "GenerateDraftResponse",
    "GenerateFromStoreRequest",
    "MergeDraftRequest",
    "StrategyScoreItem",
    "StrategyScoresRequest",
    "StrategyScoresResponse",
    "TemplateRecommendationsRequest",
    "TemplateRecommendationsResponse",
    "ResumeTemplate",
    "StarterData",
    "StarterSettings",
    "TemplateSettings",
    "TemplateTargeting",
]
