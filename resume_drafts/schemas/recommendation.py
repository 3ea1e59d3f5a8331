from __future__ import annotations

from pydantic import BaseModel, Field

from .template import ResumeTemplate


class ScoreBreakdown(BaseModel):
    industry: int = Field(default=0, ge=0)
    experience_level: int = Field(default=0, ge=0)
    job_type: int = Field(default=0, ge=0)
    style: int = Field(default=0, ge=0)
    completeness: int = Field(default=0, ge=0)

    def total(self) -> int:
        return self.industry + self.experience_level + self.job_type + self.style + self.completeness


class TemplateScore(BaseModel):
    template_id: str
    score: int = Field(ge=0, le=100)
    reasons: list[str] = Field(default_factory=list)
    breakdown: ScoreBreakdown


class RecommendationResult(BaseModel):
    template: ResumeTemplate
    score: TemplateScore
    is_recommended: bool
    rank: int = Field(ge=1)
