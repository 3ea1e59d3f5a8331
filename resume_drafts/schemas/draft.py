from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, field_validator

from resume_drafts.normalize.utils import generate_id

from .base import CamelModel

SkillLevel = Literal["beginner", "intermediate", "advanced", "expert"]
FontSize = Literal["small", "medium", "large"]
Spacing = Literal["compact", "normal", "relaxed"]

_SKILL_LEVELS = {"beginner", "intermediate", "advanced", "expert"}


class PersonalInfo(CamelModel):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    website: str = ""
    linkedin: str = ""
    github: str = ""
    summary: str = ""
    profile_image: str = ""


class Experience(CamelModel):
    id: str = Field(default_factory=generate_id)
    company: str = ""
    position: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: str = ""
    highlights: list[str] = Field(default_factory=list)


class Education(CamelModel):
    id: str = Field(default_factory=generate_id)
    institution: str = ""
    degree: str = ""
    field: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    gpa: str = ""
    honors: list[str] = Field(default_factory=list)
    description: str = ""


class Skill(CamelModel):
    id: str = Field(default_factory=generate_id)
    name: str
    level: SkillLevel = "intermediate"
    category: str = ""

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> str:
        normalized = str(value or "").strip().lower()
        return normalized if normalized in _SKILL_LEVELS else "intermediate"


class Project(CamelModel):
    id: str = Field(default_factory=generate_id)
    name: str = "Project"
    description: str = ""
    technologies: list[str] = Field(default_factory=list)
    url: str = ""
    github: str = ""
    start_date: str = ""
    end_date: str = ""
    highlights: list[str] = Field(default_factory=list)


class BuilderSettings(CamelModel):
    layout: str = "1-page"
    mode: str = "simple"
    template: str = ""
    color_scheme: str = "blue"
    font_size: FontSize = "medium"
    spacing: Spacing = "normal"
    show_profile_image: bool = False
    section_order: list[str] = Field(
        default_factory=lambda: ["personal", "summary", "experience", "education", "skills"]
    )


class ResumeBuilderData(CamelModel):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    summary: str = ""
    experience: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    settings: BuilderSettings = Field(default_factory=BuilderSettings)
    current_step: str = "personal"
    completed_steps: list[str] = Field(default_factory=list)
