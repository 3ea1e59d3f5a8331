from __future__ import annotations

from pydantic import Field

from .base import CamelModel
from .draft import Education, Experience, FontSize, PersonalInfo, Project, Skill, Spacing


class TemplateSettings(CamelModel):
    template: str = ""
    color_scheme: str = "blue"
    font_size: FontSize = "medium"
    spacing: Spacing = "normal"
    show_profile_image: bool = False
    section_order: list[str] = Field(
        default_factory=lambda: ["personal", "summary", "experience", "education", "skills"]
    )


class StarterSettings(CamelModel):
    layout: str | None = None
    mode: str | None = None


class StarterData(CamelModel):
    personal_info: PersonalInfo | None = None
    summary: str = ""
    experience: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    settings: StarterSettings | None = None


class TemplateTargeting(CamelModel):
    industries: list[str] = Field(default_factory=list)
    experience_levels: list[str] = Field(default_factory=list)
    job_types: list[str] = Field(default_factory=list)


class ResumeTemplate(CamelModel):
    id: str
    name: str = ""
    description: str = ""
    category: str = ""
    tags: list[str] = Field(default_factory=list)
    popularity: float = 0.0
    is_premium: bool = False
    settings: TemplateSettings = Field(default_factory=TemplateSettings)
    starter_data: StarterData | None = None
    targeting: TemplateTargeting | None = None
