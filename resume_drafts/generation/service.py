from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from resume_drafts.core.config import settings
from resume_drafts.core.errors import ProfileNotAvailableError, TemplateNotFoundError
from resume_drafts.normalize import normalize_profile
from resume_drafts.schemas.draft import PersonalInfo, ResumeBuilderData
from resume_drafts.schemas.profile import UserProfile
from resume_drafts.schemas.resume import DraftValidation
from resume_drafts.schemas.template import ResumeTemplate
from resume_drafts.store import PROFILES_COLLECTION, TEMPLATES_COLLECTION, DocumentStore

from .selector import StrategyRegistry, StrategySelection, select_strategy
from .strategies import generate_resume

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GenerationResult:
    draft: ResumeBuilderData
    selection: StrategySelection
    validation: DraftValidation


def validate_personal_info(personal_info: PersonalInfo) -> DraftValidation:
    """Full name and email are required; phone and location are recommended."""
    missing_fields = [
        name for name in ("full_name", "email") if not getattr(personal_info, name).strip()
    ]
    warnings = [name for name in ("phone", "location") if not getattr(personal_info, name).strip()]
    return DraftValidation(
        is_valid=not missing_fields,
        missing_fields=missing_fields,
        warnings=warnings,
    )


def _coerce_profile(profile: UserProfile | Mapping[str, Any] | None) -> UserProfile:
    if profile is None:
        raise ProfileNotAvailableError()
    if isinstance(profile, UserProfile):
        return profile
    return UserProfile.model_validate(dict(profile))


def _coerce_template(template: ResumeTemplate | Mapping[str, Any] | None) -> ResumeTemplate:
    if template is None:
        raise TemplateNotFoundError()
    if isinstance(template, ResumeTemplate):
        return template
    return ResumeTemplate.model_validate(dict(template))


def generate_draft(
    profile: UserProfile | Mapping[str, Any] | None,
    template: ResumeTemplate | Mapping[str, Any] | None,
    *,
    target_industry: str | None = None,
    strategy_override: str | None = None,
    registry: StrategyRegistry | None = None,
) -> GenerationResult:
    """Select the best-fitting strategy and build a fresh draft.

    Raises ``ProfileNotAvailableError`` or ``TemplateNotFoundError`` when an
    input is missing.
    """
    source_profile = _coerce_profile(profile)
    source_template = _coerce_template(template)

    normalized = normalize_profile(source_profile)
    selection = select_strategy(normalized, strategy_override, registry=registry)
    draft = generate_resume(selection.strategy, normalized, source_template, target_industry)

    validation = validate_personal_info(draft.personal_info)
    if validation.missing_fields:
        logger.warning("draft_missing_required_fields fields=%s", validation.missing_fields)
    if validation.warnings:
        logger.info("draft_missing_recommended_fields fields=%s", validation.warnings)
    if settings.log_generation_details:
        logger.info(
            "draft_generated strategy=%s template=%s experience=%s education=%s skills=%s projects=%s",
            selection.strategy_name,
            source_template.id,
            len(draft.experience),
            len(draft.education),
            len(draft.skills),
            len(draft.projects),
        )

    return GenerationResult(draft=draft, selection=selection, validation=validation)


def load_profile(store: DocumentStore, user_id: str) -> UserProfile:
    matches = store.find(PROFILES_COLLECTION, user=user_id)
    if not matches:
        raise ProfileNotAvailableError()
    return UserProfile.model_validate(matches[0])


def load_template(store: DocumentStore, template_id: str) -> ResumeTemplate:
    document = store.get(TEMPLATES_COLLECTION, template_id)
    if document is None:
        raise TemplateNotFoundError()
    return ResumeTemplate.model_validate(document)


def generate_from_profile(
    store: DocumentStore,
    user_id: str,
    template_id: str,
    *,
    target_industry: str | None = None,
    strategy_override: str | None = None,
    registry: StrategyRegistry | None = None,
) -> GenerationResult:
    profile = load_profile(store, user_id)
    template = load_template(store, template_id)
    return generate_draft(
        profile,
        template,
        target_industry=target_industry,
        strategy_override=strategy_override,
        registry=registry,
    )
