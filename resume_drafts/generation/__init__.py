from .merge import merge_draft_into_document, smart_merge_field
from .selector import (
    StrategyRegistry,
    StrategySelection,
    get_all_strategy_scores,
    get_default_registry,
    get_strategy,
    score_strategy,
    select_strategy,
)
from .service import (
    DraftValidation,
    GenerationResult,
    generate_draft,
    generate_from_profile,
    validate_personal_info,
)
from .strategies import DEFAULT_STRATEGIES, GenerationContext, ResumeStrategy, generate_resume

__all__ = [
    "merge_draft_into_document",
    "smart_merge_field",
    "StrategyRegistry",
    "StrategySelection",
    "get_all_strategy_scores",
    "get_default_registry",
    "get_strategy",
    "score_strategy",
    "select_strategy",
    "DraftValidation",
    "GenerationResult",
    "generate_draft",
    "generate_from_profile",
    "validate_personal_info",
    "DEFAULT_STRATEGIES",
    "GenerationContext",
    "ResumeStrategy",
    "generate_resume",
]
