from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from resume_drafts.core.errors import EngineError
from resume_drafts.generation import (
    GenerationResult,
    generate_draft,
    generate_from_profile,
    get_all_strategy_scores,
    merge_draft_into_document,
)
from resume_drafts.schemas.draft import ResumeBuilderData
from resume_drafts.schemas.resume import (
    GenerateDraftRequest,
    GenerateDraftResponse,
    GenerateFromStoreRequest,
    MergeDraftRequest,
    StrategyScoreItem,
    StrategyScoresRequest,
    StrategyScoresResponse,
)
from resume_drafts.store import DocumentStore, get_default_document_store

router = APIRouter()


def _raise_engine_error(exc: EngineError) -> None:
    raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc


def _to_response(result: GenerationResult) -> GenerateDraftResponse:
    return GenerateDraftResponse(
        draft=result.draft,
        strategy_name=result.selection.strategy_name,
        confidence=result.selection.confidence,
        reasons=list(result.selection.reasons),
        validation=result.validation,
    )


@router.post("/resume/generate", response_model=GenerateDraftResponse)
async def resume_generate(payload: GenerateDraftRequest):
    try:
        result = generate_draft(
            payload.profile,
            payload.template,
            target_industry=payload.target_industry,
            strategy_override=payload.strategy_override,
        )
    except EngineError as exc:
        _raise_engine_error(exc)
    return _to_response(result)


@router.post("/users/{user_id}/resume/generate", response_model=GenerateDraftResponse)
async def resume_generate_for_user(
    user_id: str,
    payload: GenerateFromStoreRequest,
    store: DocumentStore = Depends(get_default_document_store),
):
    try:
        result = generate_from_profile(
            store,
            user_id,
            payload.template_id,
            target_industry=payload.target_industry,
            strategy_override=payload.strategy_override,
        )
    except EngineError as exc:
        _raise_engine_error(exc)
    return _to_response(result)


@router.post("/resume/strategies", response_model=StrategyScoresResponse)
async def resume_strategies(payload: StrategyScoresRequest):
    scores = get_all_strategy_scores(payload.profile)
    return StrategyScoresResponse(
        scores=[
            StrategyScoreItem(
                strategy_name=selection.strategy_name,
                confidence=selection.confidence,
                reasons=list(selection.reasons),
            )
            for selection in scores
        ]
    )


@router.post("/resume/merge", response_model=ResumeBuilderData)
async def resume_merge(payload: MergeDraftRequest):
    return merge_draft_into_document(payload.current, payload.draft, payload.sections)
