"""Passage browsing and assessment submission routes."""

import logging

from fastapi import APIRouter, Depends

from speedlearn.api.dependencies import get_passage_catalog
from speedlearn.api.errors import APIError
from speedlearn.models.enums import Difficulty
from speedlearn.schemas.assessment import (
    AnswerReviewOut,
    MetricsOut,
    PassageInfo,
    SubmitRequest,
    SubmitResponse,
)
from speedlearn.schemas.passage import (
    ModuleListResponse,
    ModuleOut,
    PassageListItem,
    PassageOut,
)
from speedlearn.services.passages import PassageCatalog
from speedlearn.services.scoring import ScoringInputError, assess

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/modules", response_model=ModuleListResponse)
def list_modules(catalog: PassageCatalog = Depends(get_passage_catalog)) -> ModuleListResponse:
    """List passage modules, without their passage ids."""
    modules = [ModuleOut.model_validate(m) for m in catalog.modules()]
    return ModuleListResponse(modules=modules, total=len(modules))


@router.get("/passages", response_model=list[PassageListItem])
def list_passages(
    difficulty: Difficulty | None = None,
    category: str | None = None,
    module: str | None = None,
    catalog: PassageCatalog = Depends(get_passage_catalog),
) -> list[PassageListItem]:
    """List passages, optionally filtered by module, category and difficulty."""
    if module is not None and catalog.get_module(module) is None:
        raise APIError.module_not_found(module)

    passages = catalog.by_module(module) if module is not None else catalog.all()
    if category:
        wanted = category.lower()
        passages = [p for p in passages if p.category.lower() == wanted]
    if difficulty:
        passages = [p for p in passages if p.difficulty == difficulty]
    return [PassageListItem.model_validate(p) for p in passages]


@router.get("/passages/random", response_model=PassageOut)
def random_passage(
    difficulty: Difficulty | None = None,
    module: str | None = None,
    catalog: PassageCatalog = Depends(get_passage_catalog),
) -> PassageOut:
    """Return a random passage, optionally from one module, without answers."""
    if module is not None and catalog.get_module(module) is None:
        raise APIError.module_not_found(module)

    passage = catalog.pick_random(difficulty, module=module)
    if passage is None:
        raise APIError.no_passage_available(difficulty, module)
    return PassageOut.model_validate(passage)


@router.get("/passages/{passage_id}", response_model=PassageOut)
def get_passage(
    passage_id: str,
    catalog: PassageCatalog = Depends(get_passage_catalog),
) -> PassageOut:
    """Return one passage, without answers."""
    passage = catalog.get(passage_id)
    if passage is None:
        raise APIError.passage_not_found(passage_id)
    return PassageOut.model_validate(passage)


@router.post("/submit", response_model=SubmitResponse)
def submit_assessment(
    request: SubmitRequest,
    catalog: PassageCatalog = Depends(get_passage_catalog),
) -> SubmitResponse:
    """Grade the answers and score the reading session."""
    passage = catalog.get(request.passage_id)
    if passage is None:
        raise APIError.passage_not_found(request.passage_id)

    try:
        result = assess(passage, request.reading_time_seconds, request.answers)
    except ScoringInputError as e:
        raise APIError.invalid_submission(str(e)) from e

    logger.info(
        "Scored submission for passage %s: score=%d",
        passage.id,
        result.metrics.speed_learning_score,
        extra={
            "extra_data": {
                "passage_id": passage.id,
                "wpm": result.metrics.wpm,
                "accuracy": result.metrics.accuracy,
                "level": result.level.value,
            }
        },
    )

    return SubmitResponse(
        metrics=MetricsOut.model_validate(result.metrics),
        feedback=result.feedback,
        level=result.level,
        answer_review=[AnswerReviewOut.model_validate(item) for item in result.review],
        passage_info=PassageInfo(
            id=passage.id,
            title=passage.title,
            difficulty=passage.difficulty,
        ),
    )
