"""RSVP tokenization preview route."""

from fastapi import APIRouter, Depends

from speedlearn.config import Settings, get_settings
from speedlearn.schemas.rsvp import DisplayUnitDTO, TokenizeRequest, TokenizeResponse
from speedlearn.services.rsvp import (
    compute_word_delay,
    estimate_reading_time_formatted,
    optimal_reading_position,
    split_at_orp,
    tokenize,
)

router = APIRouter()


@router.post("/rsvp/tokens", response_model=TokenizeResponse)
def preview_tokens(
    request: TokenizeRequest,
    settings: Settings = Depends(get_settings),
) -> TokenizeResponse:
    """Tokenize text and annotate each unit with its focus split and delay."""
    wpm = request.wpm or settings.default_wpm
    units = tokenize(request.text)

    dtos = []
    for unit in units:
        before, focus, after = split_at_orp(unit.text)
        dtos.append(
            DisplayUnitDTO(
                sequence_index=unit.sequence_index,
                text=unit.text,
                is_sentence_final=unit.is_sentence_final,
                is_punctuation_only=unit.is_punctuation_only,
                orp_index=optimal_reading_position(unit.text),
                before=before,
                focus=focus,
                after=after,
                delay_ms=compute_word_delay(wpm, unit),
            )
        )

    return TokenizeResponse(
        wpm=wpm,
        total_words=len(units),
        estimated_ms=sum(dto.delay_ms for dto in dtos),
        estimated_time=estimate_reading_time_formatted(units, wpm),
        units=dtos,
    )
