from __future__ import annotations

from fastapi import APIRouter, Request

from app.api.errors import core_errors_as_http, process_use_case
from app.api.schemas.v1.phrases import (
    MatchRequest,
    MatchResponse,
    PhraseMatches,
    PhraseModel,
    PhrasesRequest,
    PhrasesResponse,
    WordModel,
)
from app.services.pattern import TokenPattern

router = APIRouter()


@router.post("/phrases", response_model=PhrasesResponse)
def post_phrases(payload: PhrasesRequest, request: Request) -> PhrasesResponse:
    use_case = process_use_case(request)
    with core_errors_as_http():
        phrases = use_case.phrases(payload.text, compress=payload.compress)
    return PhrasesResponse(phrases=[PhraseModel.from_phrase(phrase) for phrase in phrases])


@router.post("/match", response_model=MatchResponse)
def post_match(payload: MatchRequest, request: Request) -> MatchResponse:
    use_case = process_use_case(request)
    with core_errors_as_http():
        pattern = TokenPattern.parse(payload.pos_tag, *payload.lemmas)
        results = use_case.query_pattern(payload.text, pattern)
    return MatchResponse(
        pattern=str(pattern),
        phrases=[
            PhraseMatches(
                sentence=phrase.sentence,
                matches=[WordModel.from_word(word) for word in words],
            )
            for phrase, words in results
        ],
    )
