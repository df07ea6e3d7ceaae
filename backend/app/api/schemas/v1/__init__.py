from app.api.schemas.v1.phrases import (
    MatchRequest,
    MatchResponse,
    PhraseMatches,
    PhraseModel,
    PhrasesRequest,
    PhrasesResponse,
    WordModel,
)
from app.api.schemas.v1.process import MessageModel, ProcessRequest, SentenceModel, TokenModel

__all__ = [
    "ProcessRequest",
    "TokenModel",
    "SentenceModel",
    "MessageModel",
    "PhrasesRequest",
    "WordModel",
    "PhraseModel",
    "PhrasesResponse",
    "MatchRequest",
    "PhraseMatches",
    "MatchResponse",
]
