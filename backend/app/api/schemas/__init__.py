from app.api.schemas.v1 import (
    MatchRequest,
    MatchResponse,
    MessageModel,
    PhraseMatches,
    PhraseModel,
    PhrasesRequest,
    PhrasesResponse,
    ProcessRequest,
    SentenceModel,
    TokenModel,
    WordModel,
)

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
