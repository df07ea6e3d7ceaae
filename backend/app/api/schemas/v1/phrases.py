from __future__ import annotations

from pydantic import BaseModel, Field

from app.services.phrase import Phrase, Word


class PhrasesRequest(BaseModel):
    text: str = Field(...)
    compress: bool | None = None


class WordModel(BaseModel):
    text: str
    pos_tag: str
    lemma: str
    start: int
    end: int

    @classmethod
    def from_word(cls, word: Word) -> WordModel:
        return cls(
            text=word.text,
            pos_tag=word.pos_tag,
            lemma=word.lemma,
            start=word.start,
            end=word.end,
        )


class PhraseModel(BaseModel):
    sentence: str
    size: int
    words: list[WordModel] = Field(default_factory=list)

    @classmethod
    def from_phrase(cls, phrase: Phrase) -> PhraseModel:
        return cls(
            sentence=phrase.sentence,
            size=phrase.size,
            words=[WordModel.from_word(word) for word in phrase.get_pattern_tokens()],
        )


class PhrasesResponse(BaseModel):
    phrases: list[PhraseModel]


class MatchRequest(BaseModel):
    text: str = Field(...)
    pos_tag: str = Field(..., min_length=1)
    lemmas: list[str] = Field(default_factory=list)


class PhraseMatches(BaseModel):
    sentence: str
    matches: list[WordModel] = Field(default_factory=list)


class MatchResponse(BaseModel):
    pattern: str
    phrases: list[PhraseMatches]
