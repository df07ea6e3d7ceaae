from __future__ import annotations

from pydantic import BaseModel, Field


class ProcessRequest(BaseModel):
    content: str = Field(default="")


class TokenModel(BaseModel):
    start: int
    end: int
    index: int
    text: str
    pos_tag: str
    chunk_tag: str | None = None
    ner_tag: str | None = None
    lemma: str


class SentenceModel(BaseModel):
    start: int
    end: int
    content: str
    size: int
    tokens: list[TokenModel] = Field(default_factory=list)


class MessageModel(BaseModel):
    id: int
    sentences: list[SentenceModel] = Field(default_factory=list)
