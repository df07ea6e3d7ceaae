from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class AnnotatedWord:
    word_form: str
    pos_tag: str
    lemma: str
    chunk_tag: str | None = None
    ner_tag: str | None = None


class AnnotationSource(Protocol):
    def annotate(self, text: str) -> list[list[AnnotatedWord]]:
        ...

    def metadata(self) -> dict[str, str]:
        ...
