from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from app.core.errors import AlignmentMismatchError, ValidationError


@dataclass(frozen=True)
class SentenceAlignment:
    first: int
    last: int
    spans: tuple[tuple[int, int], ...]
    text: str

    @property
    def size(self) -> int:
        return len(self.spans)


class OffsetAligner:
    """Maps annotated word-forms back to ``[start, end)`` offsets in a document.

    The annotation pipeline reports word-forms only, so each one is searched
    for in the document starting from a cursor that advances past every
    aligned word. Repeated word-forms therefore resolve to increasing spans,
    and consecutive sentences continue where the previous one stopped.
    Offsets are code point offsets into the whole document.
    """

    def __init__(self, document: str):
        if document is None:
            raise ValidationError("'document' is required")
        self._document = document
        self._cursor = 0

    @property
    def document(self) -> str:
        return self._document

    @property
    def cursor(self) -> int:
        return self._cursor

    def locate(self, word_form: str, position: int = 0) -> tuple[int, int]:
        if not word_form:
            raise ValidationError(f"word-form at position {position} is empty")

        start = self._document.find(word_form, self._cursor)
        if start < 0:
            raise AlignmentMismatchError(word_form, self._cursor, position)
        end = start + len(word_form)
        self._cursor = end
        return start, end

    def align_sentence(self, word_forms: Sequence[str]) -> SentenceAlignment:
        """Align one sentence and advance the cursor to its last word.

        On a mismatch the cursor is restored to where the sentence started,
        so a failed sentence leaves no partial state behind.
        """
        initial_cursor = self._cursor
        spans: list[tuple[int, int]] = []
        try:
            for position, word_form in enumerate(word_forms):
                spans.append(self.locate(word_form, position))
        except (AlignmentMismatchError, ValidationError):
            self._cursor = initial_cursor
            raise

        if spans:
            first, last = spans[0][0], spans[-1][1]
        else:
            first = last = initial_cursor
        return SentenceAlignment(
            first=first,
            last=last,
            spans=tuple(spans),
            text=self._document[first:last],
        )


def align_document(document: str, sentences: Iterable[Sequence[str]]) -> list[SentenceAlignment]:
    aligner = OffsetAligner(document)
    return [aligner.align_sentence(word_forms) for word_forms in sentences]
