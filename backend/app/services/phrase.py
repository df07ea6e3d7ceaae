from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from app.core.errors import BoundsError, ValidationError
from app.services.pattern import match


def _require_text(name: str, value: str) -> str:
    if value is None:
        raise ValidationError(f"'{name}' is required")
    cleaned = value.strip()
    if not cleaned:
        raise ValidationError(f"'{name}' is empty")
    return cleaned


def _require_span(start: int, end: int) -> None:
    if start < 0:
        raise ValidationError(f"'start' must be greater or equals to zero: {start}")
    if end < start:
        raise ValidationError(f"'end' must be greater or equals to 'start' ({start}): {end}")


@dataclass(frozen=True)
class Word:
    """A read-only snapshot of one word of a phrase."""

    text: str
    pos_tag: str
    lemma: str
    start: int
    end: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "text", _require_text("text", self.text))
        object.__setattr__(self, "pos_tag", _require_text("posTag", self.pos_tag))
        object.__setattr__(self, "lemma", _require_text("lemma", self.lemma))
        _require_span(self.start, self.end)

    def match(self, pos_tag: str, *lemmas: str) -> bool:
        return match(self, pos_tag, *lemmas)

    def __str__(self) -> str:
        return self.text


class Phrase:
    """A sentence split into a fixed number of words.

    Words are kept as five parallel sequences (tokens, POS tags, lemmas,
    starts, ends). A phrase is created empty with a declared size and filled
    position by position through :meth:`set_word`; readers only ever get
    tuples or :class:`Word` snapshots, never the internal lists.
    """

    def __init__(self, sentence: str, size: int):
        if sentence is None:
            raise ValidationError("'sentence' is required")
        if size < 0:
            raise ValidationError(f"'size' must be greater or equals to zero: {size}")

        self._sentence = sentence
        self._size = size
        self._tokens: list[str | None] = [None] * size
        self._pos_tags: list[str | None] = [None] * size
        self._lemmas: list[str | None] = [None] * size
        self._starts: list[int] = [0] * size
        self._ends: list[int] = [0] * size

    @classmethod
    def from_words(
        cls,
        sentence: str,
        tokens: Sequence[str],
        pos_tags: Sequence[str],
        lemmas: Sequence[str],
        starts: Sequence[int],
        ends: Sequence[int],
    ) -> Phrase:
        size = len(tokens)
        for name, values in (
            ("posTags", pos_tags),
            ("lemmas", lemmas),
            ("starts", starts),
            ("ends", ends),
        ):
            if len(values) != size:
                raise ValidationError(
                    f"'{name}' has a different length than 'tokens' ({size}): {len(values)}"
                )

        phrase = cls(sentence, size)
        for position in range(size):
            phrase.set_word(
                position,
                tokens[position],
                pos_tags[position],
                lemmas[position],
                starts[position],
                ends[position],
            )
        return phrase

    @property
    def sentence(self) -> str:
        return self._sentence

    @property
    def size(self) -> int:
        return self._size

    @property
    def tokens(self) -> tuple[str | None, ...]:
        return tuple(self._tokens)

    @property
    def pos_tags(self) -> tuple[str | None, ...]:
        return tuple(self._pos_tags)

    @property
    def lemmas(self) -> tuple[str | None, ...]:
        return tuple(self._lemmas)

    @property
    def starts(self) -> tuple[int, ...]:
        return tuple(self._starts)

    @property
    def ends(self) -> tuple[int, ...]:
        return tuple(self._ends)

    def set_word(self, position: int, text: str, pos_tag: str, lemma: str, start: int, end: int) -> None:
        if position < 0 or position >= self._size:
            raise BoundsError(position, self._size)
        text = _require_text("text", text)
        pos_tag = _require_text("posTag", pos_tag)
        lemma = _require_text("lemma", lemma)
        _require_span(start, end)

        self._tokens[position] = text
        self._pos_tags[position] = pos_tag
        self._lemmas[position] = lemma
        self._starts[position] = start
        self._ends[position] = end

    def get_pattern_tokens(self, start: int = 0, end: int | None = None) -> list[Word]:
        """Return fresh :class:`Word` snapshots for positions ``[start, end)``.

        ``end`` defaults to the phrase size. Raises :class:`ValidationError`
        when ``start`` is outside ``[0, size]`` or ``end`` is outside
        ``[start, size]``, and when a requested position was never written.
        """
        if end is None:
            end = self._size
        if start < 0 or start > self._size:
            raise ValidationError(f"'start' must be in [0,size:{self._size}]: {start}")
        if end < start or end > self._size:
            raise ValidationError(f"'end' must be in [start:{start},size:{self._size}]: {end}")

        return [
            Word(
                self._tokens[index],
                self._pos_tags[index],
                self._lemmas[index],
                self._starts[index],
                self._ends[index],
            )
            for index in range(start, end)
        ]

    def compress(self) -> Phrase:
        # Imported here: the compressor builds Phrase instances itself.
        from app.services.compressor import compress_proper_nouns

        return compress_proper_nouns(self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Word]:
        return iter(self.get_pattern_tokens())

    def __repr__(self) -> str:
        return f"Phrase(sentence={self._sentence!r}, size={self._size})"
