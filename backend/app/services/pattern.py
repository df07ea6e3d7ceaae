from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from app.core.errors import ValidationError

if TYPE_CHECKING:
    from app.services.phrase import Phrase, Word


WILDCARD = "*"


class TaggedToken(Protocol):
    @property
    def pos_tag(self) -> str: ...

    @property
    def lemma(self) -> str: ...


@dataclass(frozen=True)
class TokenPattern:
    """A POS tag filter with an optional case-insensitive lemma allow-list.

    A tag ending in ``*`` addresses a tag family ("NN*" covers "NN", "NNS",
    "NNP" and "NNPS"); any other tag must match exactly. ``match("CC", "and",
    "or")`` therefore accepts only the "and" and "or" connectives.
    """

    tag: str
    prefix: bool = False
    lemmas: tuple[str, ...] = ()

    @classmethod
    def parse(cls, pos_tag: str, *lemmas: str) -> TokenPattern:
        if pos_tag is None:
            raise ValidationError("'posTag' is required")
        cleaned = pos_tag.strip()
        if not cleaned:
            raise ValidationError("'posTag' is empty")

        prefix = cleaned.endswith(WILDCARD)
        if prefix:
            cleaned = cleaned[: -len(WILDCARD)]
        return cls(tag=cleaned, prefix=prefix, lemmas=_unique_lowercased(lemmas))

    def matches(self, token: TaggedToken) -> bool:
        if not self._matches_tag(token.pos_tag):
            return False
        if not self.lemmas:
            return True
        return token.lemma.lower() in self.lemmas

    def _matches_tag(self, pos_tag: str) -> bool:
        if self.prefix:
            return pos_tag.startswith(self.tag)
        return pos_tag == self.tag

    def __str__(self) -> str:
        tag = f"{self.tag}{WILDCARD}" if self.prefix else self.tag
        if not self.lemmas:
            return tag
        return f"{tag}[{'|'.join(self.lemmas)}]"


def _unique_lowercased(lemmas: Iterable[str]) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for lemma in lemmas:
        if lemma is None:
            raise ValidationError("'lemmas' must not contain None")
        seen.setdefault(lemma.lower(), None)
    return tuple(seen)


def match(token: TaggedToken, pos_tag: str, *lemmas: str) -> bool:
    return TokenPattern.parse(pos_tag, *lemmas).matches(token)


def find_matches(phrase: Phrase, pattern: TokenPattern) -> list[Word]:
    return [word for word in phrase.get_pattern_tokens() if pattern.matches(word)]
