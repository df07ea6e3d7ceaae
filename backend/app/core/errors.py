from __future__ import annotations


class ClearPhraseError(RuntimeError):
    """Base class for failures raised by the alignment and phrase core."""


class ValidationError(ClearPhraseError, ValueError):
    """Raised when a word, phrase or pattern is built from malformed arguments."""


class BoundsError(ClearPhraseError, IndexError):
    """Raised when a phrase position falls outside its declared size."""

    def __init__(self, position: int, size: int):
        super().__init__(f"'position' is not in [0,{size}): {position}")
        self.position = position
        self.size = size


class AlignmentMismatchError(ClearPhraseError, LookupError):
    """Raised when an annotated word-form cannot be found in the remaining text."""

    def __init__(self, word_form: str, cursor: int, position: int):
        super().__init__(
            f"word-form {word_form!r} (position {position}) not found at or after offset {cursor}"
        )
        self.word_form = word_form
        self.cursor = cursor
        self.position = position

    def context(self) -> dict[str, object]:
        return {
            "word_form": self.word_form,
            "cursor": self.cursor,
            "position": self.position,
        }
