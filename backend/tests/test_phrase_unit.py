from __future__ import annotations

import pytest

from app.core.errors import BoundsError, ValidationError
from app.services.phrase import Phrase, Word


def _filled_phrase() -> Phrase:
    phrase = Phrase("the cat sat", 3)
    phrase.set_word(0, "the", "DT", "the", 0, 3)
    phrase.set_word(1, "cat", "NN", "cat", 4, 7)
    phrase.set_word(2, "sat", "VBD", "sit", 8, 11)
    return phrase


def test_word_trims_fields() -> None:
    word = Word("  cat ", " NN", "cat  ", 4, 7)

    assert (word.text, word.pos_tag, word.lemma) == ("cat", "NN", "cat")
    assert str(word) == "cat"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"text": " "},
        {"pos_tag": ""},
        {"lemma": "\t"},
        {"start": -1},
        {"start": 5, "end": 4},
    ],
)
def test_word_rejects_invalid_fields(kwargs: dict[str, object]) -> None:
    values: dict[str, object] = {"text": "cat", "pos_tag": "NN", "lemma": "cat", "start": 4, "end": 7}
    values.update(kwargs)

    with pytest.raises(ValidationError):
        Word(**values)


def test_word_is_immutable() -> None:
    word = Word("cat", "NN", "cat", 4, 7)

    with pytest.raises(AttributeError):
        word.text = "dog"  # type: ignore[misc]


def test_phrase_exposes_parallel_sequences() -> None:
    phrase = _filled_phrase()

    assert phrase.size == len(phrase) == 3
    assert phrase.sentence == "the cat sat"
    assert phrase.tokens == ("the", "cat", "sat")
    assert phrase.pos_tags == ("DT", "NN", "VBD")
    assert phrase.lemmas == ("the", "cat", "sit")
    assert phrase.starts == (0, 4, 8)
    assert phrase.ends == (3, 7, 11)


def test_empty_phrase_is_valid() -> None:
    phrase = Phrase("", 0)

    assert phrase.size == 0
    assert phrase.get_pattern_tokens(0, 0) == []
    assert list(phrase) == []


def test_negative_size_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Phrase("text", -1)


@pytest.mark.parametrize("position", [-1, 3, 10])
def test_set_word_outside_bounds_raises_bounds_error(position: int) -> None:
    phrase = Phrase("the cat sat", 3)

    with pytest.raises(BoundsError) as excinfo:
        phrase.set_word(position, "the", "DT", "the", 0, 3)

    assert excinfo.value.position == position
    assert excinfo.value.size == 3


@pytest.mark.parametrize(
    "args",
    [
        ("", "DT", "the", 0, 3),
        ("the", "  ", "the", 0, 3),
        ("the", "DT", "", 0, 3),
        ("the", "DT", "the", -2, 3),
        ("the", "DT", "the", 3, 2),
    ],
)
def test_set_word_validates_arguments(args: tuple) -> None:
    phrase = Phrase("the cat sat", 3)

    with pytest.raises(ValidationError):
        phrase.set_word(0, *args)


def test_set_word_overwrites_position() -> None:
    phrase = _filled_phrase()

    phrase.set_word(1, "dog", "NN", "dog", 4, 7)

    assert phrase.tokens == ("the", "dog", "sat")


def test_get_pattern_tokens_returns_snapshots() -> None:
    phrase = _filled_phrase()

    window = phrase.get_pattern_tokens(1, 3)
    phrase.set_word(1, "dog", "NN", "dog", 4, 7)

    assert [word.text for word in window] == ["cat", "sat"]
    assert window[0] == Word("cat", "NN", "cat", 4, 7)
    assert [word.text for word in phrase.get_pattern_tokens()] == ["the", "dog", "sat"]


@pytest.mark.parametrize(("start", "end"), [(-1, 2), (4, 4), (2, 1), (0, 4)])
def test_get_pattern_tokens_validates_range(start: int, end: int) -> None:
    phrase = _filled_phrase()

    with pytest.raises(ValidationError):
        phrase.get_pattern_tokens(start, end)


def test_accessors_do_not_alias_internal_storage() -> None:
    phrase = _filled_phrase()

    tokens = phrase.tokens
    with pytest.raises(TypeError):
        tokens[0] = "a"  # type: ignore[index]
    assert phrase.tokens[0] == "the"


def test_from_words_rejects_mismatched_lengths() -> None:
    with pytest.raises(ValidationError, match="'lemmas' has a different length"):
        Phrase.from_words("a b", ["a", "b"], ["DT", "NN"], ["a"], [0, 2], [1, 3])


def test_snapshot_of_unwritten_position_fails_validation() -> None:
    phrase = Phrase("the cat", 2)
    phrase.set_word(0, "the", "DT", "the", 0, 3)

    assert phrase.get_pattern_tokens(0, 1) == [Word("the", "DT", "the", 0, 3)]
    with pytest.raises(ValidationError, match="'text' is required"):
        phrase.get_pattern_tokens()
