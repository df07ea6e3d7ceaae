from __future__ import annotations

import pytest

from app.core.config import Settings
from app.nlp.adapter import AnnotatedWord


def words(*triples: tuple[str, str, str]) -> list[AnnotatedWord]:
    return [AnnotatedWord(word_form=text, pos_tag=tag, lemma=lemma) for text, tag, lemma in triples]


BASEL_TEXT = "Basel Accords are important."
BASEL_SENTENCE = words(
    ("Basel", "NNP", "Basel"),
    ("Accords", "NNPS", "Accords"),
    ("are", "VBP", "be"),
    ("important", "JJ", "important"),
    (".", ".", "."),
)
BLANK_LEMMA_TEXT = "Hm ok"
BLANK_TAG_TEXT = "Hm, ok"


class ScriptedAnnotationSource:
    """Returns pre-annotated sentences for known texts."""

    def __init__(self, scripts: dict[str, list[list[AnnotatedWord]]] | None = None):
        self.scripts = dict(scripts or {})
        self.calls: list[str] = []

    def annotate(self, text: str) -> list[list[AnnotatedWord]]:
        self.calls.append(text)
        return self.scripts.get(text, [])

    def metadata(self) -> dict[str, str]:
        return {"adapter": "ScriptedAnnotationSource"}


def make_settings(**overrides) -> Settings:
    values = {
        "environment": "test",
        "app_name": "clearphrase-backend-test",
        "host": "127.0.0.1",
        "port": 8001,
        "nlp_model": "en_core_web_sm",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def scripted_source() -> ScriptedAnnotationSource:
    return ScriptedAnnotationSource(
        {
            BASEL_TEXT: [BASEL_SENTENCE],
            "the cat and the dog": [
                words(
                    ("the", "DT", "the"),
                    ("cat", "NN", "cat"),
                    ("and", "CC", "and"),
                    ("the", "DT", "the"),
                    ("dog", "NN", "dog"),
                )
            ],
            "Hello there. New York sleeps.": [
                words(("Hello", "UH", "hello"), ("there", "RB", "there"), (".", ".", ".")),
                words(
                    ("New", "NNP", "New"),
                    ("York", "NNP", "York"),
                    ("sleeps", "VBZ", "sleep"),
                    (".", ".", "."),
                ),
            ],
            "I can't go.": [
                words(("I", "PRP", "I"), ("ca", "MD", "can"), ("not", "RB", "not"), ("go", "VB", "go"), (".", ".", "."))
            ],
            BLANK_LEMMA_TEXT: [words(("Hm", "UH", " "), ("ok", "UH", "ok"))],
            BLANK_TAG_TEXT: [words(("Hm", "UH", "hm"), ("ok", "", "ok"))],
        }
    )


@pytest.fixture
def scripted_source_factory(scripted_source: ScriptedAnnotationSource):
    return lambda _settings: scripted_source
