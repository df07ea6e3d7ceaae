from __future__ import annotations

import logging
from importlib.metadata import version as package_version

from packaging.specifiers import InvalidSpecifier, SpecifierSet
from packaging.version import InvalidVersion, Version

from app.core.config import Settings
from app.nlp.adapter import AnnotatedWord, AnnotationSource


logger = logging.getLogger(__name__)

NOUN_PART = "NP"
PREPOSITION_PART = "PP"
OUTSIDE = "O"


class SpacyAnnotationSource(AnnotationSource):
    """English annotation pipeline backed by a spaCy model.

    Produces Penn Treebank tags, lemmas, IOB entity tags and a coarse chunk
    tag per word. spaCy's own character offsets are not exposed; callers
    align word-forms against the input text themselves.
    """

    def __init__(self, model_name: str):
        self.model_name = model_name
        # Import lazily so backend startup can degrade cleanly if spaCy is absent.
        import spacy

        self._nlp = spacy.load(model_name)
        self._warn_if_spacy_version_incompatible()

    def annotate(self, text: str) -> list[list[AnnotatedWord]]:
        if not text.strip():
            return []

        doc = self._nlp(text)
        chunk_tags = self._chunk_tags(doc)
        sentences: list[list[AnnotatedWord]] = []
        spans = doc.sents if doc.has_annotation("SENT_START") else (doc[:],)
        for sentence in spans:
            words = [
                self._to_annotated_word(token, chunk_tags.get(token.i))
                for token in sentence
                if not token.is_space
            ]
            if words:
                sentences.append(words)
        return sentences

    def metadata(self) -> dict[str, str]:
        return {
            "adapter": self.__class__.__name__,
            "spacy": package_version("spacy"),
            "model": self.model_name,
            "pipeline": ",".join(self._nlp.pipe_names),
        }

    def _to_annotated_word(self, token, chunk_tag: str | None) -> AnnotatedWord:
        pos_tag = token.tag_ or token.pos_ or "XX"
        lemma = token.lemma_.strip() or token.text
        return AnnotatedWord(
            word_form=token.text,
            pos_tag=pos_tag,
            lemma=lemma,
            # Words outside any chunk keep their POS tag as chunk tag.
            chunk_tag=chunk_tag or pos_tag,
            ner_tag=self._ner_tag(token),
        )

    @staticmethod
    def _ner_tag(token) -> str:
        if not token.ent_iob_ or token.ent_iob_ == OUTSIDE:
            return OUTSIDE
        return f"{token.ent_iob_}-{token.ent_type_}"

    @staticmethod
    def _chunk_tags(doc) -> dict[int, str]:
        tags: dict[int, str] = {}
        # noun_chunks needs a dependency parse; models without one get no NP tags.
        if doc.has_annotation("DEP"):
            for chunk in doc.noun_chunks:
                for token in chunk:
                    tags[token.i] = NOUN_PART
            for token in doc:
                if token.dep_ == "prep" and token.i not in tags:
                    tags[token.i] = PREPOSITION_PART
        return tags

    def _warn_if_spacy_version_incompatible(self) -> None:
        model_spec = str(self._nlp.meta.get("spacy_version") or "").strip()
        if not model_spec:
            return

        runtime_version_str = package_version("spacy")
        try:
            runtime_version = Version(runtime_version_str)
            compat_spec = SpecifierSet(model_spec)
        except (InvalidVersion, InvalidSpecifier):
            logger.warning(
                "nlp_spacy_version_parse_failed",
                extra={
                    "model": self.model_name,
                    "runtime_spacy": runtime_version_str,
                    "model_spacy_spec": model_spec,
                },
            )
            return

        if compat_spec.contains(runtime_version, prereleases=True):
            return

        logger.warning(
            "nlp_model_spacy_version_mismatch",
            extra={
                "model": self.model_name,
                "runtime_spacy": runtime_version_str,
                "model_spacy_spec": model_spec,
            },
        )


def load_english_annotation_source(settings: Settings) -> AnnotationSource:
    return SpacyAnnotationSource(model_name=settings.nlp_model)
