from __future__ import annotations

import logging
from itertools import count

from app.api.schemas.v1.process import SentenceModel, TokenModel
from app.core.errors import AlignmentMismatchError
from app.nlp.adapter import AnnotatedWord, AnnotationSource
from app.services.aligner import OffsetAligner, SentenceAlignment
from app.services.pattern import TokenPattern, find_matches
from app.services.phrase import Phrase, Word


logger = logging.getLogger(__name__)


class ProcessTextUseCase:
    def __init__(self, annotation_source: AnnotationSource, compress: bool = True):
        self._annotation_source = annotation_source
        self._compress = compress

    def phrases(self, text: str, compress: bool | None = None) -> list[Phrase]:
        should_compress = self._compress if compress is None else compress
        phrases: list[Phrase] = []
        for words, alignment in self._annotate_and_align(text):
            phrase = self._build_phrase(words, alignment)
            phrases.append(phrase.compress() if should_compress else phrase)
        return phrases

    def sentences(self, text: str) -> list[SentenceModel]:
        index = count()
        sentences: list[SentenceModel] = []
        for words, alignment in self._annotate_and_align(text):
            snapshots = self._build_phrase(words, alignment).get_pattern_tokens()
            tokens = [
                TokenModel(
                    start=snapshot.start,
                    end=snapshot.end,
                    index=next(index),
                    text=snapshot.text,
                    pos_tag=snapshot.pos_tag,
                    chunk_tag=word.chunk_tag,
                    ner_tag=word.ner_tag,
                    lemma=snapshot.lemma,
                )
                for word, snapshot in zip(words, snapshots, strict=True)
            ]
            sentences.append(
                SentenceModel(
                    start=alignment.first,
                    end=alignment.last,
                    content=alignment.text,
                    size=len(tokens),
                    tokens=tokens,
                )
            )
        return sentences

    def query(self, text: str, pos_tag: str, *lemmas: str) -> list[tuple[Phrase, list[Word]]]:
        return self.query_pattern(text, TokenPattern.parse(pos_tag, *lemmas))

    def query_pattern(self, text: str, pattern: TokenPattern) -> list[tuple[Phrase, list[Word]]]:
        return [(phrase, find_matches(phrase, pattern)) for phrase in self.phrases(text)]

    @staticmethod
    def _build_phrase(words: list[AnnotatedWord], alignment: SentenceAlignment) -> Phrase:
        phrase = Phrase(alignment.text, len(words))
        for position, (word, (start, end)) in enumerate(zip(words, alignment.spans, strict=True)):
            phrase.set_word(position, word.word_form, word.pos_tag, word.lemma, start, end)
        return phrase

    def _annotate_and_align(self, text: str) -> list[tuple[list[AnnotatedWord], SentenceAlignment]]:
        if not text.strip():
            return []

        aligner = OffsetAligner(text)
        aligned: list[tuple[list[AnnotatedWord], SentenceAlignment]] = []
        for sentence_index, words in enumerate(self._annotation_source.annotate(text)):
            try:
                alignment = aligner.align_sentence([word.word_form for word in words])
            except AlignmentMismatchError as exc:
                logger.warning(
                    "process_alignment_mismatch",
                    extra={"sentence_index": sentence_index, **exc.context()},
                )
                raise
            aligned.append((words, alignment))
        return aligned
