from __future__ import annotations

from app.services.phrase import Phrase


# Common root of the singular (NNP) and plural (NNPS) proper noun tags.
PROPER_NOUN_PREFIX = "NNP"


def is_proper_noun(pos_tag: str | None) -> bool:
    return bool(pos_tag) and pos_tag.startswith(PROPER_NOUN_PREFIX)


def compress_proper_nouns(phrase: Phrase) -> Phrase:
    """Merge every run of consecutive proper nouns into a single word.

    ['Basel'_NNP, 'Accords'_NNPS] becomes ['Basel Accords'_NNPS]: texts and
    lemmas are joined with one space, the tag is the one of the last member
    and the span runs from the first start to the last end. The input phrase
    is left untouched; a new phrase with the same sentence is returned.
    """
    tokens = phrase.tokens
    pos_tags = phrase.pos_tags
    lemmas = phrase.lemmas
    starts = phrase.starts
    ends = phrase.ends

    out_tokens: list[str] = []
    out_pos_tags: list[str] = []
    out_lemmas: list[str] = []
    out_starts: list[int] = []
    out_ends: list[int] = []

    size = phrase.size
    read = 0
    while read < size:
        run_end = read + 1
        if is_proper_noun(pos_tags[read]):
            while run_end < size and is_proper_noun(pos_tags[run_end]):
                run_end += 1

        if run_end - read == 1:
            # Unwritten positions pass through and fail validation below.
            out_tokens.append(tokens[read])
            out_lemmas.append(lemmas[read])
        else:
            out_tokens.append(" ".join(tokens[read:run_end]))
            out_lemmas.append(" ".join(lemmas[read:run_end]))
        out_pos_tags.append(pos_tags[run_end - 1])
        out_starts.append(starts[read])
        out_ends.append(ends[run_end - 1])
        read = run_end

    return Phrase.from_words(
        phrase.sentence,
        out_tokens,
        out_pos_tags,
        out_lemmas,
        out_starts,
        out_ends,
    )
