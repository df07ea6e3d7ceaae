from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app.api.schemas.v1.phrases import PhraseModel, WordModel
from app.core.config import load_settings
from app.core.errors import AlignmentMismatchError
from app.core.logging import configure_logging
from app.nlp.english import load_english_annotation_source
from app.services.use_cases.process import ProcessTextUseCase


def _read_text(path: str | None) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Align annotated words to the input text and print phrases as JSON."
    )
    parser.add_argument("path", nargs="?", help="Text file to process (stdin when omitted).")
    parser.add_argument("--no-compress", action="store_true", help="Keep proper nouns as separate words.")
    parser.add_argument("--pattern", help="Only print words matching this POS tag filter, e.g. 'NN*'.")
    parser.add_argument("--lemma", action="append", default=[], help="Lemma allow-list entry for --pattern.")
    parser.add_argument("--model", help="spaCy model overriding CLEARPHRASE_NLP_MODEL.")
    args = parser.parse_args()

    settings = load_settings()
    configure_logging(settings.log_level)
    if args.model:
        settings = replace(settings, nlp_model=args.model)

    use_case = ProcessTextUseCase(
        load_english_annotation_source(settings),
        compress=settings.compress_proper_nouns and not args.no_compress,
    )
    text = _read_text(args.path)

    try:
        if args.pattern:
            output = [
                {
                    "sentence": phrase.sentence,
                    "matches": [WordModel.from_word(word).model_dump() for word in words],
                }
                for phrase, words in use_case.query(text, args.pattern, *args.lemma)
            ]
        else:
            output = [PhraseModel.from_phrase(phrase).model_dump() for phrase in use_case.phrases(text)]
    except AlignmentMismatchError as exc:
        print(json.dumps({"error": "alignment_mismatch", **exc.context()}), file=sys.stderr)
        return 1

    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
