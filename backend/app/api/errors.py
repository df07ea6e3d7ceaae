from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import HTTPException, Request

from app.core.errors import AlignmentMismatchError, ValidationError
from app.services.use_cases.process import ProcessTextUseCase


NLP_UNAVAILABLE = "NLP unavailable. Check backend logs and NLP model installation."


def process_use_case(request: Request) -> ProcessTextUseCase:
    if not bool(getattr(request.app.state, "nlp_ready", False)):
        raise HTTPException(status_code=503, detail=NLP_UNAVAILABLE)
    annotation_source = getattr(request.app.state, "annotation_source", None)
    if annotation_source is None:
        raise HTTPException(status_code=503, detail=NLP_UNAVAILABLE)

    settings = request.app.state.settings
    return ProcessTextUseCase(annotation_source, compress=settings.compress_proper_nouns)


@contextmanager
def core_errors_as_http() -> Iterator[None]:
    try:
        yield
    except AlignmentMismatchError as exc:
        raise HTTPException(
            status_code=422,
            detail={"error": "alignment_mismatch", "message": str(exc), **exc.context()},
        ) from exc
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail={"error": "validation", "message": str(exc)},
        ) from exc
