from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/")
def api_root() -> dict[str, str]:
    return {"status": "ok", "message": "clearphrase backend"}


@router.get("/health")
def health(request: Request) -> dict[str, object]:
    nlp_ready = bool(getattr(request.app.state, "nlp_ready", False))
    payload: dict[str, object] = {
        "status": "ok" if nlp_ready else "degraded",
        "service": "backend",
        "components": {
            "nlp": "ok" if nlp_ready else "degraded",
        },
    }

    nlp_error = getattr(request.app.state, "nlp_error", None)
    if nlp_error:
        payload["nlp_error"] = str(nlp_error)

    annotation_source = getattr(request.app.state, "annotation_source", None)
    if annotation_source is not None:
        payload["nlp"] = annotation_source.metadata()

    return payload
