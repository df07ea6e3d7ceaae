from __future__ import annotations

from fastapi import APIRouter, Request

from app.api.errors import core_errors_as_http, process_use_case
from app.api.schemas.v1.process import MessageModel, ProcessRequest

router = APIRouter()


def _next_message_id(request: Request) -> int:
    state = request.app.state
    with state.message_id_lock:
        state.message_id += 1
        return state.message_id


def _process(content: str, request: Request) -> MessageModel:
    use_case = process_use_case(request)
    with core_errors_as_http():
        sentences = use_case.sentences(content)
    return MessageModel(id=_next_message_id(request), sentences=sentences)


@router.get("/process", response_model=MessageModel)
def get_process(request: Request, content: str = "") -> MessageModel:
    return _process(content, request)


@router.post("/process", response_model=MessageModel)
def post_process(payload: ProcessRequest, request: Request) -> MessageModel:
    return _process(payload.content, request)
