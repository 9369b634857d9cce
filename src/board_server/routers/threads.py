"""Board-level thread endpoints."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.responses import RedirectResponse

from board_server.dependencies import get_store
from board_server.errors import BoardError
from board_server.schemas.requests import CreateThreadRequest, DeleteThreadRequest, ReportThreadRequest
from board_server.services import threads
from board_server.stores.base import ThreadStore
from board_server.utils import read_payload

router = APIRouter(prefix="/api/threads", tags=["threads"])
logger = logging.getLogger(__name__)


@router.post("/{board}", response_model=None)
async def create_thread(
    board: str,
    request: Request,
    store: ThreadStore = Depends(get_store),
) -> RedirectResponse | PlainTextResponse:
    body = CreateThreadRequest.model_validate(await read_payload(request))
    try:
        await threads.create_thread(store, board, body.text, body.delete_password)
    except Exception:
        logger.exception("Error creating thread")
        return PlainTextResponse("Error creating thread", status_code=500)
    return RedirectResponse(url=f"/b/{board}/", status_code=302)


@router.get("/{board}", response_model=None)
async def list_threads(board: str, store: ThreadStore = Depends(get_store)) -> JSONResponse | PlainTextResponse:
    try:
        views = await threads.list_threads(store, board)
    except Exception:
        logger.exception("Error fetching threads")
        return PlainTextResponse("Error fetching threads", status_code=500)
    return JSONResponse(content=[view.model_dump(mode="json", by_alias=True) for view in views])


@router.delete("/{board}", response_model=None)
async def delete_thread(board: str, request: Request, store: ThreadStore = Depends(get_store)) -> PlainTextResponse:
    body = DeleteThreadRequest.model_validate(await read_payload(request))
    try:
        signal = await threads.delete_thread(store, body.thread_id, body.delete_password)
    except BoardError:
        raise
    except Exception:
        logger.exception("Error deleting thread")
        return PlainTextResponse("Error deleting thread", status_code=500)
    return PlainTextResponse(signal)


@router.put("/{board}", response_model=None)
async def report_thread(board: str, request: Request, store: ThreadStore = Depends(get_store)) -> PlainTextResponse:
    body = ReportThreadRequest.model_validate(await read_payload(request))
    try:
        signal = await threads.report_thread(store, body.thread_id)
    except BoardError:
        raise
    except Exception:
        logger.exception("Error reporting thread")
        return PlainTextResponse("Error reporting thread", status_code=500)
    return PlainTextResponse(signal)
