"""Reply endpoints; every reply is addressed through its parent thread."""

import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.responses import RedirectResponse

from board_server.dependencies import get_store
from board_server.errors import BoardError
from board_server.schemas.requests import CreateReplyRequest, DeleteReplyRequest, ReportReplyRequest
from board_server.services import replies
from board_server.stores.base import ThreadStore
from board_server.utils import read_payload

router = APIRouter(prefix="/api/replies", tags=["replies"])
logger = logging.getLogger(__name__)


@router.post("/{board}", response_model=None)
async def create_reply(
    board: str,
    request: Request,
    store: ThreadStore = Depends(get_store),
) -> RedirectResponse | PlainTextResponse:
    body = CreateReplyRequest.model_validate(await read_payload(request))
    try:
        await replies.create_reply(store, board, body.thread_id, body.text, body.delete_password)
    except BoardError:
        raise
    except Exception:
        logger.exception("Error creating reply")
        return PlainTextResponse("Error creating reply", status_code=500)
    return RedirectResponse(url=f"/b/{board}/{body.thread_id}", status_code=302)


@router.get("/{board}", response_model=None)
async def get_thread(
    board: str,
    thread_id: str = Query(..., description="Thread to show with all of its replies"),
    store: ThreadStore = Depends(get_store),
) -> JSONResponse | PlainTextResponse:
    try:
        view = await replies.get_thread_with_replies(store, thread_id)
    except BoardError:
        raise
    except Exception:
        logger.exception("Error fetching thread")
        return PlainTextResponse("Error fetching thread", status_code=500)
    return JSONResponse(content=view.model_dump(mode="json", by_alias=True))


@router.delete("/{board}", response_model=None)
async def delete_reply(board: str, request: Request, store: ThreadStore = Depends(get_store)) -> PlainTextResponse:
    body = DeleteReplyRequest.model_validate(await read_payload(request))
    try:
        signal = await replies.delete_reply(store, body.thread_id, body.reply_id, body.delete_password)
    except BoardError:
        raise
    except Exception:
        logger.exception("Error deleting reply")
        return PlainTextResponse("Error deleting reply", status_code=500)
    return PlainTextResponse(signal)


@router.put("/{board}", response_model=None)
async def report_reply(board: str, request: Request, store: ThreadStore = Depends(get_store)) -> PlainTextResponse:
    body = ReportReplyRequest.model_validate(await read_payload(request))
    try:
        signal = await replies.report_reply(store, body.thread_id, body.reply_id)
    except BoardError:
        raise
    except Exception:
        logger.exception("Error reporting reply")
        return PlainTextResponse("Error reporting reply", status_code=500)
    return PlainTextResponse(signal)
