"""HTML pages the API redirects to after a post."""

from fastapi import APIRouter, Depends
from htpy.starlette import HtpyResponse

from board_server.dependencies import get_store
from board_server.errors import ThreadNotFoundError
from board_server.services import replies, threads
from board_server.stores.base import ThreadStore
from board_server.views.pages.board import render_board_page
from board_server.views.pages.thread import render_missing_thread_page, render_thread_page

router = APIRouter(prefix="/b", tags=["pages"])


@router.get("/{board}/")
async def board_page(board: str, store: ThreadStore = Depends(get_store)) -> HtpyResponse:
    views = await threads.list_threads(store, board)
    return HtpyResponse(render_board_page(board=board, threads=views))


@router.get("/{board}/{thread_id}")
async def thread_page(board: str, thread_id: str, store: ThreadStore = Depends(get_store)) -> HtpyResponse:
    try:
        view = await replies.get_thread_with_replies(store, thread_id)
    except ThreadNotFoundError as e:
        return HtpyResponse(render_missing_thread_page(board=board, message=e.message))
    return HtpyResponse(render_thread_page(board=board, thread=view))
