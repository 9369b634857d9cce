import logging

from board_server.errors import IncorrectPasswordError, ThreadNotFoundError
from board_server.schemas.threads import BoardThreadView, Thread
from board_server.services.projection import project_board
from board_server.stores.base import ThreadStore
from board_server.utils import utcnow

logger = logging.getLogger(__name__)

SUCCESS = "success"
REPORTED = "reported"


async def create_thread(store: ThreadStore, board: str, text: str, delete_password: str) -> Thread:
    now = utcnow()
    thread = Thread(
        board=board,
        text=text,
        created_on=now,
        bumped_on=now,
        reported=False,
        delete_password=delete_password,
        replies=[],
    )
    saved = await store.save_thread(thread)
    logger.info(f"Created thread {saved.id} on board {board!r} ({saved.origin})")
    return saved


async def list_threads(store: ThreadStore, board: str) -> list[BoardThreadView]:
    threads = await store.list_threads(board)
    return project_board(threads)


async def report_thread(store: ThreadStore, thread_id: str) -> str:
    thread = await store.get_thread(thread_id)
    if thread is None:
        raise ThreadNotFoundError()

    thread.reported = True
    await store.save_thread(thread)
    return REPORTED


async def delete_thread(store: ThreadStore, thread_id: str, delete_password: str) -> str:
    """Remove a thread and its replies.

    An unknown thread answers ``incorrect password`` just like a wrong password.
    """
    thread = await store.get_thread(thread_id)
    if thread is None or thread.delete_password != delete_password:
        raise IncorrectPasswordError()

    if not await store.delete_thread(thread):
        # The backend that produced the record did not remove it.
        raise RuntimeError(f"Thread {thread.id} was not removed")
    return SUCCESS
