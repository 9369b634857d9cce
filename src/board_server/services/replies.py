import logging

from board_server.errors import IncorrectPasswordError, ReplyNotFoundError, ThreadNotFoundError
from board_server.schemas.threads import Reply, Thread, ThreadView
from board_server.services.projection import project_thread
from board_server.services.threads import REPORTED, SUCCESS
from board_server.stores.base import ThreadStore
from board_server.utils import utcnow

logger = logging.getLogger(__name__)

TOMBSTONE = "[deleted]"


async def _resolve_thread(store: ThreadStore, thread_id: str) -> Thread:
    thread = await store.get_thread(thread_id)
    if thread is None:
        raise ThreadNotFoundError()
    return thread


def _resolve_reply(thread: Thread, reply_id: str) -> Reply:
    reply = thread.find_reply(str(reply_id))
    if reply is None:
        raise ReplyNotFoundError()
    return reply


async def create_reply(store: ThreadStore, board: str, thread_id: str, text: str, delete_password: str) -> Reply:
    thread = await _resolve_thread(store, thread_id)

    now = utcnow()
    reply = Reply(text=text, created_on=now, delete_password=delete_password, reported=False)
    thread.replies.append(reply)
    thread.bumped_on = max(now, thread.bumped_on)

    saved = await store.save_thread(thread)
    created = saved.replies[-1]
    logger.info(f"Added reply {created.id} to thread {saved.id} on board {board!r} ({saved.origin})")
    return created


async def get_thread_with_replies(store: ThreadStore, thread_id: str) -> ThreadView:
    thread = await _resolve_thread(store, thread_id)
    return project_thread(thread)


async def report_reply(store: ThreadStore, thread_id: str, reply_id: str) -> str:
    # Tombstoned replies can still be reported.
    thread = await _resolve_thread(store, thread_id)
    reply = _resolve_reply(thread, reply_id)

    reply.reported = True
    await store.save_thread(thread)
    return REPORTED


async def delete_reply(store: ThreadStore, thread_id: str, reply_id: str, delete_password: str) -> str:
    """Tombstone a reply's text. The record, its timestamp and report flag stay."""
    thread = await _resolve_thread(store, thread_id)
    reply = _resolve_reply(thread, reply_id)

    if reply.delete_password != delete_password:
        raise IncorrectPasswordError()

    reply.text = TOMBSTONE
    await store.save_thread(thread)
    return SUCCESS
