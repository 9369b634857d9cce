"""In-process mirror used when the durable store cannot be reached."""

import itertools
import logging

from board_server.schemas.threads import Thread

logger = logging.getLogger(__name__)


class MemoryThreadStore:
    """Dict-backed store with per-instance counters for thread and reply ids.

    Records are copied on every read and write, so a caller only changes the
    mirror by saving. Operations never suspend, which keeps them atomic on a
    single event loop; a threaded host must add a lock around this class.
    """

    name = "memory"

    def __init__(self) -> None:
        self._threads: dict[str, Thread] = {}
        self._thread_ids = itertools.count(1)
        self._reply_ids = itertools.count(1)

    def _copy(self, thread: Thread) -> Thread:
        record = thread.model_copy(deep=True)
        record.origin = self.name
        return record

    async def list_threads(self, board: str) -> list[Thread]:
        return [self._copy(thread) for thread in self._threads.values() if thread.board == board]

    async def get_thread(self, thread_id: str) -> Thread | None:
        thread = self._threads.get(str(thread_id))
        if thread is None:
            return None
        return self._copy(thread)

    async def save_thread(self, thread: Thread) -> Thread:
        record = self._copy(thread)
        if record.id is None:
            record.id = str(next(self._thread_ids))
        for reply in record.replies:
            if reply.id is None:
                reply.id = str(next(self._reply_ids))

        self._threads[record.id] = record
        return self._copy(record)

    async def delete_thread(self, thread: Thread) -> bool:
        if thread.id is None:
            return False
        removed = self._threads.pop(str(thread.id), None)
        if removed is not None:
            logger.info(f"Deleted mirror thread: {thread.id} and {len(removed.replies)} replies")
        return removed is not None
