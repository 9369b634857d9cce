"""Durable store with a per-call fallback to the in-memory mirror."""

import logging
from typing import Awaitable, Callable, TypeVar

from board_server.schemas.threads import Thread
from board_server.stores.base import ThreadStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FallbackThreadStore:
    """Try the primary store on every call and replay the call on the mirror if it raises.

    There is no sticky "primary is down" state, so the primary is used again as
    soon as it answers. The backends are never reconciled: a record saved in one
    is invisible to the other. Records remember their origin, and a record that
    was read from the mirror is written back to the mirror only.
    """

    name = "fallback"

    def __init__(self, primary: ThreadStore | None, mirror: ThreadStore) -> None:
        self.primary = primary
        self.mirror = mirror

    async def _run(
        self,
        operation: str,
        call: Callable[[ThreadStore], Awaitable[T]],
        use_primary: bool = True,
    ) -> T:
        if self.primary is not None and use_primary:
            try:
                return await call(self.primary)
            except Exception as e:
                logger.warning(f"Durable store error during {operation}, using mirror: {e!r}")
        return await call(self.mirror)

    def _from_mirror(self, thread: Thread) -> bool:
        return thread.origin == self.mirror.name

    async def list_threads(self, board: str) -> list[Thread]:
        return await self._run("list_threads", lambda store: store.list_threads(board))

    async def get_thread(self, thread_id: str) -> Thread | None:
        return await self._run("get_thread", lambda store: store.get_thread(thread_id))

    async def save_thread(self, thread: Thread) -> Thread:
        return await self._run(
            "save_thread",
            lambda store: store.save_thread(thread),
            use_primary=not self._from_mirror(thread),
        )

    async def delete_thread(self, thread: Thread) -> bool:
        return await self._run(
            "delete_thread",
            lambda store: store.delete_thread(thread),
            use_primary=not self._from_mirror(thread),
        )
