from typing import Protocol

from board_server.schemas.threads import Thread


class ThreadStore(Protocol):
    """Storage operations shared by the durable store and the in-memory mirror.

    Identifiers are opaque strings. ``save_thread`` assigns ids to a new thread
    and to any reply that does not have one yet, and returns the stored copy.
    """

    name: str

    async def list_threads(self, board: str) -> list[Thread]: ...

    async def get_thread(self, thread_id: str) -> Thread | None: ...

    async def save_thread(self, thread: Thread) -> Thread: ...

    async def delete_thread(self, thread: Thread) -> bool: ...
