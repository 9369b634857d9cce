from board_server.stores.base import ThreadStore
from board_server.stores.fallback import FallbackThreadStore
from board_server.stores.memory import MemoryThreadStore
from board_server.stores.sql import SQLThreadStore

__all__ = ["FallbackThreadStore", "MemoryThreadStore", "SQLThreadStore", "ThreadStore"]
