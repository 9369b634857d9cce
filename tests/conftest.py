from pathlib import Path
from typing import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from board_server.app import create_app
from board_server.database import create_all_tables, create_session_maker
from board_server.schemas.threads import Thread
from board_server.settings import Settings
from board_server.stores.fallback import FallbackThreadStore
from board_server.stores.memory import MemoryThreadStore
from board_server.stores.sql import SQLThreadStore


class FlakyStore(MemoryThreadStore):
    """Stands in for the durable store.

    Raises on every call while ``down`` is set, and on the operations named in ``failing``.
    """

    name = "primary"

    def __init__(self) -> None:
        super().__init__()
        self.down = False
        self.failing: set[str] = set()
        self.calls: list[str] = []

    def _check(self, operation: str) -> None:
        self.calls.append(operation)
        if self.down or operation in self.failing:
            raise OperationalError(operation, {}, ConnectionError("durable store unreachable"))

    async def list_threads(self, board: str) -> list[Thread]:
        self._check("list_threads")
        return await super().list_threads(board)

    async def get_thread(self, thread_id: str) -> Thread | None:
        self._check("get_thread")
        return await super().get_thread(thread_id)

    async def save_thread(self, thread: Thread) -> Thread:
        self._check("save_thread")
        return await super().save_thread(thread)

    async def delete_thread(self, thread: Thread) -> bool:
        self._check("delete_thread")
        return await super().delete_thread(thread)


@pytest.fixture
def memory_store() -> MemoryThreadStore:
    return MemoryThreadStore()


@pytest.fixture
def flaky_primary() -> FlakyStore:
    return FlakyStore()


@pytest.fixture
def fallback_store(flaky_primary: FlakyStore) -> FallbackThreadStore:
    return FallbackThreadStore(flaky_primary, MemoryThreadStore())


@pytest_asyncio.fixture
async def sql_store() -> AsyncGenerator[SQLThreadStore, None]:
    engine, session_maker = create_session_maker("sqlite+aiosqlite://")
    await create_all_tables(engine)
    yield SQLThreadStore(session_maker)
    await engine.dispose()


@pytest.fixture
def client(tmp_path: Path) -> Generator[TestClient, None, None]:
    settings = Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'board.db'}")
    app = create_app(settings=settings)

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def mirror_client() -> Generator[TestClient, None, None]:
    app = create_app(settings=Settings(use_durable_store=False))

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def fallback_client(fallback_store: FallbackThreadStore) -> Generator[TestClient, None, None]:
    app = create_app(settings=Settings(use_durable_store=False), store=fallback_store)

    with TestClient(app) as test_client:
        yield test_client
