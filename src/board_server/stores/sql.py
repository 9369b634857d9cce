"""SQLModel-backed durable store for threads and their embedded replies."""

import logging
import uuid
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlmodel import col, select

from board_server.database import get_session
from board_server.entities.threads import ThreadEntity
from board_server.schemas.threads import Reply, Thread
from board_server.utils import as_utc

logger = logging.getLogger(__name__)


class SQLThreadStore:
    name = "sql"

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self.session_maker = session_maker

    def generate_id(self) -> str:
        return uuid.uuid4().hex

    def _to_record(self, entity: ThreadEntity) -> Thread:
        return Thread(
            id=entity.id,
            board=entity.board,
            text=entity.text,
            created_on=as_utc(entity.created_on),
            bumped_on=as_utc(entity.bumped_on),
            reported=entity.reported,
            delete_password=entity.delete_password,
            replies=[Reply.model_validate(item) for item in entity.replies or []],
            origin=self.name,
        )

    def _to_columns(self, thread: Thread) -> dict[str, Any]:
        return {
            "board": thread.board,
            "text": thread.text,
            "created_on": thread.created_on,
            "bumped_on": thread.bumped_on,
            "reported": thread.reported,
            "delete_password": thread.delete_password,
            "replies": [reply.model_dump(mode="json") for reply in thread.replies],
        }

    async def list_threads(self, board: str) -> list[Thread]:
        async with get_session(self.session_maker, read_only=True) as session:
            result = await session.execute(
                select(ThreadEntity)
                .where(col(ThreadEntity.board) == board)
                .order_by(col(ThreadEntity.created_on).asc())
            )
            return [self._to_record(entity) for entity in result.scalars().all()]

    async def get_thread(self, thread_id: str) -> Thread | None:
        async with get_session(self.session_maker, read_only=True) as session:
            entity = await session.get(ThreadEntity, str(thread_id))
            if entity is None:
                return None
            return self._to_record(entity)

    async def save_thread(self, thread: Thread) -> Thread:
        record = thread.model_copy(deep=True)
        if record.id is None:
            record.id = self.generate_id()
        for reply in record.replies:
            if reply.id is None:
                reply.id = self.generate_id()

        columns = self._to_columns(record)
        async with get_session(self.session_maker) as session:
            entity = await session.get(ThreadEntity, record.id)
            if entity is None:
                entity = ThreadEntity(id=record.id, **columns)
            else:
                for key, value in columns.items():
                    setattr(entity, key, value)
            session.add(entity)

        record.origin = self.name
        return record

    async def delete_thread(self, thread: Thread) -> bool:
        if thread.id is None:
            return False
        async with get_session(self.session_maker) as session:
            entity = await session.get(ThreadEntity, str(thread.id))
            if entity is None:
                return False

            reply_count = len(entity.replies or [])
            await session.delete(entity)

        logger.info(f"Deleted thread: {thread.id} and {reply_count} replies")
        return True
