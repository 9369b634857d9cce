"""Thread document entity."""

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import JSON, Column, DateTime, Index
from sqlmodel import Field, SQLModel


class ThreadEntity(SQLModel, table=True):
    """One row per thread; replies are embedded as an ordered JSON document."""

    __tablename__ = "threads"
    __table_args__ = (Index("ix_threads_board_bumped_on", "board", "bumped_on"),)

    id: str = Field(primary_key=True, default_factory=lambda: uuid.uuid4().hex)
    board: str = Field(index=True)
    text: str
    created_on: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
    bumped_on: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
    reported: bool = Field(default=False)
    delete_password: str
    replies: list[dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
