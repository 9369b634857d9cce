"""Thread and reply records, and the public views built from them."""

from datetime import datetime

from pydantic import BaseModel, Field

from board_server.utils import utcnow


class Reply(BaseModel):
    """A reply as stored inside its parent thread."""

    id: str | None = None
    text: str
    created_on: datetime = Field(default_factory=utcnow)
    delete_password: str
    reported: bool = False


class Thread(BaseModel):
    """A thread as stored, secrets included.

    ``origin`` names the backend that produced the record and is never persisted.
    """

    id: str | None = None
    board: str
    text: str
    created_on: datetime
    bumped_on: datetime
    reported: bool = False
    delete_password: str
    replies: list[Reply] = Field(default_factory=list)
    origin: str | None = Field(default=None, exclude=True)

    def find_reply(self, reply_id: str) -> Reply | None:
        for reply in self.replies:
            if reply.id == reply_id:
                return reply
        return None


class ReplyView(BaseModel):
    id: str = Field(serialization_alias="_id")
    text: str
    created_on: datetime


class ThreadView(BaseModel):
    id: str = Field(serialization_alias="_id")
    board: str
    text: str
    created_on: datetime
    bumped_on: datetime
    replies: list[ReplyView]


class BoardThreadView(ThreadView):
    replycount: int
