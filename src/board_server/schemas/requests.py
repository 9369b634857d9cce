"""Request bodies. Only presence is checked; values are taken as-is."""

from pydantic import BaseModel, ConfigDict


class BoardRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class CreateThreadRequest(BoardRequest):
    text: str
    delete_password: str


class ReportThreadRequest(BoardRequest):
    thread_id: str


class DeleteThreadRequest(BoardRequest):
    thread_id: str
    delete_password: str


class CreateReplyRequest(BoardRequest):
    thread_id: str
    text: str
    delete_password: str


class ReportReplyRequest(BoardRequest):
    thread_id: str
    reply_id: str


class DeleteReplyRequest(BoardRequest):
    thread_id: str
    reply_id: str
    delete_password: str
