"""Public projections of stored threads.

Views are built field by field, so ``reported`` and ``delete_password`` can
never reach a response.
"""

from typing import Iterable

from board_server.schemas.threads import BoardThreadView, Reply, ReplyView, Thread, ThreadView

THREAD_LIMIT = 10
REPLY_PREVIEW_LIMIT = 3


def project_reply(reply: Reply) -> ReplyView:
    return ReplyView(id=str(reply.id), text=reply.text, created_on=reply.created_on)


def project_thread(thread: Thread) -> ThreadView:
    """Full thread view with every reply, used for the single-thread page."""
    return ThreadView(
        id=str(thread.id),
        board=thread.board,
        text=thread.text,
        created_on=thread.created_on,
        bumped_on=thread.bumped_on,
        replies=[project_reply(reply) for reply in thread.replies],
    )


def project_board_thread(thread: Thread) -> BoardThreadView:
    # replycount is the full total, the visible list keeps only the newest replies
    recent = thread.replies[-REPLY_PREVIEW_LIMIT:]
    return BoardThreadView(
        id=str(thread.id),
        board=thread.board,
        text=thread.text,
        created_on=thread.created_on,
        bumped_on=thread.bumped_on,
        replies=[project_reply(reply) for reply in recent],
        replycount=len(thread.replies),
    )


def project_board(threads: Iterable[Thread]) -> list[BoardThreadView]:
    """Most recently bumped threads first; sorted() is stable so ties keep storage order."""
    ordered = sorted(threads, key=lambda thread: thread.bumped_on, reverse=True)
    return [project_board_thread(thread) for thread in ordered[:THREAD_LIMIT]]
