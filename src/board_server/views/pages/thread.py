from htpy import Node, p

from board_server.schemas.threads import ThreadView
from board_server.views.components.post_card import thread_card
from board_server.views.components.post_form import post_form
from board_server.views.layout import render_page


def render_thread_page(*, board: str, thread: ThreadView) -> Node:
    return render_page(
        title_text=f"/{board}/ - {thread.id}",
        board=board,
        content=[
            thread_card(thread=thread, link=False),
            post_form(action=f"/api/replies/{board}", submit_label="Reply", thread_id=thread.id),
        ],
    )


def render_missing_thread_page(*, board: str, message: str) -> Node:
    return render_page(title_text=f"/{board}/", board=board, content=p(class_="empty")[message])
