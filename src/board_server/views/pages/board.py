from htpy import Node, p, section, span

from board_server.schemas.threads import BoardThreadView
from board_server.views.components.post_card import thread_card
from board_server.views.components.post_form import post_form
from board_server.views.layout import render_page


def _omitted(thread: BoardThreadView) -> Node:
    hidden = thread.replycount - len(thread.replies)
    if hidden <= 0:
        return None
    return span(class_="omitted")[f"{hidden} older replies omitted"]


def render_board_page(*, board: str, threads: list[BoardThreadView]) -> Node:
    return render_page(
        title_text=f"/{board}/",
        board=board,
        content=[
            post_form(action=f"/api/threads/{board}", submit_label="New thread"),
            section(class_="threads")[
                [thread_card(thread=thread, link=True, footer=_omitted(thread)) for thread in threads]
                if threads
                else p(class_="empty")["No threads yet."]
            ],
        ],
    )
