from htpy import BaseElement, Node, a, article, div, p, span

from board_server.schemas.threads import ReplyView, ThreadView
from board_server.views.components.time import render_time


def reply_card(reply: ReplyView) -> BaseElement:
    return article(class_="reply", data_id=reply.id)[
        div(class_="post-header")[span(class_="post-id")[f"#{reply.id}"], render_time(reply.created_on)],
        p(class_="post-body")[reply.text],
    ]


def thread_card(*, thread: ThreadView, link: bool, footer: Node = None) -> BaseElement:
    header_children: list[Node] = [span(class_="post-id")[f"#{thread.id}"], render_time(thread.created_on)]
    if link:
        header_children.append(a(href=f"/b/{thread.board}/{thread.id}")["Open"])

    return article(class_="thread", data_id=thread.id)[
        div(class_="post-header")[*header_children],
        p(class_="post-body")[thread.text],
        footer,
        div(class_="replies")[[reply_card(reply) for reply in thread.replies]],
    ]
