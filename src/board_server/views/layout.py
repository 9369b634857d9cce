from htpy import Node, a, body, div, h1, head, header, html, main, meta, title


def render_page(*, title_text: str, board: str | None, content: Node) -> Node:
    return html(lang="en")[
        head[
            meta(charset="utf-8"),
            title[title_text],
            meta(name="viewport", content="width=device-width, initial-scale=1"),
            meta(name="color-scheme", content="light dark"),
        ],
        body[
            header(class_="board-header")[h1[a(href=f"/b/{board}/")[f"/{board}/"] if board else title_text],],
            div(class_="app-layout")[main(class_="main-content")[content],],
        ],
    ]
