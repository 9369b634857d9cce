from htpy import BaseElement, button, form, input as input_, label, textarea


def post_form(*, action: str, submit_label: str, thread_id: str | None = None) -> BaseElement:
    return form(action=action, method="post", class_="post-form")[
        input_(type="hidden", name="thread_id", value=thread_id) if thread_id else None,
        label[
            "Text",
            textarea(name="text", required=True, rows="4"),
        ],
        label[
            "Delete password",
            input_(type="password", name="delete_password", required=True),
        ],
        button(type="submit")[submit_label],
    ]
