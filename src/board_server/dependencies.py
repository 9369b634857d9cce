from typing import Protocol, cast

from fastapi import Request

from board_server.stores.base import ThreadStore


class HasStore(Protocol):
    store: ThreadStore


def get_store(request: Request) -> ThreadStore:
    state = cast(HasStore, request.app.state)
    return state.store
