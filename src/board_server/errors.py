"""Domain failures that are answered as plain-text signals."""


class BoardError(Exception):
    message = "error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ThreadNotFoundError(BoardError):
    message = "thread not found"


class ReplyNotFoundError(BoardError):
    message = "reply not found"


class IncorrectPasswordError(BoardError):
    message = "incorrect password"
