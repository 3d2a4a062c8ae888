"""
Board operation failures - terminal errors for write use cases.
Maps to: HTTP 400 Bad Request

Each write operation (register / update / delete) has exactly one terminal
error. The underlying failure is kept on __cause__ for logging only.
"""


class BoardOperationError(Exception):
    """Base class for board write failures."""

    code = "BOARD_OPERATION_FAILED"
    default_message = "Board operation failed."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BoardNotRegisteredError(BoardOperationError):
    code = "BOARD_NOT_REGISTERED"
    default_message = "Board could not be registered."


class BoardNotModifiedError(BoardOperationError):
    code = "BOARD_NOT_MODIFIED"
    default_message = "Board could not be modified."


class BoardNotRemovedError(BoardOperationError):
    code = "BOARD_NOT_REMOVED"
    default_message = "Board could not be removed."
