"""
EntityNotFoundError - Raised when a requested entity does not exist.
Maps to: HTTP 404 Not Found
"""


class EntityNotFoundError(Exception):
    """Exception raised when a requested entity is not found."""

    code = "ENTITY_NOT_FOUND"

    def __init__(self, message: str = "The requested entity was not found."):
        super().__init__(message)
        self.message = message


class BoardNotFoundError(EntityNotFoundError):
    """Board does not exist, or exists but was soft-deleted."""

    code = "BOARD_NOT_FOUND"

    def __init__(self, message: str = "Board not found."):
        super().__init__(message)


class MemberNotFoundError(EntityNotFoundError):
    code = "MEMBER_NOT_FOUND"

    def __init__(self, message: str = "Member not found."):
        super().__init__(message)
