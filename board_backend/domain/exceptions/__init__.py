"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain and application logic and caught by
the presentation layer, which maps them to error envelopes.
"""

from board_backend.domain.exceptions.entity_not_found import (
    EntityNotFoundError,
    BoardNotFoundError,
    MemberNotFoundError,
)
from board_backend.domain.exceptions.board_operation import (
    BoardOperationError,
    BoardNotRegisteredError,
    BoardNotModifiedError,
    BoardNotRemovedError,
)
from board_backend.domain.exceptions.validation_error import DomainValidationError

__all__ = [
    "EntityNotFoundError",
    "BoardNotFoundError",
    "MemberNotFoundError",
    "BoardOperationError",
    "BoardNotRegisteredError",
    "BoardNotModifiedError",
    "BoardNotRemovedError",
    "DomainValidationError",
]
