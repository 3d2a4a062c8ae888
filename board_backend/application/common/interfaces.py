"""
Base interfaces for CQRS pattern.

Usage:
    @dataclass(frozen=True)
    class DeleteBoardCommand(Command[Board]):
        board_id: BoardId

    class DeleteBoardHandler(CommandHandler[Board]):
        def __init__(self, board_repository: BoardRepository):
            self._board_repository = board_repository

        async def execute(self, command: DeleteBoardCommand) -> Board:
            board = await self._board_repository.get_by_id(command.board_id)
            ...
            return await self._board_repository.save(board)
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")
class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass

class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...

class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass

class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...
