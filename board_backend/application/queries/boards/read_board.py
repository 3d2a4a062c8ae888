"""Read Board Query - single board by id."""

from dataclasses import dataclass

from board_backend.application.common.interfaces import Query, QueryHandler
from board_backend.application.common.lookups import retrieve_active_board
from board_backend.application.dto.board import BoardDTO
from board_backend.domain.ports.repositories import BoardRepository
from board_backend.domain.value_objects.board_id import BoardId


@dataclass(frozen=True)
class ReadBoardQuery(Query[BoardDTO]):
    board_id: BoardId


class ReadBoardHandler(QueryHandler[BoardDTO]):
    def __init__(self, board_repository: BoardRepository):
        self._board_repository = board_repository

    async def execute(self, query: ReadBoardQuery) -> BoardDTO:
        board = await retrieve_active_board(self._board_repository, query.board_id)
        return BoardDTO.from_entity(board)
