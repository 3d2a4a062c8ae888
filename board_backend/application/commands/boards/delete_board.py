"""Delete Board Command (soft delete)."""

from dataclasses import dataclass
from datetime import datetime, timezone
from logging import getLogger

from board_backend.application.common.interfaces import Command, CommandHandler
from board_backend.application.common.lookups import retrieve_active_board
from board_backend.domain.entities.board import Board
from board_backend.domain.exceptions import BoardNotRemovedError
from board_backend.domain.ports.repositories import BoardRepository
from board_backend.domain.value_objects.board_id import BoardId

logger = getLogger(__name__)


@dataclass(frozen=True)
class DeleteBoardCommand(Command[Board]):
    board_id: BoardId


class DeleteBoardHandler(CommandHandler[Board]):
    def __init__(self, board_repository: BoardRepository):
        self._board_repository = board_repository

    async def execute(self, command: DeleteBoardCommand) -> Board:
        board = await retrieve_active_board(self._board_repository, command.board_id)

        try:
            board.record_deletion(datetime.now(timezone.utc))
            removed = await self._board_repository.save(board)
        except Exception as e:
            logger.exception(
                "[DeleteBoard] Failed for board %s: %s", command.board_id.value, e
            )
            raise BoardNotRemovedError() from e

        logger.info("[DeleteBoard] Board %s soft-deleted", command.board_id.value)
        return removed
