"""Update Board Command."""

from dataclasses import dataclass
from logging import getLogger
from typing import Optional

from board_backend.application.common.interfaces import Command, CommandHandler
from board_backend.application.common.lookups import (
    resolve_image_url,
    retrieve_active_board,
    retrieve_member,
)
from board_backend.config.settings import BoardSettings
from board_backend.domain.entities.board import Board
from board_backend.domain.exceptions import BoardNotModifiedError
from board_backend.domain.ports.image_store import ImageStore
from board_backend.domain.ports.repositories import BoardRepository, MemberRepository
from board_backend.domain.value_objects.board_id import BoardId
from board_backend.domain.value_objects.category import Category
from board_backend.domain.value_objects.image_upload import ImageUpload
from board_backend.domain.value_objects.member_id import MemberId

logger = getLogger(__name__)


@dataclass(frozen=True)
class UpdateBoardCommand(Command[Board]):
    board_id: BoardId
    member_id: MemberId
    title: str
    content: str
    category: Category
    image: Optional[ImageUpload] = None


class UpdateBoardHandler(CommandHandler[Board]):
    """
    Full replace of member/title/content/category/image.

    No image in the request means the default image, not "keep the old one".
    """

    def __init__(
        self,
        board_repository: BoardRepository,
        member_repository: MemberRepository,
        image_store: ImageStore,
        settings: BoardSettings,
    ):
        self._board_repository = board_repository
        self._member_repository = member_repository
        self._image_store = image_store
        self._settings = settings

    async def execute(self, command: UpdateBoardCommand) -> Board:
        member = await retrieve_member(self._member_repository, command.member_id)
        board = await retrieve_active_board(self._board_repository, command.board_id)

        try:
            image_url = await resolve_image_url(
                self._image_store, self._settings, command.image
            )
            board.update(
                member=member,
                title=command.title,
                content=command.content,
                category=command.category,
                image_url=image_url,
            )
            return await self._board_repository.save(board)
        except Exception as e:
            logger.exception(
                "[UpdateBoard] Failed for board %s: %s", command.board_id.value, e
            )
            raise BoardNotModifiedError() from e
