"""
Register Board Command.

Flow:
1. Resolve the owning member (MemberNotFoundError propagates as-is)
2. Resolve image URL (uploaded -> ImageStore URL, absent/empty -> default image)
3. Build the Board through Board.create
4. Persist via BoardRepository

Any failure in steps 2-4 surfaces as BoardNotRegisteredError; the original
exception is chained and logged.
"""

from dataclasses import dataclass
from logging import getLogger
from typing import Optional

from board_backend.application.common.interfaces import Command, CommandHandler
from board_backend.application.common.lookups import resolve_image_url, retrieve_member
from board_backend.config.settings import BoardSettings
from board_backend.domain.entities.board import Board
from board_backend.domain.exceptions import BoardNotRegisteredError
from board_backend.domain.ports.image_store import ImageStore
from board_backend.domain.ports.repositories import BoardRepository, MemberRepository
from board_backend.domain.value_objects.category import Category
from board_backend.domain.value_objects.image_upload import ImageUpload
from board_backend.domain.value_objects.member_id import MemberId

logger = getLogger(__name__)


@dataclass(frozen=True)
class RegisterBoardCommand(Command[None]):
    member_id: MemberId
    title: str
    content: str
    category: Category
    image: Optional[ImageUpload] = None


class RegisterBoardHandler(CommandHandler[None]):
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

    async def execute(self, command: RegisterBoardCommand) -> None:
        member = await retrieve_member(self._member_repository, command.member_id)

        try:
            image_url = await resolve_image_url(
                self._image_store, self._settings, command.image
            )
            board = Board.create(
                member=member,
                title=command.title,
                content=command.content,
                category=command.category,
                image_url=image_url,
            )
            saved = await self._board_repository.save(board)
        except Exception as e:
            logger.exception(
                "[RegisterBoard] Failed for member %s: %s", command.member_id.value, e
            )
            raise BoardNotRegisteredError() from e

        logger.info(
            "[RegisterBoard] Board %s registered by member %s",
            saved.id.value if saved.id else "?",
            command.member_id.value,
        )
