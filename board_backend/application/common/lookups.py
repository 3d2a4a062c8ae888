"""
Lookups shared by board handlers.

Member and board resolution raise their own NotFound errors so that callers
can let them propagate unchanged, outside of any catch-all.
"""

import asyncio
from typing import Optional

from board_backend.config.settings import BoardSettings
from board_backend.domain.entities.board import Board
from board_backend.domain.entities.member import Member
from board_backend.domain.exceptions import BoardNotFoundError, MemberNotFoundError
from board_backend.domain.ports.image_store import ImageStore
from board_backend.domain.ports.repositories import BoardRepository, MemberRepository
from board_backend.domain.value_objects.board_id import BoardId
from board_backend.domain.value_objects.image_upload import ImageUpload
from board_backend.domain.value_objects.member_id import MemberId


async def retrieve_member(
    member_repository: MemberRepository, member_id: MemberId
) -> Member:
    member = await member_repository.get_by_id(member_id)
    if member is None:
        raise MemberNotFoundError(f"Member {member_id.value} not found.")
    return member


async def retrieve_active_board(
    board_repository: BoardRepository, board_id: BoardId
) -> Board:
    """Soft-deleted boards are reported exactly like missing ones."""
    board = await board_repository.get_by_id(board_id)
    if board is None or board.is_deleted:
        raise BoardNotFoundError()
    return board


async def resolve_image_url(
    image_store: ImageStore,
    settings: BoardSettings,
    image: Optional[ImageUpload],
) -> str:
    if image is None or image.is_empty:
        return settings.default_image_url
    # Stores write to disk or the network; keep that off the event loop
    return await asyncio.to_thread(image_store.upload, image)
