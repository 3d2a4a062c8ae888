"""Board DTOs for API request/response."""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

from board_backend.domain.entities.board import Board
from board_backend.domain.value_objects.category import Category
from board_backend.domain.value_objects.pagination import Page

NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class BoardCreateRequest(BaseModel):
    """
    JSON part of the multipart register request.

    {
        "memberId": 1,
        "boardTitle": "Weekend trip",
        "boardContent": "Went to the coast...",
        "category": "REVIEW"
    }
    """

    model_config = ConfigDict(populate_by_name=True)

    member_id: int = Field(alias="memberId", gt=0)
    board_title: NonBlankStr = Field(alias="boardTitle")
    board_content: NonBlankStr = Field(alias="boardContent")
    category: Category


class BoardUpdateRequest(BoardCreateRequest):
    """Same shape as create; every field is replaced on update."""


class BoardDTO(BaseModel):
    """Read-only projection of a Board returned to clients."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    content: str
    category: Category
    image_url: str
    member_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, board: Board) -> "BoardDTO":
        return cls(
            id=board.id.value,
            title=board.title,
            content=board.content,
            category=board.category,
            image_url=board.image_url,
            member_id=board.member.id.value,
            created_at=board.created_at,
            updated_at=board.updated_at,
        )


class BoardPageDTO(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    items: list[BoardDTO]
    page: int
    size: int
    total: int
    total_pages: int
    has_next: bool

    @classmethod
    def from_page(cls, page: Page[BoardDTO]) -> "BoardPageDTO":
        return cls(
            items=page.items,
            page=page.page,
            size=page.size,
            total=page.total,
            total_pages=page.total_pages,
            has_next=page.has_next,
        )
