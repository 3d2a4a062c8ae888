"""
Page / Search Boards Queries.

Both return active boards only, ordered by ascending id. Whatever goes wrong
in the repository is reported to the caller as BoardNotFoundError.

Usage in presentation layer:
    handler: FromDishka[SearchBoardsHandler]
    page = await handler.execute(
        SearchBoardsQuery(keyword="coast", page_request=PageRequest(page=1, size=10))
    )
"""

from dataclasses import dataclass
from logging import getLogger

from board_backend.application.common.interfaces import Query, QueryHandler
from board_backend.application.dto.board import BoardDTO
from board_backend.domain.exceptions import BoardNotFoundError
from board_backend.domain.ports.repositories import BoardRepository
from board_backend.domain.value_objects.pagination import Page, PageRequest

logger = getLogger(__name__)


# ==================== QUERIES ====================


@dataclass(frozen=True)
class PageBoardsQuery(Query[Page[BoardDTO]]):
    page_request: PageRequest


@dataclass(frozen=True)
class SearchBoardsQuery(Query[Page[BoardDTO]]):
    """Keyword is matched against board title and author nickname."""

    keyword: str
    page_request: PageRequest


# ==================== HANDLERS ====================


class PageBoardsHandler(QueryHandler[Page[BoardDTO]]):
    def __init__(self, board_repository: BoardRepository):
        self._board_repository = board_repository

    async def execute(self, query: PageBoardsQuery) -> Page[BoardDTO]:
        try:
            page = await self._board_repository.page(query.page_request)
        except Exception as e:
            logger.exception("[PageBoards] Lookup failed: %s", e)
            raise BoardNotFoundError() from e
        return page.map(BoardDTO.from_entity)


class SearchBoardsHandler(QueryHandler[Page[BoardDTO]]):
    def __init__(self, board_repository: BoardRepository):
        self._board_repository = board_repository

    async def execute(self, query: SearchBoardsQuery) -> Page[BoardDTO]:
        keyword = (query.keyword or "").strip()
        try:
            if keyword:
                page = await self._board_repository.search(keyword, query.page_request)
            else:
                page = await self._board_repository.page(query.page_request)
        except Exception as e:
            logger.exception("[SearchBoards] Lookup failed for %r: %s", keyword, e)
            raise BoardNotFoundError() from e
        return page.map(BoardDTO.from_entity)
