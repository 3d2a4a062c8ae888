"""
Tests for board read use cases: read, page, search.

Run with: pytest tests/test_board_queries.py -v
"""

from datetime import datetime, timezone

import pytest

from board_backend.application.dto.board import BoardDTO
from board_backend.application.queries.boards import (
    PageBoardsHandler,
    PageBoardsQuery,
    ReadBoardHandler,
    ReadBoardQuery,
    SearchBoardsHandler,
    SearchBoardsQuery,
)
from board_backend.domain.entities.board import Board
from board_backend.domain.exceptions import BoardNotFoundError
from board_backend.domain.value_objects.board_id import BoardId
from board_backend.domain.value_objects.category import Category
from board_backend.domain.value_objects.pagination import PageRequest


def _seed(board_repo, board_id, member, title, deleted=False):
    board = Board.create(
        member=member,
        title=title,
        content=f"content of {title}",
        category=Category.FREE,
        image_url="/static/uploads/defaultImage.png",
    )
    if deleted:
        board.record_deletion(datetime.now(timezone.utc))
    return board_repo.insert(board_id, board)


class TestReadBoard:
    @pytest.mark.asyncio
    async def test_read_returns_projection(self, board_repo, alice):
        _seed(board_repo, 3, alice, "Harbor walk")

        dto = await ReadBoardHandler(board_repo).execute(ReadBoardQuery(BoardId(3)))

        assert isinstance(dto, BoardDTO)
        assert dto.id == 3
        assert dto.title == "Harbor walk"
        assert dto.member_id == alice.id.value
        assert dto.image_url == "/static/uploads/defaultImage.png"
        assert dto.created_at is not None

    @pytest.mark.asyncio
    async def test_soft_deleted_board_reads_like_missing_one(self, board_repo, alice):
        _seed(board_repo, 5, alice, "Gone", deleted=True)
        handler = ReadBoardHandler(board_repo)

        with pytest.raises(BoardNotFoundError) as deleted_exc:
            await handler.execute(ReadBoardQuery(BoardId(5)))
        with pytest.raises(BoardNotFoundError) as missing_exc:
            await handler.execute(ReadBoardQuery(BoardId(6)))

        assert type(deleted_exc.value) is type(missing_exc.value)
        assert deleted_exc.value.code == missing_exc.value.code


class TestPageBoards:
    @pytest.mark.asyncio
    async def test_page_orders_by_ascending_id(self, board_repo, alice, bob):
        # inserted out of order on purpose
        for board_id in (7, 2, 9, 4):
            _seed(board_repo, board_id, alice if board_id % 2 else bob, f"post {board_id}")

        page = await PageBoardsHandler(board_repo).execute(
            PageBoardsQuery(PageRequest(page=1, size=10))
        )

        assert [dto.id for dto in page.items] == [2, 4, 7, 9]
        assert page.total == 4

    @pytest.mark.asyncio
    async def test_page_skips_deleted_and_slices(self, board_repo, alice):
        for board_id in range(1, 6):
            _seed(board_repo, board_id, alice, f"post {board_id}", deleted=board_id == 2)

        page = await PageBoardsHandler(board_repo).execute(
            PageBoardsQuery(PageRequest(page=2, size=2))
        )

        assert [dto.id for dto in page.items] == [4, 5]
        assert page.total == 4
        assert page.total_pages == 2
        assert not page.has_next

    @pytest.mark.asyncio
    async def test_repository_failure_becomes_board_not_found(self, board_repo):
        board_repo.fail_with = ConnectionError("db down")

        with pytest.raises(BoardNotFoundError) as exc_info:
            await PageBoardsHandler(board_repo).execute(PageBoardsQuery(PageRequest()))

        assert isinstance(exc_info.value.__cause__, ConnectionError)


class TestSearchBoards:
    @pytest.mark.asyncio
    async def test_search_matches_title_or_author(self, board_repo, alice, bob):
        _seed(board_repo, 1, alice, "Coast trip")
        _seed(board_repo, 2, bob, "Mountain hike")
        _seed(board_repo, 3, bob, "City lights")
        _seed(board_repo, 4, alice, "Another coast", deleted=True)

        handler = SearchBoardsHandler(board_repo)

        by_title = await handler.execute(SearchBoardsQuery("coast", PageRequest()))
        by_author = await handler.execute(SearchBoardsQuery("BOB", PageRequest()))

        assert [dto.id for dto in by_title.items] == [1]
        assert [dto.id for dto in by_author.items] == [2, 3]

    @pytest.mark.asyncio
    async def test_blank_keyword_behaves_like_page(self, board_repo, alice):
        _seed(board_repo, 1, alice, "One")
        _seed(board_repo, 2, alice, "Two")

        page = await SearchBoardsHandler(board_repo).execute(
            SearchBoardsQuery("   ", PageRequest())
        )

        assert [dto.id for dto in page.items] == [1, 2]

    @pytest.mark.asyncio
    async def test_repository_failure_becomes_board_not_found(self, board_repo):
        board_repo.fail_with = TimeoutError()

        with pytest.raises(BoardNotFoundError):
            await SearchBoardsHandler(board_repo).execute(
                SearchBoardsQuery("x", PageRequest())
            )
