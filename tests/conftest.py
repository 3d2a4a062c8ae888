"""
Shared fixtures: in-memory fakes for every port plus an app wired to them.

The fakes stand in for Prisma and the disk, so nothing here needs a
database or a generated Prisma client.
"""

import copy
import threading
from datetime import datetime, timezone
from typing import Optional

import pytest
from dishka import Provider, Scope, make_async_container, provide
from fastapi.testclient import TestClient

from board_backend.config.settings import BoardSettings
from board_backend.domain.entities.board import Board
from board_backend.domain.entities.member import Member
from board_backend.domain.ports.image_store import ImageStore
from board_backend.domain.ports.repositories import BoardRepository, MemberRepository
from board_backend.domain.value_objects.board_id import BoardId
from board_backend.domain.value_objects.image_upload import ImageUpload
from board_backend.domain.value_objects.member_id import MemberId
from board_backend.domain.value_objects.pagination import Page, PageRequest
from board_backend.fastapi_app import create_fastapi_app
from board_backend.setup.ioc import ApplicationProvider

UPLOAD_PATH = "/static/uploads"
DEFAULT_IMAGE_URL = f"{UPLOAD_PATH}/defaultImage.png"


# ==================== FAKES ====================


class InMemoryBoardRepository(BoardRepository):
    """Stores copies, like a database would, and assigns ids/timestamps."""

    def __init__(self):
        self.rows: dict[int, Board] = {}
        self.saved: list[Board] = []
        self.fail_with: Optional[Exception] = None
        self._next_id = 1

    async def get_by_id(self, board_id: BoardId) -> Optional[Board]:
        row = self.rows.get(board_id.value)
        return copy.deepcopy(row) if row else None

    async def save(self, board: Board) -> Board:
        if self.fail_with:
            raise self.fail_with
        now = datetime.now(timezone.utc)
        stored = copy.deepcopy(board)
        if stored.id is None:
            stored.id = BoardId(self._next_id)
            self._next_id += 1
            stored.created_at = now
        stored.updated_at = now
        self.rows[stored.id.value] = stored
        self.saved.append(stored)
        return copy.deepcopy(stored)

    async def page(self, page_request: PageRequest) -> Page[Board]:
        return self._page(lambda b: True, page_request)

    async def search(self, keyword: str, page_request: PageRequest) -> Page[Board]:
        needle = keyword.lower()
        return self._page(
            lambda b: needle in b.title.lower() or needle in b.member.nickname.lower(),
            page_request,
        )

    def _page(self, predicate, page_request: PageRequest) -> Page[Board]:
        if self.fail_with:
            raise self.fail_with
        matches = sorted(
            (b for b in self.rows.values() if not b.is_deleted and predicate(b)),
            key=lambda b: b.id.value,
        )
        window = matches[page_request.offset : page_request.offset + page_request.limit]
        return Page(
            items=[copy.deepcopy(b) for b in window],
            page=page_request.page,
            size=page_request.size,
            total=len(matches),
        )

    def insert(self, board_id: int, board: Board) -> Board:
        """Seed a row with a chosen id (bypasses id generation)."""
        board.id = BoardId(board_id)
        board.created_at = board.updated_at = datetime.now(timezone.utc)
        self.rows[board_id] = copy.deepcopy(board)
        self._next_id = max(self._next_id, board_id + 1)
        return board


class InMemoryMemberRepository(MemberRepository):
    def __init__(self, members: list[Member]):
        self.members = {m.id.value: m for m in members}

    async def get_by_id(self, member_id: MemberId) -> Optional[Member]:
        return self.members.get(member_id.value)


class FakeImageStore(ImageStore):
    def __init__(self):
        self.uploads: list[ImageUpload] = []
        self.upload_threads: list[int] = []
        self.fail_with: Optional[Exception] = None

    def upload(self, image: ImageUpload) -> str:
        if self.fail_with:
            raise self.fail_with
        self.uploads.append(image)
        self.upload_threads.append(threading.get_ident())
        return f"https://images.example.com/boards/{image.filename}"


class FakeInfrastructureProvider(Provider):
    def __init__(self, board_repository, member_repository, image_store):
        super().__init__()
        self._board_repository = board_repository
        self._member_repository = member_repository
        self._image_store = image_store

    @provide(scope=Scope.APP)
    def get_board_repository(self) -> BoardRepository:
        return self._board_repository

    @provide(scope=Scope.APP)
    def get_member_repository(self) -> MemberRepository:
        return self._member_repository

    @provide(scope=Scope.APP)
    def get_image_store(self) -> ImageStore:
        return self._image_store


# ==================== FIXTURES ====================


@pytest.fixture()
def settings():
    return BoardSettings(upload_path=UPLOAD_PATH)


@pytest.fixture()
def alice():
    return Member(id=MemberId(1), nickname="alice")


@pytest.fixture()
def bob():
    return Member(id=MemberId(2), nickname="bob")


@pytest.fixture()
def board_repo():
    return InMemoryBoardRepository()


@pytest.fixture()
def member_repo(alice, bob):
    return InMemoryMemberRepository([alice, bob])


@pytest.fixture()
def image_store():
    return FakeImageStore()


@pytest.fixture()
def app(settings, board_repo, member_repo, image_store):
    """FastAPI app whose container hands out the in-memory fakes."""
    container = make_async_container(
        ApplicationProvider(settings),
        FakeInfrastructureProvider(board_repo, member_repo, image_store),
    )
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client
