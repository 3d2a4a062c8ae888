"""
Application provider - wires board handlers to the ports they need.

Dishka concepts:
- Provider: Class that defines how to create dependencies
- @provide: Decorator to mark factory methods
- Scope: Lifecycle of dependency (APP = singleton, REQUEST = per-request)

Handlers ask for abstract ports (BoardRepository, MemberRepository,
ImageStore); whichever infrastructure provider sits in the same container
supplies them.
"""

from dishka import Provider, Scope, provide

from board_backend.application.commands.boards import (
    DeleteBoardHandler,
    RegisterBoardHandler,
    UpdateBoardHandler,
)
from board_backend.application.queries.boards import (
    PageBoardsHandler,
    ReadBoardHandler,
    SearchBoardsHandler,
)
from board_backend.config.settings import BoardSettings, get_config
from board_backend.domain.ports.image_store import ImageStore
from board_backend.domain.ports.repositories import BoardRepository, MemberRepository


class ApplicationProvider(Provider):
    """Registers board settings and all command/query handlers."""

    def __init__(self, settings: BoardSettings | None = None):
        super().__init__()
        self._settings = settings or BoardSettings.from_config(get_config())

    # ==================== SETTINGS ====================

    @provide(scope=Scope.APP)
    def get_board_settings(self) -> BoardSettings:
        return self._settings

    # ==================== COMMAND HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_register_board_handler(
        self,
        board_repository: BoardRepository,
        member_repository: MemberRepository,
        image_store: ImageStore,
        settings: BoardSettings,
    ) -> RegisterBoardHandler:
        return RegisterBoardHandler(
            board_repository=board_repository,
            member_repository=member_repository,
            image_store=image_store,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_board_handler(
        self,
        board_repository: BoardRepository,
        member_repository: MemberRepository,
        image_store: ImageStore,
        settings: BoardSettings,
    ) -> UpdateBoardHandler:
        return UpdateBoardHandler(
            board_repository=board_repository,
            member_repository=member_repository,
            image_store=image_store,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_board_handler(
        self, board_repository: BoardRepository
    ) -> DeleteBoardHandler:
        return DeleteBoardHandler(board_repository)

    # ==================== QUERY HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_read_board_handler(
        self, board_repository: BoardRepository
    ) -> ReadBoardHandler:
        return ReadBoardHandler(board_repository)

    @provide(scope=Scope.REQUEST)
    def get_page_boards_handler(
        self, board_repository: BoardRepository
    ) -> PageBoardsHandler:
        return PageBoardsHandler(board_repository)

    @provide(scope=Scope.REQUEST)
    def get_search_boards_handler(
        self, board_repository: BoardRepository
    ) -> SearchBoardsHandler:
        return SearchBoardsHandler(board_repository)
