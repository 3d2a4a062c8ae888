"""
Infrastructure provider - concrete implementations of the domain ports.

Requires a generated Prisma client (`prisma generate`).
"""

from typing import AsyncIterable

from dishka import Provider, Scope, provide
from prisma import Prisma

from board_backend.config.settings import Config
from board_backend.domain.ports.image_store import ImageStore
from board_backend.domain.ports.repositories import BoardRepository, MemberRepository
from board_backend.infrastructure.persistence import (
    PrismaBoardRepository,
    PrismaMemberRepository,
)
from board_backend.infrastructure.storage import FileStorageService, LocalImageStore


class InfrastructureProvider(Provider):
    def __init__(self, cfg: type[Config] = Config):
        super().__init__()
        self._cfg = cfg

    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - Scope.APP = created ONCE, shared across all requests
        - Disconnected when the container closes (app shutdown)
        """
        prisma = Prisma()
        await prisma.connect()
        yield prisma
        await prisma.disconnect()

    # ==================== STORAGE ====================

    @provide(scope=Scope.APP)
    def get_file_storage(self) -> FileStorageService:
        return FileStorageService(upload_base=self._cfg.UPLOAD_PATH)

    @provide(scope=Scope.APP)
    def get_image_store(self, storage: FileStorageService) -> ImageStore:
        return LocalImageStore(storage, image_dir=self._cfg.BOARD_IMAGE_DIR)

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_board_repository(self, prisma: Prisma) -> BoardRepository:
        """
        - Return type is ABSTRACT (BoardRepository)
        - Implementation is CONCRETE (PrismaBoardRepository)
        """
        return PrismaBoardRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_member_repository(self, prisma: Prisma) -> MemberRepository:
        return PrismaMemberRepository(prisma)
