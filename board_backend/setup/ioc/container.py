"""
Dishka DI Container Setup.

Flow:
  Container -> provides -> PrismaBoardRepository -> to -> RegisterBoardHandler
                                    |
                            uses BoardRepository interface
"""

from dishka import AsyncContainer, make_async_container

from board_backend.config.settings import BoardSettings, Config, get_config
from board_backend.setup.ioc.application import ApplicationProvider
from board_backend.setup.ioc.infrastructure import InfrastructureProvider


def create_container(cfg: type[Config] | None = None) -> AsyncContainer:
    """
    Create and configure the DI container.

    Call this ONCE at app startup; the app closes it on shutdown.
    `cfg` defaults to the config class selected by APP_ENV.
    """
    cfg = cfg or get_config()
    return make_async_container(
        InfrastructureProvider(cfg),
        ApplicationProvider(BoardSettings.from_config(cfg)),
    )
