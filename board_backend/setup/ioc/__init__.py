"""
IoC setup - dishka providers.

- ApplicationProvider: settings + command/query handlers (no I/O)
- InfrastructureProvider: Prisma client, repositories, image store

container.create_container() combines both; tests pair ApplicationProvider
with their own fake infrastructure.
"""

from board_backend.setup.ioc.application import ApplicationProvider

__all__ = [
    "ApplicationProvider",
]
