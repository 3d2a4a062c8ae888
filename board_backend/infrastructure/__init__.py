"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: Database implementations (Prisma repositories)
- storage/: File system operations (FileStorageService, LocalImageStore)

Persistence modules import the generated Prisma client, so they are only
imported where the real container is built (setup/ioc).
"""
