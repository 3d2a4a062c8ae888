"""
DOMAIN LAYER - Board posts and the rules around them

This layer contains:
- Entities: Business objects with identity (Board, Member)
- Value Objects: Immutable types (BoardId, MemberId, Category, ImageUpload)
- Ports: Interfaces that infrastructure implements (repositories, image store)
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
"""
