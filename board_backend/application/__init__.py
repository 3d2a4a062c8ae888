"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  -> Write operations (register, update, delete)
- queries/   -> Read operations (read, page, search)
- dto/       -> Data Transfer Objects
- common/    -> Shared interfaces (Command, Query base classes) and helpers

Rules:
- Depends on Domain layer only (plus pydantic for DTOs)
- No HTTP/framework code here
- Coordinates entities, repositories, external services
"""
