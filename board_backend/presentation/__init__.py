"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers and endpoints
- envelope.py: success/error response wrapper
- errors.py: exception -> error envelope mapping
"""
