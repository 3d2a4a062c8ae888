"""
ASGI entry point.

    uvicorn board_backend.main:app --host 0.0.0.0 --port 5001 --reload
"""

from board_backend.config.settings import get_config
from board_backend.fastapi_app import create_fastapi_app
from board_backend.setup.ioc.container import create_container

cfg = get_config()

# Container is created at import time: dishka adds middleware, which must
# happen before the app starts
container = create_container(cfg)
app = create_fastapi_app(container, cfg)
