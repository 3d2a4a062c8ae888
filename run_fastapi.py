"""
Main entry point for the FastAPI application.
Run this file to start the FastAPI server.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn board_backend.main:app --host 0.0.0.0 --port 5001 --reload
"""

import uvicorn

from board_backend.config.settings import get_config

if __name__ == "__main__":
    cfg = get_config()

    print(f"Starting FastAPI application in {cfg.APP_ENV} mode...")
    print(f"Server running on http://{cfg.HOST}:{cfg.PORT}")
    print(f"API docs available at http://{cfg.HOST}:{cfg.PORT}/docs")

    uvicorn.run(
        "board_backend.main:app",
        host=cfg.HOST,
        port=cfg.PORT,
        reload=cfg.DEBUG,
        log_level="info" if cfg.DEBUG else "warning",
    )
