"""FastAPI application entry point for ``uvicorn backend.main:app``."""

from backend.application import create_app

app = create_app()
