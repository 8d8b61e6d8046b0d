"""
Liveness endpoint served next to the Discord client.
"""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)

STATUS_TEXT = "Bot is running!"


def create_app() -> FastAPI:
    """FastAPI app exposing only GET /status."""
    app = FastAPI(title="wiki-bot", docs_url=None, redoc_url=None, openapi_url=None)

    @app.get("/status", response_class=PlainTextResponse)
    async def status():
        return STATUS_TEXT

    return app


def create_server(port: int, host: str = "0.0.0.0") -> uvicorn.Server:
    """A uvicorn server for the status app, to be awaited on the bot's event loop."""
    config = uvicorn.Config(create_app(), host=host, port=port, log_level="warning")
    logger.info(f"Starting status server on port {port}")
    return uvicorn.Server(config)
