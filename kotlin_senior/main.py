"""Entry point: stdio MCP server or FastAPI app with streamable HTTP."""

import asyncio
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager

from kotlin_senior.config import Settings, get_settings
from kotlin_senior.server import create_server, run_stdio
from kotlin_senior.tools.dispatcher import Dispatcher
from kotlin_senior.tools.registry import build_registry

logger = logging.getLogger(__name__)


class MCPEndpoint:
    """ASGI app forwarding requests to the streamable HTTP session manager."""

    def __init__(self, session_manager: StreamableHTTPSessionManager):
        self.session_manager = session_manager

    async def __call__(self, scope, receive, send) -> None:
        await self.session_manager.handle_request(scope, receive, send)


def configure_logging(settings: Settings) -> None:
    # stderr only; stdout carries the stdio transport
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(settings: Settings, dispatcher: Dispatcher | None = None) -> FastAPI:
    """
    Build the HTTP application.

    MCP is served statelessly at /mcp; every request is independent.
    """
    dispatcher = dispatcher or Dispatcher(build_registry())
    server = create_server(dispatcher, settings)
    session_manager = StreamableHTTPSessionManager(app=server, stateless=True)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.server_name} (streamable HTTP)")
        async with session_manager.run():
            yield
        logger.info("Shutdown complete")

    app = FastAPI(
        title=settings.server_name,
        description="Kotlin architecture, pattern, test and cloud advice tools over MCP",
        version=settings.server_version,
        lifespan=lifespan,
    )

    # Exact route: /mcp answers without a trailing-slash redirect
    app.add_route(
        "/mcp", MCPEndpoint(session_manager), methods=["GET", "POST", "DELETE"]
    )

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": settings.server_name,
            "version": settings.server_version,
            "tools": dispatcher.registry.tool_names,
        }

    return app


def main() -> None:
    settings = get_settings()
    configure_logging(settings)

    # DuplicateToolError here aborts startup
    dispatcher = Dispatcher(build_registry())

    if settings.transport == "stdio":
        logger.info(f"{settings.server_name} running on stdio")
        asyncio.run(run_stdio(create_server(dispatcher, settings)))
    else:
        app = create_app(settings, dispatcher)
        uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
