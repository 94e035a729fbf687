"""
People Data Labs MCP - FastAPI application (JSON-RPC over HTTP).
"""
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI

from . import __version__
from .client import PDLClient
from .config import Settings, load_settings
from .exceptions import ConfigurationError
from .logger import get_logger, setup_logging
from .mcp.server import router as mcp_router
from .tools import build_registry
from .tools.dispatcher import ToolDispatcher

logger = get_logger("main")


def create_app(settings: Settings | None = None, dispatcher: ToolDispatcher | None = None) -> FastAPI:
    """
    Build the FastAPI app.

    Args:
        settings: Loaded from the environment when omitted
        dispatcher: Pre-built dispatcher (tests inject one with a mock transport)
    """
    if dispatcher is None:
        settings = settings or load_settings()
        dispatcher = ToolDispatcher(build_registry(), PDLClient(settings))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Loaded {len(dispatcher.registry)} tools")
        for tool_name in dispatcher.registry.names:
            logger.debug(f"   - {tool_name}")
        yield
        await dispatcher.client.aclose()

    app = FastAPI(
        title="People Data Labs MCP",
        description="MCP tools for the People Data Labs enrichment and search API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.dispatcher = dispatcher

    # Include MCP router
    app.include_router(mcp_router)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": "peopledatalabs-server",
            "version": __version__,
            "status": "operational"
        }

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


def run() -> None:
    """Serve the HTTP front-end with uvicorn."""
    import uvicorn

    try:
        settings = load_settings()
    except ConfigurationError as e:
        setup_logging()
        logger.error(str(e))
        sys.exit(1)

    setup_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
