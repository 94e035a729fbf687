"""
People Data Labs MCP Server - stdio transport.
"""
import sys

import anyio
from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from . import __version__
from .client import PDLClient
from .config import load_settings
from .exceptions import ConfigurationError
from .logger import get_logger, setup_logging
from .tools import build_registry
from .tools.dispatcher import ProtocolFailure, RemoteFailure, ToolDispatcher, ToolSuccess

SERVER_NAME = "peopledatalabs-server"

logger = get_logger("mcp_server")


def to_mcp_error(outcome: ProtocolFailure) -> McpError:
    return McpError(types.ErrorData(code=outcome.code, message=outcome.message))


def build_server(dispatcher: ToolDispatcher) -> Server:
    """
    Create the MCP server and wire its handlers to the dispatcher.

    tools/call is registered directly in request_handlers (not through the
    call_tool() decorator) so that McpError reaches the client as a JSON-RPC
    error instead of being folded into an isError result.
    """
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [
            types.Tool(name=schema.name, description=schema.description, inputSchema=schema.inputSchema)
            for schema in dispatcher.list_tools()
        ]

    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        outcome = await dispatcher.dispatch(req.params.name, req.params.arguments)

        if not isinstance(outcome, (ToolSuccess, RemoteFailure)):
            raise to_mcp_error(outcome)

        result = outcome.to_call_result()
        return types.ServerResult(
            types.CallToolResult(
                content=[types.TextContent(type="text", text=block.text) for block in result.content],
                isError=result.isError,
            )
        )

    server.request_handlers[types.CallToolRequest] = call_tool
    return server


async def serve(dispatcher: ToolDispatcher) -> None:
    """Run the server over stdin/stdout until the client disconnects."""
    server = build_server(dispatcher)
    async with dispatcher.client:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("People Data Labs MCP server running on stdio")
            await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    try:
        settings = load_settings()
    except ConfigurationError as e:
        setup_logging()
        logger.error(str(e))
        sys.exit(1)

    setup_logging(settings.log_level)
    dispatcher = ToolDispatcher(build_registry(), PDLClient(settings))

    try:
        anyio.run(serve, dispatcher)
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    sys.exit(0)


if __name__ == "__main__":
    main()
