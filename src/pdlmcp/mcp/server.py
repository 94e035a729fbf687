"""
MCP server - FastAPI routes for JSON-RPC requests.
"""
from fastapi import APIRouter, Request

from .models import (
    MCPRequest,
    ERROR_METHOD_NOT_FOUND
)
from .utils import error_response, handle_tools_call, handle_tools_list

router = APIRouter()


@router.post("/mcp")
async def mcp_endpoint(rpc: MCPRequest, request: Request):
    """
    Main MCP endpoint.
    Routes requests based on method field.
    """
    dispatcher = request.app.state.dispatcher

    # Route: tools/list
    if rpc.method == "tools/list":
        return handle_tools_list(rpc, dispatcher)

    # Route: tools/call
    elif rpc.method == "tools/call":
        return await handle_tools_call(rpc, dispatcher)

    # Error: unknown method
    else:
        return error_response(rpc, ERROR_METHOD_NOT_FOUND, f"Method '{rpc.method}' not found")
