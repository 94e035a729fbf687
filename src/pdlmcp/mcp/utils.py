"""
MCP utilities - handler functions for processing requests.
"""
from pydantic import ValidationError

from ..tools.dispatcher import RemoteFailure, ToolDispatcher, ToolSuccess
from .models import (
    MCPError,
    MCPRequest,
    MCPResponse,
    ToolsCallParams,
    ERROR_INVALID_PARAMS,
)


def error_response(request: MCPRequest, code: int, message: str) -> dict:
    return MCPResponse(
        id=request.id,
        error=MCPError(code=code, message=message),
    ).model_dump(exclude_none=True)


def handle_tools_list(request: MCPRequest, dispatcher: ToolDispatcher) -> dict:
    """
    Handle tools/list request.
    Returns all registered tools in MCP format.
    """
    tools_json = [schema.model_dump() for schema in dispatcher.list_tools()]
    return MCPResponse(
        id=request.id,
        result={"tools": tools_json},
    ).model_dump(exclude_none=True)


async def handle_tools_call(request: MCPRequest, dispatcher: ToolDispatcher) -> dict:
    """
    Handle tools/call request.
    Remote API failures come back as an isError result; unknown tools,
    bad arguments and internal failures as JSON-RPC errors.
    """
    try:
        params = ToolsCallParams.model_validate(request.params or {})
    except ValidationError:
        return error_response(request, ERROR_INVALID_PARAMS, "Invalid tools/call params: name is required")

    outcome = await dispatcher.dispatch(params.name, params.arguments)

    if isinstance(outcome, (ToolSuccess, RemoteFailure)):
        return MCPResponse(
            id=request.id,
            result=outcome.to_call_result().model_dump(),
        ).model_dump(exclude_none=True)

    return error_response(request, outcome.code, outcome.message)
