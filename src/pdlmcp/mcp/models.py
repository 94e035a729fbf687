"""
MCP protocol models - JSON-RPC 2.0 format.
"""
from typing import Any, Optional, Union
from pydantic import BaseModel, Field

# Error codes (defined with the exceptions, re-exported for the handlers)
from ..exceptions import (
    ERROR_INTERNAL_ERROR,
    ERROR_INVALID_PARAMS,
    ERROR_METHOD_NOT_FOUND,
)


# ============ BASE MODELS ============

class MCPRequest(BaseModel):
    """Base request - all MCP requests have these fields."""
    jsonrpc: str = Field(default="2.0")
    id: Union[int, str] = Field(...)
    method: str = Field(...)
    params: Optional[dict[str, Any]] = Field(default=None)


class MCPError(BaseModel):
    """Error structure."""
    code: int = Field(...)
    message: str = Field(...)
    data: Optional[dict[str, Any]] = Field(default=None)


class MCPResponse(BaseModel):
    """Base response - carries either a result or an error."""
    jsonrpc: str = Field(default="2.0")
    id: Union[int, str] = Field(...)
    result: Optional[dict[str, Any]] = Field(default=None)
    error: Optional[MCPError] = Field(default=None)


# ============ TOOLS/CALL ============

class ToolsCallParams(BaseModel):
    """params of a tools/call request."""
    name: str = Field(...)
    arguments: Any = Field(default=None)

