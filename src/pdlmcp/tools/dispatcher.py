"""
Tool dispatcher: routes a tools/call to validator, builder and HTTP client.

dispatch() never raises. Every call ends in exactly one DispatchOutcome,
which the protocol front-ends translate into their own wire format.
"""
import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from ..exceptions import (
    ERROR_INTERNAL_ERROR,
    ERROR_INVALID_PARAMS,
    ERROR_METHOD_NOT_FOUND,
    PDLAPIError,
)
from ..logger import get_logger
from .base import ToolRegistry
from .schemas import ToolCallResult, ToolSchema

if TYPE_CHECKING:
    from ..client import PDLClient

logger = get_logger("dispatcher")


# ============ OUTCOMES ============
# ToolSuccess and RemoteFailure are reported as tool results.
# The others are protocol-level errors and carry a JSON-RPC code.

@dataclass(frozen=True)
class ToolSuccess:
    data: Any

    def to_call_result(self) -> ToolCallResult:
        return ToolCallResult.text(json.dumps(self.data, indent=2, ensure_ascii=False))


@dataclass(frozen=True)
class RemoteFailure:
    status_code: int | None
    message: str

    def to_call_result(self) -> ToolCallResult:
        return ToolCallResult.text(str(PDLAPIError(self.status_code, self.message)), is_error=True)


@dataclass(frozen=True)
class UnknownTool:
    message: str
    code: int = ERROR_METHOD_NOT_FOUND


@dataclass(frozen=True)
class InvalidParams:
    message: str
    code: int = ERROR_INVALID_PARAMS


@dataclass(frozen=True)
class InternalFailure:
    message: str
    code: int = ERROR_INTERNAL_ERROR


DispatchOutcome = Union[ToolSuccess, RemoteFailure, UnknownTool, InvalidParams, InternalFailure]
ProtocolFailure = Union[UnknownTool, InvalidParams, InternalFailure]


class ToolDispatcher:
    """Pairs the immutable registry with the shared PDL client."""

    def __init__(self, registry: ToolRegistry, client: "PDLClient"):
        self.registry = registry
        self.client = client

    def list_tools(self) -> list[ToolSchema]:
        return self.registry.list_schemas()

    async def dispatch(self, name: str, arguments: Any) -> DispatchOutcome:
        """
        Run one tool call.

        Args:
            name: Tool name from the tools/call request
            arguments: Raw, unvalidated arguments object

        Returns:
            The classified outcome of the call
        """
        tool = self.registry.get_tool(name)
        if tool is None:
            logger.warning(f"Unknown tool requested: {name}")
            return UnknownTool(f"Unknown tool: {name}")

        verdict = tool.validator(arguments)
        if not verdict:
            logger.warning(f"Rejected arguments for '{name}': {verdict.reason}")
            return InvalidParams(f"{tool.invalid_message} ({verdict.reason})")

        logger.info(f"Calling tool '{name}'")
        try:
            request = tool.builder(arguments)
            data = await self.client.send(request)
        except PDLAPIError as e:
            logger.warning(f"Tool '{name}' failed: {e}")
            return RemoteFailure(e.status_code, e.message)
        except Exception as e:
            logger.exception(f"Tool '{name}' raised unexpected error")
            return InternalFailure(str(e) or type(e).__name__)

        return ToolSuccess(data)
