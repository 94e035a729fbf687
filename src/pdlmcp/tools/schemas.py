"""
Tool schema definitions for the People Data Labs MCP server.

ToolSchema: JSON-serializable format for MCP tools/list responses.
ToolDefinition: Internal storage that also carries the validator and builder.
ToolCallResult: The content envelope returned for a tools/call.
OutboundRequest: The exact HTTP request a builder derives from arguments.
"""
from dataclasses import dataclass
from typing import Any, Callable, Literal, TypedDict

from pydantic import BaseModel, Field


# ============ PROTOCOL SHAPES ============

class ToolSchema(BaseModel):
    """
    MCP-compliant tool format.
    Sent to clients via tools/list response.
    """
    name: str = Field(..., description="Unique tool identifier")
    description: str = Field(..., description="What the tool does")
    inputSchema: dict[str, Any] = Field(..., description="JSON Schema for parameters")


class TextContent(BaseModel):
    """A single text content block."""
    type: Literal["text"] = Field(default="text")
    text: str = Field(...)


class ToolCallResult(BaseModel):
    """Result of a tools/call: always exactly one text block."""
    content: list[TextContent] = Field(...)
    isError: bool = Field(default=False)

    @classmethod
    def text(cls, text: str, is_error: bool = False) -> "ToolCallResult":
        return cls(content=[TextContent(text=text)], isError=is_error)


# ============ REQUEST SHAPING ============

class OutboundRequest(BaseModel):
    """An HTTP request against the PDL API, relative to the base URL."""
    method: Literal["GET", "POST"] = Field(...)
    path: str = Field(..., description="Path below the API base URL")
    params: dict[str, Any] | None = Field(default=None, description="Query parameters")
    json_body: dict[str, Any] | None = Field(default=None, description="JSON request body")


@dataclass(frozen=True)
class ValidationResult:
    """Accept/reject verdict from a validator. Falsy when rejected."""
    valid: bool
    reason: str | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def reject(cls, reason: str) -> "ValidationResult":
        return cls(valid=False, reason=reason)

    def __bool__(self) -> bool:
        return self.valid


Validator = Callable[[Any], ValidationResult]
Builder = Callable[[Any], OutboundRequest]


# ============ TOOL ARGUMENTS ============
# Callers send untyped JSON objects; these describe the fields each tool
# family recognizes. Anything else is dropped by the builders.

class PersonEnrichArgs(TypedDict, total=False):
    email: str
    phone: str
    name: str
    profile: list[str]
    location: str
    company: str
    title: str
    min_likelihood: float


class CompanyEnrichArgs(TypedDict, total=False):
    name: str
    website: str
    profile: list[str]
    ticker: str


class SearchArgs(TypedDict, total=False):
    query: str
    size: int


class BulkPersonEnrichArgs(TypedDict):
    requests: list[dict[str, Any]]


class AutocompleteArgs(TypedDict, total=False):
    field: Literal["company", "school", "title", "skill", "location"]
    text: str
    size: int


# ============ REGISTRY ENTRY ============

@dataclass(frozen=True)
class ToolDefinition:
    """
    Internal tool storage.
    Pairs the advertised schema with the validator and request builder.
    """
    name: str
    description: str
    inputSchema: dict[str, Any]
    validator: Validator
    builder: Builder
    invalid_message: str = "Invalid parameters."

    def to_schema(self) -> ToolSchema:
        """Convert to MCP-compliant format (drops validator and builder)."""
        return ToolSchema(
            name=self.name,
            description=self.description,
            inputSchema=self.inputSchema
        )
