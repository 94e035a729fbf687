"""
Exception hierarchy for the People Data Labs MCP server.
"""

# JSON-RPC error codes for failures reported at the protocol level
ERROR_METHOD_NOT_FOUND = -32601
ERROR_INVALID_PARAMS = -32602
ERROR_INTERNAL_ERROR = -32603


class PDLError(Exception):
    """Base exception for all pdlmcp errors."""

    pass


class ConfigurationError(PDLError):
    """Raised at startup when required settings are missing or malformed."""

    pass


class ToolRegistrationError(PDLError):
    """Raised when a tool cannot be added to the registry."""

    pass


class PDLAPIError(PDLError):
    """
    Raised when the People Data Labs API call fails.

    Covers both non-2xx responses (status_code set) and transport
    failures such as timeouts or refused connections (status_code is None).
    """

    def __init__(self, status_code: int | None, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    def __str__(self) -> str:
        if self.status_code is None:
            return f"People Data Labs API error: {self.message}"
        return f"People Data Labs API error ({self.status_code}): {self.message}"
