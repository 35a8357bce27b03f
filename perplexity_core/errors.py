# =============================================================================
# perplexity_core/errors.py  —  Error taxonomy
# =============================================================================
#
#   PerplexityError            any failure of a single tool call
#     ├── InvalidArguments     caller sent malformed arguments
#     ├── UnknownTool          no tool registered under that name
#     ├── NetworkError         could not reach the upstream endpoint
#     ├── HttpError            upstream answered with a non-2xx status
#     └── PayloadError         upstream body is not the expected shape
#
#   ConfigError                missing/invalid process configuration
#
# Tool-call errors never reach the transport: the dispatcher turns every
# PerplexityError into an error ToolResult.  ConfigError is raised before
# the server starts and is fatal.
# =============================================================================

from __future__ import annotations

from typing import Optional

__all__ = [
    "PerplexityError",
    "InvalidArguments",
    "UnknownTool",
    "NetworkError",
    "HttpError",
    "PayloadError",
    "ConfigError",
]


class PerplexityError(Exception):
    """Base class for failures of a single tool call.

    Attributes:
        original_exc: The underlying exception, if this error wraps one.
    """

    original_exc: Optional[BaseException]

    def __init__(self, message: str, original_exc: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_exc = original_exc
        if original_exc is not None:
            self.__cause__ = original_exc


class InvalidArguments(PerplexityError):
    """Raised when tool arguments are missing or malformed."""


class UnknownTool(PerplexityError):
    """Raised when a call names a tool that is not in the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class NetworkError(PerplexityError):
    """Raised when the HTTP request could not be completed."""


class HttpError(PerplexityError):
    """Raised when the upstream API returns a non-success status."""

    def __init__(self, status: int, reason: str, body: str) -> None:
        super().__init__(f"Perplexity API error: {status} {reason}\n{body}")
        self.status = status
        self.reason = reason
        self.body = body


class PayloadError(PerplexityError):
    """Raised when the upstream response cannot be used."""


class ConfigError(Exception):
    """Raised at startup when required configuration is missing."""
