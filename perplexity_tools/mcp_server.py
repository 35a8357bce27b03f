# =============================================================================
# perplexity_tools/mcp_server.py  —  FastMCP Tool Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Registers the three Perplexity tools on a FastMCP server.  Each tool is
#   a thin adapter around ToolDispatcher.call_tool():
#
#   1. An MCP client calls "perplexity_ask" (or research / reason)
#   2. FastMCP routes the call to the matching PerplexityTool
#   3. PerplexityTool hands the raw arguments to the dispatcher, off the
#      event loop, since the HTTP call blocks
#   4. The dispatcher's ToolResult becomes the MCP tool result:
#        is_error=False  →  one TextContent with the composed answer
#        is_error=True   →  ToolError, which FastMCP reports as isError=true
#
# SCHEMAS:
#   Tools are Tool subclasses rather than @mcp.tool() functions.  They
#   advertise the catalog's JSON schema verbatim and receive the arguments
#   untouched; defaults and the 'messages' check live in
#   perplexity_core/options.py.
#
# RUNNING THIS SERVER:
#   python main.py        (or the `perplexity-mcp` console script)
#   Requires PERPLEXITY_API_KEY and BASE_URL; see perplexity_core/config.py.
# =============================================================================

import asyncio
import json
import logging
from typing import Any, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult as MCPToolResult
from mcp.types import TextContent
from pydantic import PrivateAttr

from perplexity_core.catalog import list_tools
from perplexity_core.client import CompletionClient
from perplexity_core.config import Settings
from perplexity_core.dispatcher import ToolDispatcher
from perplexity_core.models import ToolResult, ToolSpec

SERVER_NAME = "mcp-server-perplexity"
SERVER_VERSION = "0.1.0"

logger = logging.getLogger(__name__)

# =============================================================================
# Logging helpers
# =============================================================================
# Everything goes to STDERR (configured in main.py): STDOUT is the MCP
# transport and any stray output there corrupts the JSON-RPC stream.
#
#   CYAN    incoming tool call
#   YELLOW  intermediate status
#   GREEN   outgoing result
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

# Long answers are cut in the log line only; the client gets the full text.
_LOG_PREVIEW_CHARS = 200


def _log_request(tool_name: str, arguments: Optional[dict]) -> None:
    """Log an incoming tool call with its option arguments in CYAN."""
    arguments = arguments or {}
    messages = arguments.get("messages")
    count = len(messages) if isinstance(messages, list) else "?"
    options = {k: v for k, v in arguments.items() if k != "messages"}
    param_str = ", ".join(f"{k}={v!r}" for k, v in options.items())
    logger.info(f"{_CYAN}{tool_name} called with {count} message(s){': ' + param_str if param_str else ''}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: ToolResult) -> ToolResult:
    """Log a compact preview of the tool result in GREEN, then return it."""
    preview = result.to_dict()
    for item in preview["content"]:
        if len(item["text"]) > _LOG_PREVIEW_CHARS:
            item["text"] = item["text"][:_LOG_PREVIEW_CHARS] + "…"
    logger.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(preview, separators=(',', ':'), ensure_ascii=False)}{_RESET}")
    return result


# =============================================================================
# PerplexityTool — one MCP tool backed by the dispatcher
# =============================================================================
class PerplexityTool(Tool):
    """FastMCP tool that advertises a catalog schema and defers to the dispatcher."""

    _dispatcher: ToolDispatcher = PrivateAttr()

    @classmethod
    def from_spec(cls, spec: ToolSpec, dispatcher: ToolDispatcher) -> "PerplexityTool":
        tool = cls(
            name=spec.name,
            description=spec.description,
            parameters=spec.input_schema,
        )
        tool._dispatcher = dispatcher
        return tool

    async def run(self, arguments: dict[str, Any]) -> MCPToolResult:
        _log_request(self.name, arguments)

        result = await asyncio.to_thread(self._dispatcher.call_tool, self.name, arguments)
        _log_response(self.name, result)

        if result.is_error:
            raise ToolError(result.text)
        return MCPToolResult(
            content=[TextContent(type="text", text=item.text) for item in result.content]
        )


# =============================================================================
# Server construction
# =============================================================================
def build_server(settings: Settings, client: Optional[CompletionClient] = None) -> FastMCP:
    """Create the FastMCP server with every catalog tool registered.

    Args:
        settings: Loaded process configuration.
        client: Completion client to use; built from ``settings`` if omitted.
    """
    dispatcher = ToolDispatcher(client or CompletionClient(settings))

    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)
    for spec in list_tools():
        mcp.add_tool(PerplexityTool.from_spec(spec, dispatcher))
        _log_status(f"Registered {spec.name} ({spec.model})")
    return mcp
