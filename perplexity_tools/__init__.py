# =============================================================================
# perplexity_tools/__init__.py
# =============================================================================
# FastMCP wiring for the Perplexity tools.
#
# ARCHITECTURAL ROLE:
#   perplexity_tools/ is the translation layer between the MCP transport and
#   perplexity_core/.  It advertises the catalog schemas, hands each call to
#   the ToolDispatcher, and turns the dispatcher's ToolResult into an MCP
#   tool result.  It holds no request-building or formatting logic.
# =============================================================================
