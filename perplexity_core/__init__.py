# =============================================================================
# perplexity_core/__init__.py
# =============================================================================
# All request/response logic for the Perplexity MCP server lives here:
# the tool catalog, option resolution, the HTTP completion client, response
# composition and the dispatcher that ties them together.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP.  The MCP wiring lives in
#   perplexity_tools/, and everything here can be exercised from a plain
#   Python REPL (or pytest) with a fake HTTP opener.
# =============================================================================
