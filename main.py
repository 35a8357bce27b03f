# =============================================================================
# main.py  —  Entry Point for the Perplexity MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#   (or, once installed:  perplexity-mcp)
#
# WHAT HAPPENS:
#   1. Loads a local .env file, if any, into the environment
#   2. Configures logging on STDERR
#   3. Reads PERPLEXITY_API_KEY / BASE_URL; exits with status 1 if missing
#   4. Builds the FastMCP server with the ask / research / reason tools
#   5. Serves MCP over stdio until the client disconnects
# =============================================================================

import logging
import os
import sys

from dotenv import load_dotenv

from perplexity_core.config import load_settings
from perplexity_core.errors import ConfigError
from perplexity_tools.mcp_server import build_server

logger = logging.getLogger("perplexity_mcp")


def configure_logging() -> None:
    level = os.environ.get("PERPLEXITY_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [MCP] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def main() -> None:
    """Start the Perplexity MCP server on stdio."""
    load_dotenv()
    configure_logging()

    try:
        settings = load_settings()
    except ConfigError as exc:
        logger.error("Error: %s", exc)
        sys.exit(1)

    mcp = build_server(settings)
    logger.info("Perplexity MCP Server running on stdio with Ask, Research, and Reason tools")
    try:
        mcp.run()
    except Exception:
        logger.exception("Fatal error running server")
        sys.exit(1)


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    main()
