# =============================================================================
# perplexity_core/dispatcher.py  —  Tool Dispatcher
# =============================================================================
#
# Runs one tool call through the pipeline:
#
#   IDLE ─▶ RESOLVING ─▶ BUILDING ─▶ CALLING ─▶ COMPOSING ─▶ DONE
#              │             │           │            │
#              └─────────────┴─────┬─────┴────────────┘
#                                  ▼
#                      DONE with an error ToolResult
#
# Every call starts at IDLE and owns its own request/response objects.  The
# dispatcher itself only holds the read-only catalog and the client, so
# concurrent calls share nothing mutable.
#
# call_tool() never raises: every failure becomes a ToolResult with
# is_error=True.
# =============================================================================

import enum
import logging
from typing import Any, Mapping, Optional

from perplexity_core.catalog import CATALOG
from perplexity_core.client import CompletionClient
from perplexity_core.composer import compose
from perplexity_core.errors import PerplexityError, UnknownTool
from perplexity_core.models import ToolResult, ToolSpec
from perplexity_core.options import build_request, resolve_options

logger = logging.getLogger(__name__)


class Stage(enum.Enum):
    IDLE = "idle"
    RESOLVING = "resolving"
    BUILDING = "building"
    CALLING = "calling"
    COMPOSING = "composing"
    DONE = "done"


class ToolDispatcher:
    """Routes tool calls by name through resolve → build → call → compose."""

    def __init__(
        self,
        client: CompletionClient,
        catalog: Optional[Mapping[str, ToolSpec]] = None,
    ) -> None:
        self._client = client
        self._catalog = CATALOG if catalog is None else catalog

    def list_tools(self) -> list[ToolSpec]:
        return list(self._catalog.values())

    def call_tool(self, name: str, arguments: Optional[Mapping[str, Any]]) -> ToolResult:
        """Execute tool ``name`` with ``arguments`` and return its result.

        Unknown names are rejected before any argument handling or network
        I/O.  Any failure after that is reported as ``"Error: <message>"``.
        """
        spec = self._catalog.get(name)
        if spec is None:
            logger.warning("Rejected call to unknown tool %r", name)
            return ToolResult.error(str(UnknownTool(name)))

        stage = Stage.IDLE
        try:
            stage = Stage.RESOLVING
            messages, options = resolve_options(spec, arguments)

            stage = Stage.BUILDING
            body = build_request(spec.model, messages, options)

            stage = Stage.CALLING
            payload = self._client.complete(body)

            stage = Stage.COMPOSING
            text = compose(payload)
        except PerplexityError as exc:
            logger.warning("%s failed while %s: %s", name, stage.value, exc.message)
            return ToolResult.error(f"Error: {exc.message}")
        except Exception as exc:
            logger.exception("%s crashed while %s", name, stage.value)
            return ToolResult.error(f"Error: {exc}")

        stage = Stage.DONE
        logger.debug("%s %s: %d chars", name, stage.value, len(text))
        return ToolResult.success(text)
