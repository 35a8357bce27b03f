# =============================================================================
# perplexity_core/catalog.py  —  Tool Catalog
# =============================================================================
#
# The three tools this server advertises, as ToolSpec records:
#
#   perplexity_ask       sonar-pro             quick web-grounded answers
#   perplexity_research  sonar-deep-research   multi-source deep research
#   perplexity_reason    sonar-reasoning-pro   step-by-step reasoning
#
# The input schemas are returned verbatim on "list tools".  Their enums and
# min/max bounds document what upstream accepts; they are not enforced
# before the request is sent.
#
# Each spec's `defaults` is the substitution table applied by
# options.resolve_options when the caller leaves an option out.
# =============================================================================

from typing import Any, Optional

from perplexity_core.models import ToolSpec

ASK = "perplexity_ask"
RESEARCH = "perplexity_research"
REASON = "perplexity_reason"

_LEVELS = ["low", "medium", "high"]


def _messages_schema() -> dict[str, Any]:
    return {
        "type": "array",
        "items": {
            "type": "object",
            "properties": {
                "role": {
                    "type": "string",
                    "description": "Role of the message (e.g., system, user, assistant)",
                },
                "content": {
                    "type": "string",
                    "description": "The content of the message",
                },
            },
            "required": ["role", "content"],
        },
        "description": "Array of conversation messages",
    }


def _object_schema(properties: dict[str, Any]) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {"messages": _messages_schema(), **properties},
        "required": ["messages"],
    }


# -----------------------------------------------------------------------------
# perplexity_ask
# -----------------------------------------------------------------------------
ASK_TOOL = ToolSpec(
    name=ASK,
    model="sonar-pro",
    description=(
        "Engages in a conversation using the Sonar API with enhanced control over search and reasoning. "
        "Accepts messages and optional parameters to control response quality, search depth, and output format. "
        "Ideal for quick development questions and general coding assistance."
    ),
    option_names=(
        "search_context_size",
        "max_tokens",
        "temperature",
        "search_domain_filter",
        "return_related_questions",
    ),
    defaults={
        "search_context_size": "medium",
        "temperature": 0.2,
        "return_related_questions": False,
    },
    input_schema=_object_schema({
        "search_context_size": {
            "type": "string",
            "enum": _LEVELS,
            "description": (
                "Controls search comprehensiveness. 'low' for basic queries (cost-effective), "
                "'medium' for balanced results, 'high' for deep research and comprehensive coverage. "
                "Default: 'medium'"
            ),
        },
        "max_tokens": {
            "type": "number",
            "minimum": 1,
            "maximum": 4000,
            "description": (
                "Maximum number of tokens in the response. Controls response length. "
                "Typical values: 500-1500 for development questions."
            ),
        },
        "temperature": {
            "type": "number",
            "minimum": 0.0,
            "maximum": 2.0,
            "description": (
                "Controls response creativity. Lower values (0.1-0.3) for precise technical answers, "
                "higher values (0.7-1.0) for creative solutions. Default: 0.2"
            ),
        },
        "search_domain_filter": {
            "type": "array",
            "items": {"type": "string"},
            "description": (
                "Limit search to specific domains. Useful for development: "
                "['github.com', 'stackoverflow.com', 'developer.mozilla.org']. "
                "Leave empty for all domains."
            ),
        },
        "return_related_questions": {
            "type": "boolean",
            "description": (
                "Include follow-up question suggestions for deeper exploration. "
                "Helpful for discovering related development topics. Default: false"
            ),
        },
    }),
)


# -----------------------------------------------------------------------------
# perplexity_research
# -----------------------------------------------------------------------------
RESEARCH_TOOL = ToolSpec(
    name=RESEARCH,
    model="sonar-deep-research",
    description=(
        "Performs comprehensive deep research using the sonar-deep-research model. "
        "Conducts iterative searches, reads multiple sources, and provides detailed analysis with citations. "
        "Perfect for architectural decisions, technology comparisons, and thorough investigation of "
        "development topics."
    ),
    option_names=(
        "reasoning_effort",
        "search_context_size",
        "search_mode",
        "max_tokens",
        "search_domain_filter",
        "return_related_questions",
        "return_images",
    ),
    defaults={
        "reasoning_effort": "high",
        "search_context_size": "high",
        "search_mode": "web",
        "max_tokens": 3000,
        "return_related_questions": True,
        "return_images": False,
    },
    input_schema=_object_schema({
        "reasoning_effort": {
            "type": "string",
            "enum": _LEVELS,
            "description": (
                "Controls research depth and reasoning complexity. 'low' for basic research, "
                "'high' for complex architectural decisions and comprehensive analysis. Default: 'high'"
            ),
        },
        "search_context_size": {
            "type": "string",
            "enum": _LEVELS,
            "description": (
                "Controls search comprehensiveness. 'high' recommended for deep research. "
                "Default: 'high'"
            ),
        },
        "search_mode": {
            "type": "string",
            "enum": ["web", "academic"],
            "description": (
                "Search mode: 'web' for general sources, 'academic' for peer-reviewed papers "
                "and authoritative documentation. Default: 'web'"
            ),
        },
        "max_tokens": {
            "type": "number",
            "minimum": 1000,
            "maximum": 8000,
            "description": (
                "Maximum response length. Research reports typically need 2000-4000 tokens "
                "for comprehensive coverage."
            ),
        },
        "search_domain_filter": {
            "type": "array",
            "items": {"type": "string"},
            "description": (
                "Focus research on specific domains. For development: "
                "['github.com', 'docs.python.org', 'nodejs.org', 'developer.mozilla.org']"
            ),
        },
        "return_related_questions": {
            "type": "boolean",
            "description": (
                "Include suggestions for follow-up research topics. "
                "Useful for comprehensive project planning. Default: true"
            ),
        },
        "return_images": {
            "type": "boolean",
            "description": (
                "Include relevant diagrams, architecture images, and visual aids in research results. "
                "Default: false"
            ),
        },
    }),
)


# -----------------------------------------------------------------------------
# perplexity_reason
# -----------------------------------------------------------------------------
REASON_TOOL = ToolSpec(
    name=REASON,
    model="sonar-reasoning-pro",
    description=(
        "Performs advanced reasoning and problem-solving using the sonar-reasoning-pro model. "
        "Excels at logical analysis, step-by-step problem decomposition, and complex technical "
        "decision-making. Ideal for debugging complex issues, algorithm design, and architectural reasoning."
    ),
    option_names=(
        "reasoning_effort",
        "max_tokens",
        "temperature",
        "search_context_size",
    ),
    defaults={
        "reasoning_effort": "high",
        "max_tokens": 2000,
        "temperature": 0.2,
        "search_context_size": "medium",
    },
    input_schema=_object_schema({
        "reasoning_effort": {
            "type": "string",
            "enum": _LEVELS,
            "description": (
                "Reasoning complexity level. 'high' for complex debugging and architectural decisions, "
                "'medium' for standard problem-solving. Default: 'high'"
            ),
        },
        "max_tokens": {
            "type": "number",
            "minimum": 500,
            "maximum": 4000,
            "description": (
                "Maximum response length. Reasoning tasks typically need 1000-2500 tokens "
                "for detailed step-by-step analysis."
            ),
        },
        "temperature": {
            "type": "number",
            "minimum": 0.0,
            "maximum": 1.0,
            "description": (
                "Controls reasoning creativity. Lower values (0.1-0.3) for logical, systematic reasoning. "
                "Higher values (0.5-0.7) for creative problem-solving approaches. Default: 0.2"
            ),
        },
        "search_context_size": {
            "type": "string",
            "enum": _LEVELS,
            "description": (
                "Search context for reasoning support. 'medium' for standard reasoning, "
                "'high' when external context is crucial. Default: 'medium'"
            ),
        },
    }),
)


CATALOG: dict[str, ToolSpec] = {
    spec.name: spec for spec in (ASK_TOOL, RESEARCH_TOOL, REASON_TOOL)
}

TOOL_NAMES: tuple[str, ...] = tuple(CATALOG)


def list_tools() -> list[ToolSpec]:
    """All tool specs, in advertisement order."""
    return list(CATALOG.values())


def get_tool(name: str) -> Optional[ToolSpec]:
    """Look up a tool spec by name; None if it is not registered."""
    return CATALOG.get(name)
