# =============================================================================
# perplexity_core/models.py  —  Data Models
# =============================================================================
#
# The shapes that flow through a single tool call:
#
#   raw arguments ──▶ ToolOptions ──▶ upstream request dict
#                                         │
#   ToolResult ◀── composed text ◀── upstream response dict
#
# Upstream requests and responses stay plain dicts: they are JSON on the
# wire and the upstream schema is open-ended.  Everything we build or hand
# back ourselves is a dataclass.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Optional


# -----------------------------------------------------------------------------
# UNSET — "this option was not given"
# -----------------------------------------------------------------------------
# The upstream API treats a missing field differently from an explicit
# falsy one (return_images=False is a real instruction), so None/False/0
# cannot double as "absent".  Every optional field starts as UNSET and is
# only serialized once something replaces it.
# -----------------------------------------------------------------------------
class _Unset:
    """Sentinel type for an option that has no value."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


def is_set(value: Any) -> bool:
    """True when ``value`` holds a real option value."""
    return value is not UNSET


# Message is kept as a plain mapping: {"role": ..., "content": ...}.
Message = dict[str, Any]


# -----------------------------------------------------------------------------
# ToolOptions — every option any of the three tools understands
# -----------------------------------------------------------------------------
# Each tool only fills in the subset it accepts (see catalog.py); the rest
# stay UNSET and never reach the wire.
# -----------------------------------------------------------------------------
@dataclass
class ToolOptions:
    """Resolved, fully-defaulted options for one completion request."""

    search_context_size: Any = UNSET       # "low" | "medium" | "high"
    reasoning_effort: Any = UNSET          # "low" | "medium" | "high"
    search_mode: Any = UNSET               # "web" | "academic"
    max_tokens: Any = UNSET
    temperature: Any = UNSET
    search_domain_filter: Any = UNSET      # list[str]; empty means "all domains"
    return_related_questions: Any = UNSET
    return_images: Any = UNSET

    def present(self) -> dict[str, Any]:
        """Return only the options that carry a value, in field order."""
        return {
            name: value
            for name, value in self.__dict__.items()
            if is_set(value)
        }


# -----------------------------------------------------------------------------
# ToolSpec — per-tool configuration record
# -----------------------------------------------------------------------------
# The three tools share one pipeline; what differs between them is captured
# here: which upstream model to call, which options they accept, what those
# options default to, and the JSON schema advertised to MCP clients.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolSpec:
    """Static description of one Perplexity tool."""

    name: str                              # "perplexity_ask"
    model: str                             # "sonar-pro"
    description: str                       # Shown to the calling LLM
    option_names: tuple[str, ...]          # Options this tool forwards
    defaults: dict[str, Any]               # Substituted when the caller omits an option
    input_schema: dict[str, Any]           # JSON schema for "list tools"


@dataclass
class ImageResult:
    """One entry of the upstream ``images`` list."""

    title: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_payload(cls, raw: Any) -> "ImageResult":
        # Upstream occasionally sends bare strings or nulls in this list.
        if not isinstance(raw, dict):
            return cls()
        return cls(
            title=raw.get("title"),
            url=raw.get("url"),
            description=raw.get("description"),
        )


# -----------------------------------------------------------------------------
# ToolResult — the only thing ever handed back to the transport
# -----------------------------------------------------------------------------
@dataclass
class TextContent:
    text: str
    type: str = "text"


@dataclass
class ToolResult:
    """Outcome of one tool call: composed text, or an error message."""

    content: list[TextContent] = field(default_factory=list)
    is_error: bool = False

    @classmethod
    def success(cls, text: str) -> "ToolResult":
        return cls(content=[TextContent(text=text)], is_error=False)

    @classmethod
    def error(cls, text: str) -> "ToolResult":
        return cls(content=[TextContent(text=text)], is_error=True)

    @property
    def text(self) -> str:
        return "".join(item.text for item in self.content)

    def to_dict(self) -> dict[str, Any]:
        """Wire shape: ``{"content": [{"type": "text", "text": ...}], "isError": ...}``."""
        return {
            "content": [{"type": item.type, "text": item.text} for item in self.content],
            "isError": self.is_error,
        }
