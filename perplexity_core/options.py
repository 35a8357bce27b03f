# =============================================================================
# perplexity_core/options.py  —  Parameter Resolver & Upstream Request Builder
# =============================================================================
#
# Two steps, kept separate so each can be tested on its own:
#
#   resolve_options(spec, arguments)   raw MCP arguments  ──▶ (messages, ToolOptions)
#   build_request(model, msgs, opts)   ToolOptions        ──▶ JSON body dict
#
# RESOLUTION RULES:
#   - `messages` must be a list; anything else is InvalidArguments.
#   - An option the caller supplied is used verbatim: no coercion, no
#     clamping to the schema bounds.
#   - An option the caller left out (or sent as null) takes the tool's
#     default, or stays UNSET when the tool has none.
#   - Options the tool does not accept are ignored.
#
# SERIALIZATION RULES:
#   - `model` and `messages` are always present.
#   - Any option that is not UNSET is written, including False and 0.
#   - An empty search_domain_filter is left out entirely.
# =============================================================================

from typing import Any, Mapping, Optional, Sequence

from perplexity_core.errors import InvalidArguments
from perplexity_core.models import UNSET, Message, ToolOptions, ToolSpec


def resolve_options(
    spec: ToolSpec,
    arguments: Optional[Mapping[str, Any]],
) -> tuple[list[Message], ToolOptions]:
    """Validate ``arguments`` for ``spec`` and apply its default policy.

    Args:
        spec: The tool being called.
        arguments: The raw ``arguments`` mapping from the tool call.

    Returns:
        The conversation messages (order preserved) and the resolved options.

    Raises:
        InvalidArguments: ``arguments`` is missing, or ``messages`` is not
            an array.
    """
    if arguments is None:
        raise InvalidArguments("No arguments provided")

    messages = arguments.get("messages")
    if not isinstance(messages, (list, tuple)):
        raise InvalidArguments(
            f"Invalid arguments for {spec.name}: 'messages' must be an array"
        )

    options = ToolOptions()
    for name in spec.option_names:
        value = arguments.get(name)
        if value is None:
            value = spec.defaults.get(name, UNSET)
        setattr(options, name, value)

    return list(messages), options


def build_request(
    model: str,
    messages: Sequence[Message],
    options: ToolOptions,
) -> dict[str, Any]:
    """Serialize one upstream chat-completion body."""
    body: dict[str, Any] = {
        "model": model,
        "messages": list(messages),
    }
    for name, value in options.present().items():
        if name == "search_domain_filter" and not value:
            continue
        body[name] = value
    return body
