# =============================================================================
# perplexity_core/composer.py  —  Response Composer
# =============================================================================
#
# Flattens an upstream payload into the single text block an MCP client
# receives.  Sections are appended in a fixed order and each one is skipped
# when its source field is missing, not a list, or empty:
#
#   <answer>
#
#   Citations:
#   [1] https://...
#
#   Related Questions:
#   1. ...
#
#   Relevant Images:
#   [1] Title: https://...
#       Description: ...
# =============================================================================

from typing import Any, Iterable

from perplexity_core.models import ImageResult


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _section(header: str, lines: Iterable[str]) -> str:
    return f"\n\n{header}:\n" + "".join(f"{line}\n" for line in lines)


def format_citations(citations: list) -> str:
    return _section(
        "Citations",
        (f"[{i}] {citation}" for i, citation in enumerate(citations, start=1)),
    )


def format_related_questions(questions: list) -> str:
    return _section(
        "Related Questions",
        (f"{i}. {question}" for i, question in enumerate(questions, start=1)),
    )


def format_images(images: list) -> str:
    lines = []
    for i, raw in enumerate(images, start=1):
        image = ImageResult.from_payload(raw)
        lines.append(f"[{i}] {image.title or 'Image'}: {image.url or 'URL not available'}")
        if image.description:
            lines.append(f"    Description: {image.description}")
    return _section("Relevant Images", lines)


def compose(payload: dict[str, Any]) -> str:
    """Build the tool's text output from a validated upstream payload."""
    text = payload["choices"][0]["message"]["content"]

    citations = _as_list(payload.get("citations"))
    if citations:
        text += format_citations(citations)

    questions = _as_list(payload.get("related_questions"))
    if questions:
        text += format_related_questions(questions)

    images = _as_list(payload.get("images"))
    if images:
        text += format_images(images)

    return text
