"""
Utility functions for formatting Learning Drops for display in the Gradio UI.
"""
from typing import List

from learning_coach.core.schemas import Citation, Heading, ParsedBlock, PlainLine, ResourceEntry, SubHeading


def format_resource_entry(entry: ResourceEntry) -> str:
    """
    Format a resource as a bold link with its type and price underneath.

    Entries recovered from a bare link have no price and show only "(Link)".
    """
    details = f"({entry.type})"
    if entry.price:
        details += f" — **{entry.price}**"
    return f"**[{entry.title}]({entry.url})**  \n{details}"


def format_block_markdown(block: ParsedBlock) -> str:
    if isinstance(block, Heading):
        return f"### {block.text}"
    if isinstance(block, SubHeading):
        return f"#### {block.text}"
    if isinstance(block, ResourceEntry):
        return format_resource_entry(block)
    if isinstance(block, PlainLine):
        return block.text
    return str(block)


def format_learning_drop_markdown(blocks: List[ParsedBlock]) -> str:
    """
    Format parsed blocks as markdown, one paragraph per block.

    Args:
        blocks: Output of parse_message

    Returns:
        Markdown string ("" when there is nothing to show)
    """
    return "\n\n".join(format_block_markdown(block) for block in blocks)


def format_sources_markdown(sources: List[Citation]) -> str:
    """
    Format grounding citations as a markdown list.

    Citations without a title are labelled with their URI.
    """
    if not sources:
        return ""

    lines = ["#### Sources", ""]
    for source in sources:
        label = source.title or source.uri
        lines.append(f"- [{label}]({source.uri})")
    return "\n".join(lines)


def format_error_markdown(message: str) -> str:
    if not message:
        return ""
    return f"**An error occurred:**\n\n{message}"
