"""
Helpers for reading Gemini responses returned through langchain.

Gemini may return message content as a list of content blocks, and reports
search grounding under response_metadata["grounding_metadata"].
"""
from typing import Any, List

from learning_coach.core.schemas import Citation


def extract_content_as_string(response) -> str:
    """
    Extract the text of an LLM response.

    Args:
        response: AIMessage (or anything with .content), or raw content

    Returns:
        Content as a plain string
    """
    content = response.content if hasattr(response, "content") else response
    return normalize_content_to_string(content)


def normalize_content_to_string(content) -> str:
    """
    Normalize str / list of content blocks / dict block to a plain string.

    Gemini returns e.g. [{'type': 'text', 'text': '...'}]. Text blocks are
    concatenated as-is; Gemini splits a reply mid-line so no separator is added.
    """
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        return "".join(normalize_content_to_string(item) for item in content if item is not None)
    if isinstance(content, dict):
        if "text" in content:
            return content["text"]
        if "content" in content:
            return normalize_content_to_string(content["content"])
        # Non-text blocks (e.g. thinking signatures) carry no message text
        return ""
    return str(content) if content else ""


def _get(obj: Any, *keys: str, default=None):
    """Read the first present key from a dict or attribute from an object."""
    for key in keys:
        if isinstance(obj, dict):
            if obj.get(key) is not None:
                return obj[key]
        elif getattr(obj, key, None) is not None:
            return getattr(obj, key)
    return default


def extract_grounding_citations(response) -> List[Citation]:
    """
    Map Gemini grounding chunks to Citations.

    Chunks without a web URI are dropped.

    Args:
        response: AIMessage returned by ChatGoogleGenerativeAI

    Returns:
        Citations in the order the model reported them
    """
    metadata = getattr(response, "response_metadata", None) or {}
    grounding = _get(metadata, "grounding_metadata", "groundingMetadata", default={})
    chunks = _get(grounding, "grounding_chunks", "groundingChunks", default=[]) or []

    citations = []
    for chunk in chunks:
        web = _get(chunk, "web", default={}) or {}
        uri = _get(web, "uri", default="") or ""
        if not uri:
            continue
        citations.append(Citation(title=_get(web, "title", default="") or "", uri=uri))
    return citations
