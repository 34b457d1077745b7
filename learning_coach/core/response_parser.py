"""
Parse a Learning Drop message into renderable blocks.

Each non-blank line is tried against LINE_MATCHERS in order and becomes exactly
one block; a line no matcher accepts becomes a PlainLine. The model does not
always follow the requested entry format, so a resource line degrades from a
full entry to a bare link to plain text instead of failing.
"""

import re
from typing import Callable, List, Optional, Tuple

from learning_coach.core.prompts import HARD_SKILLS_MARKER, SOFT_SKILLS_MARKER, TITLE_LINE, TITLE_MARKER
from learning_coach.core.schemas import Heading, ParsedBlock, PlainLine, ResourceEntry, SubHeading

# [**Title**](https://url) — Price — (Type); hyphen, en-dash and em-dash all accepted
RESOURCE_PATTERN = re.compile(
    r"^\[\*\*(?P<title>.*?)\*\*\]\((?P<url>https?://\S+)\)"
    r"[\s\-—–]+(?P<price>.*?)[\s\-—–]+\((?P<type>.*?)\)$"
)

# [**Title**](https://url) anywhere in the line
LINK_PATTERN = re.compile(r"\[\*\*(?P<title>.*?)\*\*\]\((?P<url>https?://\S+)\)")

SUBHEADING_MARKERS = (HARD_SKILLS_MARKER, SOFT_SKILLS_MARKER)
FALLBACK_RESOURCE_TYPE = "Link"

LineMatcher = Callable[[str], Optional[ParsedBlock]]


def match_heading(line: str) -> Optional[Heading]:
    if TITLE_MARKER in line:
        return Heading(text=TITLE_LINE)
    return None


def match_subheading(line: str) -> Optional[SubHeading]:
    if line in SUBHEADING_MARKERS:
        return SubHeading(text=line.replace("**", ""))
    return None


def match_resource(line: str) -> Optional[ResourceEntry]:
    """Full entry: title, url, price and type."""
    match = RESOURCE_PATTERN.match(line)
    if not match:
        return None
    return ResourceEntry(
        title=match.group("title").strip(),
        url=match.group("url").strip(),
        price=match.group("price").strip(),
        type=match.group("type").strip(),
    )


def match_link(line: str) -> Optional[ResourceEntry]:
    """Bare bold link; price unknown."""
    match = LINK_PATTERN.search(line)
    if not match:
        return None
    return ResourceEntry(
        title=match.group("title").strip(),
        url=match.group("url").strip(),
        price="",
        type=FALLBACK_RESOURCE_TYPE,
    )


# Order matters: first match wins
LINE_MATCHERS: Tuple[Tuple[str, LineMatcher], ...] = (
    ("heading", match_heading),
    ("subheading", match_subheading),
    ("resource", match_resource),
    ("link", match_link),
)


def parse_line(line: str) -> ParsedBlock:
    """
    Classify a single line.

    Matchers see the trimmed line; a PlainLine keeps the original text.
    """
    trimmed = line.strip()
    for _, matcher in LINE_MATCHERS:
        block = matcher(trimmed)
        if block is not None:
            return block
    return PlainLine(text=line)


def parse_message(message: str) -> List[ParsedBlock]:
    """
    Parse a Learning Drop message line by line.

    Args:
        message: Raw model output

    Returns:
        One block per non-blank line, in order
    """
    if not message:
        return []
    return [parse_line(line) for line in message.split("\n") if line.strip()]
