"""Front-matter extraction — split a document into header and body."""

from __future__ import annotations

import re
from dataclasses import dataclass

from agentnet.core.frontmatter.errors import FrontMatterError
from agentnet.core.frontmatter.structure import Mapping, parse_structure

_FRONT_MATTER_RE = re.compile(r"\A---\r?\n(.*?)\r?\n---\r?\n(.*)\Z", re.DOTALL)


@dataclass(frozen=True)
class FrontMatter:
    """A parsed header plus the trimmed free-text body that follows it."""

    header: Mapping
    body: str


def extract_front_matter(text: str) -> FrontMatter:
    """Split *text* on its leading ``---`` delimited header.

    The document must start with a ``---`` line and the header must be closed
    by another ``---`` line followed by a newline.

    Raises:
        FrontMatterError: If the delimiters are not found.
    """
    match = _FRONT_MATTER_RE.match(text)
    if match is None:
        raise FrontMatterError("missing-delimiters")

    header, body = match.groups()
    return FrontMatter(header=parse_structure(header), body=body.strip())
