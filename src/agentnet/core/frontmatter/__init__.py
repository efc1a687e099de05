"""Front matter — the structure parser and the header/body extractor."""

from agentnet.core.frontmatter.errors import FrontMatterError
from agentnet.core.frontmatter.extractor import FrontMatter, extract_front_matter
from agentnet.core.frontmatter.structure import parse_scalar, parse_structure

__all__ = [
    "FrontMatter",
    "FrontMatterError",
    "extract_front_matter",
    "parse_scalar",
    "parse_structure",
]
