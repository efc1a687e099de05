"""Structure parser — the restricted YAML-like dialect used in front matter.

Only the subset needed by network documents is understood:

* ``key: value`` scalar assignments (bool / number / string),
* ``key: [a, b, c]`` inline arrays,
* ``key:`` followed by indented ``- item`` lines (block arrays),
* ``key:`` followed by indented ``key: value`` lines (nested mappings).

Anything else is ignored.  This layer never raises; a missing or mistyped
field is reported later by schema validation.

A bare ``key:`` is ambiguous until the following lines are seen, so it is
opened as a *pending block*: it is bound to an empty mapping straight away
and only committed as an array once it has collected at least one ``- item``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Union

Scalar = Union[str, int, float, bool]
Value = Union[Scalar, list[Scalar], dict[str, "Value"]]
Mapping = dict[str, Value]

_INLINE_ARRAY_RE = re.compile(r"^([\w-]+):\s*\[([^\]]*)\]$", re.ASCII)
_KEY_VALUE_RE = re.compile(r"^([\w-]+):\s*(.*)$", re.ASCII)
_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_EDGE_QUOTES_RE = re.compile(r"^[\"']|[\"']$")


@dataclass
class _Scope:
    """An open mapping on the indentation stack."""

    mapping: Mapping
    indent: int


@dataclass
class _PendingBlock:
    """A ``key:`` line that may still turn out to be a block array."""

    key: str
    parent: Mapping
    indent: int
    items: list[Scalar] = field(default_factory=list)

    def commit(self) -> None:
        if self.items:
            self.parent[self.key] = self.items


def parse_scalar(value: str) -> Scalar:
    """Coerce a raw scalar token.

    ``true`` / ``false`` become booleans, fully numeric tokens become ``int``
    or ``float``, and a token wrapped in matching quotes is unquoted.
    Everything else is returned as-is.
    """
    if value == "true":
        return True
    if value == "false":
        return False

    if _NUMBER_RE.match(value):
        if "." in value or "e" in value or "E" in value:
            return float(value)
        return int(value)

    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]

    return value


def _indent_of(line: str) -> int:
    return len(line) - len(line.lstrip())


def _enclosing(stack: list[_Scope], indent: int) -> Mapping:
    while len(stack) > 1 and stack[-1].indent >= indent:
        stack.pop()
    return stack[-1].mapping


def parse_structure(text: str) -> Mapping:
    """Parse an indented block into a mapping of scalars, lists and mappings."""
    root: Mapping = {}
    stack: list[_Scope] = [_Scope(root, -1)]
    pending: _PendingBlock | None = None

    for line in text.split("\n"):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        indent = _indent_of(line)

        if stripped.startswith("- "):
            if pending is not None and indent > pending.indent:
                pending.items.append(parse_scalar(stripped[2:].strip()))
            continue

        inline = _INLINE_ARRAY_RE.match(stripped)
        if inline:
            if pending is not None:
                pending.commit()
                pending = None

            key, raw_items = inline.groups()
            items = [
                parse_scalar(_EDGE_QUOTES_RE.sub("", token))
                for token in (part.strip() for part in raw_items.split(","))
                if token
            ]
            _enclosing(stack, indent)[key] = items
            continue

        pair = _KEY_VALUE_RE.match(stripped)
        if not pair:
            continue

        if pending is not None and indent <= pending.indent:
            pending.commit()
            pending = None

        key, raw_value = pair.groups()
        parent = _enclosing(stack, indent)
        raw_value = raw_value.strip()

        if raw_value:
            parent[key] = parse_scalar(raw_value)
            continue

        nested: Mapping = {}
        parent[key] = nested
        stack.append(_Scope(nested, indent))
        pending = _PendingBlock(key=key, parent=parent, indent=indent)

    if pending is not None:
        pending.commit()

    return root
