"""
Fragment blocks and the final render pass.

Emitters build ``Block`` trees instead of concatenating strings. A block is
an ordered list of lines and nested blocks; nested blocks are indented one
level deeper than their parent. ``render`` is the only place that turns a
tree into text.

Every piece of user text passes through one of the escape helpers below
before it becomes part of a line.
"""

import re
from dataclasses import dataclass, field
from typing import Union

_JS_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

Part = Union[str, "Block", None]


@dataclass
class Block:
    """
    Ordered fragments rendered one per line.

    ``None`` parts are dropped so optional lines can be written inline.
    ``indent`` is the number of levels added relative to the parent block.
    With ``gap`` set, parts are separated by one blank line.
    """

    parts: list[Part] = field(default_factory=list)
    indent: int = 1
    gap: bool = False

    def add(self, *parts: Part) -> "Block":
        self.parts.extend(parts)
        return self


def render(block: Block, indent_unit: str = "  ") -> str:
    """Serialize ``block`` to text. The root block is not indented."""
    return "\n".join(_render_lines(block, indent_unit, level=0))


def _render_lines(block: Block, indent_unit: str, level: int) -> list[str]:
    lines: list[str] = []
    for part in block.parts:
        if part is None:
            continue
        if isinstance(part, Block):
            chunk = _render_lines(part, indent_unit, level + part.indent)
        else:
            chunk = [
                indent_unit * level + line if line else ""
                for line in part.split("\n")
            ]
        if not chunk:
            continue
        if block.gap and lines:
            lines.append("")
        lines.extend(chunk)
    return lines


def js_string(value: str, quote: str = "'") -> str:
    """
    Quote ``value`` as a JavaScript string literal.

    ``<`` is written as ``\\u003c`` so user text can never spell out a type
    annotation of the typed dialect.
    """
    escaped = (
        value.replace("\\", "\\\\")
        .replace(quote, "\\" + quote)
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("<", "\\u003c")
    )
    return f"{quote}{escaped}{quote}"


def js_key(name: str) -> str:
    """Object key for ``name``; quoted when it is not a plain identifier."""
    if _JS_IDENTIFIER.match(name):
        return name
    return js_string(name)


def jsx_attr(value: str) -> str:
    """Double-quoted JSX attribute value."""
    escaped = (
        value.replace("&", "&amp;")
        .replace('"', "&quot;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )
    return f'"{escaped}"'


def jsx_text(value: str) -> str:
    """Text placed between JSX tags."""
    return (
        value.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace("{", "&#123;")
        .replace("}", "&#125;")
    )


def js_bool(value: bool) -> str:
    return "true" if value else "false"
