"""A minimal HTML node tree and its serializer."""

from dataclasses import dataclass, field
from html import escape


@dataclass(frozen=True)
class Text:
    """Plain text; escaped when serialized."""

    text: str


@dataclass(frozen=True)
class RawHtml:
    """Markup passed through unescaped."""

    html: str


@dataclass(frozen=True)
class Element:
    tag: str
    attrs: dict[str, str] = field(default_factory=dict)
    children: list["Node"] = field(default_factory=list)


Node = Text | RawHtml | Element

VOID_TAGS = {"img", "br", "hr"}


def to_html(nodes: Node | list[Node]) -> str:
    if not isinstance(nodes, list):
        nodes = [nodes]
    return "".join(_serialize(node) for node in nodes)


def text_content(nodes: Node | list[Node]) -> str:
    """Concatenated text of the tree, without markup. Raw HTML is skipped."""
    if not isinstance(nodes, list):
        nodes = [nodes]
    parts = []
    for node in nodes:
        if isinstance(node, Text):
            parts.append(node.text)
        elif isinstance(node, Element):
            parts.append(text_content(node.children))
    return "".join(parts)


def _serialize(node: Node) -> str:
    if isinstance(node, Text):
        return escape(node.text, quote=False)
    if isinstance(node, RawHtml):
        return node.html
    attrs = "".join(f' {name}="{escape(value)}"' for name, value in node.attrs.items())
    if node.tag in VOID_TAGS:
        return f"<{node.tag}{attrs}>"
    return f"<{node.tag}{attrs}>{to_html(node.children)}</{node.tag}>"
