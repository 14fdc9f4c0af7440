"""HTML renderer for decoded document fields and structured text.

Spans are applied as a flat sequence sorted by start offset: overlapping or
nested spans are not supported and render incorrectly. Each list item gets its
own single-item list. Embed HTML is injected as-is, without sanitizing.
"""

from typing import Callable

from prismic_client.models.document import (
    Block,
    BlockKind,
    ColorField,
    DateField,
    DefaultDocType,
    DocumentField,
    DocumentLink,
    DocumentReference,
    Em,
    Embed,
    EmbedBlock,
    EmbedVideo,
    Hyperlink,
    ImageBlock,
    ImageField,
    ImageProperties,
    Link,
    LinkField,
    NumberField,
    SelectField,
    SimpleBlock,
    Span,
    SpanKind,
    Strong,
    StructuredTextField,
    TextField,
    WebLink,
)

from .nodes import Element, Node, RawHtml, Text

LinkResolver = Callable[[DocumentReference], str]

BLOCK_TAGS = {
    BlockKind.HEADING1: "h1",
    BlockKind.HEADING2: "h2",
    BlockKind.HEADING3: "h3",
    BlockKind.HEADING4: "h4",
    BlockKind.HEADING5: "h5",
    BlockKind.HEADING6: "h6",
    BlockKind.PARAGRAPH: "p",
}

LIST_TAGS = {
    BlockKind.LIST_ITEM: "ul",
    BlockKind.ORDERED_LIST_ITEM: "ol",
}


def default_link_resolver(ref: DocumentReference) -> str:
    return f"/documents/{ref.id}/{ref.slug or ''}"


def resolve_link(link: Link, link_resolver: LinkResolver) -> str:
    if isinstance(link, DocumentLink):
        return link_resolver(link.document)
    return link.url


# --- Spans ---


def render_spans(text: str, spans: list[Span], link_resolver: LinkResolver = default_link_resolver) -> list[Node]:
    """Splice span annotations into ``text`` as a flat list of inline nodes."""
    nodes: list[Node] = []
    cursor = 0
    for span in sorted(spans, key=lambda s: s.start):
        plain = text[cursor:span.start]
        if plain:
            nodes.append(Text(plain))
        nodes.append(_render_span_kind(span.kind, text[span.start:span.end], link_resolver))
        cursor = span.end
    tail = text[cursor:]
    if tail:
        nodes.append(Text(tail))
    return nodes


def _render_span_kind(kind: SpanKind, content: str, link_resolver: LinkResolver) -> Element:
    if isinstance(kind, Em):
        return Element("em", children=[Text(content)])
    if isinstance(kind, Hyperlink):
        return Element("a", {"href": resolve_link(kind.link, link_resolver)}, [Text(content)])
    if isinstance(kind, Strong):
        return Element("strong", children=[Text(content)])
    raise TypeError(f"not a span kind: {kind!r}")


# --- Blocks ---


def render_block(block: Block, link_resolver: LinkResolver = default_link_resolver) -> Node:
    if isinstance(block, ImageBlock):
        return render_image(block.image)
    if isinstance(block, EmbedBlock):
        return render_embed(block.embed)

    inline = render_spans(block.text, block.spans, link_resolver)
    if block.kind in LIST_TAGS:
        return Element(LIST_TAGS[block.kind], children=[Element("li", children=inline)])
    return Element(BLOCK_TAGS[block.kind], children=inline)


def render_structured_text(blocks: list[Block], link_resolver: LinkResolver = default_link_resolver) -> list[Node]:
    return [render_block(block, link_resolver) for block in blocks]


def render_image(image: ImageProperties) -> Element:
    attrs = {
        "src": image.url,
        "alt": image.alt or "",
        "width": str(image.width),
        "height": str(image.height),
    }
    if image.copyright:
        attrs["title"] = image.copyright
    return Element("img", attrs)


def render_embed(embed: Embed) -> Element:
    embed_type = "video" if isinstance(embed, EmbedVideo) else "rich"
    attrs = {"data-oembed": embed.embed_url, "data-oembed-type": embed_type}
    if embed.provider_name:
        attrs["data-oembed-provider"] = embed.provider_name.lower()
    return Element("div", attrs, [RawHtml(embed.html)])


def render_link(link: Link, link_resolver: LinkResolver = default_link_resolver) -> Element:
    href = resolve_link(link, link_resolver)
    if isinstance(link, WebLink):
        label = link.url
    else:
        label = link.document.slug or link.document.id
    return Element("a", {"href": href}, [Text(label)])


# --- Fields ---


def render_field(field: DocumentField, link_resolver: LinkResolver = default_link_resolver) -> Node:
    if isinstance(field, TextField):
        return Element("span", children=[Text(field.text)])
    if isinstance(field, (SelectField, ColorField)):
        return Element("span", children=[Text(field.value)])
    if isinstance(field, NumberField):
        return Element("span", children=[Text(_format_number(field.value))])
    if isinstance(field, DateField):
        return Element("span", children=[Text(field.value.isoformat())])
    if isinstance(field, ImageField):
        return render_image(field.image.main)
    if isinstance(field, StructuredTextField):
        return Element("div", children=render_structured_text(field.blocks, link_resolver))
    if isinstance(field, LinkField):
        return render_link(field.link, link_resolver)
    raise TypeError(f"not a document field: {field!r}")


def render_document(doc: DefaultDocType, link_resolver: LinkResolver = default_link_resolver) -> list[Node]:
    """Render every field of every document type, in decoded order."""
    nodes: list[Node] = []
    for doc_type, fields in doc.items():
        for name, values in fields.items():
            nodes.append(
                Element(
                    "div",
                    {"class": f"{doc_type}-{name}"},
                    [render_field(value, link_resolver) for value in values],
                )
            )
    return nodes


def _format_number(value: float) -> str:
    return str(int(value)) if value.is_integer() else str(value)
