"""Structured-text decoder: an ordered JSON array of tagged blocks."""

from typing import Any

from prismic_client.errors import DecodeError
from prismic_client.models.document import (
    Block,
    BlockKind,
    Em,
    EmbedBlock,
    Hyperlink,
    ImageBlock,
    SimpleBlock,
    Span,
    SpanKind,
    Strong,
)

from .base import expect_list, expect_object, get_int, get_str, get_type_tag, require
from .fields import decode_embed, decode_image_properties, decode_link

_SIMPLE_KINDS = {kind.value: kind for kind in BlockKind}


def decode_structured_text(raw: Any, path: str = "structured_text") -> list[Block]:
    """Decode every block in order; the first bad block fails the whole list."""
    return [
        decode_block(block, f"{path}[{i}]")
        for i, block in enumerate(expect_list(raw, path))
    ]


def decode_block(raw: Any, path: str) -> Block:
    block = expect_object(raw, path)
    tag = get_type_tag(block, path)

    if tag in _SIMPLE_KINDS:
        spans = expect_list(block.get("spans", []), f"{path}.spans")
        return SimpleBlock(
            kind=_SIMPLE_KINDS[tag],
            text=get_str(block, "text", path),
            spans=[decode_span(span, f"{path}.spans[{i}]") for i, span in enumerate(spans)],
        )
    if tag == "image":
        return ImageBlock(image=decode_image_properties(block, path))
    if tag == "embed":
        return EmbedBlock(embed=decode_embed(require(block, "oembed", path), f"{path}.oembed"))
    raise DecodeError.unknown_tag("structured text block", tag, f"{path}.type")


def decode_span(raw: Any, path: str) -> Span:
    span = expect_object(raw, path)
    return Span(
        start=get_int(span, "start", path),
        end=get_int(span, "end", path),
        kind=_decode_span_kind(span, path),
    )


def _decode_span_kind(span: dict, path: str) -> SpanKind:
    tag = get_type_tag(span, path)
    if tag == "em":
        return Em()
    if tag == "strong":
        return Strong()
    if tag == "hyperlink":
        return Hyperlink(link=decode_link(require(span, "data", path), f"{path}.data"))
    raise DecodeError.unknown_tag("span", tag, f"{path}.type")
