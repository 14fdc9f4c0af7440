"""Lookup helpers for documents decoded with the default document type."""

from datetime import date

from prismic_client.models.document import (
    Block,
    BlockKind,
    DateField,
    DefaultDocType,
    DocumentField,
    ImageBlock,
    ImageField,
    ImageProperties,
    ImageViews,
    Link,
    LinkField,
    NumberField,
    SimpleBlock,
    StructuredTextField,
    TextField,
)


def get_fields(doc: DefaultDocType, doc_type: str, field: str) -> list[DocumentField]:
    """All values of ``doc_type.field``; empty when the field is absent."""
    return doc.get(doc_type, {}).get(field, [])


def get_texts(doc: DefaultDocType, doc_type: str, field: str) -> list[str]:
    return [f.text for f in get_fields(doc, doc_type, field) if isinstance(f, TextField)]


def get_text(doc: DefaultDocType, doc_type: str, field: str) -> str | None:
    texts = get_texts(doc, doc_type, field)
    return texts[0] if texts else None


def get_structured_text(doc: DefaultDocType, doc_type: str, field: str) -> list[Block] | None:
    for f in get_fields(doc, doc_type, field):
        if isinstance(f, StructuredTextField):
            return f.blocks
    return None


def get_image(doc: DefaultDocType, doc_type: str, field: str) -> ImageViews | None:
    for f in get_fields(doc, doc_type, field):
        if isinstance(f, ImageField):
            return f.image
    return None


def get_image_view(doc: DefaultDocType, doc_type: str, field: str, view: str) -> ImageProperties | None:
    image = get_image(doc, doc_type, field)
    return image.get_view(view) if image else None


def get_number(doc: DefaultDocType, doc_type: str, field: str) -> float | None:
    for f in get_fields(doc, doc_type, field):
        if isinstance(f, NumberField):
            return f.value
    return None


def get_date(doc: DefaultDocType, doc_type: str, field: str) -> date | None:
    for f in get_fields(doc, doc_type, field):
        if isinstance(f, DateField):
            return f.value
    return None


def get_link(doc: DefaultDocType, doc_type: str, field: str) -> Link | None:
    for f in get_fields(doc, doc_type, field):
        if isinstance(f, LinkField):
            return f.link
    return None


# --- Structured text ---


def get_title(blocks: list[Block]) -> SimpleBlock | None:
    """First heading block, of any level."""
    for block in blocks:
        if isinstance(block, SimpleBlock) and block.kind.is_heading:
            return block
    return None


def get_first_paragraph(blocks: list[Block]) -> SimpleBlock | None:
    for block in blocks:
        if isinstance(block, SimpleBlock) and block.kind == BlockKind.PARAGRAPH:
            return block
    return None


def get_first_image(blocks: list[Block]) -> ImageProperties | None:
    for block in blocks:
        if isinstance(block, ImageBlock):
            return block.image
    return None


def get_plain_text(blocks: list[Block], separator: str = "\n") -> str:
    """Text of all text blocks, ignoring spans, images and embeds."""
    return separator.join(b.text for b in blocks if isinstance(b, SimpleBlock))
