"""Typed document values decoded from query responses.

Every model here is a frozen value. Variants of the same family (fields,
blocks, span kinds, links, embeds) are separate classes grouped under a
type alias; consumers dispatch with ``isinstance``.
"""

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict


class _Value(BaseModel):
    model_config = ConfigDict(frozen=True)


# --- Links ---


class DocumentReference(_Value):
    """A pointer to another document, as found in links and linked_documents."""

    id: str
    type: str
    tags: list[str] = []
    slug: str | None = None
    uid: str | None = None


class DocumentLink(_Value):
    document: DocumentReference
    is_broken: bool = False


class WebLink(_Value):
    url: str


Link = DocumentLink | WebLink


# --- Images ---


class ImageProperties(_Value):
    url: str
    width: int
    height: int
    alt: str | None = None
    copyright: str | None = None


class ImageViews(_Value):
    main: ImageProperties
    views: dict[str, ImageProperties] = {}

    def get_view(self, name: str) -> ImageProperties | None:
        if name == "main":
            return self.main
        return self.views.get(name)


# --- Embeds ---


class EmbedVideo(_Value):
    html: str
    embed_url: str
    provider_name: str | None = None
    provider_url: str | None = None
    author_name: str | None = None
    author_url: str | None = None
    title: str | None = None
    version: str | None = None
    width: int | None = None
    height: int | None = None
    thumbnail_url: str | None = None
    thumbnail_width: int | None = None
    thumbnail_height: int | None = None


class EmbedRich(_Value):
    html: str
    embed_url: str
    provider_name: str | None = None
    provider_url: str | None = None
    author_name: str | None = None
    author_url: str | None = None
    title: str | None = None
    url: str | None = None
    version: str | None = None
    width: int | None = None
    height: int | None = None


Embed = EmbedVideo | EmbedRich


# --- Structured text ---


class Em(_Value):
    pass


class Strong(_Value):
    pass


class Hyperlink(_Value):
    link: Link


SpanKind = Em | Strong | Hyperlink


class Span(_Value):
    """An annotation over ``text[start:end]`` of the owning block."""

    start: int
    end: int
    kind: SpanKind


class BlockKind(str, Enum):
    HEADING1 = "heading1"
    HEADING2 = "heading2"
    HEADING3 = "heading3"
    HEADING4 = "heading4"
    HEADING5 = "heading5"
    HEADING6 = "heading6"
    PARAGRAPH = "paragraph"
    LIST_ITEM = "list-item"
    ORDERED_LIST_ITEM = "o-list-item"

    @property
    def is_heading(self) -> bool:
        return self.value.startswith("heading")


class SimpleBlock(_Value):
    kind: BlockKind
    text: str
    spans: list[Span] = []


class ImageBlock(_Value):
    image: ImageProperties


class EmbedBlock(_Value):
    embed: Embed


Block = SimpleBlock | ImageBlock | EmbedBlock


# --- Document fields ---


class TextField(_Value):
    text: str


class SelectField(_Value):
    value: str


class ColorField(_Value):
    value: str


class NumberField(_Value):
    value: float


class DateField(_Value):
    value: date


class ImageField(_Value):
    image: ImageViews


class StructuredTextField(_Value):
    blocks: list[Block]


class LinkField(_Value):
    link: Link


DocumentField = (
    TextField
    | SelectField
    | ColorField
    | NumberField
    | DateField
    | ImageField
    | StructuredTextField
    | LinkField
)

# documentType -> fieldName -> fields
DefaultDocType = dict[str, dict[str, list[DocumentField]]]
