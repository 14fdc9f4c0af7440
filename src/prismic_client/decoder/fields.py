"""Document field decoder.

A field is a JSON object ``{"type": <tag>, "value": <payload>}``. The tag picks
the payload decoder; an unrecognized tag is a DecodeError naming it. The link,
image and embed sub-decoders are shared with the structured-text decoder.
"""

from datetime import date
from typing import Any, Callable

from prismic_client.errors import DecodeError
from prismic_client.models.document import (
    ColorField,
    DateField,
    DefaultDocType,
    DocumentField,
    DocumentLink,
    DocumentReference,
    Embed,
    EmbedRich,
    EmbedVideo,
    ImageField,
    ImageProperties,
    ImageViews,
    Link,
    LinkField,
    NumberField,
    SelectField,
    StructuredTextField,
    TextField,
    WebLink,
)

from .base import (
    expect_list,
    expect_object,
    get_bool,
    get_int,
    get_object,
    get_optional_int,
    get_optional_str,
    get_str,
    get_type_tag,
    require,
)


# --- Links ---


def decode_document_reference(raw: Any, path: str) -> DocumentReference:
    doc = expect_object(raw, path)
    tags = expect_list(doc.get("tags", []), f"{path}.tags")
    return DocumentReference(
        id=get_str(doc, "id", path),
        type=get_str(doc, "type", path),
        tags=[_as_str(tag, f"{path}.tags[{i}]") for i, tag in enumerate(tags)],
        slug=get_optional_str(doc, "slug", path),
        uid=get_optional_str(doc, "uid", path),
    )


def decode_link(raw: Any, path: str) -> Link:
    """Decode a ``Link.document`` / ``Link.web`` tagged object."""
    obj = expect_object(raw, path)
    tag = get_type_tag(obj, path)
    value = expect_object(require(obj, "value", path), f"{path}.value")
    return decode_link_value(tag, value, f"{path}.value")


def decode_link_value(tag: str, value: dict, path: str) -> Link:
    if tag == "Link.document":
        return DocumentLink(
            document=decode_document_reference(require(value, "document", path), f"{path}.document"),
            is_broken=get_bool(value, "isBroken", path, default=False),
        )
    if tag == "Link.web":
        return WebLink(url=get_str(value, "url", path))
    raise DecodeError.unknown_tag("link", tag, path)


# --- Images ---


def decode_image_properties(raw: Any, path: str) -> ImageProperties:
    image = expect_object(raw, path)
    dimensions = get_object(image, "dimensions", path)
    return ImageProperties(
        url=get_str(image, "url", path),
        width=get_int(dimensions, "width", f"{path}.dimensions"),
        height=get_int(dimensions, "height", f"{path}.dimensions"),
        alt=get_optional_str(image, "alt", path),
        copyright=get_optional_str(image, "copyright", path),
    )


def decode_image_views(raw: Any, path: str) -> ImageViews:
    obj = expect_object(raw, path)
    views = expect_object(obj.get("views", {}), f"{path}.views")
    return ImageViews(
        main=decode_image_properties(require(obj, "main", path), f"{path}.main"),
        views={
            name: decode_image_properties(view, f"{path}.views.{name}")
            for name, view in views.items()
        },
    )


# --- Embeds ---


def decode_embed(raw: Any, path: str) -> Embed:
    """Decode an oEmbed payload, dispatching on its ``type``."""
    oembed = expect_object(raw, path)
    tag = get_type_tag(oembed, path)
    common = dict(
        html=get_str(oembed, "html", path),
        embed_url=get_str(oembed, "embed_url", path),
        provider_name=get_optional_str(oembed, "provider_name", path),
        provider_url=get_optional_str(oembed, "provider_url", path),
        author_name=get_optional_str(oembed, "author_name", path),
        author_url=get_optional_str(oembed, "author_url", path),
        title=get_optional_str(oembed, "title", path),
        version=_optional_version(oembed, path),
        width=get_optional_int(oembed, "width", path),
        height=get_optional_int(oembed, "height", path),
    )
    if tag == "video":
        return EmbedVideo(
            **common,
            thumbnail_url=get_optional_str(oembed, "thumbnail_url", path),
            thumbnail_width=get_optional_int(oembed, "thumbnail_width", path),
            thumbnail_height=get_optional_int(oembed, "thumbnail_height", path),
        )
    if tag == "rich":
        return EmbedRich(**common, url=get_optional_str(oembed, "url", path))
    raise DecodeError.unknown_tag("embed", tag, f"{path}.type")


def _optional_version(oembed: dict, path: str) -> str | None:
    # Providers send the oEmbed version as "1.0" or 1.0
    version = oembed.get("version")
    if isinstance(version, (int, float)) and not isinstance(version, bool):
        return str(version)
    return get_optional_str(oembed, "version", path)


# --- Document fields ---


def _decode_text(value: Any, path: str) -> TextField:
    return TextField(text=_as_str(value, path))


def _decode_select(value: Any, path: str) -> SelectField:
    return SelectField(value=_as_str(value, path))


def _decode_color(value: Any, path: str) -> ColorField:
    return ColorField(value=_as_str(value, path))


def _decode_number(value: Any, path: str) -> NumberField:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError("a number", value, path)
    return NumberField(value=float(value))


def _decode_date(value: Any, path: str) -> DateField:
    text = _as_str(value, path)
    try:
        return DateField(value=date.fromisoformat(text))
    except ValueError:
        raise DecodeError("a YYYY-MM-DD date", value, path)


def _decode_image(value: Any, path: str) -> ImageField:
    return ImageField(image=decode_image_views(value, path))


def _decode_structured_text(value: Any, path: str) -> StructuredTextField:
    from .structured_text import decode_structured_text

    return StructuredTextField(blocks=decode_structured_text(value, path))


def _decode_document_link(value: Any, path: str) -> LinkField:
    return LinkField(link=decode_link_value("Link.document", expect_object(value, path), path))


def _decode_web_link(value: Any, path: str) -> LinkField:
    return LinkField(link=decode_link_value("Link.web", expect_object(value, path), path))


FIELD_DECODERS: dict[str, Callable[[Any, str], DocumentField]] = {
    "Text": _decode_text,
    "Select": _decode_select,
    "Color": _decode_color,
    "Number": _decode_number,
    "Date": _decode_date,
    "Image": _decode_image,
    "StructuredText": _decode_structured_text,
    "Link.document": _decode_document_link,
    "Link.web": _decode_web_link,
}


def decode_document_field(raw: Any, path: str = "field") -> DocumentField:
    """Decode one tagged document field."""
    obj = expect_object(raw, path)
    tag = get_type_tag(obj, path)
    decoder = FIELD_DECODERS.get(tag)
    if decoder is None:
        raise DecodeError.unknown_tag("document field", tag, f"{path}.type")
    return decoder(require(obj, "value", path), f"{path}.value")


def decode_default_doc_type(raw: Any) -> DefaultDocType:
    """Decode ``data`` as documentType -> fieldName -> list of fields.

    A field is either a single tagged object or an array of them.
    """
    data = expect_object(raw, "data")
    result: DefaultDocType = {}
    for doc_type, fields in data.items():
        doc_path = f"data.{doc_type}"
        decoded: dict[str, list[DocumentField]] = {}
        for name, value in expect_object(fields, doc_path).items():
            field_path = f"{doc_path}.{name}"
            if isinstance(value, list):
                decoded[name] = [
                    decode_document_field(item, f"{field_path}[{i}]")
                    for i, item in enumerate(value)
                ]
            else:
                decoded[name] = [decode_document_field(value, field_path)]
        result[doc_type] = decoded
    return result


def _as_str(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise DecodeError("a string", value, path)
    return value
