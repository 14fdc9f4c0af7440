from datetime import date

import pytest

from prismic_client.models.document import (
    BlockKind,
    DateField,
    DocumentLink,
    DocumentReference,
    Em,
    EmbedBlock,
    EmbedRich,
    Hyperlink,
    ImageBlock,
    ImageField,
    ImageProperties,
    ImageViews,
    LinkField,
    NumberField,
    SimpleBlock,
    Span,
    StructuredTextField,
    Strong,
    TextField,
    WebLink,
)
from prismic_client.render.html import (
    default_link_resolver,
    render_block,
    render_document,
    render_field,
    render_spans,
    render_structured_text,
)
from prismic_client.render.nodes import Element, RawHtml, Text, text_content, to_html

AUTHOR = DocumentReference(id="A1", type="author", slug="jane-doe")
IMAGE = ImageProperties(url="https://images.example/cat.png", width=640, height=480, alt="A cat")


def _span(start: int, end: int, kind=None) -> Span:
    return Span(start=start, end=end, kind=kind or Strong())


class TestRenderSpans:
    def test_strong_prefix(self):
        nodes = render_spans("Hello world", [_span(0, 5)])
        assert nodes == [Element("strong", children=[Text("Hello")]), Text(" world")]

    def test_no_spans(self):
        assert render_spans("Hello", []) == [Text("Hello")]

    def test_empty_text(self):
        assert render_spans("", []) == []

    def test_spans_sorted_by_start(self):
        nodes = render_spans("Hello big world", [_span(10, 15, Em()), _span(0, 5)])
        assert to_html(nodes) == "<strong>Hello</strong> big <em>world</em>"

    def test_equal_starts_keep_input_order(self):
        nodes = render_spans("Hello world", [_span(0, 3, Em()), _span(0, 5)])
        assert nodes[0] == Element("em", children=[Text("Hel")])
        assert to_html(nodes) == "<em>Hel</em><strong>Hello</strong> world"

    def test_equal_starts_reversed_input(self):
        nodes = render_spans("Hello world", [_span(0, 5), _span(0, 3, Em())])
        assert nodes[0] == Element("strong", children=[Text("Hello")])
        # Overlapping ranges are not merged; the tail starts at the last span's end.
        assert to_html(nodes) == "<strong>Hello</strong><em>Hel</em>lo world"

    def test_unknown_span_kind(self):
        span = Span.model_construct(start=0, end=5, kind=object())
        with pytest.raises(TypeError, match="not a span kind"):
            render_spans("Hello world", [span])

    @pytest.mark.parametrize("spans", [
        [],
        [_span(0, 5)],
        [_span(6, 11, Em())],
        [_span(0, 1), _span(2, 4, Em()), _span(8, 11)],
        [_span(3, 3)],
    ])
    def test_text_content_preserved(self, spans):
        text = "Hello world"
        assert text_content(render_spans(text, spans)) == text

    def test_web_hyperlink(self):
        nodes = render_spans("Go here", [_span(3, 7, Hyperlink(link=WebLink(url="https://example.com")))])
        assert to_html(nodes) == 'Go <a href="https://example.com">here</a>'

    def test_document_hyperlink_uses_resolver(self):
        link = DocumentLink(document=AUTHOR)
        nodes = render_spans("By Jane", [_span(3, 7, Hyperlink(link=link))], lambda ref: f"/authors/{ref.slug}")
        assert to_html(nodes) == 'By <a href="/authors/jane-doe">Jane</a>'

    def test_text_is_escaped(self):
        assert to_html(render_spans("a < b & c", [])) == "a &lt; b &amp; c"


class TestRenderBlocks:
    @pytest.mark.parametrize("kind, tag", [
        (BlockKind.HEADING1, "h1"),
        (BlockKind.HEADING2, "h2"),
        (BlockKind.HEADING3, "h3"),
        (BlockKind.PARAGRAPH, "p"),
    ])
    def test_simple_blocks(self, kind, tag):
        block = SimpleBlock(kind=kind, text="Title")
        assert to_html(render_block(block)) == f"<{tag}>Title</{tag}>"

    def test_list_items_wrapped_individually(self):
        blocks = [
            SimpleBlock(kind=BlockKind.LIST_ITEM, text="One"),
            SimpleBlock(kind=BlockKind.LIST_ITEM, text="Two"),
        ]
        html = to_html(render_structured_text(blocks))
        assert html == "<ul><li>One</li></ul><ul><li>Two</li></ul>"

    def test_ordered_list_item(self):
        block = SimpleBlock(kind=BlockKind.ORDERED_LIST_ITEM, text="One")
        assert to_html(render_block(block)) == "<ol><li>One</li></ol>"

    def test_image_block(self):
        html = to_html(render_block(ImageBlock(image=IMAGE)))
        assert html == '<img src="https://images.example/cat.png" alt="A cat" width="640" height="480">'

    def test_embed_html_not_escaped(self):
        embed = EmbedRich(html="<script>track()</script>", embed_url="https://x.example/1", provider_name="X")
        node = render_block(EmbedBlock(embed=embed))
        assert node.children == [RawHtml("<script>track()</script>")]
        assert to_html(node) == (
            '<div data-oembed="https://x.example/1" data-oembed-type="rich" data-oembed-provider="x">'
            "<script>track()</script></div>"
        )


class TestRenderFields:
    def test_text(self):
        assert to_html(render_field(TextField(text="Hi"))) == "<span>Hi</span>"

    def test_number_and_date(self):
        assert to_html(render_field(NumberField(value=4.0))) == "<span>4</span>"
        assert to_html(render_field(NumberField(value=2.5))) == "<span>2.5</span>"
        assert to_html(render_field(DateField(value=date(2016, 3, 1)))) == "<span>2016-03-01</span>"

    def test_image_uses_main_view(self):
        thumb = ImageProperties(url="https://images.example/thumb.png", width=1, height=1)
        field = ImageField(image=ImageViews(main=IMAGE, views={"thumb": thumb}))
        assert render_field(field).attrs["src"] == IMAGE.url

    def test_structured_text(self):
        field = StructuredTextField(blocks=[SimpleBlock(kind=BlockKind.PARAGRAPH, text="Hi")])
        assert to_html(render_field(field)) == "<div><p>Hi</p></div>"

    def test_links(self):
        web = render_field(LinkField(link=WebLink(url="https://example.com")))
        assert to_html(web) == '<a href="https://example.com">https://example.com</a>'
        doc = render_field(LinkField(link=DocumentLink(document=AUTHOR)))
        assert to_html(doc) == '<a href="/documents/A1/jane-doe">jane-doe</a>'

    def test_default_link_resolver(self):
        assert default_link_resolver(AUTHOR) == "/documents/A1/jane-doe"


class TestRenderDocument:
    def test_one_container_per_field(self):
        doc = {"article": {"title": [TextField(text="Hi")], "tags": [TextField(text="a"), TextField(text="b")]}}
        html = to_html(render_document(doc))
        assert html == (
            '<div class="article-title"><span>Hi</span></div>'
            '<div class="article-tags"><span>a</span><span>b</span></div>'
        )
