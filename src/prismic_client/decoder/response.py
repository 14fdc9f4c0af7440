"""Query response decoder.

The ``data`` of each result is handed to a caller-supplied decoder; everything
else has a fixed shape.
"""

from typing import Any, Callable, TypeVar

from prismic_client.errors import DecodeError
from prismic_client.models.response import Response, SearchResult

from .base import (
    expect_list,
    expect_object,
    get_int,
    get_optional_str,
    get_str,
    get_str_list,
    require,
)
from .fields import decode_document_reference

DocT = TypeVar("DocT")

DocumentDecoder = Callable[[Any], DocT]


def decode_response(raw: Any, decoder: DocumentDecoder) -> Response:
    body = expect_object(raw, "response")
    results = expect_list(require(body, "results", "response"), "response.results")
    return Response(
        license=get_str(body, "license", "response"),
        next_page=get_optional_str(body, "next_page", "response"),
        page=get_int(body, "page", "response"),
        prev_page=get_optional_str(body, "prev_page", "response"),
        results=[
            decode_search_result(result, decoder, f"response.results[{i}]")
            for i, result in enumerate(results)
        ],
        results_per_page=get_int(body, "results_per_page", "response"),
        results_size=get_int(body, "results_size", "response"),
        total_pages=get_int(body, "total_pages", "response"),
        total_results_size=get_int(body, "total_results_size", "response"),
        version=get_str(body, "version", "response"),
    )


def decode_search_result(raw: Any, decoder: DocumentDecoder, path: str) -> SearchResult:
    result = expect_object(raw, path)
    linked = expect_list(require(result, "linked_documents", path), f"{path}.linked_documents")
    return SearchResult(
        data=_decode_data(require(result, "data", path), decoder, path),
        href=get_str(result, "href", path),
        id=get_str(result, "id", path),
        linked_documents=[
            decode_document_reference(doc, f"{path}.linked_documents[{i}]")
            for i, doc in enumerate(linked)
        ],
        slugs=get_str_list(result, "slugs", path),
        tags=get_str_list(result, "tags", path),
        type=get_str(result, "type", path),
        uid=get_optional_str(result, "uid", path),
    )


def _decode_data(raw_data: Any, decoder: DocumentDecoder, path: str) -> Any:
    """Run the caller's decoder; any failure becomes a DecodeError under ``path``."""
    try:
        return decoder(raw_data)
    except DecodeError as e:
        # Decoder paths are relative to the result (e.g. "data.article.body").
        inner = e.path or "data"
        raise DecodeError(e.expected, e.found, f"{path}.{inner}", tag=e.tag) from e
    except Exception as e:
        raise DecodeError("data accepted by the document decoder", raw_data, f"{path}.data") from e
