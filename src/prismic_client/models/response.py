"""Query response models, generic over the decoded document data type."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from prismic_client.models.document import DocumentReference

DocT = TypeVar("DocT")


class SearchResult(BaseModel, Generic[DocT]):
    """One document returned by a query."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    data: DocT
    href: str
    id: str
    linked_documents: list[DocumentReference]
    slugs: list[str]
    tags: list[str]
    type: str
    uid: str | None = None


class Response(BaseModel, Generic[DocT]):
    """A page of query results. Paging links are exposed as plain data."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    license: str
    next_page: str | None
    page: int
    prev_page: str | None
    results: list[SearchResult]
    results_per_page: int
    results_size: int
    total_pages: int
    total_results_size: int
    version: str
