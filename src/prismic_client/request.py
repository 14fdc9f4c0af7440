"""Request composition.

A request is built from an API descriptor by a short chain of fallible steps:
select a form (which also picks the master ref), optionally switch ref, and
optionally replace the query with predicates. ``RequestBuilder`` records the
chain so it can be written before the descriptor has been fetched and applied
by the submission pipeline once it has.
"""

from typing import Callable
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict

from prismic_client.errors import BookmarkNotFound, FormNotFound, RefNotFound
from prismic_client.models.api import ApiDescriptor
from prismic_client.predicates import Predicate, at, to_query

MASTER_REF_ID = "master"
BOOKMARK_FORM_ID = "everything"


class Request(BaseModel):
    """An immutable, fully resolved query."""

    model_config = ConfigDict(frozen=True)

    action: str
    ref: str
    query: str = ""

    @property
    def url(self) -> str:
        params = {"ref": self.ref}
        if self.query:
            params["q"] = self.query
        sep = "&" if "?" in self.action else "?"
        return f"{self.action}{sep}{urlencode(params)}"


def cache_key(request: Request) -> str:
    """Canonical string form of a request; equal requests share a key."""
    return request.model_dump_json()


# --- Builder steps ---


def select_form(api: ApiDescriptor, form_id: str) -> Request:
    form = api.get_form(form_id)
    if form is None:
        raise FormNotFound(form_id)
    master = api.get_ref(MASTER_REF_ID)
    if master is None:
        raise RefNotFound(MASTER_REF_ID)
    q_field = form.fields.get("q")
    query = q_field.default if q_field and q_field.default else ""
    return Request(action=form.action, ref=master.ref, query=query)


def select_ref(api: ApiDescriptor, ref_id: str, request: Request) -> Request:
    ref = api.get_ref(ref_id)
    if ref is None:
        raise RefNotFound(ref_id)
    return request.model_copy(update={"ref": ref.ref})


def attach_predicates(predicates: list[Predicate], request: Request) -> Request:
    """Replace the request's query; earlier queries are discarded."""
    return request.model_copy(update={"query": to_query(predicates)})


def resolve_bookmark(api: ApiDescriptor, name: str) -> Request:
    doc_id = api.bookmarks.get(name)
    if doc_id is None:
        raise BookmarkNotFound(name)
    request = select_form(api, BOOKMARK_FORM_ID)
    return attach_predicates([at("document.id", doc_id)], request)


# --- Fluent builder ---

Step = Callable[[ApiDescriptor, Request], Request]


class RequestBuilder:
    """An immutable recipe for a Request.

    Each method returns a new builder. ``build`` runs the recorded steps in
    order; the first failing step raises and the rest never run.
    """

    def __init__(self, start: Callable[[ApiDescriptor], Request], steps: tuple[Step, ...] = ()):
        self._start = start
        self._steps = steps

    def ref(self, ref_id: str) -> "RequestBuilder":
        return self._then(lambda api, request: select_ref(api, ref_id, request))

    def query(self, predicates: list[Predicate]) -> "RequestBuilder":
        predicates = list(predicates)
        return self._then(lambda api, request: attach_predicates(predicates, request))

    def build(self, api: ApiDescriptor) -> Request:
        request = self._start(api)
        for step in self._steps:
            request = step(api, request)
        return request

    def _then(self, step: Step) -> "RequestBuilder":
        return RequestBuilder(self._start, self._steps + (step,))


def form(form_id: str) -> RequestBuilder:
    """Start a request on the given form, against the master ref."""
    return RequestBuilder(lambda api: select_form(api, form_id))


def bookmark(name: str) -> RequestBuilder:
    """Start a request for the document a bookmark points to."""
    return RequestBuilder(lambda api: resolve_bookmark(api, name))
