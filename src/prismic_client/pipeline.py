"""Submission pipeline.

``Model`` is the session value: the repository's API URL, its descriptor once
fetched, and the response cache. Nothing in it is mutated; ``fetch_api`` and
``submit`` return updated copies. A submission awaits at most two network
calls, in order: the descriptor (only if the model lacks it), then the
document query (only on a cache miss).

Typical use::

    model = Model(api_url="https://repo.cdn.prismic.io/api")
    response, model = await submit(
        model,
        form("everything").query([at("document.type", "article")]),
        transport,
    )
"""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from prismic_client.cache import Cache, merge_caches
from prismic_client.decoder.api import decode_api
from prismic_client.decoder.fields import decode_default_doc_type
from prismic_client.decoder.response import DocumentDecoder, decode_response
from prismic_client.errors import ApiFetchError, DecodeError, SubmitDecodeError, SubmitRequestError, TransportError
from prismic_client.models.api import ApiDescriptor
from prismic_client.models.response import Response
from prismic_client.request import Request, RequestBuilder, cache_key
from prismic_client.transport import Transport

logger = logging.getLogger(__name__)


class Model(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_url: str
    api: ApiDescriptor | None = None
    cache: Cache = Field(default_factory=Cache)

    def reset(self) -> "Model":
        """Forget the descriptor and cache; the next submission refetches both."""
        return Model(api_url=self.api_url)


async def fetch_api(model: Model, transport: Transport) -> Model:
    """Make sure the model holds an API descriptor, fetching it at most once."""
    if model.api is not None:
        logger.debug("Reusing API descriptor for %s", model.api_url)
        return model

    try:
        raw = await transport.fetch_json(model.api_url)
        api = decode_api(raw)
    except (TransportError, DecodeError) as e:
        logger.warning("API descriptor fetch failed for %s: %s", model.api_url, e)
        raise ApiFetchError(e) from e

    logger.info("Fetched API descriptor %s (%d forms, %d refs)", model.api_url, len(api.forms), len(api.refs))
    return model.model_copy(update={"api": api})


async def submit(
    model: Model,
    request: RequestBuilder | Request,
    transport: Transport,
    decoder: DocumentDecoder = decode_default_doc_type,
) -> tuple[Response, Model]:
    """Run one query and return its decoded response with the updated model.

    Only payloads that decoded successfully are cached, and a cached payload
    that fails to decode (for example with a different decoder) stays cached.
    """
    model = await fetch_api(model, transport)
    if isinstance(request, RequestBuilder):
        request = request.build(model.api)

    key = cache_key(request)
    if key in model.cache:
        logger.debug("Cache hit for %s", request.url)
        return _decode(model.cache.get(key), decoder), model

    logger.debug("Cache miss for %s", request.url)
    try:
        raw = await transport.fetch_json(request.url)
    except TransportError as e:
        logger.warning("Query failed for %s: %s", request.url, e)
        raise SubmitRequestError(e) from e

    response = _decode(raw, decoder)
    return response, model.model_copy(update={"cache": model.cache.with_entry(key, raw)})


def collect_responses(session: Model, result: Model) -> Model:
    """Fold the model returned by ``submit`` back into a long-lived session model.

    The result's cache entries win over the session's; the descriptor is taken
    from the session if it has one, otherwise from the result.
    """
    return session.model_copy(
        update={
            "api": session.api if session.api is not None else result.api,
            "cache": merge_caches(session.cache, result.cache),
        }
    )


def _decode(raw: Any, decoder: DocumentDecoder) -> Response:
    try:
        return decode_response(raw, decoder)
    except (DecodeError, ValidationError) as e:
        logger.warning("Could not decode query response: %s", e)
        raise SubmitDecodeError(e) from e
