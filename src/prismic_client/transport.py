"""Transport capability used by the submission pipeline.

The pipeline only needs ``await transport.fetch_json(url)``. Anything with that
coroutine method can be passed in; ``RequestsTransport`` is the default.
"""

import asyncio
import logging
from typing import Any, Protocol

import requests

from prismic_client.errors import TransportError
from prismic_client.settings import get_settings

logger = logging.getLogger(__name__)


class Transport(Protocol):
    async def fetch_json(self, url: str) -> Any:
        """GET ``url`` and return the decoded JSON body, or raise TransportError."""
        ...


class RequestsTransport:
    """GET-only JSON transport backed by a ``requests.Session``.

    The blocking call runs in a worker thread so the caller's event loop is
    never blocked.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
    ):
        settings = get_settings()
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else settings.timeout_s
        self.session.headers["Accept"] = "application/json"
        self.session.headers["User-Agent"] = user_agent or settings.user_agent

    async def fetch_json(self, url: str) -> Any:
        return await asyncio.to_thread(self._get, url)

    def _get(self, url: str) -> Any:
        logger.info("GET %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            raise TransportError(url, e) from e
        except ValueError as e:
            # Body was not JSON
            raise TransportError(url, e) from e

    def close(self) -> None:
        self.session.close()
