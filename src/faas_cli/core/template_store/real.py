"""Production TemplateStore implementation using httpx."""

import logging
import time
from collections.abc import Callable

import httpx

from faas_cli.core.template_store.abc import TemplateStore
from faas_cli.core.template_store.errors import (
    BodyReadError,
    EmptyBodyError,
    RequestConstructionError,
    TransportError,
    UnexpectedStatusError,
)

logger = logging.getLogger(__name__)

# Deadline for the whole exchange, from connecting to the last body byte
REQUEST_TIMEOUT_SECONDS = 5.0


class RealTemplateStore(TemplateStore):
    """Fetches store documents with a single bounded GET request.

    httpx timeouts only bound each connect/read/write step, so the overall
    deadline is also checked after the response headers and after every
    body chunk.

    A transport can be passed in so tests can serve responses from an
    httpx.MockTransport instead of the network, and a clock so tests can
    simulate slow servers.
    """

    def __init__(
        self,
        transport: httpx.BaseTransport | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._transport = transport
        self._clock = clock

    def fetch(self, url: str) -> bytes:
        deadline = self._clock() + REQUEST_TIMEOUT_SECONDS

        with httpx.Client(
            transport=self._transport,
            timeout=REQUEST_TIMEOUT_SECONDS,
            follow_redirects=True,
        ) as client:
            request = _build_request(client, url)
            logger.debug("Requesting template store: %s", request.url)

            try:
                response = client.send(request, stream=True)
            except httpx.TimeoutException as e:
                raise TransportError(str(e) or type(e).__name__, is_timeout=True) from e
            except (httpx.TransportError, httpx.TooManyRedirects) as e:
                raise TransportError(str(e) or type(e).__name__, is_timeout=False) from e

            try:
                self._check_deadline(deadline)
                return self._read_body(response, url, deadline)
            finally:
                response.close()

    def _check_deadline(self, deadline: float) -> None:
        if self._clock() > deadline:
            raise TransportError(
                f"request exceeded the {REQUEST_TIMEOUT_SECONDS:g}s deadline", is_timeout=True
            )

    def _read_body(self, response: httpx.Response, url: str, deadline: float) -> bytes:
        """Validate the response and read its body to the end.

        EmptyBodyError names the URL that was asked for, which differs from
        response.url when redirects were followed.
        """
        logger.debug(
            "Template store responded: status=%d url=%s", response.status_code, response.url
        )

        if response.status_code != httpx.codes.OK:
            raise UnexpectedStatusError(wanted=int(httpx.codes.OK), got=response.status_code)

        chunks: list[bytes] = []
        try:
            for chunk in response.iter_bytes():
                chunks.append(chunk)
                self._check_deadline(deadline)
        except httpx.TimeoutException as e:
            raise TransportError(str(e) or type(e).__name__, is_timeout=True) from e
        except (httpx.TransportError, httpx.StreamError) as e:
            raise BodyReadError(str(e) or type(e).__name__) from e

        body = b"".join(chunks)
        if not body:
            raise EmptyBodyError(url)

        logger.debug("Read %d bytes from template store", len(body))
        return body


def _build_request(client: httpx.Client, url: str) -> httpx.Request:
    try:
        request = client.build_request("GET", url)
    except httpx.InvalidURL as e:
        raise RequestConstructionError(str(e)) from e

    if request.url.scheme not in ("http", "https"):
        raise RequestConstructionError(
            f"unsupported protocol scheme {request.url.scheme!r} in URL {url!r}"
        )
    if not request.url.host:
        raise RequestConstructionError(f"no host in request URL {url!r}")
    return request
