"""JSON request and response helpers layered over ``httpx``.

Every helper performs a single round trip. HTTP failures never raise: the
response text is handed to an :class:`~json_http.logger.ErrorLogger` and the
zero value of the requested type is returned. Bodies that are not valid JSON
raise :class:`~json_http.codec.ContentDecodeError`.
"""

from __future__ import annotations

import io
import logging
from typing import Any, BinaryIO, Dict, Optional, Type

import httpx

from .codec import ContentDecodeError, dumps, loads, zero_value
from .logger import NULL_LOGGER, ErrorLogger
from .models import JSON_CONTENT_TYPE, RequestBody

LOGGER = logging.getLogger(__name__)


def set_bearer_token(client: httpx.AsyncClient, token: str) -> None:
    """Add ``Authorization: Bearer <token>`` to the client's default headers.

    The header sticks to ``client`` for every later request. Prefer passing
    ``token=`` to the request helpers, which scope it to one call.
    """

    client.headers["Authorization"] = f"Bearer {token}"


def bearer_headers(token: Optional[str]) -> Dict[str, str]:
    """Return the authorization header for ``token``, or nothing when it is blank."""

    if not token or not token.strip():
        return {}
    return {"Authorization": f"Bearer {token}"}


async def _perform_request(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    logger: ErrorLogger,
    headers: Optional[Dict[str, str]] = None,
    content: Optional[bytes] = None,
) -> Optional[httpx.Response]:
    request = client.build_request(method, url, headers=headers, content=content)
    try:
        return await client.send(request, stream=True)
    except httpx.TransportError as exc:
        LOGGER.warning("%s %s failed: %s", method, url, exc)
        logger.log_error(str(exc))
        return None


async def get_json(
    client: httpx.AsyncClient,
    url: str,
    token: Optional[str] = None,
    logger: Optional[ErrorLogger] = None,
    model: Optional[Type[Any]] = None,
) -> Any:
    """GET ``url`` and decode the JSON body into ``model``.

    A non-blank ``token`` is sent as a bearer header on this request only.
    """

    logger = logger or NULL_LOGGER
    response = await _perform_request(client, "GET", url, logger, headers=bearer_headers(token))
    return await response_to_json(response, logger, model)


async def get_from_component(
    client: httpx.AsyncClient,
    url: str,
    token: Optional[str],
    model: Optional[Type[Any]] = None,
) -> Any:
    """GET a component resource; error text is discarded."""

    return await get_json(client, url, token=token, logger=NULL_LOGGER, model=model)


async def post_json(
    client: httpx.AsyncClient,
    url: str,
    data: Any,
    token: Optional[str] = None,
    logger: Optional[ErrorLogger] = None,
    model: Optional[Type[Any]] = None,
) -> Any:
    """POST ``data`` as a JSON body and decode the reply like :func:`get_json`."""

    logger = logger or NULL_LOGGER
    body = create_json_body(io.BytesIO(), data)
    headers = {**body.headers, **bearer_headers(token)}
    response = await _perform_request(
        client, "POST", url, logger, headers=headers, content=body.content()
    )
    return await response_to_json(response, logger, model)


async def response_to_json(
    response: Optional[httpx.Response],
    logger: Optional[ErrorLogger] = None,
    model: Optional[Type[Any]] = None,
) -> Any:
    """Read ``response`` once and decode it, or log its text on failure status."""

    logger = logger or NULL_LOGGER
    if response is None:
        return zero_value(model)
    try:
        body = await response.aread()
    except httpx.TransportError as exc:
        LOGGER.warning("Reading response body failed: %s", exc)
        logger.log_error(str(exc))
        return zero_value(model)
    finally:
        await response.aclose()

    LOGGER.debug("Response status %s (%d bytes)", response.status_code, len(body))
    if response.is_success:
        return deserialize_json_from_stream(io.BytesIO(body), model)

    LOGGER.warning("Request failed with HTTP %s", response.status_code)
    logger.log_error(body.decode("utf-8", errors="replace"))
    return zero_value(model)


def deserialize_json_from_stream(stream: Optional[BinaryIO], model: Optional[Type[Any]] = None) -> Any:
    """Decode the whole of ``stream`` as JSON and close it.

    Missing, closed or unreadable streams and blank content give the zero value.
    """

    if stream is None or getattr(stream, "closed", False) or not stream.readable():
        return zero_value(model)
    with stream:
        raw = stream.read()
    try:
        text = raw.decode("utf-8-sig") if isinstance(raw, bytes) else raw
    except UnicodeDecodeError as exc:
        raise ContentDecodeError("Response body is not valid UTF-8") from exc
    if not text.strip():
        return zero_value(model)
    return loads(text, model)


def serialize_json_to_stream(stream: Optional[BinaryIO], data: Any) -> None:
    """Write ``data`` as ASCII JSON into ``stream`` and rewind it when possible.

    The stream is left open. Nothing happens when it cannot be written to
    or is a text stream.
    """

    if stream is None or isinstance(stream, io.TextIOBase):
        return
    if getattr(stream, "closed", False) or not stream.writable():
        return
    stream.write(dumps(data).encode("ascii"))
    stream.flush()
    if stream.seekable():
        stream.seek(0)


def create_json_body(
    stream: Optional[BinaryIO],
    data: Any,
    model: Optional[Type[Any]] = None,
) -> RequestBody:
    """Serialise ``data`` into ``stream`` and wrap it as a JSON request body.

    When ``data`` is ``None`` the zero value of ``model`` is written instead
    and no ``Content-Type`` header is attached.
    """

    if stream is None:
        stream = io.BytesIO()
    if data is None:
        serialize_json_to_stream(stream, zero_value(model))
        return RequestBody(stream=stream)

    serialize_json_to_stream(stream, data)
    return RequestBody(stream=stream, headers={"Content-Type": JSON_CONTENT_TYPE})


class JsonHttpClient:
    """Bundle an ``httpx.AsyncClient`` with a token and an error logger.

    Usable as an async context manager; the underlying client is closed on exit.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        token: Optional[str] = None,
        logger: Optional[ErrorLogger] = None,
    ) -> None:
        self.client = client
        self.token = token
        self.logger = logger or NULL_LOGGER

    async def __aenter__(self) -> "JsonHttpClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.client.aclose()

    async def get_json(self, url: str, model: Optional[Type[Any]] = None) -> Any:
        """GET ``url`` with this client's token and logger."""

        return await get_json(self.client, url, token=self.token, logger=self.logger, model=model)

    async def post_json(self, url: str, data: Any, model: Optional[Type[Any]] = None) -> Any:
        """POST ``data`` as JSON with this client's token and logger."""

        return await post_json(
            self.client, url, data, token=self.token, logger=self.logger, model=model
        )


__all__ = [
    "JsonHttpClient",
    "bearer_headers",
    "create_json_body",
    "deserialize_json_from_stream",
    "get_from_component",
    "get_json",
    "post_json",
    "response_to_json",
    "serialize_json_to_stream",
    "set_bearer_token",
]
