"""JSON request and response helpers for ``httpx`` clients."""

from .codec import ContentDecodeError, zero_value
from .config import ClientConfig, create_client
from .dates import ensure_utc, get_utc_web_date
from .http import (
    JsonHttpClient,
    bearer_headers,
    create_json_body,
    deserialize_json_from_stream,
    get_from_component,
    get_json,
    post_json,
    response_to_json,
    serialize_json_to_stream,
    set_bearer_token,
)
from .logger import ErrorLogger, MemoryLogger, NullLogger, StdlibErrorLogger
from .models import RequestBody

__all__ = [
    "ClientConfig",
    "ContentDecodeError",
    "ErrorLogger",
    "JsonHttpClient",
    "MemoryLogger",
    "NullLogger",
    "RequestBody",
    "StdlibErrorLogger",
    "bearer_headers",
    "create_client",
    "create_json_body",
    "deserialize_json_from_stream",
    "ensure_utc",
    "get_from_component",
    "get_json",
    "get_utc_web_date",
    "post_json",
    "response_to_json",
    "serialize_json_to_stream",
    "set_bearer_token",
    "zero_value",
]
