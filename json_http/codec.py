"""JSON encoding and typed decoding shared by the HTTP helpers."""

from __future__ import annotations

import dataclasses
import datetime as _dt
import json
import types
from collections import abc
from typing import Any, Optional, Type, Union, get_args, get_origin, get_type_hints

from .dates import get_utc_web_date, parse_web_date

_ZERO_CONSTRUCTIBLE = (int, float, bool, str, list, dict, tuple)
_UNION_TYPES = (Union, types.UnionType)


class ContentDecodeError(ValueError):
    """Raised when a response body cannot be decoded into the requested type."""


class JsonEncoder(json.JSONEncoder):
    """JSON encoder writing datetimes as UTC web dates and dataclasses as objects."""

    def default(self, o: Any) -> Any:
        if isinstance(o, _dt.datetime):
            return get_utc_web_date(o)
        if isinstance(o, _dt.date):
            return o.isoformat()
        if dataclasses.is_dataclass(o) and not isinstance(o, type):
            return dataclasses.asdict(o)
        return super().default(o)


def zero_value(model: Optional[Type[Any]] = None) -> Any:
    """Return the empty instance of ``model``; ``None`` for objects and dataclasses."""

    if model in _ZERO_CONSTRUCTIBLE:
        return model()
    return None


def dumps(data: Any) -> str:
    """Serialise ``data`` to ASCII JSON text."""

    return json.dumps(data, cls=JsonEncoder, ensure_ascii=True)


def loads(text: str, model: Optional[Type[Any]] = None) -> Any:
    """Parse ``text`` and convert the payload into ``model``."""

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ContentDecodeError(f"Failed to parse JSON content: {exc.msg}") from exc
    return decode(payload, model)


def decode(payload: Any, model: Optional[Any] = None) -> Any:
    """Convert a decoded JSON payload into an instance of ``model``.

    ``None``, ``object`` and ``Any`` leave the payload untouched. Types exposing a
    ``from_payload`` classmethod build themselves and dataclasses are filled from
    the matching keys. Builtin types and ``datetime`` must match the JSON value;
    ``List[...]``, ``Dict[str, ...]`` and ``Optional[...]`` hints are followed.
    """

    if model is None or model is object or model is Any:
        return payload
    if payload is None:
        return zero_value(model)
    try:
        return _decode_value(payload, model)
    except ContentDecodeError:
        raise
    except (KeyError, TypeError, ValueError) as exc:
        name = getattr(model, "__name__", repr(model))
        raise ContentDecodeError(f"Payload does not match {name}: {exc}") from exc


def _decode_value(value: Any, hint: Any) -> Any:
    if hint is None or hint is object or hint is Any:
        return value

    origin = get_origin(hint)
    if origin in _UNION_TYPES:
        args = get_args(hint)
        if value is None:
            if type(None) in args:
                return None
            raise TypeError("unexpected null")
        errors = []
        for arg in args:
            if arg is type(None):
                continue
            try:
                return _decode_value(value, arg)
            except (KeyError, TypeError, ValueError) as exc:
                errors.append(str(exc))
        raise TypeError("; ".join(errors) or "no matching type")
    if origin is not None:
        return _decode_generic(value, origin, get_args(hint))

    if value is None:
        return None
    if isinstance(hint, type) and issubclass(hint, _dt.datetime):
        return parse_web_date(_expect(value, str))
    if isinstance(hint, type) and issubclass(hint, _dt.date):
        return _dt.date.fromisoformat(_expect(value, str))
    from_payload = getattr(hint, "from_payload", None)
    if from_payload is not None:
        return from_payload(value)
    if dataclasses.is_dataclass(hint):
        return _decode_dataclass(value, hint)
    if hint in _ZERO_CONSTRUCTIBLE:
        return _decode_builtin(value, hint)
    return hint(value)


def _decode_generic(value: Any, origin: Any, args: tuple) -> Any:
    if origin is tuple and args and args[-1] is not Ellipsis:
        items = _expect(value, list)
        if len(args) != len(items):
            raise TypeError(f"expected {len(args)} items, got {len(items)}")
        return tuple(_decode_value(item, arg) for item, arg in zip(items, args))
    if origin in (list, tuple, set, frozenset, abc.Sequence, abc.MutableSequence):
        item_hint = args[0] if args else Any
        decoded = [_decode_value(item, item_hint) for item in _expect(value, list)]
        if origin in (tuple, set, frozenset):
            return origin(decoded)
        return decoded
    if origin in (dict, abc.Mapping, abc.MutableMapping):
        mapping = _expect(value, dict)
        value_hint = args[1] if len(args) == 2 else Any
        return {key: _decode_value(item, value_hint) for key, item in mapping.items()}
    return _decode_value(value, origin)


def _decode_builtin(value: Any, model: Type[Any]) -> Any:
    if model is float and isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    if model is tuple and isinstance(value, list):
        return tuple(value)
    return _expect(value, model)


def _expect(value: Any, model: Type[Any]) -> Any:
    # bool is an int subclass, JSON keeps them apart
    if isinstance(value, bool) and model is not bool:
        raise TypeError(f"expected {model.__name__}, got bool")
    if not isinstance(value, model):
        raise TypeError(f"expected {model.__name__}, got {type(value).__name__}")
    return value


def _decode_dataclass(payload: Any, model: Type[Any]) -> Any:
    _expect(payload, dict)
    try:
        hints = get_type_hints(model)
    except NameError:
        hints = {}
    kwargs = {}
    for item in dataclasses.fields(model):
        if not item.init or item.name not in payload:
            continue
        kwargs[item.name] = _decode_value(payload[item.name], hints.get(item.name))
    return model(**kwargs)


__all__ = ["ContentDecodeError", "JsonEncoder", "decode", "dumps", "loads", "zero_value"]
