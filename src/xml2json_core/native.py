"""Bridge from the Value union to plain Python objects."""

from __future__ import annotations

from typing import Any

from .model import JArray, JBool, JNumber, JObject, JString, Value, _NullType


def to_native(value: Value) -> Any:
    """Convert a Value into dict / list / str / int / float / bool / None.

    The result can be passed straight to ``json.dumps``.
    """
    if isinstance(value, JObject):
        return {k: to_native(v) for k, v in value.entries.items()}
    if isinstance(value, JArray):
        return [to_native(v) for v in value.items]
    if isinstance(value, (JString, JNumber, JBool)):
        return value.value
    if isinstance(value, _NullType):
        return None
    raise TypeError(f"not a JSON value: {value!r}")
