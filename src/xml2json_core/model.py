"""Data model: the parsed XML input and the JSON value union."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


# ---------------------------------------------------------------------------
# SourceElement: already-parsed XML node
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class SourceElement:
    tag: str
    attributes: list[tuple[str, str]] = field(default_factory=list)
    children: list[SourceElement] = field(default_factory=list)
    text: str | None = None


# ---------------------------------------------------------------------------
# Null: singleton for the JSON null
# ---------------------------------------------------------------------------

class _NullType:
    """JSON ``null``."""

    _instance: _NullType | None = None

    def __new__(cls) -> _NullType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Null"

    def __bool__(self) -> bool:
        return False


Null = _NullType()


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class JString:
    value: str


@dataclass(slots=True)
class JNumber:
    value: int | float


@dataclass(slots=True)
class JBool:
    value: bool


@dataclass(slots=True)
class JArray:
    items: list[Value] = field(default_factory=list)


@dataclass(slots=True)
class JObject:
    entries: dict[str, Value] = field(default_factory=dict)


Value = Union[JObject, JArray, JString, JNumber, JBool, _NullType]
