"""xml2json_core: transcode parsed XML element trees into JSON value trees."""

from .coerce import coerce_scalar
from .errors import DepthLimitError, TranscodeError
from .model import (
    JArray,
    JBool,
    JNumber,
    JObject,
    JString,
    Null,
    SourceElement,
    Value,
    _NullType,
)
from .native import to_native
from .options import DEFAULT_OPTIONS, TranscodeOptions
from .source import from_etree, transcode_etree
from .transcoder import NodeKind, classify, transcode

__all__ = [
    "transcode",
    "transcode_etree",
    "from_etree",
    "classify",
    "coerce_scalar",
    "to_native",
    "NodeKind",
    "SourceElement",
    "Value",
    "JObject",
    "JArray",
    "JString",
    "JNumber",
    "JBool",
    "Null",
    "TranscodeOptions",
    "DEFAULT_OPTIONS",
    "TranscodeError",
    "DepthLimitError",
]
