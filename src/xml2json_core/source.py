"""Adapters from ElementTree-style elements to SourceElement."""

from __future__ import annotations

from typing import Any

from .model import JObject, SourceElement
from .options import TranscodeOptions
from .transcoder import transcode


def from_etree(element: Any) -> SourceElement:
    """Build a SourceElement tree from an ElementTree or lxml element.

    Comments and processing instructions (whose ``tag`` is not a string)
    are skipped, tail text is ignored, and namespaced tags are kept in
    Clark notation (``{uri}local``).
    """
    return SourceElement(
        tag=element.tag,
        attributes=list(element.attrib.items()),
        children=[from_etree(c) for c in element if isinstance(c.tag, str)],
        text=element.text,
    )


def transcode_etree(element: Any, options: TranscodeOptions | None = None) -> JObject:
    """Shortcut for ``transcode(from_etree(element), options)``."""
    return transcode(from_etree(element), options)
