"""Tree Transcoder: SourceElement tree → JSON Value tree."""

from __future__ import annotations

import logging
from enum import Enum, auto

from .coerce import XML_WHITESPACE, coerce_scalar
from .errors import DepthLimitError
from .model import JArray, JObject, JString, SourceElement, Value
from .options import DEFAULT_OPTIONS, TranscodeOptions

logger = logging.getLogger(__name__)


class NodeKind(Enum):
    EMPTY = auto()
    TEXT = auto()
    ATTRIBUTES = auto()
    TEXT_AND_ATTRIBUTES = auto()
    PARENT = auto()
    MIXED = auto()


def _has_text(element: SourceElement) -> bool:
    return element.text is not None and element.text.strip(XML_WHITESPACE) != ""


def classify(element: SourceElement) -> NodeKind:
    """Classify an element by which of children / text / attributes it has.

    Whitespace-only text counts as no text.
    """
    has_text = _has_text(element)
    if element.children:
        return NodeKind.MIXED if has_text else NodeKind.PARENT
    if has_text:
        return NodeKind.TEXT_AND_ATTRIBUTES if element.attributes else NodeKind.TEXT
    return NodeKind.ATTRIBUTES if element.attributes else NodeKind.EMPTY


def transcode(
    element: SourceElement,
    options: TranscodeOptions | None = None,
) -> JObject:
    """Transcode a parsed XML tree into a JSON object keyed by the root tag.

    The root's content is always an object, even for a text-only root
    (its text then lives under ``options.text_key``).

    Example::

        <population>
          <entry><name>Alex</name><height>173.5</height></entry>
          <entry><name>Mel</name><height>180.4</height></entry>
        </population>
        → {"population": {"entry": [{"name": "Alex", "height": 173.5},
                                    {"name": "Mel", "height": 180.4}]}}
    """
    opts = options or DEFAULT_OPTIONS
    return JObject({element.tag: _content(element, opts, 0)})


def _scalar(text: str, opts: TranscodeOptions) -> Value:
    if opts.coerce_values:
        return coerce_scalar(text)
    return JString(text)


def _content(element: SourceElement, opts: TranscodeOptions, depth: int) -> JObject:
    """Build the element's own content object (attributes, text, children)."""
    kind = classify(element)
    entries: dict[str, Value] = {}

    for key, raw in element.attributes:
        entries[opts.attribute_prefix + key] = _scalar(raw, opts)

    if kind in (NodeKind.TEXT, NodeKind.TEXT_AND_ATTRIBUTES):
        entries[opts.text_key] = _scalar(element.text, opts)
    elif kind is NodeKind.MIXED:
        logger.debug("dropping text of mixed-content element <%s>", element.tag)

    # Group by tag in order of first appearance
    groups: dict[str, list[Value]] = {}
    for child in element.children:
        groups.setdefault(child.tag, []).append(_value(child, opts, depth + 1))

    # Child groups go in after attributes, so a clashing tag overwrites
    for tag, values in groups.items():
        entries[tag] = values[0] if len(values) == 1 else JArray(values)

    return JObject(entries)


def _value(element: SourceElement, opts: TranscodeOptions, depth: int) -> Value:
    """Value of a non-root element as inserted into its parent."""
    if opts.max_depth is not None and depth > opts.max_depth:
        raise DepthLimitError(element.tag, depth, opts.max_depth)
    if classify(element) is NodeKind.TEXT:
        return _scalar(element.text, opts)
    return _content(element, opts, depth)
