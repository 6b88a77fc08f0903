"""Transcoder configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TranscodeOptions:
    """Knobs for :func:`xml2json_core.transcode`.

    - ``attribute_prefix``: prepended to every attribute key (``"@"`` gives
      the ``@attr`` convention)
    - ``text_key``: key holding the text of an element that must stay an
      object (text plus attributes, or a text-only root)
    - ``coerce_values``: when False every scalar is kept as a string
    - ``max_depth``: nesting limit, root is depth 0; None means unlimited
    """

    attribute_prefix: str = ""
    text_key: str = "#text"
    coerce_values: bool = True
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if not self.text_key:
            raise ValueError("text_key must be a non-empty string")
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")


DEFAULT_OPTIONS = TranscodeOptions()
