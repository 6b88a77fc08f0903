"""Exceptions raised by xml2json_core."""

from __future__ import annotations


class TranscodeError(Exception):
    """Base class for all xml2json_core errors."""


class DepthLimitError(TranscodeError):
    """An element is nested deeper than ``TranscodeOptions.max_depth``."""

    def __init__(self, tag: str, depth: int, limit: int) -> None:
        super().__init__(
            f"element <{tag}> at depth {depth} exceeds max_depth={limit}"
        )
        self.tag = tag
        self.depth = depth
        self.limit = limit
