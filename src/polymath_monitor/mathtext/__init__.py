"""Segmentation of free text with embedded math notation."""

from .classifier import clean_token, is_math_continuation, is_math_token
from .segmenter import (
    reconstruct,
    segment_heuristic,
    segment_inline,
    segment_text,
    strip_inline_delimiters,
)

__all__ = [
    "segment_text",
    "segment_inline",
    "segment_heuristic",
    "reconstruct",
    "strip_inline_delimiters",
    "is_math_token",
    "is_math_continuation",
    "clean_token",
]
