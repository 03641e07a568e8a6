"""
Math Text Segmenter - Splits free text into literal and math segments.

Three phases, in order:
    1. Block split on \\[...\\] and $$...$$; blocks keep only their content
    2. Inline split on "$" for every remaining part that contains one
    3. Word heuristic for parts without any "$" (see classifier)

The segmenter never raises. Nested or unbalanced delimiters are not
handled specially; they produce whatever the splits above yield.
"""

from typing import Iterable, Optional

from ..core.models import SegmentKind, TextSegment
from .classifier import is_math_continuation, is_math_token
from .patterns import BLOCK_DELIMITERS, BLOCK_PATTERN, INLINE_DELIMITER


def segment_text(text: Optional[str]) -> list[TextSegment]:
    """Segment text into literal, inline-math and block-math spans.

    Args:
        text: Source text, may be None

    Returns:
        Ordered segments; empty for None or ""
    """
    if not text:
        return []

    segments: list[TextSegment] = []
    # re.split with a capturing group puts the blocks at odd indexes
    for index, part in enumerate(BLOCK_PATTERN.split(text)):
        if index % 2 == 1:
            segments.append(TextSegment.block_math(_strip_block(part)))
        elif part:
            segments.extend(segment_inline(part))
    return segments


def _strip_block(block: str) -> str:
    for opening, closing in BLOCK_DELIMITERS:
        if block.startswith(opening) and block.endswith(closing):
            return block[len(opening) : len(block) - len(closing)]
    return block


def segment_inline(text: str) -> list[TextSegment]:
    """Segment a part that holds no block math."""
    if not text:
        return []
    if INLINE_DELIMITER not in text:
        return segment_heuristic(text)

    segments = []
    for index, piece in enumerate(text.split(INLINE_DELIMITER)):
        if index % 2 == 1:
            segments.append(TextSegment.inline_math(piece))
        elif piece:
            segments.append(TextSegment.literal(piece))
    return segments


def segment_heuristic(text: str) -> list[TextSegment]:
    """Find unmarked math in plain text, word by word.

    Consecutive math-like words are grouped into one inline-math segment.
    Other words become literal segments followed by a single space.
    """
    segments = []
    buffer: list[str] = []

    for word in text.split():
        if is_math_token(word) or (buffer and is_math_continuation(word)):
            buffer.append(word)
            continue
        if buffer:
            segments.append(TextSegment.inline_math(" ".join(buffer)))
            buffer = []
        segments.append(TextSegment.literal(f"{word} "))

    if buffer:
        segments.append(TextSegment.inline_math(" ".join(buffer)))
    return segments


def reconstruct(segments: Iterable[TextSegment]) -> str:
    """Render segments back to delimited source text."""
    out = []
    for segment in segments:
        if segment.kind is SegmentKind.BLOCK_MATH:
            out.append(f"$${segment.text}$$")
        elif segment.kind is SegmentKind.INLINE_MATH:
            out.append(f"${segment.text}$")
        else:
            out.append(segment.text)
    return "".join(out)


def strip_inline_delimiters(value: str) -> str:
    """Remove every "$" from a value, for single-formula property values."""
    return value.replace(INLINE_DELIMITER, "")
