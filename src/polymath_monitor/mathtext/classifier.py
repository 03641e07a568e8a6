"""
Token classification for the plain-text math heuristic.

Both predicates are pure functions over a single token, so the rules can
be tested independently of segmentation.
"""

from .patterns import (
    FUNCTION_PATTERN,
    MATH_CHARS,
    MATH_OPERATORS,
    NUMBER_PATTERN,
    TRAILING_PUNCTUATION,
)


def clean_token(token: str) -> str:
    """Strip trailing sentence punctuation from a token."""
    return token.rstrip(TRAILING_PUNCTUATION)


def is_math_token(token: str) -> bool:
    """Does this word look like a math term?

    A token is math-like if, after trailing punctuation is stripped, it
    contains a LaTeX-only character, a relational/arithmetic operator, or
    is one of the function keywords (bare or applied, e.g. "gcd(a,b)").
    """
    word = clean_token(token)
    if not word:
        return False
    if any(ch in MATH_CHARS for ch in word):
        return True
    if any(ch in MATH_OPERATORS for ch in word):
        return True
    return FUNCTION_PATTERN.match(word) is not None


def is_math_continuation(token: str) -> bool:
    """Can this word extend a math run that is already open?

    Plain numbers ("1", "3.5") continue an expression like "x = 1" but
    never start one, so prose such as "3 apples" stays literal.
    """
    return NUMBER_PATTERN.match(clean_token(token)) is not None
