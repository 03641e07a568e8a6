"""
Math Text Patterns - Delimiters and token tables for math detection

Provides:
- BLOCK_PATTERN: \\[ ... \\] and $$ ... $$ display math blocks
- INLINE_DELIMITER: single-dollar inline math delimiter
- MATH_CHARS: characters that only appear in LaTeX source
- MATH_OPERATORS: relational/arithmetic operators
- FUNCTION_KEYWORDS: function names written without a backslash
"""

import re

# Capturing group keeps the matched blocks in re.split() output
BLOCK_PATTERN = re.compile(r"(\\\[[\s\S]*?\\\]|\$\$[\s\S]*?\$\$)")

BLOCK_DELIMITERS = (("\\[", "\\]"), ("$$", "$$"))

INLINE_DELIMITER = "$"

MATH_CHARS = frozenset("\\[]{}_^")

MATH_OPERATORS = frozenset("=<>+")

FUNCTION_KEYWORDS = ("gcd", "sum", "lim", "min", "max", "log", "sin", "cos", "tan")

# Bare keyword, or keyword applied to arguments: gcd, gcd(a,b)
FUNCTION_PATTERN = re.compile(
    r"^(?:" + "|".join(FUNCTION_KEYWORDS) + r")(?:\(.*\))?$"
)

NUMBER_PATTERN = re.compile(r"^[-+]?\d+(?:[.,]\d+)*$")

TRAILING_PUNCTUATION = ".,;:"
