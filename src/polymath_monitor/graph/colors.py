"""
Color map for verification levels.
"""

from typing import Any, Optional

from ..core.models import VerificationLevel

VERIFICATION_COLORS = {
    VerificationLevel.REJECTED: "#e74c3c",  # Red
    VerificationLevel.SPECULATIVE: "#f1c40f",  # Yellow
    VerificationLevel.NUMERICAL: "#3498db",  # Blue
    VerificationLevel.FORMAL_SKETCH: "#9b59b6",  # Purple
    VerificationLevel.VERIFIED: "#2ecc71",  # Green
}

UNKNOWN_COLOR = "#95a5a6"  # Grey


def coerce_verification(value: Any) -> Optional[VerificationLevel]:
    """Read a verification scalar as a level, or None if it is not one.

    Accepts ints, integral floats and digit strings in the 0-4 range.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    elif isinstance(value, str):
        value = value.strip()
        if not value.isdecimal():
            return None
        try:
            value = int(value)
        except ValueError:
            # Beyond the interpreter's integer string conversion limit
            return None
    elif not isinstance(value, int):
        return None

    try:
        return VerificationLevel(value)
    except ValueError:
        return None


def get_verification_color(level: Any) -> str:
    """Get the display color for a verification value; never fails."""
    coerced = coerce_verification(level)
    if coerced is None:
        return UNKNOWN_COLOR
    return VERIFICATION_COLORS[coerced]
