"""Numeric coercion for user-entered assumption values"""
import logging
import math
import re

logger = logging.getLogger(__name__)

# Leading decimal number, same prefix rule a browser's parseFloat applies
_NUMERIC_PREFIX = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")

def coerce_number(value) -> float:
    """
    Convert any input to a float. Empty, non-numeric, NaN and infinite
    values become 0.0; text keeps its leading numeric part ("12abc" -> 12).
    """
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _NUMERIC_PREFIX.match(str(value or "").strip())
        if not match:
            logger.debug("Non-numeric input %r coerced to 0", value)
            return 0.0
        number = float(match.group(0))
    if math.isnan(number) or math.isinf(number):
        logger.debug("Non-finite input %r coerced to 0", value)
        return 0.0
    return number

def clamp_count(value) -> float:
    """Coerce a count-like field (table counts) and floor it at zero"""
    return max(0.0, coerce_number(value))
