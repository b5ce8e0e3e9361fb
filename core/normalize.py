"""
Amount and text normalization.
Tolerant of currency symbols, thousands separators and stray text.
"""
import math
import re
from typing import Any, Optional

from core.config import get_settings
from core.logger import setup_logger

logger = setup_logger(__name__)

_NON_NUMERIC_RE = re.compile(r"[^0-9.\-]")
_LEADING_DECIMAL_RE = re.compile(r"^-?(?:\d+(?:\.\d*)?|\.\d+)")
_WHITESPACE_RE = re.compile(r"\s+")


def parse_amount(value: Any) -> float:
    """
    Parse a raw amount token into a signed float.
    
    Everything except digits, '.' and '-' is dropped, then the longest
    leading decimal is read, so "$1,234.56" gives 1234.56 and "-$15.49"
    gives -15.49. Anything unparseable gives 0.0.
    
    Args:
        value: Raw amount value (string or number)
    
    Returns:
        Signed float, or 0.0 when nothing numeric is found
    """
    if value is None:
        return 0.0
    
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        result = float(value)
        return 0.0 if math.isnan(result) else result
    
    cleaned = _NON_NUMERIC_RE.sub("", str(value))
    match = _LEADING_DECIMAL_RE.match(cleaned)
    if not match:
        if cleaned:
            logger.debug(f"Failed to parse amount: '{value}'")
        return 0.0
    
    result = float(match.group(0))
    if math.isnan(result) or math.isinf(result):
        return 0.0
    return result


def collapse_whitespace(text: Optional[str]) -> str:
    """
    Collapse whitespace runs to a single space and trim.
    
    Args:
        text: Input string
    
    Returns:
        Cleaned string ("" for None)
    """
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text).strip()


def is_plausible_amount(amount: float, limit: Optional[float] = None) -> bool:
    """
    Check that an amount looks like a transaction.
    
    Zero amounts are malformed tokens; magnitudes above the limit are
    running balances picked up from the statement.
    
    Args:
        amount: Parsed amount
        limit: Maximum magnitude (defaults to configured value)
    
    Returns:
        True if the amount should be kept
    """
    limit = limit or get_settings().max_transaction_amount
    return amount != 0 and abs(amount) <= limit
