"""
Keyword-based service and category detection.
Lower-cases the description and returns the first table entry with a
keyword substring present.
"""
from typing import Optional

from core.keywords import CATEGORY_KEYWORDS, DEFAULT_CATEGORY, SERVICE_KEYWORDS, KeywordTable


def first_match(description: Optional[str], table: KeywordTable) -> Optional[str]:
    """
    Find the first label whose keywords appear in the description.
    
    Args:
        description: Free-text transaction description
        table: Ordered (label, keywords) pairs
    
    Returns:
        Matching label or None
    """
    if not description:
        return None
    
    lower_desc = description.lower()
    for label, keywords in table:
        if any(keyword in lower_desc for keyword in keywords):
            return label
    return None


def detect_service(description: Optional[str], table: KeywordTable = SERVICE_KEYWORDS) -> Optional[str]:
    """Detect a known subscription service, or None."""
    return first_match(description, table)


def detect_category(description: Optional[str], table: KeywordTable = CATEGORY_KEYWORDS) -> str:
    """Detect a spending category, falling back to "Other"."""
    return first_match(description, table) or DEFAULT_CATEGORY
