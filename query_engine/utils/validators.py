"""
Input validators for the query engine
"""
from typing import Optional
import logging

from ..config import settings

logger = logging.getLogger(__name__)


def within_length_bound(query: str, max_length: Optional[int] = None) -> bool:
    """
    Check a query against the configured maximum input length

    Args:
        query: Raw query text
        max_length: Override for settings.max_query_length

    Returns:
        True if the query may be parsed
    """
    limit = settings.max_query_length if max_length is None else max_length

    if len(query) > limit:
        logger.debug(f"Query rejected: length {len(query)} exceeds {limit}")
        return False

    return True
