"""Fuzzy matching of search results against a queried title."""
import logging
from typing import List, Optional

from fuzzywuzzy import fuzz

from tvdbapi.models import Series

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 50


def find_best_match(query: str, results: List[Series],
                    threshold: int = DEFAULT_THRESHOLD) -> Optional[Series]:
    """Find best matching series from results."""
    best_match = None
    highest_ratio = 0

    for show in results:
        ratio = fuzz.ratio(query.lower(), show.series_name.lower())
        if ratio > highest_ratio:
            highest_ratio = ratio
            best_match = show

    if best_match is None or highest_ratio < threshold:
        logger.debug(f"No match for {query!r} (best ratio {highest_ratio})")
        return None

    logger.debug(f"Matched {query!r} to {best_match.series_name!r} (ratio {highest_ratio})")
    return best_match
