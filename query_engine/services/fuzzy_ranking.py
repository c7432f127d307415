"""
Fuzzy Ranking Module
Scores launcher items against a typed fragment using subsequence alignment

The fragment must appear in a field as a subsequence. Matched characters earn
a base score plus bonuses for word-boundary starts and contiguous runs; gaps
between matched characters are penalized.
"""
import logging
from typing import Iterable, List, Optional, Tuple

from rapidfuzz.distance import LCSseq

from ..models.item import Item

logger = logging.getLogger(__name__)


# Alignment scoring
SCORE_MATCH = 16
SCORE_GAP_START = -3
SCORE_GAP_EXTENSION = -1
BONUS_BOUNDARY = 8
BONUS_CAMEL = 7
BONUS_CONSECUTIVE = -(SCORE_GAP_START + SCORE_GAP_EXTENSION)
BONUS_FIRST_CHAR_MULTIPLIER = 2


def char_bonus(prev: str, char: str) -> int:
    """
    Bonus for matching `char` given the character before it

    Args:
        prev: Preceding character (a space at the start of the text)
        char: Matched character

    Returns:
        Boundary or camel-case bonus, 0 otherwise
    """
    if char.isalnum() and not prev.isalnum():
        return BONUS_BOUNDARY
    if prev.islower() and char.isupper():
        return BONUS_CAMEL
    if char.isdigit() and not prev.isdigit():
        return BONUS_CAMEL
    return 0


def align(pattern: str, text: str, source: str) -> Optional[Tuple[int, List[int]]]:
    """
    Best-scoring alignment of `pattern` against `text`

    Every way of placing the pattern's characters in the text is scored, and
    the highest total wins: 16 per matched character, the first character's
    bonus doubled, contiguous runs earn at least the consecutive bonus, and
    each gap costs SCORE_GAP_START plus SCORE_GAP_EXTENSION per extra
    skipped character.

    Args:
        pattern: Fragment to find (already case-folded if needed)
        text: Field to search (already case-folded if needed)
        source: Text whose characters decide word-boundary and camel-case bonuses

    Returns:
        (score, ascending positions), or None if pattern is not a subsequence of text
    """
    if not pattern:
        return 0, []

    if LCSseq.similarity(pattern, text) < len(pattern):
        return None

    bonuses = [
        char_bonus(source[j - 1] if j > 0 else " ", source[j])
        for j in range(len(text))
    ]

    # row[j]: best score with the current pattern character placed at text[j]
    row: List[Optional[int]] = [
        SCORE_MATCH + bonuses[j] * BONUS_FIRST_CHAR_MULTIPLIER if c == pattern[0] else None
        for j, c in enumerate(text)
    ]
    backtrack: List[List[Optional[int]]] = [[None] * len(text)]

    for char in pattern[1:]:
        previous_row = row
        row = [None] * len(text)
        links: List[Optional[int]] = [None] * len(text)

        # Best gapped predecessor so far, with the per-position gap cost folded in
        best_gap: Optional[int] = None
        best_gap_at = -1

        for j, c in enumerate(text):
            k = j - 2
            if k >= 0 and previous_row[k] is not None:
                candidate = previous_row[k] - SCORE_GAP_EXTENSION * k
                if best_gap is None or candidate > best_gap:
                    best_gap, best_gap_at = candidate, k

            if c != char:
                continue

            if best_gap is not None:
                gap_cost = SCORE_GAP_START + SCORE_GAP_EXTENSION * (j - 2)
                row[j] = best_gap + gap_cost + SCORE_MATCH + bonuses[j]
                links[j] = best_gap_at

            if j > 0 and previous_row[j - 1] is not None:
                consecutive = previous_row[j - 1] + SCORE_MATCH + max(bonuses[j], BONUS_CONSECUTIVE)
                if row[j] is None or consecutive >= row[j]:
                    row[j] = consecutive
                    links[j] = j - 1

        backtrack.append(links)

    end = max(
        (j for j in range(len(text)) if row[j] is not None),
        key=lambda j: row[j]
    )
    best = row[end]

    positions = [end]
    for links in reversed(backtrack[1:]):
        end = links[end]
        positions.append(end)
    positions.reverse()

    return best, positions


def matched_positions(pattern: str, text: str) -> Optional[List[int]]:
    """
    Positions in `text` of the best-scoring alignment of `pattern`

    Args:
        pattern: Fragment to find
        text: Field to search

    Returns:
        Ascending positions, or None if pattern is not a subsequence of text
    """
    alignment = align(pattern, text, text)
    if alignment is None:
        return None
    return alignment[1]


def fuzzy_match(text: str, pattern: str) -> Optional[int]:
    """
    Score one field against a fragment

    Matching is case-insensitive unless the fragment contains an upper-case
    letter.

    Args:
        text: Field value (name, description or keyword)
        pattern: Typed fragment

    Returns:
        Best alignment score, or None if the fragment does not match
    """
    if not pattern:
        return 0

    if any(c.isupper() for c in pattern):
        haystack, needle = text, pattern
    else:
        haystack, needle = text.lower(), pattern.lower()

    # Case folding can change length; bonuses then read the folded text
    source = text if len(text) == len(haystack) else haystack

    alignment = align(needle, haystack, source)
    if alignment is None:
        return None

    return alignment[0]


def _halve(score: int) -> int:
    # Truncates toward zero
    return int(score / 2)


def score(item: Item, query: str) -> int:
    """
    Relevance of an item to a query

    The name scores in full; description and keyword scores are halved so a
    name match outranks an equally strong description or keyword match.

    Args:
        item: Candidate item
        query: Typed fragment

    Returns:
        Best field score; 0 means no match
    """
    best = 0

    name_score = fuzzy_match(item.name, query)
    if name_score is not None:
        best = max(best, name_score)

    if item.description:
        description_score = fuzzy_match(item.description, query)
        if description_score is not None:
            best = max(best, _halve(description_score))

    for keyword in item.keywords:
        keyword_score = fuzzy_match(keyword, query)
        if keyword_score is not None:
            best = max(best, _halve(keyword_score))

    return best


def score_items(items: Iterable[Item], query: str) -> List[Tuple[Item, int]]:
    """
    Filter and sort items by score

    Items scoring 0 or less are dropped. Equal scores keep input order.

    Args:
        items: Candidate items
        query: Typed fragment

    Returns:
        (item, score) pairs, best first
    """
    scored = [(item, score(item, query)) for item in items]
    matched = [pair for pair in scored if pair[1] > 0]
    matched.sort(key=lambda pair: pair[1], reverse=True)

    logger.debug(f"Ranked {len(matched)}/{len(scored)} items for {query!r}")

    return matched


def rank_items(items: Iterable[Item], query: str) -> List[Item]:
    """
    Rank candidate items for Apps mode

    Args:
        items: Candidate items in listing order
        query: Residual search term

    Returns:
        All items unchanged for an empty query; otherwise matching items, best first
    """
    query = query.lower()
    if not query:
        return list(items)

    return [item for item, _ in score_items(items, query)]
