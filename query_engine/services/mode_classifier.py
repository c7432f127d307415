"""
Mode Classifier Module
Routes raw launcher input to a mode based on its leading word, then on shape heuristics
"""
import logging
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from ..models.responses import Mode, RoutingDecision

logger = logging.getLogger(__name__)


# Leading word -> (mode, canonical web-search engine or None)
PREFIX_RULES = [
    (Mode.WINDOWS, ["w", "window", "windows"], None),
    (Mode.PROCESSES, ["ps", "proc", "process"], None),
    (Mode.WIFI, ["wifi", "network"], None),
    (Mode.BLUETOOTH, ["bt", "bluetooth"], None),
    (Mode.AUDIO, ["vol", "volume", "audio"], None),
    (Mode.CLIPBOARD, ["cb", "clip", "clipboard"], None),
    (Mode.NOTES, ["note", "notes"], None),
    (Mode.SNIPPETS, ["snip", "snippet", "snippets"], None),
    (Mode.TODOS, ["todo", "todos", "task", "tasks"], None),
    (Mode.SSH, ["ssh"], None),
    (Mode.DOCKER, ["docker", "container", "containers"], None),
    (Mode.TIMER, ["timer", "stopwatch"], None),
    (Mode.EMOJI, ["e", "emoji"], None),
    (Mode.FILES, ["f", "find", "file", "files"], None),
    (Mode.RECENT_FILES, ["r", "recent"], None),
    (Mode.BITWARDEN, ["bw", "bitwarden", "pass", "password"], None),
    (Mode.AI, ["ask", "ai", "?"], None),
    (Mode.WEB_SEARCH, ["g", "google"], "google"),
    (Mode.WEB_SEARCH, ["gh", "github"], "github"),
    (Mode.WEB_SEARCH, ["yt", "youtube"], "youtube"),
]


def _build_prefix_table() -> Mapping[str, Tuple[Mode, Optional[str]]]:
    table = {}
    for mode, tokens, engine in PREFIX_RULES:
        for token in tokens:
            # First rule wins
            table.setdefault(token, (mode, engine))
    return MappingProxyType(table)


PREFIX_TABLE = _build_prefix_table()

MATH_OPERATORS = set("+-*/^%()")
CONVERSION_MARKERS = (" to ", " in ")


def split_prefix(query: str) -> Tuple[str, str]:
    """
    Split trimmed input on its first whitespace run

    Args:
        query: Trimmed query

    Returns:
        (lower-cased leading word, remainder)
    """
    parts = query.split(None, 1)

    if not parts:
        return "", ""

    prefix = parts[0].lower()
    remainder = parts[1] if len(parts) > 1 else ""

    return prefix, remainder


def is_math_expression(query: str) -> bool:
    """True if the query has an operator or parenthesis and an ASCII digit"""
    has_operator = any(c in MATH_OPERATORS for c in query)
    has_digit = any("0" <= c <= "9" for c in query)
    return has_operator and has_digit


def is_conversion(query: str) -> bool:
    """True if the query contains a " to " or " in " marker"""
    query_lower = query.lower()
    return any(marker in query_lower for marker in CONVERSION_MARKERS)


def classify(query: str) -> RoutingDecision:
    """
    Route a query to a mode

    A recognized leading word always wins. Otherwise the math heuristic is
    checked before the conversion heuristic, so "5 km to 10 m" routes to the
    calculator. Anything else is an application search.

    Args:
        query: Raw search-box contents

    Returns:
        RoutingDecision with the mode and its residual query
    """
    query = query.strip()
    prefix, remainder = split_prefix(query)

    rule = PREFIX_TABLE.get(prefix)
    if rule is not None:
        mode, engine = rule
        residual = f"{engine} {remainder}".rstrip() if engine else remainder
        decision = RoutingDecision(mode=mode, residual=residual)

    elif is_math_expression(query):
        decision = RoutingDecision(mode=Mode.CALCULATOR, residual=query)

    elif is_conversion(query):
        decision = RoutingDecision(mode=Mode.CONVERTER, residual=query)

    else:
        decision = RoutingDecision(mode=Mode.APPS, residual=query)

    logger.debug(f"Classified {query!r} as {decision.mode.value} ({decision.residual!r})")

    return decision
