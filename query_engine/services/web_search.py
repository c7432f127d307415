"""
Web Search Module
Resolves a web-search residual ("<engine> <terms>") into an engine and URL
"""
import logging
from typing import List, Tuple
from urllib.parse import quote_plus

from ..config import settings
from ..models.responses import ItemType, ResultItem

logger = logging.getLogger(__name__)


# Alias -> canonical engine
ENGINE_ALIASES = {
    "google": "google",
    "github": "github",
    "youtube": "youtube",
    "ddg": "duckduckgo",
    "duckduckgo": "duckduckgo",
    "wiki": "wikipedia",
    "wikipedia": "wikipedia",
    "so": "stackoverflow",
    "stackoverflow": "stackoverflow",
    "reddit": "reddit",
    "amazon": "amazon",
    "npm": "npm",
    "crates": "crates",
    "cratesio": "crates",
    "pypi": "pypi",
}

# Canonical engine -> (display name, URL template)
SEARCH_ENGINES = {
    "google": ("Google", "https://www.google.com/search?q={}"),
    "github": ("GitHub", "https://github.com/search?q={}"),
    "youtube": ("YouTube", "https://www.youtube.com/results?search_query={}"),
    "duckduckgo": ("DuckDuckGo", "https://duckduckgo.com/?q={}"),
    "wikipedia": ("Wikipedia", "https://en.wikipedia.org/wiki/Special:Search?search={}"),
    "stackoverflow": ("Stack Overflow", "https://stackoverflow.com/search?q={}"),
    "reddit": ("Reddit", "https://www.reddit.com/search/?q={}"),
    "amazon": ("Amazon", "https://www.amazon.com/s?k={}"),
    "npm": ("npm", "https://www.npmjs.com/search?q={}"),
    "crates": ("crates.io", "https://crates.io/search?q={}"),
    "pypi": ("PyPI", "https://pypi.org/search/?q={}"),
}

# Listed when the residual is empty: (engine, prefix hint)
FEATURED_ENGINES = [
    ("google", "g"),
    ("github", "gh"),
    ("youtube", "yt"),
    ("duckduckgo", "ddg"),
    ("wikipedia", "wiki"),
]


def parse_search_query(residual: str) -> Tuple[str, str]:
    """
    Split a web-search residual into engine and search terms

    Args:
        residual: e.g. "github rapidfuzz" or "best pizza"

    Returns:
        (canonical engine, terms); unknown first words fall back to the default engine
    """
    parts = residual.split(" ", 1)
    alias = parts[0].lower()

    engine = ENGINE_ALIASES.get(alias)
    if engine is None:
        return default_engine(), residual

    terms = parts[1] if len(parts) > 1 else ""
    return engine, terms


def default_engine() -> str:
    engine = ENGINE_ALIASES.get(settings.default_search_engine.lower())
    return engine or "google"


def build_search_url(engine: str, terms: str) -> Tuple[str, str]:
    """
    Build the search URL for an engine

    Args:
        engine: Canonical engine name
        terms: Search terms, form-encoded into the URL

    Returns:
        (engine display name, URL)
    """
    name, template = SEARCH_ENGINES.get(engine, SEARCH_ENGINES["google"])
    return name, template.format(quote_plus(terms))


def web_search_items(residual: str) -> List[ResultItem]:
    """
    Build result rows for a web-search residual

    Args:
        residual: Residual handed over by the mode classifier

    Returns:
        Featured engines for an empty residual, one search row when terms are
        present, nothing for an engine without terms
    """
    if not residual:
        items = []
        for engine, prefix in FEATURED_ENGINES:
            name, _ = SEARCH_ENGINES[engine]
            items.append(
                ResultItem(
                    id=f"websearch:{engine}",
                    name=f"{name} Search",
                    description=f"Search with {name} (prefix: {prefix})",
                    item_type=ItemType.WEB_SEARCH,
                    icon="web-browser",
                    search_engine=engine
                )
            )
        return items

    engine, terms = parse_search_query(residual)
    if not terms:
        return []

    name, url = build_search_url(engine, terms)
    logger.debug(f"Web search on {engine}: {terms!r}")

    return [
        ResultItem(
            id=f"websearch:{engine}:{terms}",
            name=f"Search {name}: {terms}",
            description=f"Open {url} in browser",
            item_type=ItemType.WEB_SEARCH,
            icon="web-browser",
            search_engine=engine,
            search_terms=terms,
            url=url
        )
    ]
