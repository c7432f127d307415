"""
Tests for web-search resolution
"""
import pytest
from query_engine.config import settings
from query_engine.services.web_search import (
    build_search_url,
    parse_search_query,
    web_search_items,
)
from query_engine.models.responses import ItemType


def test_parse_known_engine():
    """Test a leading engine alias is split off"""
    assert parse_search_query("github rapidfuzz") == ("github", "rapidfuzz")
    assert parse_search_query("wiki Alan Turing") == ("wikipedia", "Alan Turing")
    assert parse_search_query("DDG privacy") == ("duckduckgo", "privacy")


def test_parse_unknown_engine_uses_default():
    """Test unknown first words keep the whole residual as terms"""
    assert parse_search_query("best pizza") == ("google", "best pizza")


def test_default_engine_from_settings(monkeypatch):
    """Test the default engine is configurable"""
    monkeypatch.setattr(settings, "default_search_engine", "ddg")

    assert parse_search_query("best pizza") == ("duckduckgo", "best pizza")


def test_build_search_url():
    """Test URL templates and form encoding"""
    assert build_search_url("google", "rust lang") == (
        "Google",
        "https://www.google.com/search?q=rust+lang",
    )
    assert build_search_url("github", "c++ & go")[1] == "https://github.com/search?q=c%2B%2B+%26+go"
    assert build_search_url("pypi", "snake_case-v1.0~x")[1] == "https://pypi.org/search/?q=snake_case-v1.0~x"


def test_empty_residual_lists_featured_engines():
    """Test an empty residual lists the featured engines"""
    items = web_search_items("")

    assert [item.id for item in items] == [
        "websearch:google",
        "websearch:github",
        "websearch:youtube",
        "websearch:duckduckgo",
        "websearch:wikipedia",
    ]
    assert items[1].description == "Search with GitHub (prefix: gh)"


def test_engine_without_terms_gives_nothing():
    """Test an engine alias alone produces no row"""
    assert web_search_items("google") == []


def test_search_row():
    """Test a residual with terms produces one row with its URL"""
    items = web_search_items("youtube lofi beats")

    assert len(items) == 1
    item = items[0]
    assert item.item_type == ItemType.WEB_SEARCH
    assert item.name == "Search YouTube: lofi beats"
    assert item.search_engine == "youtube"
    assert item.search_terms == "lofi beats"
    assert item.url == "https://www.youtube.com/results?search_query=lofi+beats"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
