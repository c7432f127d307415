"""
Tests for the mode classifier
"""
import pytest
from query_engine.services.mode_classifier import (
    classify,
    is_conversion,
    is_math_expression,
    split_prefix,
)
from query_engine.models.responses import Mode, RoutingDecision


def test_prefix_wins_over_heuristics():
    """Test a recognized prefix beats the math heuristic"""
    assert classify("wifi 5+5") == RoutingDecision(mode=Mode.WIFI, residual="5+5")


def test_math_expression_routes_to_calculator():
    """Test arithmetic routes to the calculator with the full query"""
    result = classify("5+5")

    assert result.mode == Mode.CALCULATOR
    assert result.residual == "5+5"


def test_conversion_routes_to_converter():
    """Test conversion phrasing without operators routes to the converter"""
    result = classify("5 km to m")

    assert result.mode == Mode.CONVERTER
    assert result.residual == "5 km to m"


def test_math_heuristic_beats_conversion():
    """Test queries satisfying both heuristics route to the calculator"""
    assert classify("(5) km to m").mode == Mode.CALCULATOR
    assert classify("5-2 km in m").mode == Mode.CALCULATOR


def test_empty_query():
    """Test empty and blank input route to apps with an empty residual"""
    assert classify("") == RoutingDecision(mode=Mode.APPS, residual="")
    assert classify("   ") == RoutingDecision(mode=Mode.APPS, residual="")


def test_plain_search_term():
    """Test ordinary text routes to apps"""
    assert classify("  firefox ") == RoutingDecision(mode=Mode.APPS, residual="firefox")


def test_prefix_only_gives_empty_residual():
    """Test a bare prefix lists everything in its mode"""
    assert classify("wifi") == RoutingDecision(mode=Mode.WIFI, residual="")
    assert classify("todo ") == RoutingDecision(mode=Mode.TODOS, residual="")


def test_prefix_is_case_insensitive():
    """Test upper-case prefixes are recognized"""
    assert classify("WIFI home") == RoutingDecision(mode=Mode.WIFI, residual="home")
    assert classify("Docker web").mode == Mode.DOCKER


def test_prefix_must_match_exactly():
    """Test partial prefixes are not matched"""
    assert classify("wif home").mode == Mode.APPS
    assert classify("notesapp").mode == Mode.APPS


@pytest.mark.parametrize(
    "query,mode",
    [
        ("w term", Mode.WINDOWS),
        ("ps firefox", Mode.PROCESSES),
        ("network home", Mode.WIFI),
        ("bt headphones", Mode.BLUETOOTH),
        ("vol 50", Mode.AUDIO),
        ("cb link", Mode.CLIPBOARD),
        ("notes groceries", Mode.NOTES),
        ("snip sig", Mode.SNIPPETS),
        ("tasks today", Mode.TODOS),
        ("ssh prod", Mode.SSH),
        ("containers redis", Mode.DOCKER),
        ("stopwatch", Mode.TIMER),
        ("e smile", Mode.EMOJI),
        ("find report", Mode.FILES),
        ("recent pdf", Mode.RECENT_FILES),
        ("pass github", Mode.BITWARDEN),
        ("? what is rust", Mode.AI),
    ]
)
def test_prefix_table(query, mode):
    """Test every prefix family routes to its mode"""
    assert classify(query).mode == mode


def test_web_search_aliases_reprefix():
    """Test web-search aliases hand over the canonical engine name"""
    assert classify("g rust lang") == RoutingDecision(
        mode=Mode.WEB_SEARCH, residual="google rust lang"
    )
    assert classify("gh rapidfuzz").residual == "github rapidfuzz"
    assert classify("yt lofi").residual == "youtube lofi"
    assert classify("google").residual == "google"


def test_split_on_first_whitespace_run():
    """Test the remainder keeps its inner spacing"""
    assert split_prefix("wifi   home  network") == ("wifi", "home  network")
    assert classify("notes\tgroceries") == RoutingDecision(mode=Mode.NOTES, residual="groceries")


def test_heuristics():
    """Test the heuristics in isolation"""
    assert is_math_expression("2*3")
    assert not is_math_expression("(hello)")
    assert not is_math_expression("42")
    assert is_conversion("5 KM TO m")
    assert not is_conversion("tomato")


def test_classification_is_deterministic():
    """Test the same input always yields the same decision"""
    for query in ["", "5+5", "wifi x", "1 km to m", "firefox"]:
        assert classify(query) == classify(query)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
