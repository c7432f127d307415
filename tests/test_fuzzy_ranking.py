"""
Tests for the fuzzy ranking engine
"""
import pytest
from query_engine.models.item import Item
from query_engine.services.fuzzy_ranking import (
    char_bonus,
    fuzzy_match,
    matched_positions,
    rank_items,
    score,
    score_items,
    BONUS_BOUNDARY,
    BONUS_CAMEL,
)


def test_name_match_beats_keyword_match():
    """Test an exact name outranks the same text found only in a keyword"""
    exact = Item(name="firefox")
    keyword_only = Item(name="Web Browser", keywords=["firefox"])

    assert score(exact, "firefox") > score(keyword_only, "firefox") > 0


def test_description_and_keywords_are_halved():
    """Test secondary fields score half of their raw match"""
    raw = fuzzy_match("firefox", "firefox")

    assert score(Item(name="Xyz", description="firefox"), "firefox") == raw // 2
    assert score(Item(name="Xyz", keywords=["zzz", "firefox"]), "firefox") == raw // 2


def test_no_match_scores_zero():
    """Test an item matching nowhere scores 0"""
    item = Item(name="Terminal", description="Command line", keywords=["shell"])

    assert score(item, "qqq") == 0


def test_no_match_is_excluded():
    """Test zero-score items are dropped, not sorted last"""
    items = [Item(name="Terminal"), Item(name="Firefox")]

    assert rank_items(items, "fire") == [Item(name="Firefox")]


def test_rank_sorts_by_score():
    """Test better matches come first"""
    items = [Item(name="Decoder"), Item(name="Code")]

    ranked = rank_items(items, "code")

    assert [item.name for item in ranked] == ["Code", "Decoder"]


def test_rank_ties_keep_input_order():
    """Test equal scores keep first-seen order"""
    items = [
        Item(id="a", name="Files"),
        Item(id="b", name="Firefox"),
        Item(id="c", name="Calculator"),
        Item(id="d", name="Files"),
    ]

    ranked = rank_items(items, "fi")

    assert [item.id for item in ranked] == ["a", "b", "d"]


def test_rank_empty_query_returns_everything():
    """Test an empty residual lists all items unchanged"""
    items = [Item(name="b"), Item(name="a")]

    assert rank_items(items, "") == items


def test_rank_is_case_insensitive():
    """Test apps ranking lower-cases the query"""
    assert rank_items([Item(name="firefox")], "FIRE") == [Item(name="firefox")]


def test_score_items_returns_scores():
    """Test score_items pairs each match with its score"""
    pairs = score_items([Item(name="Code"), Item(name="Nope")], "code")

    assert len(pairs) == 1
    assert pairs[0][0].name == "Code"
    assert pairs[0][1] == score(Item(name="Code"), "code")


def test_fuzzy_match_requires_subsequence():
    """Test a fragment must appear in order"""
    assert fuzzy_match("abc", "abd") is None
    assert fuzzy_match("abc", "cba") is None
    assert fuzzy_match("Firefox", "ff") > 0


def test_contiguous_beats_scattered():
    """Test a contiguous run outscores the same characters spread out"""
    assert fuzzy_match("terminal", "term") > fuzzy_match("txexrxm", "term")


def test_smart_case():
    """Test upper-case fragments match case-sensitively"""
    assert fuzzy_match("Firefox", "f") is not None
    assert fuzzy_match("firefox", "F") is None
    assert fuzzy_match("Firefox", "F") is not None


def test_matched_positions():
    """Test aligned positions of a subsequence"""
    assert matched_positions("fx", "fox") == [0, 2]
    assert matched_positions("xf", "firefox") is None


def test_char_bonus():
    """Test boundary and camel-case bonuses"""
    assert char_bonus(" ", "a") == BONUS_BOUNDARY
    assert char_bonus("_", "a") == BONUS_BOUNDARY
    assert char_bonus("a", "B") == BONUS_CAMEL
    assert char_bonus("a", "1") == BONUS_CAMEL
    assert char_bonus("a", "b") == 0


def test_item_matches_substring():
    """Test Item.matches over every field"""
    item = Item(name="Firefox", description="Web Browser", keywords=["internet"])

    assert item.matches("FIRE")
    assert item.matches("browser")
    assert item.matches("inter")
    assert not item.matches("chrome")


def test_best_alignment_is_scored():
    """Test a later contiguous run is preferred over an earlier scattered one"""
    assert matched_positions("term", "the terminal") == [4, 5, 6, 7]
    assert score(Item(name="the terminal"), "term") == score(Item(name="term"), "term")


def test_contiguous_word_outranks_scattered_letters():
    """Test a name containing the fragment as a word ranks above a scattered match"""
    items = [Item(name="tea ramp"), Item(name="the terminal")]

    assert fuzzy_match("the terminal", "term") > fuzzy_match("tea ramp", "term")
    assert [item.name for item in rank_items(items, "term")] == ["the terminal", "tea ramp"]


def test_trailing_word_match_is_included():
    """Test a long name ending in the fragment still matches"""
    filler = "x" * 40
    long_name = "t" + filler + "e" + filler + "r" + filler + "m term"
    items = [Item(id="long", name=long_name), Item(id="other", name="Files")]

    assert score(Item(name=long_name), "term") == score(Item(name="term"), "term")
    assert [item.id for item in rank_items(items, "term")] == ["long"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
