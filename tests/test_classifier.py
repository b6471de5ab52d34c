import pytest

from oil_news.classifier import CATEGORY_RULES, categorize, match_category


@pytest.mark.parametrize("title,summary,expected", [
    ("OPEC meets in Vienna", "", "OPEC"),
    ("US LNG exports climb", "", "Natural Gas"),
    ("Henry Hub futures slip", "", "Natural Gas"),
    ("Gasoline prices ease", "", "Refining"),
    ("New sanctions on Russian crude", "", "International"),
    ("Crude stockpile grows", "", "Inventory"),
    ("Permian rig count rises", "", "Extraction"),
    ("Carbon capture pilot launched", "", "Technology"),
    ("Asian demand softens", "", "Demand"),
    ("Output hits record", "", "Supply"),
])
def test_rule_categories(title, summary, expected):
    assert categorize(title, summary, "Oil Markets") == expected


def test_opec_takes_precedence_over_refining():
    assert categorize("OPEC eyes refinery deal", "", "Refining") == "OPEC"


def test_earlier_rule_wins_for_summary_match():
    # "demand" and "supply" both present: Demand is checked first.
    assert categorize("Market update", "demand and supply balance", "Oil Markets") == "Demand"


def test_no_match_returns_default():
    assert categorize("Markets steady", "Little change today", "Oil Markets") == "Oil Markets"


def test_lng_needs_word_boundaries():
    # "lng" only counts with spaces on both sides.
    assert categorize("Falling prices", "", "Oil Markets") == "Oil Markets"
    assert match_category("xlngx", "Fallback") == "Fallback"


def test_match_category_is_case_insensitive():
    assert match_category("NATURAL GAS storage", "X") == "Natural Gas"


def test_rule_order():
    assert [category for category, _ in CATEGORY_RULES] == [
        "OPEC", "Natural Gas", "Refining", "International", "Inventory",
        "Extraction", "Technology", "Demand", "Supply",
    ]
