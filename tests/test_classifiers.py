from __future__ import annotations

from services.classifiers import classify_tag, is_location_text, is_sector_text


def test_location_gazetteer_is_case_insensitive():
    assert is_location_text("Singapore")
    assert is_location_text("based in SINGAPORE")
    assert is_location_text("Saudi Arabia")
    assert not is_location_text("FinTech")
    assert not is_location_text("")


def test_sector_vocabulary_and_generic_tokens():
    assert is_sector_text("FinTech")
    assert is_sector_text("health and biotech")
    assert is_sector_text("SaaS platform")
    assert is_sector_text("field services")
    assert not is_sector_text("ai/ml")


def test_sector_title_case_shape():
    assert is_sector_text("Marketplace")
    assert is_sector_text("Food Delivery")
    assert not is_sector_text("food delivery")
    assert not is_sector_text("Food, Delivery")


def test_location_wins_when_both_classifiers_match():
    assert is_location_text("Singapore") and is_sector_text("Singapore")
    assert classify_tag("Singapore") == "location"
    assert classify_tag("FinTech") == "sector"
    assert classify_tag("42") is None
