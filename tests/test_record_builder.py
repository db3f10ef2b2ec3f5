from __future__ import annotations

import logging

import pytest

import services.record_builder as rb
from exceptions import ExtractionError
from services.html_document import parse_document
from sources.antler_portfolio import AntlerPortfolioSource


SOURCE = AntlerPortfolioSource()


def _anchor(html: str, href: str):
    return parse_document(html).select_one(f'a[href="{href}"]')


def test_builds_complete_record(card_html):
    anchor = _anchor(card_html("Acme Corp!", "https://acme.io", location="London, UK"), "https://acme.io")
    record = rb.build_company_record(anchor, SOURCE, current_year=2026)
    assert record is not None
    assert record.id == "antler-acme-corp"
    assert record.name == "Acme Corp!"
    assert record.slug == "acme-corp"
    assert record.website == "https://acme.io"
    assert record.description == "Acme Corp! builds software for small businesses."
    assert record.founded_year == 2019
    assert record.location == "London"
    assert record.sector == "FinTech"
    assert record.logo_url == "https://www.antler.co/images/acme-corp!.png"
    assert record.portfolio_url == "https://www.antler.co/portfolio/acme-corp"
    assert record.api_url == "https://antler-api.github.io/companies/acme-corp.json"


def test_unresolved_categories_default_to_unknown():
    html = '<div class="company-card"><h3>Nimbus</h3><a href="https://nimbus.dev">Visit</a></div>'
    record = rb.build_company_record(_anchor(html, "https://nimbus.dev"), SOURCE)
    assert record.location == "Unknown"
    assert record.sector == "Unknown"
    assert record.founded_year == 0
    assert record.logo_url == ""
    assert record.description == "Nimbus is a portfolio company of Antler."


def test_heuristic_misses_are_dropped_silently(caplog):
    short = _anchor('<li><a href="http">x</a></li>', "http")
    nameless = _anchor('<li><a href="https://x/abcd"></a></li>', "https://x/abcd")
    with caplog.at_level(logging.WARNING):
        assert rb.build_company_record(short, SOURCE) is None
        assert rb.build_company_record(nameless, SOURCE) is None
        assert rb.build_page_records([short, nameless], SOURCE) == []
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


def test_extraction_failure_is_wrapped(monkeypatch, card_html):
    def _boom(card, fallback):
        raise ValueError("broken markup")

    monkeypatch.setattr(rb, "extract_description", _boom)
    anchor = _anchor(card_html("Acme", "https://acme.io"), "https://acme.io")
    with pytest.raises(ExtractionError):
        rb.build_company_record(anchor, SOURCE)


def test_page_extraction_survives_one_bad_candidate(monkeypatch, card_html, caplog):
    html = card_html("Acme", "https://acme.io") + card_html("Beta", "https://beta.dev")
    doc = parse_document(html)
    anchors = [doc.select_one('a[href="https://acme.io"]'), doc.select_one('a[href="https://beta.dev"]')]

    real = rb.extract_description

    def _flaky(card, fallback):
        if "Acme" in card.text():
            raise ValueError("broken markup")
        return real(card, fallback)

    monkeypatch.setattr(rb, "extract_description", _flaky)
    with caplog.at_level(logging.WARNING):
        records = rb.build_page_records(anchors, SOURCE)
    assert [r.slug for r in records] == ["beta"]
    assert any("index 0" in r.getMessage() for r in caplog.records)
