from __future__ import annotations

import json
import sys
from typing import List

import pytest

from config.settings import get_settings
from sources.antler_portfolio import AntlerPortfolioSource


def _run_cli_with_args(args_list: List[str]) -> None:
    """Run cli.py main() with provided argv in-process (no subprocess)."""
    argv_backup = sys.argv[:]
    try:
        sys.argv = ["cli.py"] + args_list
        # Import fresh to ensure clean parser each time
        if "cli" in sys.modules:
            del sys.modules["cli"]
        import cli  # type: ignore
        try:
            cli.main()  # type: ignore[attr-defined]
        except SystemExit as e:
            code = int(getattr(e, "code", 0) or 0)
            if code not in (0, None):
                raise
    finally:
        sys.argv = argv_backup


@pytest.fixture
def fresh_settings(monkeypatch):
    monkeypatch.setenv("SETTLE_DELAY_MS", "0")
    monkeypatch.setenv("PAGE_DELAY_MS", "0")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def stub_browser(monkeypatch, scripted_fetcher):
    """Replace the Playwright fetcher with canned pages; returns a setter for the page map."""
    import services.browser_fetcher as bf

    state = {"pages": {}, "fail_urls": []}

    class _StubFetcher(scripted_fetcher):
        def __init__(self, settings=None):
            super().__init__(state["pages"], fail_urls=state["fail_urls"])

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc, tb):
            return None

    monkeypatch.setattr(bf, "PlaywrightPageFetcher", _StubFetcher)
    return state


def _dirs(tmp_path):
    return [
        "--output-dir", str(tmp_path / "companies"),
        "--meta-path", str(tmp_path / "meta.json"),
        "--industries-dir", str(tmp_path / "industries"),
    ]


def test_cli_scrape_writes_outputs(tmp_path, fresh_settings, stub_browser, card_html, page_html, capsys):
    source = AntlerPortfolioSource()
    stub_browser["pages"] = {
        source.page_url(1): page_html([card_html("Acme Corp", "https://acme.io"), card_html("Beta", "https://beta.io")]),
        source.page_url(2): page_html([]),
    }
    _run_cli_with_args(_dirs(tmp_path) + ["scrape", "--max-pages", "5"])

    out = capsys.readouterr().out
    assert "PORTFOLIO SCRAPE - SUMMARY" in out
    assert "Final State: DONE" in out
    assert "Total Companies: 2" in out
    assert "Pages Visited: 2" in out
    assert (tmp_path / "companies" / "acme-corp.json").exists()
    assert (tmp_path / "industries" / "fintech.json").exists()
    meta = json.loads((tmp_path / "meta.json").read_text(encoding="utf-8"))
    assert meta["totalCompanies"] == 2


def test_cli_scrape_exits_nonzero_on_error(tmp_path, fresh_settings, stub_browser, card_html, page_html, capsys):
    source = AntlerPortfolioSource()
    stub_browser["pages"] = {source.page_url(1): page_html([card_html("Acme", "https://acme.io")])}
    stub_browser["fail_urls"] = [source.page_url(2)]

    with pytest.raises(SystemExit) as exc:
        _run_cli_with_args(_dirs(tmp_path) + ["scrape"])
    assert exc.value.code == 1

    out = capsys.readouterr().out
    assert "Final State: ERROR" in out
    assert "Page 2: " in out
    all_json = json.loads((tmp_path / "companies" / "all.json").read_text(encoding="utf-8"))
    assert [c["slug"] for c in all_json] == ["acme"]


def test_cli_rebuild_and_report(tmp_path, fresh_settings, capsys):
    companies_dir = tmp_path / "companies"
    companies_dir.mkdir()
    record = {
        "id": "antler-acme",
        "name": "Acme",
        "slug": "acme",
        "website": "https://acme.io",
        "description": "Acme does things.",
        "founded_year": 2020,
        "location": "Kenya",
        "sector": "FinTech",
        "logo_url": "",
        "url": "https://www.antler.co/portfolio/acme",
        "api": "https://antler-api.github.io/companies/acme.json",
    }
    (companies_dir / "all.json").write_text(json.dumps([record]), encoding="utf-8")
    (companies_dir / "acme.json").write_text(json.dumps(record), encoding="utf-8")

    _run_cli_with_args(_dirs(tmp_path) + ["rebuild-stats"])
    meta = json.loads((tmp_path / "meta.json").read_text(encoding="utf-8"))
    assert meta["totalCompanies"] == 1
    assert meta["yearDistribution"] == {"2020": 1}
    assert meta["locationDistribution"] == {"Kenya": 1}

    capsys.readouterr()
    _run_cli_with_args(_dirs(tmp_path) + ["report-stats"])
    assert json.loads(capsys.readouterr().out)["sectorDistribution"] == {"FinTech": 1}

    _run_cli_with_args(_dirs(tmp_path) + ["report-company", "--slug", "acme"])
    assert json.loads(capsys.readouterr().out)["api"] == "https://antler-api.github.io/companies/acme.json"


def test_cli_report_company_missing(tmp_path, fresh_settings, capsys):
    with pytest.raises(SystemExit) as exc:
        _run_cli_with_args(_dirs(tmp_path) + ["report-company", "--slug", "nope"])
    assert exc.value.code == 1
    assert "No record found for slug nope" in capsys.readouterr().out
