"""Tests for the reskin CLI commands."""

import json
from unittest.mock import patch

from typer.testing import CliRunner

from cli.main import app
from reskin.errors import FetchAttempt, RetrievalCause, RetrievalError
from reskin.scraper.parser import parse_page

runner = CliRunner()

_URL = "https://acme.test/"
_HTML = (
    "<html><head><title>Acme | Home</title>"
    "<style>body{color:#112233;font-family:Arial;} a{color:#112233}</style></head>"
    '<body><header><a class="brand" href="/"><img src="/logo.png" alt="Acme logo">Acme</a></header>'
    "<section>Welcome to Acme</section></body></html>"
)


def _content():
    return parse_page(_HTML, _URL)


def _exhausted() -> RetrievalError:
    return RetrievalError(
        RetrievalCause.ALL_PATHS_EXHAUSTED,
        _URL,
        [FetchAttempt("direct", _URL, RetrievalCause.UPSTREAM_STATUS, "403")],
    )


# ---------------------------------------------------------------------------
# scrape
# ---------------------------------------------------------------------------

def test_scrape_prints_summary():
    with patch("cli.main.scrape_website", return_value=_content()) as mock_scrape:
        result = runner.invoke(app, ["scrape", "--url", _URL])

    assert result.exit_code == 0
    assert "Acme | Home" in result.output
    assert "header" in result.output
    assert "1 section(s)" in result.output
    assert mock_scrape.call_args[0] == (_URL, False)


def test_scrape_with_proxy_flag():
    with patch("cli.main.scrape_website", return_value=_content()) as mock_scrape:
        result = runner.invoke(app, ["scrape", "--url", _URL, "--proxy"])

    assert result.exit_code == 0
    assert mock_scrape.call_args[0] == (_URL, True)


def test_scrape_retrieval_failure_exits_1():
    with patch("cli.main.scrape_website", side_effect=_exhausted()):
        result = runner.invoke(app, ["scrape", "--url", _URL])

    assert result.exit_code == 1
    assert "all-paths-exhausted" in result.output
    assert "direct: upstream-status" in result.output
    assert "--proxy" in result.output


def test_scrape_invalid_url_exits_2():
    with patch("cli.main.scrape_website", side_effect=ValueError("Expected an absolute URL")):
        result = runner.invoke(app, ["scrape", "--url", "acme.test"])

    assert result.exit_code == 2
    assert "absolute URL" in result.output


# ---------------------------------------------------------------------------
# brand
# ---------------------------------------------------------------------------

def test_brand_table():
    with patch("cli.main.scrape_website", return_value=_content()):
        result = runner.invoke(app, ["brand", "--url", _URL])

    assert result.exit_code == 0
    assert "Acme" in result.output
    assert "#112233" in result.output
    assert "Arial" in result.output


def test_brand_json():
    with patch("cli.main.scrape_website", return_value=_content()):
        result = runner.invoke(app, ["brand", "--url", _URL, "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.output[result.output.index("{"):])
    assert payload["name"] == "Acme"
    assert payload["logo"] == "https://acme.test/logo.png"
    assert payload["colors"]["primary"] == "#112233"


# ---------------------------------------------------------------------------
# rebrand
# ---------------------------------------------------------------------------

def test_rebrand_writes_output_file(tmp_path):
    out = tmp_path / "zenith.html"
    with patch("cli.main.scrape_website", return_value=_content()):
        result = runner.invoke(
            app,
            [
                "rebrand", "--url", _URL,
                "--name", "Zenith", "--primary", "#ff0000", "--font", "Georgia",
                "--out", str(out),
            ],
        )

    assert result.exit_code == 0
    assert "Detected brand 'Acme'" in result.output
    assert "colors=2" in result.output
    assert "fonts=1" in result.output
    assert "logo=replaced" in result.output
    html = out.read_text(encoding="utf-8")
    assert "Welcome to Zenith" in html
    assert "#ff0000" in html
    assert "Acme" not in html


def test_rebrand_prints_html_without_out():
    with patch("cli.main.scrape_website", return_value=_content()):
        result = runner.invoke(
            app,
            ["rebrand", "--url", _URL, "--name", "Zenith", "--primary", "#ff0000", "--font", "Georgia"],
        )

    assert result.exit_code == 0
    assert "Welcome to Zenith" in result.output


def test_rebrand_blank_name_exits_2():
    with patch("cli.main.scrape_website", return_value=_content()):
        result = runner.invoke(
            app,
            ["rebrand", "--url", _URL, "--name", " ", "--primary", "#ff0000", "--font", "Georgia"],
        )

    assert result.exit_code == 2
    assert "name" in result.output


def test_rebrand_ai_flag_calls_supplement():
    with patch("cli.main.scrape_website", return_value=_content()), \
         patch("cli.main.apply_ai_css", side_effect=lambda r, *a, **k: r) as mock_ai:
        result = runner.invoke(
            app,
            [
                "rebrand", "--url", _URL,
                "--name", "Zenith", "--primary", "#ff0000", "--font", "Georgia", "--ai",
            ],
        )

    assert result.exit_code == 0
    mock_ai.assert_called_once()


def test_rebrand_retrieval_failure_exits_1():
    with patch("cli.main.scrape_website", side_effect=_exhausted()):
        result = runner.invoke(
            app,
            ["rebrand", "--url", _URL, "--name", "Zenith", "--primary", "#ff0000", "--font", "Georgia"],
        )

    assert result.exit_code == 1
