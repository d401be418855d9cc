"""Tests for the FastAPI endpoints.

The pipeline is patched at the router level so no network calls are made.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from reskin.api.app import create_app
from reskin.brand.models import BrandColors, BrandElements, Typography
from reskin.errors import FetchAttempt, RetrievalCause, RetrievalError
from reskin.rebrand.models import RebrandedContent
from reskin.scraper.models import ScrapedContent


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

_URL = "https://acme.test/"

_HTML = (
    "<html><head><title>Acme</title><style>body{color:#112233;font-family:Arial}</style></head>"
    '<body><a class="brand"><img src="/logo.png" alt="Acme logo">Acme</a><p>Hi from Acme</p></body></html>'
)


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


def _content() -> ScrapedContent:
    return ScrapedContent(
        url=_URL,
        html=_HTML,
        css=["body{color:#112233;font-family:Arial}"],
        images=["https://acme.test/logo.png"],
        title="Acme",
        description="Rockets.",
    )


def _brand() -> BrandElements:
    return BrandElements(
        name="Acme",
        logo="https://acme.test/logo.png",
        colors=BrandColors(primary="#112233", accent="#445566"),
        typography=Typography(primary="Arial"),
    )


def _rebrand_body(**target) -> dict:
    return {
        "content": _content().to_dict(),
        "original": _brand().to_dict(),
        "target": target,
    }


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------

def test_health(client: TestClient) -> None:
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


# ---------------------------------------------------------------------------
# POST /scrape
# ---------------------------------------------------------------------------

class TestScrape:
    def test_returns_content_brand_and_record(self, client: TestClient) -> None:
        with patch(
            "reskin.api.routers.scrape.analyze_website", return_value=(_content(), _brand())
        ) as mock_analyze:
            resp = client.post(
                "/scrape",
                json={"url": _URL, "name": "My copy"},
                headers={"X-User-Id": "user-42"},
            )

        assert resp.status_code == 200
        data = resp.json()
        assert data["content"]["title"] == "Acme"
        assert data["content"]["structure"]["sections"] == 0
        assert data["brand"]["name"] == "Acme"
        assert data["brand"]["colors"]["primary"] == "#112233"
        assert data["record"]["name"] == "My copy"
        assert data["record"]["creator"] == "user-42"
        assert data["record"]["description"] == "Rockets."
        assert "rebranded_content" not in data["record"]

        args, kwargs = mock_analyze.call_args
        assert args == (_URL, False)

    def test_anonymous_creator(self, client: TestClient) -> None:
        with patch(
            "reskin.api.routers.scrape.analyze_website", return_value=(_content(), _brand())
        ):
            resp = client.post("/scrape", json={"url": _URL})
        assert resp.json()["record"]["creator"] == "anonymous"

    def test_use_proxy_forwarded(self, client: TestClient) -> None:
        with patch(
            "reskin.api.routers.scrape.analyze_website", return_value=(_content(), _brand())
        ) as mock_analyze:
            client.post("/scrape", json={"url": _URL, "use_proxy": True})
        assert mock_analyze.call_args[0][1] is True

    def test_retrieval_failure_is_502(self, client: TestClient) -> None:
        attempts = [
            FetchAttempt("direct", _URL, RetrievalCause.UPSTREAM_STATUS, "403"),
            FetchAttempt("corsproxy.io", "https://corsproxy.io/?x", RetrievalCause.TIMEOUT),
        ]
        err = RetrievalError(RetrievalCause.ALL_PATHS_EXHAUSTED, _URL, attempts)
        with patch("reskin.api.routers.scrape.analyze_website", side_effect=err):
            resp = client.post("/scrape", json={"url": _URL})

        assert resp.status_code == 502
        detail = resp.json()["detail"]
        assert detail["cause"] == "all-paths-exhausted"
        assert detail["url"] == _URL
        assert [a["cause"] for a in detail["attempts"]] == ["upstream-status", "timeout"]
        assert "use_proxy" in detail["hint"]

    def test_no_hint_when_proxy_already_used(self, client: TestClient) -> None:
        err = RetrievalError(RetrievalCause.ALL_PATHS_EXHAUSTED, _URL)
        with patch("reskin.api.routers.scrape.analyze_website", side_effect=err):
            resp = client.post("/scrape", json={"url": _URL, "use_proxy": True})
        assert resp.json()["detail"]["hint"] is None

    def test_invalid_url_is_422(self, client: TestClient) -> None:
        resp = client.post("/scrape", json={"url": "not a url"})
        assert resp.status_code == 422

    def test_value_error_is_422(self, client: TestClient) -> None:
        with patch(
            "reskin.api.routers.scrape.analyze_website", side_effect=ValueError("bad url")
        ):
            resp = client.post("/scrape", json={"url": _URL})
        assert resp.status_code == 422
        assert resp.json()["detail"] == "bad url"


# ---------------------------------------------------------------------------
# POST /rebrand
# ---------------------------------------------------------------------------

class TestRebrand:
    def test_rebrands_page(self, client: TestClient) -> None:
        body = _rebrand_body(
            name="Zenith",
            colors={"primary": "#ff0000"},
            typography={"primary": "Georgia"},
        )
        resp = client.post("/rebrand", json=body, headers={"X-User-Id": "user-42"})

        assert resp.status_code == 200
        data = resp.json()
        assert data["original_url"] == _URL
        assert "Hi from Zenith" in data["html"]
        assert "#ff0000" in data["css"]
        assert data["changes"] == {
            "name_replacements": 4,
            "color_replacements": 1,
            "font_replacements": 1,
            "logo_replaced": True,
        }

    def test_accent_inherited_from_original(self, client: TestClient) -> None:
        body = _rebrand_body(
            name="Zenith",
            colors={"primary": "#ff0000"},
            typography={"primary": "Georgia"},
        )
        captured = {}

        def _capture(content, original, target, **kwargs):
            captured["target"] = target
            return RebrandedContent(html="", css="", original_url=content.url)

        with patch("reskin.api.routers.rebrand.rebrand", side_effect=_capture):
            resp = client.post("/rebrand", json=body)

        assert resp.status_code == 200
        assert captured["target"].colors.accent == "#445566"
        assert captured["target"].colors.primary == "#ff0000"

    def test_missing_fields_is_400(self, client: TestClient) -> None:
        resp = client.post("/rebrand", json=_rebrand_body(name="Zenith"))

        assert resp.status_code == 400
        assert resp.json()["detail"]["missing"] == ["colors.primary", "typography.primary"]

    def test_empty_target_lists_every_field(self, client: TestClient) -> None:
        resp = client.post("/rebrand", json=_rebrand_body())

        assert resp.status_code == 400
        assert resp.json()["detail"]["missing"] == ["name", "colors.primary", "typography.primary"]

    def test_use_ai_appends_css(self, client: TestClient) -> None:
        body = _rebrand_body(
            name="Zenith",
            colors={"primary": "#ff0000"},
            typography={"primary": "Georgia"},
        )
        body["use_ai"] = True

        def _fake_ai(result, original, target, **kwargs):
            result.css += "\n/* ai */"
            return result

        with patch("reskin.api.routers.rebrand.apply_ai_css", side_effect=_fake_ai) as mock_ai:
            resp = client.post("/rebrand", json=body)

        assert resp.status_code == 200
        assert resp.json()["css"].endswith("/* ai */")
        mock_ai.assert_called_once()

    def test_ai_not_called_by_default(self, client: TestClient) -> None:
        body = _rebrand_body(
            name="Zenith",
            colors={"primary": "#ff0000"},
            typography={"primary": "Georgia"},
        )
        with patch("reskin.api.routers.rebrand.apply_ai_css") as mock_ai:
            client.post("/rebrand", json=body)
        mock_ai.assert_not_called()
