"""Tests for the optional LLM stylesheet supplement.

The chat model is always patched out; no provider is contacted.
"""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock, patch

from reskin.brand.models import BrandColors, BrandElements, Typography
from reskin.rebrand.ai import apply_ai_css, generate_supplementary_css
from reskin.rebrand.models import ChangeSummary, RebrandedContent


def _brands() -> tuple[BrandElements, BrandElements]:
    original = BrandElements(name="Acme", colors=BrandColors(primary="#112233"))
    target = BrandElements(
        name="Zenith",
        colors=BrandColors(primary="#ff0000"),
        typography=Typography(primary="Georgia"),
    )
    return original, target


def _result(css: str = "a{color:#ff0000}") -> RebrandedContent:
    return RebrandedContent(
        html="<p>Zenith</p>",
        css=css,
        original_url="https://example.com/",
        changes=ChangeSummary(name_replacements=1),
    )


def _mock_llm(content: str) -> MagicMock:
    llm = MagicMock()
    llm.invoke.return_value = MagicMock(content=content)
    return llm


class TestGenerateSupplementaryCss:
    def test_prompt_contains_both_brands(self) -> None:
        original, target = _brands()
        llm = _mock_llm("body { color: red; }")
        with patch("reskin.rebrand.ai._get_llm", return_value=llm):
            css = generate_supplementary_css(original, target)

        assert css == "body { color: red; }"
        prompt = llm.invoke.call_args[0][0]
        assert json.dumps(original.to_dict()) in prompt
        assert json.dumps(target.to_dict()) in prompt
        assert "Return only valid CSS" in prompt

    def test_strips_markdown_fences(self) -> None:
        original, target = _brands()
        llm = _mock_llm("```css\nh1 { font-family: Georgia; }\n```")
        with patch("reskin.rebrand.ai._get_llm", return_value=llm):
            css = generate_supplementary_css(original, target)

        assert css == "h1 { font-family: Georgia; }"


class TestApplyAiCss:
    def test_appends_generated_css(self) -> None:
        original, target = _brands()
        result = _result()
        with patch("reskin.rebrand.ai._get_llm", return_value=_mock_llm(".btn{border-radius:4px}")):
            updated = apply_ai_css(result, original, target)

        assert updated.css == "a{color:#ff0000}\n.btn{border-radius:4px}"
        assert updated.html == result.html
        assert updated.changes == result.changes
        # The input result is left untouched.
        assert result.css == "a{color:#ff0000}"

    def test_empty_base_css(self) -> None:
        original, target = _brands()
        with patch("reskin.rebrand.ai._get_llm", return_value=_mock_llm("p{margin:0}")):
            updated = apply_ai_css(_result(css=""), original, target)

        assert updated.css == "p{margin:0}"

    def test_failure_returns_result_unchanged(self, caplog) -> None:
        original, target = _brands()
        result = _result()
        llm = MagicMock()
        llm.invoke.side_effect = ConnectionError("model offline")
        logger = logging.getLogger("test.ai")
        caplog.set_level(logging.WARNING, logger="test.ai")

        with patch("reskin.rebrand.ai._get_llm", return_value=llm):
            updated = apply_ai_css(result, original, target, logger=logger)

        assert updated is result
        assert any("model offline" in r.getMessage() for r in caplog.records if r.name == "test.ai")

    def test_empty_answer_returns_result_unchanged(self) -> None:
        original, target = _brands()
        result = _result()
        with patch("reskin.rebrand.ai._get_llm", return_value=_mock_llm("   ")):
            assert apply_ai_css(result, original, target) is result
