"""Optional LLM-generated stylesheet supplement for a rebrand.

The model is handed both brands as JSON and asked for extra CSS.  Its answer
is treated as an opaque stylesheet fragment appended to the deterministic
result; a failing or unreachable model never breaks the rebrand.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import re
from typing import Any

from reskin.brand.models import BrandElements
from reskin.config import settings
from reskin.rebrand.models import RebrandedContent

_log = logging.getLogger(__name__)

_FENCE = re.compile(r"^```[a-zA-Z]*\s*|\s*```\s*$")

_PROMPT = """\
I need to rebrand a website. Here are the original brand elements:
{original}

And here are the new brand elements:
{target}

Please provide CSS modifications to apply the new brand elements to the website.
Focus on:
1. Replacing color values
2. Updating font families
3. Adjusting spacing and border-radius if needed
4. Any other style changes to match the new brand

Return only valid CSS that can be added to the website.
"""


# ---------------------------------------------------------------------------
# LLM helper (mirrors the provider switch used across the project)
# ---------------------------------------------------------------------------

def _get_llm() -> Any:
    """Return a configured LangChain chat model based on ``settings``."""
    if settings.llm_provider == "openai":
        from langchain_openai import ChatOpenAI

        return ChatOpenAI(model=settings.openai_chat_model, temperature=0.7)

    from langchain_ollama import ChatOllama

    return ChatOllama(model=settings.ollama_chat_model, temperature=0.7)


def _strip_fences(text: str) -> str:
    return _FENCE.sub("", text.strip()).strip()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def generate_supplementary_css(original: BrandElements, target: BrandElements) -> str:
    """Ask the LLM for CSS that moves a page from *original* to *target*.

    Raises:
        Whatever the LangChain client raises on failure.
    """
    prompt = _PROMPT.format(
        original=json.dumps(original.to_dict()),
        target=json.dumps(target.to_dict()),
    )
    llm = _get_llm()
    response = llm.invoke(prompt)
    raw = response.content if hasattr(response, "content") else str(response)
    return _strip_fences(str(raw))


def apply_ai_css(
    result: RebrandedContent,
    original: BrandElements,
    target: BrandElements,
    *,
    logger: logging.Logger | None = None,
) -> RebrandedContent:
    """Return *result* with LLM-generated CSS appended to its ``css``.

    Any failure is logged and *result* is returned unchanged.
    """
    log = logger or _log
    try:
        extra = generate_supplementary_css(original, target)
    except Exception as exc:
        log.warning("[ai] stylesheet supplement failed: %s", exc)
        return result

    if not extra:
        log.info("[ai] model returned no CSS.")
        return result

    log.info("[ai] appended %d chars of generated CSS.", len(extra))
    css = f"{result.css}\n{extra}" if result.css else extra
    return dataclasses.replace(result, css=css)
