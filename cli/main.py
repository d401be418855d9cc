"""Reskin CLI — entry-point for the scrape → brand → rebrand pipeline.

Usage:
    python cli/main.py --help

Commands:
    scrape   → retrieve and parse a page
    brand    → infer a page's brand identity
    rebrand  → rewrite a page with a different brand
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from reskin.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
from typing import Optional

import typer

from cli.rendering import render_brand, render_changes, render_content
from reskin.brand.extractor import extract_brand
from reskin.brand.models import BrandElements
from reskin.config import settings
from reskin.errors import RebrandValidationError, RetrievalError
from reskin.logging import configure_logging, get_logger
from reskin.pipeline import scrape_website
from reskin.rebrand.ai import apply_ai_css
from reskin.rebrand.rebrander import rebrand
from reskin.scraper.models import ScrapedContent

app = typer.Typer(
    name="reskin",
    help="Infer a web page's brand and rewrite it with another.",
    no_args_is_help=True,
)

_log = get_logger("reskin.cli")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every retrieval attempt."),
) -> None:
    configure_logging("DEBUG" if verbose else settings.log_level)


def _scrape_or_exit(url: str, proxy: bool, label: str) -> ScrapedContent:
    """Run retrieval + parsing, turning failures into CLI exit codes."""
    typer.echo(f"[{label}] Fetching {url!r}{' via proxy' if proxy else ''} …")
    try:
        return scrape_website(url, proxy, logger=_log)
    except ValueError as exc:
        typer.echo(f"[{label}] {exc}", err=True)
        raise typer.Exit(2)
    except RetrievalError as exc:
        typer.echo(f"[{label}] Could not fetch page ({exc.cause.value}).", err=True)
        for attempt in exc.attempts:
            typer.echo(f"  ✗ {attempt.path}: {attempt.cause.value}", err=True)
        if not proxy:
            typer.echo(f"[{label}] Retry with --proxy to use the alternate path.", err=True)
        raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.command("scrape")
def scrape(
    url: str = typer.Option(..., help="Absolute URL of the page."),
    proxy: bool = typer.Option(False, "--proxy", help="Skip the direct fetch."),
) -> None:
    """Retrieve a page and print its structural summary."""
    content = _scrape_or_exit(url, proxy, "scrape")
    typer.echo(render_content(content))


@app.command("brand")
def brand(
    url: str = typer.Option(..., help="Absolute URL of the page."),
    proxy: bool = typer.Option(False, "--proxy", help="Skip the direct fetch."),
    as_json: bool = typer.Option(False, "--json", help="Print the brand as JSON."),
) -> None:
    """Infer and print a page's brand identity."""
    content = _scrape_or_exit(url, proxy, "brand")
    detected = extract_brand(content, logger=_log)
    if as_json:
        typer.echo(json.dumps(detected.to_dict(), indent=2))
    else:
        typer.echo(render_brand(detected))


@app.command("rebrand")
def rebrand_cmd(
    url: str = typer.Option(..., help="Absolute URL of the page."),
    name: str = typer.Option(..., help="New brand name."),
    primary: str = typer.Option(..., help="New primary color."),
    font: str = typer.Option(..., help="New primary font-family."),
    secondary: Optional[str] = typer.Option(None, help="New secondary color."),
    accent: Optional[str] = typer.Option(None, help="New accent color."),
    font_secondary: Optional[str] = typer.Option(None, help="New secondary font-family."),
    logo: Optional[str] = typer.Option(None, help="URL of the new logo image."),
    proxy: bool = typer.Option(False, "--proxy", help="Skip the direct fetch."),
    ai: bool = typer.Option(False, "--ai", help="Append LLM-generated CSS."),
    out: Optional[Path] = typer.Option(None, help="Write the rebranded HTML here."),
) -> None:
    """Rewrite a page so that it carries a different brand."""
    content = _scrape_or_exit(url, proxy, "rebrand")
    original = extract_brand(content, logger=_log)
    typer.echo(f"[rebrand] Detected brand {original.name!r}.")

    target = BrandElements.from_dict(
        {
            "name": name,
            "logo": logo,
            "colors": {"primary": primary, "secondary": secondary, "accent": accent},
            "typography": {"primary": font, "secondary": font_secondary},
        },
        base=original,
    )

    try:
        result = rebrand(content, original, target, logger=_log)
    except RebrandValidationError as exc:
        typer.echo(f"[rebrand] {exc}", err=True)
        raise typer.Exit(2)

    if ai:
        result = apply_ai_css(result, original, target, logger=_log)

    typer.echo(f"[rebrand] {render_changes(result.changes)}")
    if out is not None:
        out.write_text(result.html, encoding="utf-8")
        typer.echo(f"[rebrand] Wrote {out}")
    else:
        typer.echo(result.html)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
