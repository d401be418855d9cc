"""HTTP retrieval with an ordered chain of fallback paths.

Path priority (highest to lowest):
  1. Direct — a single browser-like GET against the page itself.
  2. Public pass-through fetchers (``settings.proxy_endpoints``), in order.

All paths share a common interface: ``fetch(client, url, target, timeout) ->
RawPage``.  The :class:`Retriever` tries each path in order and returns the
first success.  Attempts are strictly sequential and never retried; every
failure is classified, recorded and logged before the next path runs.  If
every path fails a :class:`~reskin.errors.RetrievalError` with cause
``all-paths-exhausted`` is raised.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Callable
from urllib.parse import quote, urlparse

import httpx

from reskin.config import settings
from reskin.errors import FetchAttempt, RetrievalCause, RetrievalError
from reskin.scraper.models import RawPage

_log = logging.getLogger(__name__)

_BROWSER_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/124.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
    "Referer": "https://www.google.com/",
}


class EmptyResponseError(Exception):
    """A path answered with a success status but no body."""


def require_absolute_url(url: str) -> str:
    """Return *url* unchanged if it is an absolute http(s) URL.

    Raises:
        ValueError: For relative URLs or non-web schemes.
    """
    parsed = urlparse(url or "")
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ValueError(f"Expected an absolute http(s) URL, got {url!r}")
    return url


def _classify(exc: Exception) -> RetrievalCause:
    if isinstance(exc, httpx.TimeoutException):
        return RetrievalCause.TIMEOUT
    if isinstance(exc, httpx.HTTPStatusError):
        return RetrievalCause.UPSTREAM_STATUS
    return RetrievalCause.NO_RESPONSE


# ---------------------------------------------------------------------------
# Abstract base
# ---------------------------------------------------------------------------

class RetrievalPath(ABC):
    """One way of getting a page's markup."""

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout

    @property
    @abstractmethod
    def name(self) -> str:
        """Short label used in logs and attempt records."""

    @abstractmethod
    def target(self, url: str) -> str:
        """Return the URL that is actually requested for *url*."""

    def fetch(self, client: httpx.Client, url: str, target: str, timeout: float) -> RawPage:
        """GET *target* and return its body as a :class:`RawPage` for *url*.

        Raises:
            httpx.HTTPError: Timeouts, transport failures and non-2xx statuses.
            EmptyResponseError: A 2xx response whose body is blank.
        """
        response = client.get(target, timeout=timeout)
        response.raise_for_status()
        body = response.text
        if not body or not body.strip():
            raise EmptyResponseError(f"{self.name} returned an empty body")
        return RawPage(url=url, html=body, status_code=response.status_code, path=self.name)


# ---------------------------------------------------------------------------
# Concrete paths
# ---------------------------------------------------------------------------

class DirectPath(RetrievalPath):
    """Fetch the page itself."""

    @property
    def name(self) -> str:
        return "direct"

    def target(self, url: str) -> str:
        return url


class ProxyPath(RetrievalPath):
    """Fetch the page through a public pass-through endpoint.

    *template* may reference ``{url}`` (raw) or ``{encoded}``
    (percent-encoded) placeholders.
    """

    def __init__(self, template: str, timeout: float) -> None:
        super().__init__(timeout)
        self.template = template

    @property
    def name(self) -> str:
        host = urlparse(self.template.format(url="", encoded="")).hostname
        return host or self.template

    def target(self, url: str) -> str:
        return self.template.format(url=url, encoded=quote(url, safe=""))


# ---------------------------------------------------------------------------
# Fallback chain
# ---------------------------------------------------------------------------

class Retriever:
    """Try the direct path, then each alternate path, until one succeeds."""

    def __init__(
        self,
        direct: RetrievalPath,
        alternates: list[RetrievalPath],
        max_redirects: int = 5,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._direct = direct
        self._alternates = list(alternates)
        self._max_redirects = max_redirects
        self._clock = clock

    def retrieve(
        self,
        url: str,
        prefer_alternate_path: bool = False,
        *,
        logger: logging.Logger | None = None,
        deadline: float | None = None,
    ) -> RawPage:
        """Return the markup for *url*.

        Args:
            url: Absolute http(s) URL of the page.
            prefer_alternate_path: Skip the direct fetch and go straight to
                the alternate endpoints.
            logger: Receives one record per attempt.  Defaults to this
                module's logger.
            deadline: Overall budget in seconds for the whole chain.  Each
                attempt's timeout is capped by the time left.  ``None`` uses
                ``settings.retrieval_deadline``; ``0`` means unbounded.

        Raises:
            ValueError: If *url* is not absolute.
            RetrievalError: ``timeout`` when the deadline is spent,
                ``all-paths-exhausted`` when every path failed.
        """
        require_absolute_url(url)
        log = logger or _log
        if deadline is None:
            deadline = settings.retrieval_deadline

        paths = list(self._alternates)
        if not prefer_alternate_path:
            paths.insert(0, self._direct)

        attempts: list[FetchAttempt] = []
        started = self._clock()

        with httpx.Client(
            headers=_BROWSER_HEADERS,
            follow_redirects=True,
            max_redirects=self._max_redirects,
        ) as client:
            for path in paths:
                timeout = path.timeout
                if deadline and deadline > 0:
                    remaining = deadline - (self._clock() - started)
                    if remaining <= 0:
                        log.warning("[retrieve] deadline of %.1fs spent before %s", deadline, path.name)
                        raise RetrievalError(
                            RetrievalCause.TIMEOUT,
                            url,
                            attempts,
                            message=f"Retrieval deadline of {deadline:.1f}s exceeded for {url}",
                        )
                    timeout = min(timeout, remaining)

                target = path.target(url)
                log.info("[retrieve] %s → %s", path.name, target)
                try:
                    raw = path.fetch(client, url, target, timeout)
                except (httpx.HTTPError, httpx.InvalidURL, EmptyResponseError) as exc:
                    attempt = FetchAttempt(
                        path=path.name,
                        target=target,
                        cause=_classify(exc),
                        detail=f"{exc!r:.200}",
                    )
                    attempts.append(attempt)
                    log.warning(
                        "[retrieve] %s failed (%s): %s", path.name, attempt.cause.value, attempt.detail
                    )
                    continue

                log.info("[retrieve] %s ✓ %d chars", path.name, len(raw.html))
                return raw

        log.error("[retrieve] all %d path(s) exhausted for %s", len(paths), url)
        raise RetrievalError(RetrievalCause.ALL_PATHS_EXHAUSTED, url, attempts)


# ---------------------------------------------------------------------------
# Default chain factory
# ---------------------------------------------------------------------------

def build_default_retriever() -> Retriever:
    """Direct → each configured pass-through endpoint, in order."""
    return Retriever(
        direct=DirectPath(settings.direct_timeout),
        alternates=[ProxyPath(t, settings.proxy_timeout) for t in settings.proxy_endpoints],
        max_redirects=settings.max_redirects,
    )


def fetch_url(
    url: str,
    use_proxy: bool = False,
    *,
    logger: logging.Logger | None = None,
    deadline: float | None = None,
) -> RawPage:
    """Fetch *url* through the default fallback chain.

    See :meth:`Retriever.retrieve` for the arguments and errors.
    """
    return build_default_retriever().retrieve(
        url, prefer_alternate_path=use_proxy, logger=logger, deadline=deadline
    )
