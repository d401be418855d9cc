"""Exception types surfaced by the pipeline.

Only two failures ever reach a caller:

* :class:`RetrievalError` — the source page could not be fetched.  Retrying
  with the alternate (proxy) path enabled may help.
* :class:`RebrandValidationError` — the submitted target brand is missing a
  required field.  The caller must fix its input.

Parsing is permissive and brand extraction absorbs its own failures, so
neither has an exception type of its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ReskinError(Exception):
    """Base class for all pipeline errors."""


class RetrievalCause(str, Enum):
    TIMEOUT = "timeout"
    UPSTREAM_STATUS = "upstream-status"
    NO_RESPONSE = "no-response"
    ALL_PATHS_EXHAUSTED = "all-paths-exhausted"


@dataclass
class FetchAttempt:
    """Diagnostic record of one failed retrieval attempt."""

    path: str
    target: str
    cause: RetrievalCause
    detail: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "path": self.path,
            "target": self.target,
            "cause": self.cause.value,
            "detail": self.detail,
        }


class RetrievalError(ReskinError):
    """Raised when a page could not be fetched.

    Attributes:
        cause: Classification of the failure.
        url: The page that was requested.
        attempts: Every failed attempt, in the order they were made.
    """

    def __init__(
        self,
        cause: RetrievalCause,
        url: str,
        attempts: list[FetchAttempt] | None = None,
        message: str | None = None,
    ) -> None:
        self.cause = RetrievalCause(cause)
        self.url = url
        self.attempts = list(attempts or [])
        super().__init__(message or f"Failed to retrieve {url}: {self.cause.value}")


class RebrandValidationError(ReskinError, ValueError):
    """Raised when a target brand omits a required field."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(
            "Target brand is missing required field(s): " + ", ".join(self.missing)
        )
