"""Rebrand package — deterministic brand substitution."""

from reskin.rebrand.models import ChangeSummary, RebrandedContent
from reskin.rebrand.rebrander import rebrand

__all__ = ["rebrand", "RebrandedContent", "ChangeSummary"]
