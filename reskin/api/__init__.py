"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from reskin.api import app

    uvicorn reskin.api:app --reload
"""

from reskin.api.app import app

__all__ = ["app"]
