from __future__ import annotations

from typing import Any

from .data_model import DataModel


class Context(DataModel):
    """Operation context."""

    id: str | None = None
    """Context id, generated per call when not supplied."""

    data: dict[str, Any] | None = None
    """Caller data carried through to the provider."""
