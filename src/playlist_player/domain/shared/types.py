"""Reusable Pydantic Annotated types for domain-wide validation.

Constrained types are defined here once so models can simply annotate
their fields::

    from playlist_player.domain.shared.types import NonNegativeInt

    class MyModel(BaseModel):
        seed: NonNegativeInt
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from pydantic import AfterValidator, Field

from playlist_player.domain.shared.messages import ErrorMessages

# ── Numeric constraints ─────────────────────────────────────────────

NonNegativeInt = Annotated[int, Field(ge=0)]
"""Integer >= 0."""


# ── String constraints ──────────────────────────────────────────────

TrackTitleStr = Annotated[str, Field(description="Track title; empty and duplicate titles allowed")]
"""A track is identified solely by its title."""


# ── Datetime ────────────────────────────────────────────────────────


def _require_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        raise ValueError(ErrorMessages.TIMEZONE_REQUIRED_UTC_DATETIME)
    return value.astimezone(UTC)


UtcDatetimeField = Annotated[datetime, AfterValidator(_require_utc)]
"""Timezone-aware datetime normalized to UTC."""
