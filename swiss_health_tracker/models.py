from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from swiss_health_tracker.constants import EXPECTED_POINTS_TOTAL


class TrackedItem(BaseModel):
    """A daily goal or result worth a fixed number of points.

    ``is_completed`` is a view projection for a single date. It is serialized
    as ``isCompleted`` for compatibility with stored catalogs but is never the
    source of truth; completion lives in the completion store.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    title: str
    points: int = Field(default=0, ge=0)
    details: str = ""
    is_completed: bool = Field(default=False, alias="isCompleted")

    def with_completion(self, completed: bool) -> "TrackedItem":
        return self.model_copy(update={"is_completed": completed})

    def to_storage(self) -> dict[str, object]:
        return self.model_dump(by_alias=True)


ITEM_LIST_ADAPTER: TypeAdapter[list[TrackedItem]] = TypeAdapter(list[TrackedItem])


def coerce_points(raw: object) -> int:
    """Convert user input to a non-negative point value, falling back to 0."""

    if isinstance(raw, bool):
        return 0
    try:
        if isinstance(raw, (int, float)):
            return max(0, int(raw))
        return max(0, int(float(str(raw).strip())))
    except (TypeError, ValueError, OverflowError):
        return 0


def total_points(items: Iterable[TrackedItem]) -> int:
    return sum(item.points for item in items)


def points_warning(items: Iterable[TrackedItem], *, expected: int = EXPECTED_POINTS_TOTAL) -> str | None:
    """Return a hint when the catalog points do not add up to the expected total."""

    total = total_points(items)
    if total == expected:
        return None
    return f"{total} / {expected}"


__all__ = [
    "ITEM_LIST_ADAPTER",
    "TrackedItem",
    "coerce_points",
    "points_warning",
    "total_points",
]
