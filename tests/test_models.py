from __future__ import annotations

import pytest
from pydantic import ValidationError

from swiss_health_tracker.models import TrackedItem, coerce_points, points_warning


def test_item_serializes_completion_under_legacy_alias() -> None:
    item = TrackedItem(id=3, title="Boire 2L d'eau", points=10, details="")

    payload = item.to_storage()

    assert payload == {"id": 3, "title": "Boire 2L d'eau", "points": 10, "details": "", "isCompleted": False}
    assert TrackedItem.model_validate(payload) == item


def test_item_is_immutable_and_rejects_negative_points() -> None:
    item = TrackedItem(id=1, title="Sleep", points=10)

    with pytest.raises(ValidationError):
        item.title = "Nap"  # type: ignore[misc]

    with pytest.raises(ValidationError):
        TrackedItem(id=2, title="Broken", points=-5)


def test_with_completion_returns_copy() -> None:
    item = TrackedItem(id=1, title="Sleep", points=10)

    completed = item.with_completion(True)

    assert completed.is_completed is True
    assert item.is_completed is False


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("15", 15),
        (" 7 ", 7),
        (12, 12),
        (10.0, 10),
        ("12.5", 12),
        ("abc", 0),
        ("", 0),
        (None, 0),
        ("-4", 0),
        (True, 0),
        (float("nan"), 0),
    ],
)
def test_coerce_points(raw: object, expected: int) -> None:
    assert coerce_points(raw) == expected


def test_points_warning_only_when_total_differs() -> None:
    balanced = [TrackedItem(id=index, title=str(index), points=25) for index in range(1, 5)]
    unbalanced = balanced[:3]

    assert points_warning(balanced) is None
    assert points_warning(unbalanced) == "75 / 100"
