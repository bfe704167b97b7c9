"""Tests for shared validation rules."""

from datetime import date

import pytest

from calorie_tracker.domain.errors import InvalidComposition, InvalidRange
from calorie_tracker.services.validation import (
    require_non_empty,
    require_not_future,
    require_positive_servings,
    validate_date_range,
)


def test_require_non_empty_rejects_empty_and_none() -> None:
    with pytest.raises(InvalidComposition):
        require_non_empty([], "empty")
    with pytest.raises(InvalidComposition):
        require_non_empty(None, "missing")

    require_non_empty([1], "ok")


@pytest.mark.parametrize("servings", [0, -1.5, float("nan")])
def test_require_positive_servings_rejects(servings: float) -> None:
    with pytest.raises(InvalidComposition):
        require_positive_servings(servings)


def test_require_not_future() -> None:
    today = date(2025, 3, 30)

    require_not_future(today, today)
    with pytest.raises(InvalidComposition):
        require_not_future(date(2025, 3, 31), today)


def test_validate_date_range_counts_inclusive_days() -> None:
    assert validate_date_range(date(2025, 3, 30), date(2025, 3, 30)) == 1
    assert validate_date_range(date(2025, 3, 1), date(2025, 3, 31)) == 31


def test_validate_date_range_rejects_reversed_range() -> None:
    with pytest.raises(InvalidRange):
        validate_date_range(date(2025, 4, 2), date(2025, 4, 1))


def test_validate_date_range_rejects_32_days() -> None:
    with pytest.raises(InvalidRange):
        validate_date_range(date(2025, 3, 30), date(2025, 4, 30))


def test_validate_date_range_custom_limit() -> None:
    with pytest.raises(InvalidRange):
        validate_date_range(date(2025, 3, 1), date(2025, 3, 8), max_days=7)
