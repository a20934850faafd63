"""여행 일수 계산 및 일차별 배정 개수 테스트."""

from __future__ import annotations

from datetime import date

import pytest

from app.services.day_partition import count_travel_days, partition_items


def _counts(item_count: int, day_count: int) -> list[int]:
    return [target.target_count for target in partition_items(item_count, day_count)]


@pytest.mark.parametrize(
    ("item_count", "day_count", "expected"),
    [
        (10, 3, [4, 3, 3]),
        (9, 3, [3, 3, 3]),
        (0, 2, [0, 0]),
        (2, 4, [1, 1, 0, 0]),
        (7, 1, [7]),
    ],
)
def test_partition_items_examples(item_count: int, day_count: int, expected: list[int]) -> None:
    assert _counts(item_count, day_count) == expected


def test_partition_items_is_fair_for_all_small_inputs() -> None:
    for day_count in range(1, 8):
        for item_count in range(0, 30):
            counts = _counts(item_count, day_count)
            remainder = item_count % day_count

            assert len(counts) == day_count
            assert sum(counts) == item_count
            assert max(counts) - min(counts) <= 1
            assert all(count == counts[0] for count in counts[:remainder])
            if remainder:
                assert counts[remainder - 1] > counts[remainder]


def test_partition_items_numbers_days_from_one() -> None:
    targets = partition_items(5, 3)

    assert [target.day_number for target in targets] == [1, 2, 3]


def test_partition_items_treats_non_positive_day_count_as_single_day() -> None:
    assert _counts(4, 0) == [4]


def test_count_travel_days_includes_both_ends() -> None:
    assert count_travel_days(date(2025, 5, 1), date(2025, 5, 3)) == 3


def test_count_travel_days_same_day_is_one_day() -> None:
    assert count_travel_days(date(2025, 5, 1), date(2025, 5, 1)) == 1


def test_count_travel_days_clamps_reversed_range_to_one_day() -> None:
    assert count_travel_days(date(2025, 5, 3), date(2025, 5, 1)) == 1
