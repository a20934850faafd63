"""여행 일수 계산 및 일차별 장소 배정 개수 산정."""

from __future__ import annotations

from datetime import date

from app.schemas.schedule import DayTarget


def count_travel_days(start_date: date, end_date: date) -> int:
    """여행 일수를 계산한다. 종료일이 시작일보다 빠르면 1일로 본다."""
    travel_days = (end_date - start_date).days + 1
    return travel_days if travel_days > 0 else 1


def partition_items(item_count: int, day_count: int) -> list[DayTarget]:
    """장소 개수를 일차별로 균등 배분한다.

    나머지는 앞 일차부터 하나씩 더 배정한다. 예: 10개/3일 -> [4, 3, 3].
    """
    days = max(1, day_count)
    base, remainder = divmod(max(0, item_count), days)
    return [DayTarget(day_number=index + 1, target_count=base + (1 if index < remainder else 0)) for index in range(days)]
