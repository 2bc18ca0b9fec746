"""月历聚合

对指定年月，计算每天是否有订单以及当天显示的主类型（优先级最高的类型）。
周一为每周第一天，leading_blanks 表示月初前需要留空的格数。
"""

import calendar as _calendar
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Optional

from .order_types import OrderType, color_of, priority_of
from ..utils.helpers import to_day

NEUTRAL_COLOR = "bg-gray-200"


@dataclass
class CalendarDay:
    day: int
    date: date
    has_orders: bool = False
    order_count: int = 0
    dominant_type: Optional[OrderType] = None
    is_today: bool = False

    @property
    def color(self) -> str:
        # 没有主类型的日子显示中性色，不套用任何类型颜色
        return color_of(self.dominant_type) if self.dominant_type else NEUTRAL_COLOR


@dataclass
class MonthCalendar:
    year: int
    month: int
    leading_blanks: int
    days: List[CalendarDay] = field(default_factory=list)

    def get(self, day: int) -> CalendarDay:
        return self.days[day - 1]


def dominant_type(order_types: Iterable) -> Optional[OrderType]:
    """按优先级左折叠：只有严格更高时才替换，未知类型（优先级 0）永远不会成为主类型"""
    best, best_priority = None, 0
    for order_type in order_types:
        priority = priority_of(order_type)
        if priority > best_priority:
            best, best_priority = OrderType.parse(order_type), priority
    return best


def aggregate_month(orders: Iterable, year: int, month: int, today: Optional[date] = None) -> MonthCalendar:
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month {month}")

    by_day = {}
    for order in orders:
        delivery = to_day(order.delivery_date)
        if delivery is None or delivery.year != year or delivery.month != month:
            continue
        by_day.setdefault(delivery.day, []).append(order.type)

    first_weekday, total_days = _calendar.monthrange(year, month)
    result = MonthCalendar(year=year, month=month, leading_blanks=first_weekday)

    for day in range(1, total_days + 1):
        current = date(year, month, day)
        types = by_day.get(day, [])
        result.days.append(
            CalendarDay(
                day=day,
                date=current,
                has_orders=bool(types),
                order_count=len(types),
                dominant_type=dominant_type(types),
                is_today=current == today,
            )
        )
    return result
