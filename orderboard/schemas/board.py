"""看板与日历数据结构定义"""

from pydantic import BaseModel
from typing import List, Optional
from datetime import date

from .order import OrderRead
from ..core.order_types import OrderType


class BoardResponse(BaseModel):
    today: date
    pending: List[OrderRead]
    confirmed: List[OrderRead]
    archived: List[OrderRead]


class CalendarDayRead(BaseModel):
    day: int
    date: date
    has_orders: bool
    order_count: int
    dominant_type: Optional[OrderType] = None
    color: str
    is_today: bool

    class Config:
        from_attributes = True


class MonthCalendarRead(BaseModel):
    year: int
    month: int
    leading_blanks: int
    days: List[CalendarDayRead]

    class Config:
        from_attributes = True


class DailySummaryRead(BaseModel):
    day: date
    orders: List[OrderRead]
    html: str

    class Config:
        from_attributes = True
