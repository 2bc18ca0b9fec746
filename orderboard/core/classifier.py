"""订单分类

把全部订单按“今天”划分为三个互斥的桶：
- archived：已归档，优先于任何日期判断
- confirmed：有交货日期且日期 >= 今天
- pending：其余（没有交货日期，或日期已过）
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable, List, Union

from ..utils.helpers import to_day

PENDING = "pending"
CONFIRMED = "confirmed"
ARCHIVED = "archived"


@dataclass
class ClassifiedOrders:
    pending: List = field(default_factory=list)
    confirmed: List = field(default_factory=list)
    archived: List = field(default_factory=list)


def bucket_of(order, today: date) -> str:
    if order.archived:
        return ARCHIVED
    delivery = to_day(order.delivery_date)
    if delivery is not None and delivery >= today:
        return CONFIRMED
    return PENDING


def classify(orders: Iterable, today: Union[date, datetime, None] = None) -> ClassifiedOrders:
    today = to_day(today) or date.today()
    result = ClassifiedOrders()
    for order in orders:
        getattr(result, bucket_of(order, today)).append(order)
    return result
