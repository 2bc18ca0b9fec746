"""每日配送摘要

选出某天交付的订单，生成可以直接粘贴到邮件里的 HTML 列表。
"""

from dataclasses import dataclass, field
from datetime import date
from html import escape
from typing import Iterable, List

from .order_types import hex_color_of
from ..utils.helpers import format_day, to_day


@dataclass
class DailySummary:
    day: date
    orders: List = field(default_factory=list)
    html: str = ""


def build_daily_summary(orders: Iterable, day: date) -> DailySummary:
    daily = [o for o in orders if to_day(o.delivery_date) == day]

    lines = [f"<p><strong>Delivery summary for {format_day(day)}:</strong></p><ul>"]
    for order in daily:
        lines.append(
            f'<li><span style="color: {hex_color_of(order.type)};">●</span> '
            f"Order #{escape(str(order.order_number))} - Customer: {escape(str(order.customer_name))} "
            f"({escape(str(order.type))})</li>"
        )
    lines.append("</ul>")

    return DailySummary(day=day, orders=daily, html="".join(lines))
