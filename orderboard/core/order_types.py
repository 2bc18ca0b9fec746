"""订单类型、优先级与显示颜色

订单类型是固定的五种配送阶段。优先级用于两处：
- 导入对账时决定新记录能否覆盖已有记录（严格大于才覆盖）
- 日历上每天显示优先级最高的类型颜色
"""

import enum
from typing import Optional, Union

from .errors import UnknownOrderType


class OrderType(str, enum.Enum):
    installation = "instalacion"
    postdated = "posdatado"
    complete = "completo"
    partial = "parcial"
    pickup = "recogida"

    @classmethod
    def parse(cls, value) -> "OrderType":
        """接受类型标签（instalacion）或英文名（installation），不区分大小写"""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key == member.value or key == member.name:
                    return member
        raise UnknownOrderType(value)


PRIORITY = {
    OrderType.pickup: 5,
    OrderType.postdated: 4,
    OrderType.installation: 3,
    OrderType.complete: 2,
    OrderType.partial: 1,
}

COLORS = {
    OrderType.installation: "bg-blue-500",
    OrderType.postdated: "bg-yellow-400",
    OrderType.complete: "bg-green-500",
    OrderType.partial: "bg-lime-400",
    OrderType.pickup: "bg-red-500",
}

# 邮件摘要中使用的十六进制颜色
HEX_COLORS = {
    OrderType.installation: "#3B82F6",
    OrderType.postdated: "#FACC15",
    OrderType.complete: "#22C55E",
    OrderType.partial: "#A3E635",
    OrderType.pickup: "#EF4444",
}

FALLBACK_COLOR = "bg-gray-300"
FALLBACK_HEX_COLOR = "#9CA3AF"


def _lookup(order_type: Union[OrderType, str, None]) -> Optional[OrderType]:
    # 手工录入的历史数据可能带有未知类型，这里不抛异常
    if order_type is None:
        return None
    try:
        return OrderType.parse(order_type)
    except UnknownOrderType:
        return None


def priority_of(order_type) -> int:
    """未知类型的优先级为 0"""
    member = _lookup(order_type)
    return PRIORITY[member] if member else 0


def color_of(order_type) -> str:
    member = _lookup(order_type)
    return COLORS[member] if member else FALLBACK_COLOR


def hex_color_of(order_type) -> str:
    member = _lookup(order_type)
    return HEX_COLORS[member] if member else FALLBACK_HEX_COLOR


def supersedes(new_type, existing_type) -> bool:
    """新类型的优先级严格大于已有类型时才覆盖，相等不覆盖"""
    return priority_of(new_type) > priority_of(existing_type)
