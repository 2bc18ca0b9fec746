"""工具函数模块

包含一些常用的日期工具函数
"""

from datetime import date, datetime
from typing import Optional, Union


def to_day(value: Union[date, datetime, str, None]) -> Optional[date]:
    """把 date / datetime / ISO 字符串统一成当天日期（去掉时间部分）"""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.fromisoformat(str(value)).date()


def format_day(value) -> str:
    """将日期格式化为 日/月/年 显示格式"""
    day = to_day(value)
    if day:
        return day.strftime("%d/%m/%Y")
    return "—"
