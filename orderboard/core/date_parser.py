"""交货日期解析

支持两种文本格式（按顺序尝试）：
1. D/M/Y，例如 15/08/2025
2. D/MY，月份与四位年份连写，例如 15/082025 或 1/12025

构造出的日期必须与输入的年、月完全一致，31/02/2025 之类的溢出日期直接判为无效，
而不是顺延到下个月。
"""

import re
from datetime import date

from .errors import InvalidDate

# 年份最多四位，超出 date 的范围也就无从还原
_DAY_MONTH_YEAR = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{1,4})$", re.ASCII)
_DAY_MONTHYEAR = re.compile(r"^(\d{1,2})/(\d{1,2})(\d{4})$", re.ASCII)

# 两位数年份无法原样还原，直接拒绝
MIN_YEAR = 100


def _build(day: int, month: int, year: int, token: str) -> date:
    if year < MIN_YEAR:
        raise InvalidDate(token, f"Year out of range in {token!r}")
    try:
        result = date(year, month, day)
    except (ValueError, OverflowError):
        raise InvalidDate(token, f"Invalid calendar date {token!r}")
    if result.year != year or result.month != month:
        raise InvalidDate(token, f"Invalid calendar date {token!r}")
    return result


def parse_delivery_date(token: str) -> date:
    """把日期文本解析为 date，无法解析时抛出 InvalidDate"""
    if token is None:
        raise InvalidDate("", "Missing delivery date")
    text = token.strip()

    if len(text.split("/")) == 3:
        match = _DAY_MONTH_YEAR.match(text)
    else:
        match = _DAY_MONTHYEAR.match(text)

    if not match:
        raise InvalidDate(text, f"Unrecognised date format {text!r}")

    day, month, year = (int(part) for part in match.groups())
    return _build(day, month, year, text)
