"""订单看板核心逻辑

导入解析与对账、订单分类、月历聚合，均为不依赖数据库的纯函数。
"""

from .order_types import OrderType, priority_of, color_of, supersedes
from .date_parser import parse_delivery_date
from .line_parser import parse_line, ParsedLine
from .reconciler import (
    ImportCandidate,
    ImportReport,
    analyze_import,
    reconcile_import,
    STATUS_NEW,
    STATUS_UPDATE,
)
from .commit import CommitResult, commit_import
from .classifier import ClassifiedOrders, classify
from .calendar import MonthCalendar, CalendarDay, aggregate_month
from .summary import DailySummary, build_daily_summary

__all__ = [
    "OrderType",
    "priority_of",
    "color_of",
    "supersedes",
    "parse_delivery_date",
    "parse_line",
    "ParsedLine",
    "ImportCandidate",
    "ImportReport",
    "analyze_import",
    "reconcile_import",
    "STATUS_NEW",
    "STATUS_UPDATE",
    "CommitResult",
    "commit_import",
    "ClassifiedOrders",
    "classify",
    "MonthCalendar",
    "CalendarDay",
    "aggregate_month",
    "DailySummary",
    "build_daily_summary",
]
