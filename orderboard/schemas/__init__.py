"""API数据模型模块

定义所有 Pydantic 模型（请求/响应结构体）
"""

from .order import OrderCreate, OrderUpdate, OrderRead, BulkDeleteRequest, DeleteResult
from .imports import (
    ImportTextRequest,
    ImportCandidateSchema,
    SkippedLineSchema,
    ImportPreviewResponse,
    ImportCommitRequest,
    CommitFailureSchema,
    ImportCommitResponse,
)
from .board import BoardResponse, CalendarDayRead, MonthCalendarRead, DailySummaryRead

__all__ = [
    "OrderCreate",
    "OrderUpdate",
    "OrderRead",
    "BulkDeleteRequest",
    "DeleteResult",
    "ImportTextRequest",
    "ImportCandidateSchema",
    "SkippedLineSchema",
    "ImportPreviewResponse",
    "ImportCommitRequest",
    "CommitFailureSchema",
    "ImportCommitResponse",
    "BoardResponse",
    "CalendarDayRead",
    "MonthCalendarRead",
    "DailySummaryRead",
]
