"""导入数据结构定义

预览（候选变更集）与提交相关的Pydantic模型
"""

from pydantic import BaseModel, field_validator, model_validator
from typing import List, Literal, Optional
from datetime import date

from ..core.order_types import OrderType, color_of
from ..core.reconciler import ImportCandidate, STATUS_UPDATE


class ImportTextRequest(BaseModel):
    text: str
    order_type: OrderType
    source_file: Optional[str] = None

    @field_validator("order_type", mode="before")
    @classmethod
    def parse_type(cls, value):
        return OrderType.parse(value)


class ImportCandidateSchema(BaseModel):
    """候选记录，status 为 new 或 update"""
    order_number: str
    customer_name: str
    type: OrderType
    delivery_date: date
    status: Literal["new", "update"]
    order_id: Optional[int] = None
    source_file: Optional[str] = None
    color: Optional[str] = None

    @field_validator("type", mode="before")
    @classmethod
    def parse_type(cls, value):
        return OrderType.parse(value)

    @model_validator(mode="after")
    def check_update_target(self):
        if self.status == STATUS_UPDATE and self.order_id is None:
            raise ValueError("update candidates must carry order_id")
        # 颜色总是由类型重新计算
        self.color = color_of(self.type)
        return self

    @classmethod
    def from_candidate(cls, candidate: ImportCandidate) -> "ImportCandidateSchema":
        return cls(
            order_number=candidate.order_number,
            customer_name=candidate.customer_name,
            type=candidate.type,
            delivery_date=candidate.delivery_date,
            status=candidate.status,
            order_id=candidate.order_id,
            source_file=candidate.source_file,
        )

    def to_candidate(self) -> ImportCandidate:
        return ImportCandidate(
            order_number=self.order_number,
            customer_name=self.customer_name,
            type=self.type,
            delivery_date=self.delivery_date,
            status=self.status,
            order_id=self.order_id,
            source_file=self.source_file,
        )


class SkippedLineSchema(BaseModel):
    line_number: int
    line: str
    reason: str
    detail: str = ""

    class Config:
        from_attributes = True


class ImportPreviewResponse(BaseModel):
    candidates: List[ImportCandidateSchema]
    skipped: List[SkippedLineSchema]
    new_count: int
    update_count: int
    warning: Optional[str] = None


class ImportCommitRequest(BaseModel):
    candidates: List[ImportCandidateSchema]


class CommitFailureSchema(BaseModel):
    order_number: str
    status: str
    order_id: Optional[int] = None
    error: str

    class Config:
        from_attributes = True


class ImportCommitResponse(BaseModel):
    status: Literal["empty", "success", "partial", "failed"]
    created: List[int]
    updated: List[int]
    failures: List[CommitFailureSchema]
    message: str
