"""订单数据结构定义

定义订单相关的Pydantic模型
"""

from pydantic import BaseModel, field_validator
from typing import List, Optional
from datetime import date, datetime

from ..core.order_types import OrderType


def _required_text(value):
    if value is None:
        raise ValueError("must not be empty")
    value = str(value).strip()
    if not value:
        raise ValueError("must not be empty")
    return value


class OrderBase(BaseModel):
    """订单基础模型"""
    order_number: str
    customer_name: str
    type: OrderType
    delivery_date: Optional[date] = None

    @field_validator("order_number", "customer_name", mode="before")
    @classmethod
    def strip_text(cls, value):
        return _required_text(value)

    @field_validator("type", mode="before")
    @classmethod
    def parse_type(cls, value):
        return OrderType.parse(value)


class OrderCreate(OrderBase):
    """创建订单时的模型"""
    archived: bool = False


class OrderUpdate(BaseModel):
    """更新订单时的模型"""
    order_number: Optional[str] = None
    customer_name: Optional[str] = None
    type: Optional[OrderType] = None
    delivery_date: Optional[date] = None
    archived: Optional[bool] = None

    @field_validator("order_number", "customer_name", mode="before")
    @classmethod
    def strip_text(cls, value):
        return _required_text(value)

    @field_validator("type", mode="before")
    @classmethod
    def parse_type(cls, value):
        return OrderType.parse(value)

    @field_validator("archived", mode="before")
    @classmethod
    def require_archived(cls, value):
        # 字段可省略，但不能显式置空
        if value is None:
            raise ValueError("archived must be true or false")
        return value


class OrderRead(BaseModel):
    """读取订单时的模型

    type 使用普通字符串：手工录入的历史数据可能带有未知类型，此时 color 为中性色
    """
    id: int
    order_number: str
    customer_name: str
    type: str
    color: str
    delivery_date: Optional[date] = None
    archived: bool = False
    created_at: Optional[datetime] = None
    source_file: Optional[str] = None

    class Config:
        from_attributes = True


class BulkDeleteRequest(BaseModel):
    ids: List[int]


class DeleteResult(BaseModel):
    deleted: int
    message: str
