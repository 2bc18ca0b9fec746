"""订单模型定义"""

from sqlalchemy import Boolean, Column, Date, DateTime, Integer, String
from sqlalchemy.sql import func
from .base import Base
from ..core.order_types import color_of


class Order(Base):
    """订单模型"""
    __tablename__ = "orders"
    id = Column(Integer, primary_key=True, index=True)
    # 订单号，导入时用于去重的自然键（不做唯一约束）
    order_number = Column(String(64), nullable=False, index=True)
    customer_name = Column(String(255), nullable=False)
    # 类型标签：instalacion / posdatado / completo / parcial / recogida
    type = Column(String(32), nullable=False)
    # 交货日期，未排期时为空
    delivery_date = Column(Date, nullable=True)
    archived = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, server_default=func.now())
    # 导入来源文件
    source_file = Column(String(255), nullable=True)

    @property
    def color(self) -> str:
        # 颜色只由类型推导，不落库
        return color_of(self.type)
