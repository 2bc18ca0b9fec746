"""数据库操作（CRUD）- 订单相关

封装常用的数据库读写操作，便于路由层调用并保持业务逻辑集中。
- create_order / update_order 用于手工录入和编辑
- confirm_delivery / set_archived 对应看板上的确认送达、归档与恢复
- delete_orders / delete_all_orders 用于批量删除
"""

from sqlalchemy.orm import Session
from .. import models, schemas
from datetime import date, datetime
from typing import Iterable, Optional


def create_order(db: Session, order: schemas.OrderCreate, created_at: Optional[datetime] = None):
    db_order = models.Order(
        order_number=order.order_number,
        customer_name=order.customer_name,
        type=order.type.value,
        delivery_date=order.delivery_date,
        archived=order.archived,
        created_at=created_at or datetime.now(),
    )
    db.add(db_order)
    db.commit()
    db.refresh(db_order)
    return db_order


def get_order(db: Session, order_id: int):
    return db.query(models.Order).filter(models.Order.id == order_id).first()


def list_orders(db: Session):
    """获取所有订单，按创建时间倒序"""
    return db.query(models.Order).order_by(models.Order.created_at.desc(), models.Order.id.desc()).all()


def update_order(db: Session, order_id: int, order_update: schemas.OrderUpdate):
    """更新订单"""
    db_order = get_order(db, order_id)
    if not db_order:
        return None

    update_data = order_update.model_dump(exclude_unset=True)
    if "type" in update_data:
        update_data["type"] = update_data["type"].value
    return update_order_fields(db, db_order, update_data)


def update_order_fields(db: Session, db_order, fields: dict):
    """只写入给定的字段"""
    for field, value in fields.items():
        setattr(db_order, field, value)
    db.commit()
    db.refresh(db_order)
    return db_order


def confirm_delivery(db: Session, order_id: int, today: Optional[date] = None):
    """确认送达：交货日期设为今天"""
    db_order = get_order(db, order_id)
    if not db_order:
        return None
    return update_order_fields(db, db_order, {"delivery_date": today or date.today()})


def set_archived(db: Session, order_id: int, archived: bool):
    """归档 / 恢复订单"""
    db_order = get_order(db, order_id)
    if not db_order:
        return None
    return update_order_fields(db, db_order, {"archived": archived})


def delete_order(db: Session, order_id: int):
    """删除指定ID的订单"""
    order = get_order(db, order_id)
    if order:
        db.delete(order)
        db.commit()
        return True
    return False


def delete_orders(db: Session, order_ids: Iterable[int]) -> int:
    """按ID批量删除，返回实际删除的数量"""
    ids = list(order_ids)
    if not ids:
        return 0
    deleted = db.query(models.Order).filter(models.Order.id.in_(ids)).delete(synchronize_session=False)
    db.commit()
    return deleted


def delete_all_orders(db: Session) -> int:
    deleted = db.query(models.Order).delete(synchronize_session=False)
    db.commit()
    return deleted
