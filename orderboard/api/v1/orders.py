from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import date
import logging

from ... import crud, schemas
from ...core.errors import StoreUnavailable
from ...database.connection import get_db

router = APIRouter(prefix="/orders", tags=["orders"])

logger = logging.getLogger(__name__)


def load_orders(db: Session):
    """读取全部订单，存储不可用时返回 503"""
    try:
        return crud.SqlAlchemyOrderStore(db).read_all()
    except StoreUnavailable as exc:
        logger.error("Order store unavailable: %s", exc)
        raise HTTPException(status_code=503, detail="Order store unavailable")


@router.post("/", response_model=schemas.OrderRead)
def create_order_endpoint(order: schemas.OrderCreate, db: Session = Depends(get_db)):
    """手工创建订单"""
    return crud.create_order(db, order)


@router.get("/", response_model=List[schemas.OrderRead])
def list_orders_endpoint(db: Session = Depends(get_db)):
    return load_orders(db)


@router.get("/{order_id}", response_model=schemas.OrderRead)
def get_order_endpoint(order_id: int, db: Session = Depends(get_db)):
    db_order = crud.get_order(db, order_id)
    if not db_order:
        raise HTTPException(status_code=404, detail="Order not found")
    return db_order


@router.put("/{order_id}", response_model=schemas.OrderRead)
def update_order_endpoint(order_id: int, order_update: schemas.OrderUpdate, db: Session = Depends(get_db)):
    """编辑订单，只更新请求中给出的字段"""
    db_order = crud.update_order(db, order_id, order_update)
    if not db_order:
        raise HTTPException(status_code=404, detail="Order not found")
    return db_order


@router.post("/{order_id}/confirm-delivery", response_model=schemas.OrderRead)
def confirm_delivery_endpoint(
    order_id: int,
    today: Optional[date] = Query(None, description="默认为服务器当天"),
    db: Session = Depends(get_db),
):
    """确认今天送达"""
    db_order = crud.confirm_delivery(db, order_id, today)
    if not db_order:
        raise HTTPException(status_code=404, detail="Order not found")
    return db_order


@router.post("/{order_id}/archive", response_model=schemas.OrderRead)
def archive_order_endpoint(order_id: int, db: Session = Depends(get_db)):
    db_order = crud.set_archived(db, order_id, True)
    if not db_order:
        raise HTTPException(status_code=404, detail="Order not found")
    return db_order


@router.post("/{order_id}/restore", response_model=schemas.OrderRead)
def restore_order_endpoint(order_id: int, db: Session = Depends(get_db)):
    db_order = crud.set_archived(db, order_id, False)
    if not db_order:
        raise HTTPException(status_code=404, detail="Order not found")
    return db_order


@router.delete("/{order_id}")
def delete_order_endpoint(order_id: int, db: Session = Depends(get_db)):
    """删除指定ID的订单"""
    success = crud.delete_order(db, order_id)
    if not success:
        raise HTTPException(status_code=404, detail="Order not found")
    return {"message": "Order deleted successfully"}


@router.post("/bulk-delete", response_model=schemas.DeleteResult)
def bulk_delete_endpoint(payload: schemas.BulkDeleteRequest, db: Session = Depends(get_db)):
    deleted = crud.delete_orders(db, payload.ids)
    return schemas.DeleteResult(deleted=deleted, message=f"{deleted} orders deleted")


@router.delete("/", response_model=schemas.DeleteResult)
def delete_all_endpoint(db: Session = Depends(get_db)):
    """删除全部订单"""
    deleted = crud.delete_all_orders(db)
    logger.warning("All orders deleted (%d)", deleted)
    return schemas.DeleteResult(deleted=deleted, message="All orders deleted")
