"""基于 SQLAlchemy 会话的订单存储

为导入提交提供 read_all / create / update / delete / delete_many 五个操作，
并把数据库异常转换为订单看板异常：
- 连接类错误（OperationalError）-> StoreUnavailable
- 其他数据库错误 -> StoreWriteError
"""

from contextlib import contextmanager

from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from .. import models
from ..core.errors import OrderNotFound, StoreUnavailable, StoreWriteError
from . import order as order_crud


class SqlAlchemyOrderStore:
    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _guard(self):
        try:
            yield
        except OperationalError as exc:
            self.db.rollback()
            raise StoreUnavailable(str(exc.orig or exc)) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreWriteError(str(exc)) from exc

    def read_all(self):
        with self._guard():
            return order_crud.list_orders(self.db)

    def create(self, fields: dict):
        with self._guard():
            db_order = models.Order(**fields)
            self.db.add(db_order)
            self.db.commit()
            return db_order.id

    def update(self, order_id, fields: dict) -> None:
        with self._guard():
            db_order = order_crud.get_order(self.db, order_id)
            if not db_order:
                raise OrderNotFound(order_id)
            order_crud.update_order_fields(self.db, db_order, fields)

    def delete(self, order_id) -> None:
        with self._guard():
            if not order_crud.delete_order(self.db, order_id):
                raise OrderNotFound(order_id)

    def delete_many(self, order_ids) -> int:
        with self._guard():
            return order_crud.delete_orders(self.db, order_ids)
