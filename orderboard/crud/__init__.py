from .order import (
    create_order,
    get_order,
    list_orders,
    update_order,
    update_order_fields,
    confirm_delivery,
    set_archived,
    delete_order,
    delete_orders,
    delete_all_orders,
)
from .store import SqlAlchemyOrderStore

__all__ = [
    "create_order",
    "get_order",
    "list_orders",
    "update_order",
    "update_order_fields",
    "confirm_delivery",
    "set_archived",
    "delete_order",
    "delete_orders",
    "delete_all_orders",
    "SqlAlchemyOrderStore",
]
