from .orders import router as orders_router
from .imports import router as imports_router
from .board import router as board_router

__all__ = ["orders_router", "imports_router", "board_router"]
