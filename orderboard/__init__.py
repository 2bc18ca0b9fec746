"""订单看板模块入口

提供统一的模块导入接口
"""

from . import (
    config,
    db,
    models,
    schemas,
    crud,
    core,
)

from .config import settings
from .db import get_db, engine, Base

__all__ = [
    "config",
    "db",
    "models",
    "schemas",
    "crud",
    "core",
    "settings",
    "get_db",
    "engine",
    "Base",
]
