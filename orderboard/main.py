"""FastAPI主应用入口

实现订单看板的RESTful API服务：
- 订单的增删改查、确认送达、归档与恢复
- 文本/文件批量导入：预览候选变更集后再提交
- 看板分类、月历聚合与每日配送摘要
"""

import logging

from fastapi import FastAPI, Depends, HTTPException
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .api.v1 import orders_router, imports_router, board_router
from .config.settings import settings
from .database.connection import Base, engine, get_db
from . import models  # noqa: F401  注册模型，保证 create_all 能建表

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

try:
    Base.metadata.create_all(bind=engine)
except SQLAlchemyError as exc:
    logger.warning("Could not create tables on startup: %s", exc)

# 创建FastAPI应用实例
app = FastAPI(title=settings.APP_TITLE, description=settings.APP_DESCRIPTION, version=settings.APP_VERSION)

# 挂载API路由
app.include_router(orders_router, prefix="/api/v1")
app.include_router(imports_router, prefix="/api/v1")
app.include_router(board_router, prefix="/api/v1")


# 健康检查端点
@app.get("/health/db")
def health_check(db: Session = Depends(get_db)):
    """检查数据库连接状态"""
    try:
        db.execute(text("SELECT 1"))
        return {"status": "healthy", "database": "reachable"}
    except SQLAlchemyError:
        raise HTTPException(status_code=503, detail="Database connection failed")


# 根路径 - 返回服务状态
@app.get("/")
def read_root():
    """返回服务运行状态"""
    return {"service": "Order Board", "status": "running"}
