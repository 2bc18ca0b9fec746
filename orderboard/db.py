"""数据库入口

路由通过 get_db 获得请求级会话，导入脚本与测试直接使用 SessionLocal；
订单存储 (crud.store) 在同一会话上逐条提交导入结果
"""

from .database.connection import engine, get_db, Base, SessionLocal

__all__ = ["engine", "get_db", "Base", "SessionLocal"]
