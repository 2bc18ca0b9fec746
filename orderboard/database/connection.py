"""订单库连接

DATABASE_URL 由 config.settings 解析（显式配置、MySQL 变量或本地 sqlite 文件）。
会话不自动提交，提交时机由 crud 层决定：单条写入立即提交，导入按候选逐条提交。
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from ..config.settings import settings

# sqlite 在 TestClient / 线程池中使用时需要关闭同线程检查
connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    connect_args = {"check_same_thread": False}

# 创建数据库引擎
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    echo=settings.ECHO_SQL,  # 从配置中读取是否显示SQL日志
    connect_args=connect_args,
)

# 创建会话工厂
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# 创建模型基类
Base = declarative_base()


def get_db():
    """获取数据库会话的依赖函数"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
