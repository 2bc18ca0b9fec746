"""应用配置模块

使用 Pydantic Settings 管理应用配置，支持从 .env 文件加载环境变量
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """应用配置类"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # 应用配置
    APP_TITLE: str = "订单看板"
    APP_DESCRIPTION: str = "配送订单导入、对账与日历看板API"
    APP_VERSION: str = "1.0.0"

    # MySQL 配置 - 从环境变量加载，未设置 MYSQL_USER 时不使用
    MYSQL_USER: Optional[str] = None
    MYSQL_PASSWORD: str = ""
    MYSQL_HOST: str = "127.0.0.1"
    MYSQL_PORT: str = "3306"
    MYSQL_DB: str = "orderboard"

    # 数据库配置 - 优先使用DATABASE_URL，否则从MySQL配置构建，最后退回本地sqlite
    DATABASE_URL: str = ""
    ECHO_SQL: bool = False  # 是否打印SQL日志

    # 日志级别
    LOG_LEVEL: str = "INFO"

    # 导入配置
    IMPORT_MAX_UPLOAD_BYTES: int = 1024 * 1024
    IMPORT_HEADER_MARKER: str = "fecha entrega"  # 表头行标记（不区分大小写）

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if not self.DATABASE_URL:
            if self.MYSQL_USER:
                self.DATABASE_URL = (
                    f"mysql+pymysql://{self.MYSQL_USER}:{self.MYSQL_PASSWORD}"
                    f"@{self.MYSQL_HOST}:{self.MYSQL_PORT}/{self.MYSQL_DB}"
                )
            else:
                self.DATABASE_URL = "sqlite:///./orderboard.db"


# 创建全局配置实例
settings = Settings()
