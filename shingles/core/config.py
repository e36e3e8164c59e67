# 读取 .env 配置
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""

    # Shingling
    NGRAM_LENGTH: int = Field(3, ge=1, le=8)
    NORMALIZE: bool = False

    # Ingestion
    INGEST_WORKERS: int = Field(4, ge=1)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"  # 忽略多余的环境变量
    )


settings = Settings()
