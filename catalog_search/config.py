"""
환경변수 설정 모듈
Pydantic Settings를 사용하여 환경변수를 관리합니다.
모든 설정은 .env 파일에서 가져옵니다.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========== 데이터베이스 설정 ==========
    postgres_user: str = ""
    postgres_password: str = ""
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = ""
    database_echo: bool = False

    @property
    def database_url(self) -> str:
        """PostgreSQL 비동기 연결 URL"""
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def database_url_sync(self) -> str:
        """PostgreSQL 동기 연결 URL (Alembic용)"""
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    # ========== 검색 설정 ==========
    # 개별 검색어 분리 시 이 길이 미만의 토큰은 버림
    search_min_term_length: int = 2
    # product_tags 조인 테이블 기반 태그 ID 필터 사용 여부
    search_tag_join_enabled: bool = True
    search_suggestion_min_length: int = 2
    search_suggestion_limit: int = 10

    # ========== 로깅 설정 ==========
    log_level: str = "INFO"


@lru_cache()
def get_settings() -> Settings:
    """캐싱된 설정 인스턴스 반환"""
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """설정된 로그 레벨로 루트 로거 구성"""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
