"""
데이터베이스 연결 및 세션 관리 모듈
SQLAlchemy 비동기 설정
"""

from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from catalog_search.config import get_settings


class Base(DeclarativeBase):
    """SQLAlchemy 모델 베이스 클래스"""
    pass


def build_engine(url: Optional[str] = None, echo: Optional[bool] = None) -> AsyncEngine:
    """
    비동기 엔진 생성

    SQLite(aiosqlite)는 테스트/로컬 용도로만 사용하며,
    인메모리 DB는 모든 세션이 같은 연결을 공유해야 함
    """
    settings = get_settings()
    url = url or settings.database_url
    echo = settings.database_echo if echo is None else echo

    if url.startswith("sqlite"):
        return create_async_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    return create_async_engine(
        url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
    )


# 싱글톤 인스턴스
_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def get_engine() -> AsyncEngine:
    """설정 기반 엔진 싱글톤 반환"""
    global _engine
    if _engine is None:
        _engine = build_engine()
    return _engine


def make_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """비동기 세션 팩토리 생성"""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """세션 팩토리 싱글톤 반환"""
    global _session_factory
    if _session_factory is None:
        _session_factory = make_session_factory(get_engine())
    return _session_factory


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    데이터베이스 세션 의존성
    검색 엔진은 읽기 전용이므로 커밋하지 않음
    """
    async with get_session_factory()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def init_db(engine: Optional[AsyncEngine] = None) -> None:
    """
    데이터베이스 초기화
    테이블 생성 (개발/테스트용, 프로덕션에서는 Alembic 사용)
    """
    # 모델 임포트 (메타데이터 등록용)
    from catalog_search.models import catalog  # noqa: F401

    engine = engine or get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """데이터베이스 연결 종료"""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None
