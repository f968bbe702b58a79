from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.exc import OperationalError
from app.core.config import settings
from app.db.base_class import Base
import logging
from typing import AsyncGenerator

logger = logging.getLogger(__name__)


def get_async_database_url(db_url: str) -> str:
    """
    Rewrite plain PostgreSQL URLs so they use the asyncpg driver.
    """
    # If using postgresql://, convert to postgresql+asyncpg://
    if db_url.startswith('postgresql://'):
        return db_url.replace('postgresql://', 'postgresql+asyncpg://', 1)
    # If using postgres://, convert to postgresql+asyncpg://
    if db_url.startswith('postgres://'):
        return db_url.replace('postgres://', 'postgresql+asyncpg://', 1)
    return db_url


def build_engine(db_url: str):
    """
    Create the async engine. Pool tuning only applies to server databases;
    sqlite picks its own pool.
    """
    db_url = get_async_database_url(db_url)

    if db_url.startswith('sqlite'):
        logger.info("Using async database connection with aiosqlite")
        return create_async_engine(db_url, echo=settings.SQL_ECHO, future=True)

    logger.info("Using async database connection with asyncpg")
    return create_async_engine(
        db_url,
        echo=settings.SQL_ECHO,
        future=True,
        pool_pre_ping=True,  # Verify connections before using them
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,  # Seconds to wait before giving up on getting a connection
        pool_recycle=settings.DB_POOL_RECYCLE,
        connect_args={
            "command_timeout": settings.DB_COMMAND_TIMEOUT,  # Maximum time for a command to run
        }
    )


try:
    engine = build_engine(settings.DATABASE_URL)

    AsyncSessionLocal = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False
    )
except OperationalError as e:
    logger.error(f"Failed to connect to database: {e}")
    raise

# Dependency to use in FastAPI endpoints
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency that provides an async database session.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()

async def create_tables(bind=None):
    """
    Create every table registered on the declarative base.
    """
    # Register all models on the metadata
    import app.db.base  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

# Function to initialize database connection
async def initialize_db():
    """
    Initialize database connection and verify it's working.
    """
    if settings.DB_CREATE_TABLES:
        await create_tables()
    else:
        async with engine.connect():
            pass
    logger.info("Database connection initialized successfully")
    return True

# Function to close database connection
async def close_db_connection():
    """
    Close database connection pool.
    """
    await engine.dispose()
    logger.info("Database connection pool closed")
