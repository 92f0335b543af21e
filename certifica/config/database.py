# =============================================
# certifica/config/database.py
# =============================================
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool
from sqlalchemy import MetaData, inspect, text
from typing import AsyncGenerator
import logging
from certifica.config.settings import get_settings

logger = logging.getLogger(__name__)

# Get settings instance
settings = get_settings()

def _engine_options() -> dict:
    if settings.is_sqlite:
        return {"echo": settings.DEBUG, "poolclass": NullPool}
    return {
        "echo": settings.DEBUG,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
        "pool_size": 10,
        "max_overflow": 20,
    }

# Async Engine
engine = create_async_engine(settings.get_database_url(), **_engine_options())

# Session Factory
async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)

# Base Model with metadata
metadata = MetaData()

class Base(DeclarativeBase):
    metadata = metadata

# =============================================
# DATABASE FUNCTIONS
# =============================================

# Dependency para obter sessão do banco
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency para obter sessão do banco de dados"""
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()

def get_session_factory() -> async_sessionmaker:
    """Dependency for services that open several independent sessions"""
    return async_session

async def create_tables():
    """Criar todas as tabelas registradas no metadata"""
    # Registers every model on Base.metadata
    import certifica.database.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tabelas criadas/verificadas via metadata")

async def drop_all_tables():
    """
    Remover todas as tabelas (usar com cuidado!)
    """
    logger.warning("REMOVENDO TODAS AS TABELAS!")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info("Todas as tabelas removidas")

async def get_table_names() -> list:
    """Get list of all table names"""
    async with engine.connect() as conn:
        tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
    return sorted(tables)

# Health check function
async def check_database_health() -> bool:
    """Check if database is accessible"""
    try:
        async with async_session() as session:
            result = await session.execute(text("SELECT 1"))
            return result.scalar() == 1
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return False

# =============================================
# CONNECTION MANAGEMENT
# =============================================

async def init_database():
    """Initialize database connection and verify setup"""
    logger.info("Inicializando conexão com banco de dados...")

    if not await check_database_health():
        raise ConnectionError("Não foi possível conectar ao banco de dados")

    if settings.AUTO_CREATE_TABLES:
        await create_tables()
        return True

    tables = await get_table_names()
    logger.info(f"Encontradas {len(tables)} tabelas no banco de dados")
    if not tables:
        logger.warning("Nenhuma tabela encontrada! Execute as migrações Alembic:")
        logger.warning("  python -m alembic upgrade head")
    return True

async def close_database():
    """Close database connections"""
    await engine.dispose()
    logger.info("Conexões com banco de dados fechadas")
