from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker, declarative_base
from config import DATABASE_URL_ASYNC, SQL_ECHO

# one engine per process; every request borrows a session from its pool
async_engine = create_async_engine(DATABASE_URL_ASYNC, echo=SQL_ECHO, pool_pre_ping=True)
async_session_maker = sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)
Base = declarative_base()

async def init_models():
    import models  # noqa: F401  registers the tables on Base.metadata
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

async def dispose_engine():
    await async_engine.dispose()

async def get_db():
    async with async_session_maker() as session:
        yield session
