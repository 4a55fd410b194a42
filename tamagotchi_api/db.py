from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tamagotchi_api.load_secrets import db_backend

if db_backend == "postgres":
    from tamagotchi_api.create_postgres_engine import engine
else:
    from tamagotchi_api.create_sqlite_engine import engine

# Centralized session factory to avoid creating it in router modules.
# Rows stay readable after commit so services can build response schemas.
Session = async_sessionmaker(
    autocommit=False,
    class_=AsyncSession,
    autoflush=True,
    expire_on_commit=False,
    bind=engine,
)
