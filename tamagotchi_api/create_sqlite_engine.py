import pathlib

from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from tamagotchi_api.load_secrets import sqlite_path

if sqlite_path is None:
    file_path = pathlib.Path(__file__).parent / "tamagotchi.sqlite3"
    sqlite_path = str(file_path)

sqlite_url = f"sqlite+aiosqlite:///{sqlite_path}"

if sqlite_path == ":memory:":
    # Every connection would otherwise get its own empty database.
    engine = create_async_engine(
        url=sqlite_url,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
else:
    engine = create_async_engine(url=sqlite_url, echo=False)


@event.listens_for(engine.sync_engine, "connect")
def enable_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores foreign keys (and ON DELETE CASCADE) unless asked per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
