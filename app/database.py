from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import sessionmaker, Session

from app.config.settings import settings


def _connect_args() -> dict:
    if settings.is_sqlite():
        # FastAPI may hand the session to a different worker thread
        return {"check_same_thread": False}
    if settings.DATABASE_SSLMODE:
        # If you're using PostgreSQL on Render or similar, set DATABASE_SSLMODE=require
        return {"sslmode": settings.DATABASE_SSLMODE}
    return {}


engine = create_engine(settings.DATABASE_URL, connect_args=_connect_args())

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection"""
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# ✅ This is required to be imported wherever DB session is needed
def get_db():
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
