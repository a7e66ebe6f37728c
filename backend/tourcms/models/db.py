from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker

from ..config import DATABASE_URL, DB_POOL_SIZE, DB_POOL_TIMEOUT

# Create engine
# SQLite needs check_same_thread=False for FastAPI
if "sqlite" in DATABASE_URL.lower():
    engine = create_engine(DATABASE_URL, connect_args={"check_same_thread": False})

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
else:
    # Fixed-size pool: extra requests wait for a free connection instead of failing
    engine = create_engine(
        DATABASE_URL,
        pool_size=DB_POOL_SIZE,
        max_overflow=0,
        pool_timeout=DB_POOL_TIMEOUT,
        pool_pre_ping=True,
    )

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create base class for models
Base = declarative_base()


def init_db():
    """Create any missing tables."""
    # Import model modules so every table is registered on Base.metadata
    from . import geo_models, content_models, package_models, hotel_models  # noqa: F401

    Base.metadata.create_all(bind=engine)
