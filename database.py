# database.py
import logging
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from paths import DATA_DIR

logger = logging.getLogger(__name__)

# Bound to an engine by init_db() at application startup
SessionLocal = sessionmaker(autocommit=False, autoflush=False)

engine: Optional[Engine] = None


def init_db(database_url: str) -> Engine:
    """Create the process-wide engine, bind the session factory and create tables."""
    global engine
    from Models import Base

    connect_args = {}
    if database_url.startswith("sqlite"):
        DATA_DIR.mkdir(exist_ok=True)
        connect_args["check_same_thread"] = False  # Needed for SQLite

    engine = create_engine(database_url, connect_args=connect_args)
    SessionLocal.configure(bind=engine)
    Base.metadata.create_all(bind=engine)
    logger.info("Database initialized at: %s", engine.url.render_as_string(hide_password=True))
    return engine


def close_db() -> None:
    global engine
    if engine is not None:
        engine.dispose()
        logger.info("Database connections closed")
        engine = None


# Dependency for FastAPI
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
