from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
import os
from dotenv import load_dotenv

from config.env import settings

# Try to load .env.local first, fall back to .env
if os.path.exists(".env.local"):
    load_dotenv(".env.local")
else:
    load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", settings.database_url)

engine_options = {}
if DATABASE_URL.startswith("sqlite"):
    engine_options["connect_args"] = {"check_same_thread": False}
    if ":memory:" in DATABASE_URL:
        # Single shared connection so every session sees the same in-memory database
        engine_options["poolclass"] = StaticPool

engine = create_engine(DATABASE_URL, **engine_options)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def init_db():
    """Create any missing tables."""
    from models.base import Base
    import models.stored_deck  # noqa: F401

    Base.metadata.create_all(bind=engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
