from datetime import datetime, UTC
from sqlalchemy import Column, Integer, String, DateTime, JSON

from .base import Base

class StoredDeck(Base):
    __tablename__ = "stored_decks"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False, unique=True, index=True)

    # Plain records: [{"id": int, "title": str, "rows": str}, ...]
    cards = Column(JSON, nullable=False, default=list)
    card_id_counter = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, default=lambda: datetime.now(UTC))
    updated_at = Column(DateTime, default=lambda: datetime.now(UTC), onupdate=lambda: datetime.now(UTC))
