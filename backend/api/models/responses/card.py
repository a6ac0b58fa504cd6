from pydantic import BaseModel, Field, ConfigDict
from typing import List

class CardResponse(BaseModel):
    id: int
    title: str
    rows: str
    title_lines: List[str]
    row_lines: List[str]

    model_config = ConfigDict(from_attributes=True)

class EditorSessionResponse(BaseModel):
    session_id: str = Field(..., description="Session ID")
    name: str = Field(..., description="Storage key of the session's deck")
    card_id_counter: int = Field(..., description="Highest card ID handed out so far")
    cards: List[CardResponse] = Field(default_factory=list, description="Cards in display order")
