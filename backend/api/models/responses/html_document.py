from pydantic import BaseModel, Field
from typing import List
from api.models.responses.card import CardResponse

class HTMLExportResponse(BaseModel):
    html: str = Field(..., description="Rendered HTML")
    card_count: int = Field(..., description="Number of card blocks in the HTML")

class HTMLImportResponse(BaseModel):
    message: str
    imported_count: int = Field(..., description="Number of cards recovered from the HTML")
    card_id_counter: int
    cards: List[CardResponse]

class StorageResponse(BaseModel):
    message: str
    name: str
    card_count: int
