from pydantic import BaseModel, Field

class HTMLImport(BaseModel):
    html: str = Field(..., description="HTML document or fragment containing spec cards")
