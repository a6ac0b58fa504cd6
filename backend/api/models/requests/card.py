from pydantic import BaseModel, Field, model_validator
from typing import Optional

class EditorSessionCreate(BaseModel):
    name: Optional[str] = Field(default=None, description="Storage key for the session's deck; defaults to the configured deck name")

class CardUpdate(BaseModel):
    title: Optional[str] = Field(default=None, description="New raw title text, one line per title row")
    rows: Optional[str] = Field(default=None, description="New raw content text, one line per row")

class CardReorder(BaseModel):
    dragged_id: int = Field(..., description="ID of the card being dragged")
    target_id: int = Field(..., description="ID of the card it was dropped on")
    insert_before: Optional[bool] = Field(default=None, description="True to place the card before the target, False for after")
    pointer_y: Optional[float] = Field(default=None, description="Vertical drop coordinate, used when insert_before is not given")
    target_top: Optional[float] = Field(default=None, description="Top edge of the target's bounding box")
    target_height: Optional[float] = Field(default=None, description="Height of the target's bounding box")

    @model_validator(mode='after')
    def check_drop_position(self) -> 'CardReorder':
        if self.insert_before is None and None in (self.pointer_y, self.target_top, self.target_height):
            raise ValueError("Provide insert_before or pointer_y, target_top and target_height")
        return self
