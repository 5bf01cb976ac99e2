from pydantic import BaseModel, Field
from typing import Annotated, Optional, List

from todo_app.api.label.schemas import LabelOut

TodoText = Annotated[str, Field(min_length=1, max_length=100)]

class TodoCreate(BaseModel):
    text: TodoText
    label_ids: List[int] = []

class TodoUpdate(BaseModel):
    text: Optional[TodoText] = None
    completed: Optional[bool] = None
    label_ids: Optional[List[int]] = None

class TodoOut(BaseModel):
    id: int
    text: str
    completed: bool
    labels: List[LabelOut] = []

    model_config = {
        "from_attributes": True
    }
