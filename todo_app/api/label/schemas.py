from pydantic import BaseModel, Field

class LabelBase(BaseModel):
    name: str = Field(min_length=1, max_length=20)

class LabelCreate(LabelBase):
    pass

class LabelOut(BaseModel):
    id: int
    name: str

    model_config = {
        "from_attributes": True
    }
