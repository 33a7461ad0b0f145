# schemas.py
from pydantic import BaseModel, Field, ValidationInfo, field_validator
from typing import List

# JSON null (or a NULL column) binds to the field's zero value
ZERO_VALUES = {"title": "", "amount": 0, "note": "", "tags": []}


class ExpenseSchema(BaseModel):
    title: str = ""
    # JSON numbers only, "76900" is rejected
    amount: int = Field(default=0, strict=True)
    note: str = ""
    tags: List[str] = Field(default_factory=list)

    @field_validator("title", "amount", "note", "tags", mode="before")
    @classmethod
    def null_as_zero_value(cls, value, info: ValidationInfo):
        if value is None:
            zero = ZERO_VALUES[info.field_name]
            return list(zero) if isinstance(zero, list) else zero
        return value

    class Config:
        from_attributes = True


class ExpenseResponse(ExpenseSchema):
    id: int

    class Config:
        from_attributes = True


class MessageResponse(BaseModel):
    message: str
