from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TimestampModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class JokeCreate(BaseModel):
    question: str = Field(min_length=1)
    answer: str = Field(min_length=1)


class JokeRead(TimestampModel):
    id: int
    question: str
    answer: str


class MessageResponse(BaseModel):
    message: str


class FieldError(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    error: str
    details: list[FieldError] | None = None
