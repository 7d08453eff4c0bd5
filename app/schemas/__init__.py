from app.schemas.schemas import (
    ErrorResponse,
    FieldError,
    JokeCreate,
    JokeRead,
    MessageResponse,
    TimestampModel,
)

__all__ = [
    "ErrorResponse",
    "FieldError",
    "JokeCreate",
    "JokeRead",
    "MessageResponse",
    "TimestampModel",
]
