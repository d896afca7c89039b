# app/clinic_models/clinic_schemas.py
from typing import Any, Optional

from pydantic import BaseModel


class SaveRecordResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


class ChatPayload(BaseModel):
    # Left untyped so a missing or empty prompt reaches the 400 check
    prompt: Optional[Any] = None

    class Config:
        extra = "ignore"
