"""
Schemas del chat con Dr. Bera.
"""
from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    msg: str = Field(..., min_length=1)


class ChatResponse(BaseModel):
    reply: str
