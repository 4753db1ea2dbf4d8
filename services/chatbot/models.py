"""Chatbot API — request/response models."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ChatRequest(BaseModel):
    message: Optional[str] = None


class ChatResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    reply: str
    timestamp: datetime
    message_id: str = Field(alias="messageId", pattern=r"^[0-9a-f]{8}$")


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str


class InfoResponse(BaseModel):
    name: str
    version: str
    description: str
    endpoints: List[str]
    author: str
    timestamp: datetime


class ErrorResponse(BaseModel):
    error: str
