"""Pydantic models for API I/O and the intent contract."""
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Literal, Optional


class IntentResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    intent: str
    topic: str


class SessionCreateRequest(BaseModel):
    session_id: Optional[str] = None


class SessionCreateResponse(BaseModel):
    session_id: str
    created: bool


class ChatRequest(BaseModel):
    session_id: str
    message: str = Field(min_length=1)
    assistant_type: Literal["ucup", "rima"] = "ucup"


class ChatResponse(BaseModel):
    session_id: str
    reply: str
    intent: str
    topic: str


class ConversationSummary(BaseModel):
    duration: int
    topics: List[str]
    message_count: int
    language: str
    suggested_follow_up: str


class IntentRequest(BaseModel):
    message: str


class ResolveRequest(BaseModel):
    text: str


class ResolveResponse(BaseModel):
    text: str


class OverlayCreateRequest(BaseModel):
    overlay: Dict[str, Any] = Field(default_factory=dict)
    is_active: bool = True


class OverlayUpdateRequest(BaseModel):
    overlay: Dict[str, Any] = Field(default_factory=dict)


class OverlayRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    overlay: Dict[str, Any]
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class OverlayUploadResponse(BaseModel):
    message: str
    records_processed: int
    overlay: OverlayRecord


class LayerInfo(BaseModel):
    source: str
    rank: int
    keys: List[str]
