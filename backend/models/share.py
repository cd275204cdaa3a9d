from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ShareRequest(BaseModel):
    """Body of POST /api/share. Field names match the browser client (camelCase)."""

    model_config = ConfigDict(populate_by_name=True)

    action: str         # "create" | "update" | "get" | "heartbeat"
    session_id: Optional[str] = Field(default=None, alias="sessionId")
    content: Optional[str] = None


class ShareResponse(BaseModel):
    """Only the fields relevant to the action are set; the rest are dropped on the wire."""

    model_config = ConfigDict(populate_by_name=True)

    session_id: Optional[str] = Field(default=None, alias="sessionId")
    content: Optional[str] = None
    success: Optional[bool] = None


class ClientConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    poll_interval_ms: int = Field(alias="pollIntervalMs")
    heartbeat_interval_ms: int = Field(alias="heartbeatIntervalMs")
    update_debounce_ms: int = Field(alias="updateDebounceMs")
