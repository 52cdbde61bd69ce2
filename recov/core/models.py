"""Request and response models for the RECOV assistant orchestrator."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

from .intent.taxonomy import ParsedCommand


class ConversationTurn(BaseModel):
    """One turn of a conversation, in chronological order."""

    speaker: Literal["user", "assistant"]
    message: str
    timestamp: datetime = Field(default_factory=datetime.now)

    def to_llm_format(self) -> dict[str, str]:
        """Convert to chat message format (role + content)."""
        return {"role": self.speaker, "content": self.message}


class OrchestratorRequest(BaseModel):
    """A single message to be interpreted.

    Attributes:
        message: Free text or voice transcript
        tenant_id: Organisation the request belongs to
        user_id: User who sent the message
        conversation_history: Prior turns, oldest first (never mutated)
        is_voice: Whether the message came from speech recognition
        context: Optional caller-supplied context (e.g. current page)
    """

    message: str
    tenant_id: str
    user_id: str
    conversation_history: list[ConversationTurn] = Field(default_factory=list)
    is_voice: bool = False
    context: str | None = None


class OrchestratorResponse(BaseModel):
    """Response produced for every request.

    Attributes:
        text: Text to show or speak to the user
        type: "quick_command" or "conversation"
        confidence: Confidence in [0, 100]
        command: Parsed command, when relevant
        requires_action: Whether an external executor must act
        action_type: Action for the executor (required if requires_action)
        action_payload: Data for the executor
        data: Additional data for the UI
    """

    text: str
    type: Literal["quick_command", "conversation"]
    confidence: float = Field(ge=0, le=100)
    command: ParsedCommand | None = None
    requires_action: bool | None = None
    action_type: str | None = None
    action_payload: Any = None
    data: Any = None

    @model_validator(mode="after")
    def _action_needs_type(self) -> "OrchestratorResponse":
        if self.requires_action and not self.action_type:
            raise ValueError("requires_action is set but action_type is empty")
        return self


__all__ = ["ConversationTurn", "OrchestratorRequest", "OrchestratorResponse"]
