"""Abstract base class for conversational AI backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ...config import BackendCredential

if TYPE_CHECKING:
    from ..models import ConversationTurn


@dataclass
class EnhancedContext:
    """Extra tenant data fetched for a specific message.

    Attributes:
        additional_context: Short text summary to replay to the model
        data: Raw records behind the summary (for the UI)
    """

    additional_context: str | None = None
    data: Any = None


@dataclass
class ConversationalResult:
    """Answer produced by a conversational backend.

    Attributes:
        text: Answer text
        confidence: Backend's confidence in the answer
        requires_action: Whether the answer suggests an action
        action_type: Suggested action
        action_payload: Data for the suggested action
    """

    text: str
    confidence: float
    requires_action: bool | None = None
    action_type: str | None = None
    action_payload: Any = None


class ConversationBackend(ABC):
    """Abstract base class for conversational backends.

    Configuration:
    - A backend is configured when its credential holds an API key
    - The credential is owned by the caller and shared by reference, so
      set_api_key() affects every request issued after it returns

    Errors:
    - Implementations may raise anything; the orchestrator converts every
      exception into a fallback response
    - No timeout or retry is applied by callers; implementations own both
    """

    def __init__(self, credential: BackendCredential | None = None) -> None:
        self.credential = credential if credential is not None else BackendCredential()

    def is_configured(self) -> bool:
        """Check if the backend has the credentials it needs."""
        return self.credential.is_set

    def set_api_key(self, api_key: str | None) -> None:
        """Replace the API key on the shared credential."""
        self.credential.update(api_key)

    @abstractmethod
    async def get_enhanced_context(self, tenant_id: str, message: str) -> EnhancedContext:
        """Fetch tenant- and message-specific context.

        Args:
            tenant_id: Tenant the message belongs to
            message: The user message

        Returns:
            EnhancedContext (additional_context may be empty)
        """
        ...

    @abstractmethod
    async def process_query(
        self,
        message: str,
        tenant_id: str,
        history: list["ConversationTurn"],
    ) -> ConversationalResult:
        """Answer a message.

        Args:
            message: The user message
            tenant_id: Tenant the message belongs to
            history: Conversation so far, oldest first

        Returns:
            ConversationalResult

        Raises:
            BackendNotConfiguredError: If called without credentials
            RateLimitError: If the tenant exceeded its quota
            QueryError: If the backend call failed
        """
        ...


__all__ = ["ConversationBackend", "ConversationalResult", "EnhancedContext"]
