"""Backend used when no conversational service is wired in."""

from __future__ import annotations

from typing import TYPE_CHECKING

from . import BackendNotConfiguredError
from .base import ConversationalResult, ConversationBackend, EnhancedContext

if TYPE_CHECKING:
    from ..models import ConversationTurn


class NullBackend(ConversationBackend):
    """A backend that is never configured.

    Every request through the orchestrator takes the fallback path, even
    when an API key is present on the credential.
    """

    def is_configured(self) -> bool:
        return False

    async def get_enhanced_context(self, tenant_id: str, message: str) -> EnhancedContext:
        return EnhancedContext()

    async def process_query(
        self,
        message: str,
        tenant_id: str,
        history: list["ConversationTurn"],
    ) -> ConversationalResult:
        raise BackendNotConfiguredError("No conversational backend is available")


__all__ = ["NullBackend"]
