"""Assistant orchestrator for RECOV.

Routes each message to one of two paths:
1. Quick action - a creation intent with its required entity becomes an
   action descriptor for an external executor
2. Conversation - everything else goes to the conversational backend,
   with enhanced tenant context replayed as a synthetic assistant turn

The orchestrator degrades gracefully: if the backend is missing,
unconfigured, or raises, a rule-based fallback answer is returned. No
exception ever reaches the caller.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from .gate import is_quick_action_eligible
from .intent.parser import CommandParser
from .intent.taxonomy import ParsedCommand
from .models import ConversationTurn, OrchestratorRequest, OrchestratorResponse
from .responders import LOW_CONFIDENCE_THRESHOLD, fallback_response, quick_action_response

if TYPE_CHECKING:
    from ..config import AssistantConfig
    from .backends import ConversationBackend

logger = logging.getLogger(__name__)


class AssistantOrchestrator:
    """Top-level request handler.

    Attributes:
        backend: Conversational backend, or None when not wired in
        parser: Command parser
        low_confidence_threshold: Recognised commands weighted below this
            get a "need more detail" fallback
    """

    def __init__(
        self,
        backend: "ConversationBackend | None" = None,
        parser: CommandParser | None = None,
        low_confidence_threshold: int = LOW_CONFIDENCE_THRESHOLD,
    ) -> None:
        self.backend = backend
        self.parser = parser or CommandParser()
        self.low_confidence_threshold = low_confidence_threshold

    @classmethod
    def from_config(
        cls,
        config: "AssistantConfig",
        backend: "ConversationBackend | None" = None,
    ) -> "AssistantOrchestrator":
        """Build an orchestrator from configuration.

        Args:
            config: Assistant configuration
            backend: Backend to use (defaults to create_backend(config))

        Returns:
            Configured AssistantOrchestrator
        """
        if backend is None:
            from .backends import create_backend

            backend = create_backend(config)

        return cls(
            backend=backend,
            parser=CommandParser(max_input_length=config.max_input_length),
            low_confidence_threshold=config.low_confidence_threshold,
        )

    def set_api_key(self, api_key: str | None) -> None:
        """Update the backend credential for subsequent requests."""
        if self.backend is None:
            logger.warning("API key update ignored: no conversational backend")
            return
        self.backend.set_api_key(api_key)

    def is_fully_configured(self) -> bool:
        """Check if the conversational path is available."""
        return self._backend_configured()

    async def process(self, request: OrchestratorRequest) -> OrchestratorResponse:
        """Interpret a message and produce a response.

        Args:
            request: Message plus tenant, user and conversation history

        Returns:
            OrchestratorResponse (never raises)
        """
        logger.debug(
            f"Processing message for tenant={request.tenant_id} user={request.user_id} "
            f"voice={request.is_voice}"
        )

        command = self._parse(request.message)

        if is_quick_action_eligible(command):
            logger.info(f"Quick action {command.type.value} for tenant={request.tenant_id}")
            return quick_action_response(command)

        if not self._backend_configured():
            logger.debug("Conversational backend not configured, using fallback")
            return self._fallback(request.message, command)

        try:
            return await self._converse(self.backend, request)
        except Exception:
            logger.exception(
                f"Conversational backend failed for tenant={request.tenant_id}, using fallback"
            )
            return self._fallback(request.message, command)

    def _parse(self, message: str) -> ParsedCommand:
        """Parse a message; failures degrade to an unknown command."""
        try:
            return self.parser.parse(message)
        except Exception:
            logger.exception("Command parsing failed, treating message as unknown")
            return ParsedCommand.unknown(message)

    def _backend_configured(self) -> bool:
        if self.backend is None:
            return False
        try:
            return bool(self.backend.is_configured())
        except Exception:
            logger.exception("Backend configuration check failed")
            return False

    async def _converse(
        self, backend: "ConversationBackend", request: OrchestratorRequest
    ) -> OrchestratorResponse:
        """Conversation attempt: enhanced context, then the backend answer."""
        enhanced = await backend.get_enhanced_context(request.tenant_id, request.message)

        # Local copy: the caller's history is never mutated
        history = list(request.conversation_history)
        if enhanced is not None and enhanced.additional_context:
            history.append(
                ConversationTurn(
                    speaker="assistant",
                    message=f"[Context: {enhanced.additional_context}]",
                    timestamp=datetime.now(),
                )
            )

        result = await backend.process_query(request.message, request.tenant_id, history)

        return OrchestratorResponse(
            text=result.text,
            type="conversation",
            confidence=result.confidence,
            requires_action=result.requires_action,
            action_type=result.action_type,
            action_payload=result.action_payload,
            data=enhanced.data if enhanced is not None else None,
        )

    def _fallback(self, message: str, command: ParsedCommand) -> OrchestratorResponse:
        return fallback_response(message, command, self.low_confidence_threshold)


__all__ = ["AssistantOrchestrator"]
