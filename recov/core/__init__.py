"""Core components for RECOV."""

from __future__ import annotations

from .backends import (
    BackendError,
    BackendNotConfiguredError,
    ConversationalResult,
    ConversationBackend,
    EnhancedContext,
    QueryError,
    RateLimitError,
    create_backend,
)
from .gate import (
    REQUIRED_ENTITIES,
    is_quick_action_eligible,
    missing_entities,
)
from .intent import (
    CommandParser,
    EntityBag,
    IntentTag,
    ParsedCommand,
    parse_command,
)
from .models import (
    ConversationTurn,
    OrchestratorRequest,
    OrchestratorResponse,
)
from .orchestrator import AssistantOrchestrator
from .responders import (
    FallbackBucket,
    fallback_response,
    quick_action_response,
)

__all__ = [
    # Orchestration
    "AssistantOrchestrator",
    "OrchestratorRequest",
    "OrchestratorResponse",
    "ConversationTurn",
    # Parsing
    "CommandParser",
    "EntityBag",
    "IntentTag",
    "ParsedCommand",
    "parse_command",
    # Gate
    "REQUIRED_ENTITIES",
    "is_quick_action_eligible",
    "missing_entities",
    # Responders
    "FallbackBucket",
    "fallback_response",
    "quick_action_response",
    # Backends
    "ConversationBackend",
    "ConversationalResult",
    "EnhancedContext",
    "create_backend",
    "BackendError",
    "BackendNotConfiguredError",
    "QueryError",
    "RateLimitError",
]
