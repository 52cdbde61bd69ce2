"""Conversational backends for RECOV.

The orchestrator talks to a conversational AI service through the
ConversationBackend contract:
- is_configured(): whether credentials are present
- get_enhanced_context(): tenant/message-specific context
- process_query(): the actual answer

Concrete model-calling backends live outside this package; NullBackend is
provided for deployments (and the CLI) with no AI service.

Usage:
    from recov.config import AssistantConfig
    from recov.core.backends import create_backend

    config = AssistantConfig()
    backend = create_backend(config)
    backend.is_configured()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import ConversationalResult, ConversationBackend, EnhancedContext

if TYPE_CHECKING:
    from ...config import AssistantConfig


# Exceptions
class BackendError(Exception):
    """Base exception for backend errors."""

    pass


class BackendNotConfiguredError(BackendError):
    """Backend called without the credentials it needs."""

    pass


class RateLimitError(BackendError):
    """Tenant exceeded the backend's request quota."""

    pass


class QueryError(BackendError):
    """Error while the backend was answering a query."""

    pass


def create_backend(config: "AssistantConfig") -> ConversationBackend:
    """Create the backend for a configuration.

    Args:
        config: Assistant configuration

    Returns:
        Backend sharing the configuration's credential
    """
    from .null import NullBackend

    return NullBackend(credential=config.credential())


__all__ = [
    # Base class
    "ConversationBackend",
    "ConversationalResult",
    "EnhancedContext",
    # Factory
    "create_backend",
    # Exceptions
    "BackendError",
    "BackendNotConfiguredError",
    "RateLimitError",
    "QueryError",
]
