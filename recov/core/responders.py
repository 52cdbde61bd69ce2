"""Deterministic responders: quick-action confirmations and fallbacks.

Neither responder touches the conversational backend. The fallback cascade
is what the user sees when that backend is unconfigured or failing, so it
must always produce a well-formed response.
"""

from __future__ import annotations

from enum import Enum

from .intent.taxonomy import IntentConfidence, IntentTag, ParsedCommand
from .models import OrchestratorResponse

QUICK_ACTION_CONFIDENCE = 0.9

# Fallback confidences, by branch
NEEDS_DETAIL_CONFIDENCE = 0.5
BUCKET_CONFIDENCE = 0.4
GENERIC_CONFIDENCE = 0.3

# Commands below this weight get a "need more detail" fallback
LOW_CONFIDENCE_THRESHOLD = IntentConfidence.REPORT


class FallbackBucket(str, Enum):
    """Coarse topic of a message, used when no backend is available."""

    REVENUE = "revenue"
    CUSTOMER = "customer"
    INVOICE = "invoice"
    GENERAL = "general"


# Checked in order; first bucket with a keyword in the message wins
BUCKET_KEYWORDS: tuple[tuple[FallbackBucket, tuple[str, ...]], ...] = (
    (FallbackBucket.REVENUE, ("revenue", "sales")),
    (FallbackBucket.CUSTOMER, ("customer", "client")),
    (FallbackBucket.INVOICE, ("invoice", "payment")),
)

GENERIC_HELP = (
    "I can help you with:\n"
    "- Creating leads, customers, quotations, and invoices (just tell me what you need)\n"
    "- For detailed business questions and insights, please configure AI assistant in settings"
)


def match_bucket(message: str) -> FallbackBucket:
    """Find the first keyword bucket present in a message."""
    lowered = message.lower()
    for bucket, keywords in BUCKET_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return bucket
    return FallbackBucket.GENERAL


def quick_action_text(command: ParsedCommand) -> str:
    """Confirmation text for a quick action."""
    entities = command.entities
    match command.type:
        case IntentTag.CREATE_LEAD:
            return f"Creating a new lead for {entities.get('company_name')}..."
        case IntentTag.CREATE_CUSTOMER:
            return f"Adding {entities.get('company_name')} as a new customer..."
        case IntentTag.CREATE_QUOTATION:
            return f"Preparing quotation for {entities.get('customer_name')}..."
        case IntentTag.CREATE_INVOICE:
            return f"Generating invoice for {entities.get('customer_name')}..."
        case _:
            return "Processing your request..."


def quick_action_response(command: ParsedCommand) -> OrchestratorResponse:
    """Build the response for a gate-approved command.

    The orchestrator never persists anything: the executor downstream reads
    action_type and action_payload and creates the business object.
    """
    return OrchestratorResponse(
        text=quick_action_text(command),
        type="quick_command",
        confidence=QUICK_ACTION_CONFIDENCE,
        command=command,
        requires_action=True,
        action_type=command.type.value,
        action_payload=command.entities.to_dict(),
    )


def bucket_text(bucket: FallbackBucket) -> str:
    """Canned suggestion for a fallback bucket."""
    match bucket:
        case FallbackBucket.REVENUE:
            return (
                "I can help you check revenue! However, for detailed financial analysis, "
                "please configure the AI assistant in settings to enable conversational queries."
            )
        case FallbackBucket.CUSTOMER:
            return (
                "I can help with customer information! For intelligent conversations about "
                "your business, please enable AI features in assistant settings."
            )
        case FallbackBucket.INVOICE:
            return (
                "I can assist with invoices and payments! For natural conversations, "
                "configure the AI assistant in settings."
            )
        case _:
            return GENERIC_HELP


def needs_detail_text(command: ParsedCommand) -> str:
    """Ask the user for more detail about a recognised intent."""
    if command.type.is_creation:
        hint = "or use the form to create manually."
    else:
        hint = "or configure the AI assistant in settings for detailed insights."
    return (
        f"I understood you want to {command.type.label}, but I need more details. "
        f"Please try again with more specific information, {hint}"
    )


def fallback_response(
    message: str,
    command: ParsedCommand,
    low_confidence_threshold: int = LOW_CONFIDENCE_THRESHOLD,
) -> OrchestratorResponse:
    """Build a rule-based response without the conversational backend.

    Args:
        message: Original user message
        command: Command already parsed from the message
        low_confidence_threshold: Recognised commands below this weight
            get a "need more detail" reply

    Returns:
        A conversation response with confidence 0.5, 0.4 or 0.3
    """
    if not command.is_unknown and command.confidence < low_confidence_threshold:
        return OrchestratorResponse(
            text=needs_detail_text(command),
            type="conversation",
            confidence=NEEDS_DETAIL_CONFIDENCE,
            command=command,
        )

    bucket = match_bucket(message)
    return OrchestratorResponse(
        text=bucket_text(bucket),
        type="conversation",
        confidence=GENERIC_CONFIDENCE if bucket is FallbackBucket.GENERAL else BUCKET_CONFIDENCE,
    )


__all__ = [
    "BUCKET_KEYWORDS",
    "FallbackBucket",
    "GENERIC_HELP",
    "LOW_CONFIDENCE_THRESHOLD",
    "QUICK_ACTION_CONFIDENCE",
    "bucket_text",
    "fallback_response",
    "match_bucket",
    "needs_detail_text",
    "quick_action_response",
    "quick_action_text",
]
