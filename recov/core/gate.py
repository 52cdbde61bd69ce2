"""Quick-action eligibility gate for RECOV.

A parsed command qualifies for the deterministic quick-action path only when
it is a creation intent AND its required entity is present. This is not a
confidence threshold: a 75-confidence lead creation without a company name
is still routed to the conversational path. Report/analytics intents are
never eligible.
"""

from __future__ import annotations

from .intent.taxonomy import CREATION_INTENTS, IntentTag, ParsedCommand

# Required entity for each quick-action intent
REQUIRED_ENTITIES: dict[IntentTag, str] = {
    IntentTag.CREATE_LEAD: "company_name",
    IntentTag.CREATE_CUSTOMER: "company_name",
    IntentTag.CREATE_QUOTATION: "customer_name",
    IntentTag.CREATE_INVOICE: "customer_name",
}


def missing_entities(command: ParsedCommand) -> list[str]:
    """List required entity names absent from the command.

    Args:
        command: Parsed command to inspect

    Returns:
        Missing field names (empty for intents with no requirement)
    """
    required = REQUIRED_ENTITIES.get(command.type)
    if required is None or command.entities.get(required):
        return []
    return [required]


def is_quick_action_eligible(command: ParsedCommand) -> bool:
    """Check whether a command can be handled as a quick action.

    Args:
        command: Parsed command

    Returns:
        True if the intent is a creation intent with its required field
    """
    if command.type not in CREATION_INTENTS:
        return False
    return not missing_entities(command)


__all__ = ["REQUIRED_ENTITIES", "is_quick_action_eligible", "missing_entities"]
