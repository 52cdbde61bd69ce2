"""Command parsing for the RECOV business assistant.

This package turns a typed or transcribed message into a ParsedCommand:
an intent tag with a fixed confidence weight plus the entities found in
the text.

The pipeline has two independent halves:
1. Intent classification - ordered rules, first match wins
2. Entity extraction - phone, email, amount, name, "top N" limit

Example usage:
    ```python
    from recov.core.intent import IntentTag, parse_command

    command = parse_command("create lead for Acme Corp")
    assert command.type == IntentTag.CREATE_LEAD
    assert command.confidence == 75
    assert command.entities.name == "Acme Corp"
    ```
"""

from .entities import (
    EntityExtractor,
    extract_entities,
)
from .parser import (
    MAX_INPUT_LENGTH,
    CommandParser,
    create_parser,
    parse_command,
)
from .patterns import (
    INTENT_RULES,
    IntentClassifier,
    IntentMatch,
    IntentRule,
)
from .taxonomy import (
    CREATION_INTENTS,
    DEFAULT_LIMIT,
    REPORT_INTENTS,
    EntityBag,
    IntentConfidence,
    IntentTag,
    ParsedCommand,
)

__all__ = [
    # Main parser
    "CommandParser",
    "create_parser",
    "parse_command",
    "MAX_INPUT_LENGTH",
    # Classification
    "IntentClassifier",
    "IntentMatch",
    "IntentRule",
    "INTENT_RULES",
    # Taxonomy
    "IntentTag",
    "IntentConfidence",
    "ParsedCommand",
    "EntityBag",
    "CREATION_INTENTS",
    "REPORT_INTENTS",
    "DEFAULT_LIMIT",
    # Entity extraction
    "EntityExtractor",
    "extract_entities",
]
