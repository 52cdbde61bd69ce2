"""Command parser for RECOV.

Composes the intent classifier and the entity extractor into a single
ParsedCommand. Parsing is a pure function of the input text: the same
message always yields an identical result.
"""

from __future__ import annotations

import logging

from .entities import EntityExtractor
from .patterns import IntentClassifier
from .taxonomy import ParsedCommand

logger = logging.getLogger(__name__)

# Security: Maximum input length to prevent DoS via regex abuse
MAX_INPUT_LENGTH = 10_000


class CommandParser:
    """Turn a raw message into a structured command.

    Attributes:
        classifier: Priority-ordered intent classifier
        extractor: Entity extractor
        max_input_length: Input beyond this many characters is ignored
    """

    def __init__(
        self,
        classifier: IntentClassifier | None = None,
        extractor: EntityExtractor | None = None,
        max_input_length: int = MAX_INPUT_LENGTH,
    ) -> None:
        self.classifier = classifier or IntentClassifier()
        self.extractor = extractor or EntityExtractor()
        self.max_input_length = max_input_length

    def parse(self, text: str) -> ParsedCommand:
        """Classify text and extract its entities.

        Args:
            text: Raw message (typed or transcribed)

        Returns:
            ParsedCommand; raw_text always holds the original input
        """
        subject = text
        if len(subject) > self.max_input_length:
            logger.warning(
                f"Input truncated from {len(subject)} to {self.max_input_length} chars"
            )
            subject = subject[: self.max_input_length]

        match = self.classifier.classify(subject)
        entities = self.extractor.extract(subject)

        logger.debug(
            f"Parsed command: {match.tag.value} ({match.confidence}) via {match.pattern!r}"
        )

        return ParsedCommand(
            type=match.tag,
            confidence=match.confidence,
            entities=entities,
            raw_text=text,
        )


def create_parser(max_input_length: int = MAX_INPUT_LENGTH) -> CommandParser:
    """Factory function to create a CommandParser.

    Args:
        max_input_length: Truncation limit for incoming messages

    Returns:
        Configured CommandParser instance
    """
    return CommandParser(max_input_length=max_input_length)


_parser = CommandParser()


def parse_command(text: str) -> ParsedCommand:
    """Parse text using the default parser."""
    return _parser.parse(text)
