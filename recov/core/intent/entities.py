"""Entity extraction for RECOV command parsing.

This module pulls structured fields (phone, email, amount, name, limit)
out of free-text or transcribed voice input. Each field has its own rule;
rules are independent and a single message can populate several fields.
"""

from __future__ import annotations

import re

from .taxonomy import DEFAULT_LIMIT, EntityBag


class EntityExtractor:
    """Extract structured entities from natural language text."""

    PATTERNS = {
        # Phone: exactly 10 consecutive digits (Indian mobile format)
        "phone": re.compile(r"(?<!\d)\d{10}(?!\d)"),
        # Email: "name@example.com"
        "email": re.compile(r"[\w.+-]+@[\w-]+(?:\.[\w-]+)*\.\w+", re.IGNORECASE),
        # Amount: "₹15,000", "rs. 500", "rupees 1,20,000.50"
        "amount": re.compile(
            r"(?:₹|\brupees?|\brs\.?)\s*(\d+(?:,\d+)*(?:\.\d+)?)",
            re.IGNORECASE,
        ),
        # Name: "named Ravi Kumar", "called Acme", "for Acme Corp"
        # Case-sensitive: the name must start with a capital
        "name": re.compile(r"\b(?:named|called|for)\s+([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*)"),
        # Limit: "top 10", "top10", "top-3" or "10 top"
        "limit": re.compile(r"\btop[\s-]*(\d+)\b|\b(\d+)[\s-]*top\b", re.IGNORECASE),
    }

    def extract(self, text: str) -> EntityBag:
        """Extract all entities from natural language text.

        Args:
            text: User input text (original casing)

        Returns:
            EntityBag with all detected entities. Never raises.
        """
        fields: dict[str, object] = {}

        phone_match = self.PATTERNS["phone"].search(text)
        if phone_match:
            fields["phone"] = phone_match.group(0)

        email_match = self.PATTERNS["email"].search(text)
        if email_match:
            fields["email"] = email_match.group(0)

        amount_match = self.PATTERNS["amount"].search(text)
        if amount_match:
            fields["amount"] = float(amount_match.group(1).replace(",", ""))

        name_match = self.PATTERNS["name"].search(text)
        if name_match:
            fields["name"] = name_match.group(1)

        limit_match = self.PATTERNS["limit"].search(text)
        if limit_match:
            fields["limit"] = int(limit_match.group(1) or limit_match.group(2))
        else:
            fields["limit"] = DEFAULT_LIMIT

        return EntityBag(**fields)


# Module-level instance for convenience
_extractor = EntityExtractor()


def extract_entities(text: str) -> EntityBag:
    """Extract entities from text using the default extractor.

    Args:
        text: User input text

    Returns:
        EntityBag with all detected entities
    """
    return _extractor.extract(text)
