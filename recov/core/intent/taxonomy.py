"""Intent taxonomy and parsed-command data model for RECOV.

This module defines the closed set of intent tags, their fixed confidence
weights, and the immutable structures produced by the command parser.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class IntentTag(str, Enum):
    """Closed set of intents recognised by the classifier."""

    # Creation intents (quick-action candidates)
    CREATE_LEAD = "create_lead"
    CREATE_QUOTATION = "create_quotation"
    CREATE_CUSTOMER = "create_customer"
    CREATE_INVOICE = "create_invoice"

    # Report / analytics intents (always conversational)
    TOP_DEBTORS = "top_debtors"
    TOP_CUSTOMERS_MONTH = "top_customers_month"
    TOP_PAYMENTS_MONTH = "top_payments_month"
    TODAY_COLLECTION = "today_collection"
    WEEKLY_REVENUE = "weekly_revenue"
    MONTHLY_REVENUE = "monthly_revenue"
    PENDING_INVOICES = "pending_invoices"
    OVERDUE_INVOICES = "overdue_invoices"
    TOTAL_OUTSTANDING = "total_outstanding"
    RECENT_LEADS = "recent_leads"
    CONVERSION_RATE = "conversion_rate"

    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        """Human-readable phrase, e.g. "create a lead"."""
        return INTENT_LABELS[self]

    @property
    def is_creation(self) -> bool:
        return self in CREATION_INTENTS

    @property
    def is_report(self) -> bool:
        return self in REPORT_INTENTS


class IntentConfidence:
    """Fixed rule weights (0-100).

    - CREATE: creation intents and conversion rate
    - REPORT: most report intents
    - BOUNDED_REPORT: date/amount-bounded reports (today's collection,
      pending/overdue invoices, total outstanding)
    - NONE: no rule matched
    """

    CREATE = 75
    REPORT = 80
    BOUNDED_REPORT = 85
    NONE = 0


CREATION_INTENTS: frozenset[IntentTag] = frozenset(
    {
        IntentTag.CREATE_LEAD,
        IntentTag.CREATE_QUOTATION,
        IntentTag.CREATE_CUSTOMER,
        IntentTag.CREATE_INVOICE,
    }
)

REPORT_INTENTS: frozenset[IntentTag] = frozenset(
    {
        IntentTag.TOP_DEBTORS,
        IntentTag.TOP_CUSTOMERS_MONTH,
        IntentTag.TOP_PAYMENTS_MONTH,
        IntentTag.TODAY_COLLECTION,
        IntentTag.WEEKLY_REVENUE,
        IntentTag.MONTHLY_REVENUE,
        IntentTag.PENDING_INVOICES,
        IntentTag.OVERDUE_INVOICES,
        IntentTag.TOTAL_OUTSTANDING,
        IntentTag.RECENT_LEADS,
        IntentTag.CONVERSION_RATE,
    }
)

INTENT_LABELS: dict[IntentTag, str] = {
    IntentTag.CREATE_LEAD: "create a lead",
    IntentTag.CREATE_QUOTATION: "create a quotation",
    IntentTag.CREATE_CUSTOMER: "add a customer",
    IntentTag.CREATE_INVOICE: "create an invoice",
    IntentTag.TOP_DEBTORS: "see your top debtors",
    IntentTag.TOP_CUSTOMERS_MONTH: "see this month's top customers",
    IntentTag.TOP_PAYMENTS_MONTH: "see this month's top payments",
    IntentTag.TODAY_COLLECTION: "check today's collection",
    IntentTag.WEEKLY_REVENUE: "check this week's revenue",
    IntentTag.MONTHLY_REVENUE: "check this month's revenue",
    IntentTag.PENDING_INVOICES: "see pending invoices",
    IntentTag.OVERDUE_INVOICES: "see overdue invoices",
    IntentTag.TOTAL_OUTSTANDING: "check the total outstanding amount",
    IntentTag.RECENT_LEADS: "see recent leads",
    IntentTag.CONVERSION_RATE: "check the lead conversion rate",
    IntentTag.UNKNOWN: "do something I didn't recognise",
}

# Applied when no "top N" phrase is present, for every intent
DEFAULT_LIMIT = 5


@dataclass(frozen=True)
class EntityBag:
    """Structured fields pulled out of a message.

    Attributes:
        name: Capitalised name following "named", "called" or "for"
        phone: 10-digit phone number
        email: Email address
        amount: Currency amount in rupees
        date: Date string (supplied by collaborators)
        description: Free-text description (supplied by collaborators)
        limit: "top N" count, defaults to 5
        extras: Additional fields supplied by collaborators
    """

    name: str | None = None
    phone: str | None = None
    email: str | None = None
    amount: float | None = None
    date: str | None = None
    description: str | None = None
    limit: int = DEFAULT_LIMIT
    extras: dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a named field, falling back to extras."""
        if key != "extras" and key in self.__dataclass_fields__:
            value = getattr(self, key)
            return default if value is None else value
        return self.extras.get(key, default)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, excluding None values."""
        data = {
            k: v for k, v in self.__dict__.items() if v is not None and k != "extras"
        }
        data.update(self.extras)
        return data


@dataclass(frozen=True)
class ParsedCommand:
    """Result of parsing one message.

    Attributes:
        type: Matched intent tag, or UNKNOWN
        confidence: Fixed rule weight 0-100 (0 for UNKNOWN)
        entities: Extracted entities
        raw_text: Original, unmodified input
    """

    type: IntentTag
    confidence: int
    entities: EntityBag
    raw_text: str

    @classmethod
    def unknown(cls, text: str, entities: EntityBag | None = None) -> "ParsedCommand":
        """Create an unclassified command."""
        return cls(
            type=IntentTag.UNKNOWN,
            confidence=IntentConfidence.NONE,
            entities=entities or EntityBag(),
            raw_text=text,
        )

    @property
    def is_unknown(self) -> bool:
        return self.type is IntentTag.UNKNOWN

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "confidence": self.confidence,
            "entities": self.entities.to_dict(),
            "raw_text": self.raw_text,
        }


__all__ = [
    "CREATION_INTENTS",
    "DEFAULT_LIMIT",
    "EntityBag",
    "INTENT_LABELS",
    "IntentConfidence",
    "IntentTag",
    "ParsedCommand",
    "REPORT_INTENTS",
]
