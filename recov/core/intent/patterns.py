"""Priority-ordered intent classification for RECOV.

Rules are evaluated strictly in the order they are declared and the first
rule whose phrase disjunction matches wins. Later rules are never consulted,
so a message such as "create lead for our top debtor" is a lead creation,
not a debtor report. Creation intents are always declared before the
report/analytics intents.

Patterns include common Hinglish transliterations for the same concept.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .taxonomy import IntentConfidence, IntentTag


@dataclass(frozen=True)
class IntentRule:
    """A single classification rule.

    Attributes:
        tag: Intent assigned when the rule fires
        confidence: Fixed weight returned with the tag
        patterns: Phrase regexes, any one of which fires the rule
    """

    tag: IntentTag
    confidence: int
    patterns: tuple[str, ...]


@dataclass(frozen=True)
class IntentMatch:
    """Result of classification.

    Attributes:
        tag: Matched intent (UNKNOWN when nothing matched)
        confidence: Rule weight, 0 for UNKNOWN
        pattern: The pattern that fired (for debugging)
    """

    tag: IntentTag
    confidence: int
    pattern: str | None = None


# Order matters: first match wins.
INTENT_RULES: tuple[IntentRule, ...] = (
    # --- Creation intents ---
    IntentRule(
        IntentTag.CREATE_LEAD,
        IntentConfidence.CREATE,
        (
            r"\b(create|add|new)\s+lead",
            r"\blead\s+for\b",
            r"\blead\s+(banao|bana\s+do|add\s+karo)",
            r"\bnaya\s+lead",
        ),
    ),
    IntentRule(
        IntentTag.CREATE_QUOTATION,
        IntentConfidence.CREATE,
        (
            r"\b(create|add|new)\s+quotation",
            r"\bquote\s+for\b",
            r"\bquotation\s+(banao|bana\s+do)",
            r"\bnaya\s+quotation",
        ),
    ),
    IntentRule(
        IntentTag.CREATE_CUSTOMER,
        IntentConfidence.CREATE,
        (
            r"\b(create|add|new)\s+customer",
            r"\bcustomer\s+named\b",
            r"\bcustomer\s+(banao|bana\s+do|add\s+karo)",
            r"\bnaya\s+customer",
        ),
    ),
    IntentRule(
        IntentTag.CREATE_INVOICE,
        IntentConfidence.CREATE,
        (
            r"\b(create|add|new)\s+invoice",
            r"\binvoice\s+for\b",
            r"\binvoice\s+(banao|bana\s+do)",
            r"\bnaya\s+invoice",
            r"\bbill\s+banao",
        ),
    ),
    # --- Report / analytics intents ---
    IntentRule(
        IntentTag.TOP_DEBTORS,
        IntentConfidence.REPORT,
        (
            r"\bdebtors?\b",
            r"\bwho\s+owes\b",
            r"\bsabse\s+(zyada|jyada)\s+(baki|baaki|udhaar|udhar)\b",
            r"\bkiska\s+(paisa\s+)?(baki|baaki)\b",
        ),
    ),
    IntentRule(
        IntentTag.TOP_CUSTOMERS_MONTH,
        IntentConfidence.REPORT,
        (
            r"\btop(?:[\s-]*\d+)?[\s-]+(customers?|clients?)\b",
            r"\b(best|biggest)\s+(customers?|clients?)\b",
            r"\bsabse\s+(bade|acche)\s+(customers?|grahak)\b",
        ),
    ),
    IntentRule(
        IntentTag.TOP_PAYMENTS_MONTH,
        IntentConfidence.REPORT,
        (
            r"\btop(?:[\s-]*\d+)?[\s-]+payments?\b",
            r"\b(largest|biggest|highest)\s+payments?\b",
            r"\bsabse\s+bad[ae]\s+payments?\b",
        ),
    ),
    IntentRule(
        IntentTag.TODAY_COLLECTION,
        IntentConfidence.BOUNDED_REPORT,
        (
            r"\btoday'?s?\s+collection\b",
            r"\bcollect(ed|ion)\s+today\b",
            r"\baaj\s+(ka|ki)\s+(collection|vasooli|wasooli)\b",
            r"\baaj\s+kitna\s+(collect|aaya|mila)",
        ),
    ),
    IntentRule(
        IntentTag.WEEKLY_REVENUE,
        IntentConfidence.REPORT,
        (
            r"\bweekly\s+(revenue|sales|income)\b",
            r"\b(revenue|sales)\s+(this|for\s+the|of\s+the)\s+week\b",
            r"\bthis\s+week'?s?\s+(revenue|sales)\b",
            r"\bis\s+hafte\b",
            r"\bhafte\s+ki\s+(kamai|sales)\b",
        ),
    ),
    IntentRule(
        IntentTag.MONTHLY_REVENUE,
        IntentConfidence.REPORT,
        (
            r"\bmonthly\s+(revenue|sales|income)\b",
            r"\b(revenue|sales)\s+(this|for\s+the|of\s+the)\s+month\b",
            r"\bthis\s+month'?s?\s+(revenue|sales)\b",
            r"\bis\s+mahine\b",
            r"\bmahine\s+ki\s+(kamai|sales)\b",
        ),
    ),
    IntentRule(
        IntentTag.PENDING_INVOICES,
        IntentConfidence.BOUNDED_REPORT,
        (
            r"\bpending\s+(invoices?|bills?|payments?)\b",
            r"\bunpaid\s+(invoices?|bills?)\b",
            r"\b(invoices?|bills?)\s+(pending|unpaid)\b",
            r"\b(baki|baaki)\s+(invoices?|bills?)\b",
        ),
    ),
    IntentRule(
        IntentTag.OVERDUE_INVOICES,
        IntentConfidence.BOUNDED_REPORT,
        (
            r"\boverdue\b",
            r"\bpast\s+due\b",
            r"\blate\s+payments?\b",
            r"\bdue\s+date\s+(nikal|cross|passed)",
        ),
    ),
    IntentRule(
        IntentTag.TOTAL_OUTSTANDING,
        IntentConfidence.BOUNDED_REPORT,
        (
            r"\boutstanding\b",
            r"\btotal\s+(due|receivables?|baki|baaki)\b",
            r"\breceivables?\b",
            r"\bkitna\s+(paisa\s+)?(baki|baaki|lena)\b",
        ),
    ),
    IntentRule(
        IntentTag.RECENT_LEADS,
        IntentConfidence.REPORT,
        (
            r"\b(recent|latest|last)\s+(\d+\s+)?leads?\b",
            r"\b(show|list)\s+(my\s+|all\s+)?leads\b",
            r"\bnaye\s+leads?\b",
        ),
    ),
    IntentRule(
        IntentTag.CONVERSION_RATE,
        IntentConfidence.CREATE,
        (
            r"\bconversion\b",
            r"\bconvert(ed)?\s+(rate|ratio)\b",
            r"\bleads?\s+convert",
            r"\bkitne\s+leads?\s+convert",
        ),
    ),
)


class IntentClassifier:
    """First-match-wins classifier over an ordered rule list."""

    def __init__(self, rules: tuple[IntentRule, ...] = INTENT_RULES) -> None:
        """Initialize the classifier with compiled rule patterns.

        Args:
            rules: Ordered rules; earlier rules take priority
        """
        self.rules = rules
        self._compiled: list[tuple[IntentRule, list[re.Pattern[str]]]] = [
            (rule, [re.compile(p) for p in rule.patterns]) for rule in rules
        ]

    @staticmethod
    def normalize(text: str) -> str:
        """Lower-case and trim input before matching."""
        return text.lower().strip()

    def classify(self, text: str) -> IntentMatch:
        """Classify text against the ordered rules.

        Args:
            text: User input text (normalized internally)

        Returns:
            IntentMatch for the first matching rule, or UNKNOWN with
            confidence 0 when no rule matches
        """
        normalized = self.normalize(text)

        for rule, patterns in self._compiled:
            for pattern in patterns:
                if pattern.search(normalized):
                    return IntentMatch(
                        tag=rule.tag,
                        confidence=rule.confidence,
                        pattern=pattern.pattern,
                    )

        return IntentMatch(tag=IntentTag.UNKNOWN, confidence=IntentConfidence.NONE)

    def matching_rule(self, text: str) -> IntentRule | None:
        """Return the rule that would fire for text, if any."""
        match = self.classify(text)
        if match.tag is IntentTag.UNKNOWN:
            return None
        return next(rule for rule in self.rules if rule.tag is match.tag)
