"""Tests for quick-action eligibility and the deterministic responders.

Tests cover:
- Confidence gate (creation allow-list + required entity)
- Quick-action response templating
- Fallback cascade branches and confidences
"""

from __future__ import annotations

import pytest

from recov.core.gate import REQUIRED_ENTITIES, is_quick_action_eligible, missing_entities
from recov.core.intent import (
    CREATION_INTENTS,
    REPORT_INTENTS,
    EntityBag,
    IntentTag,
    ParsedCommand,
    parse_command,
)
from recov.core.responders import (
    GENERIC_HELP,
    FallbackBucket,
    bucket_text,
    fallback_response,
    match_bucket,
    quick_action_response,
    quick_action_text,
)


def make_command(
    tag: IntentTag,
    confidence: int = 75,
    **extras: str,
) -> ParsedCommand:
    """Build a command with collaborator-supplied entity fields."""
    return ParsedCommand(
        type=tag,
        confidence=confidence,
        entities=EntityBag(extras=dict(extras)),
        raw_text=tag.value,
    )


# ============================================================================
# Confidence Gate Tests
# ============================================================================


class TestConfidenceGate:
    """Tests for is_quick_action_eligible."""

    @pytest.mark.parametrize(
        "tag,field",
        [
            (IntentTag.CREATE_LEAD, "company_name"),
            (IntentTag.CREATE_CUSTOMER, "company_name"),
            (IntentTag.CREATE_QUOTATION, "customer_name"),
            (IntentTag.CREATE_INVOICE, "customer_name"),
        ],
    )
    def test_creation_with_required_field(self, tag: IntentTag, field: str) -> None:
        command = make_command(tag, **{field: "Acme Corp"})
        assert is_quick_action_eligible(command) is True
        assert missing_entities(command) == []

    @pytest.mark.parametrize("tag", sorted(CREATION_INTENTS, key=lambda t: t.value))
    def test_creation_without_required_field(self, tag: IntentTag) -> None:
        command = make_command(tag)
        assert is_quick_action_eligible(command) is False
        assert missing_entities(command) == [REQUIRED_ENTITIES[tag]]

    def test_wrong_field_not_enough(self) -> None:
        """Test lead creation needs company_name, not customer_name."""
        command = make_command(IntentTag.CREATE_LEAD, customer_name="Acme")
        assert is_quick_action_eligible(command) is False

    @pytest.mark.parametrize("tag", sorted(REPORT_INTENTS, key=lambda t: t.value))
    def test_report_intents_never_eligible(self, tag: IntentTag) -> None:
        """Test reports are ineligible even with every field present."""
        command = make_command(
            tag,
            confidence=85,
            company_name="Acme",
            customer_name="Acme",
        )
        assert is_quick_action_eligible(command) is False

    def test_unknown_never_eligible(self) -> None:
        assert is_quick_action_eligible(ParsedCommand.unknown("hi")) is False

    def test_extractor_output_never_eligible(self) -> None:
        """Test the extractor's generic name field does not satisfy the gate."""
        for text in (
            "create lead for Acme Corp",
            "add customer named Ravi Kumar",
            "quote for Mehta Steel",
            "create invoice for Sharma Traders",
        ):
            command = parse_command(text)
            assert command.type in CREATION_INTENTS
            assert command.entities.name
            assert is_quick_action_eligible(command) is False


# ============================================================================
# Quick Action Responder Tests
# ============================================================================


class TestQuickActionResponse:
    """Tests for quick_action_response."""

    def test_lead_response(self) -> None:
        command = make_command(IntentTag.CREATE_LEAD, company_name="Acme Corp")
        response = quick_action_response(command)

        assert response.type == "quick_command"
        assert response.confidence == 0.9
        assert response.requires_action is True
        assert response.action_type == "create_lead"
        assert response.action_payload == {"limit": 5, "company_name": "Acme Corp"}
        assert response.text == "Creating a new lead for Acme Corp..."
        assert response.command == command

    @pytest.mark.parametrize(
        "tag,field,expected",
        [
            (IntentTag.CREATE_CUSTOMER, "company_name", "Adding Acme as a new customer..."),
            (IntentTag.CREATE_QUOTATION, "customer_name", "Preparing quotation for Acme..."),
            (IntentTag.CREATE_INVOICE, "customer_name", "Generating invoice for Acme..."),
        ],
    )
    def test_templates(self, tag: IntentTag, field: str, expected: str) -> None:
        assert quick_action_text(make_command(tag, **{field: "Acme"})) == expected

    def test_default_template(self) -> None:
        command = make_command(IntentTag.TOP_DEBTORS, confidence=80)
        assert quick_action_text(command) == "Processing your request..."


# ============================================================================
# Fallback Responder Tests
# ============================================================================


class TestFallbackResponse:
    """Tests for the fallback cascade."""

    def test_low_confidence_creation_asks_for_detail(self) -> None:
        command = parse_command("create lead for Acme Corp")
        response = fallback_response(command.raw_text, command)

        assert response.type == "conversation"
        assert response.confidence == 0.5
        assert "create a lead" in response.text
        assert "need more details" in response.text
        assert "form" in response.text
        assert response.command == command
        assert not response.requires_action

    def test_low_confidence_report_asks_for_detail(self) -> None:
        command = parse_command("what is our conversion rate")
        response = fallback_response(command.raw_text, command)

        assert response.confidence == 0.5
        assert "conversion rate" in response.text
        assert "configure the AI assistant" in response.text

    def test_report_intent_goes_to_bucket(self) -> None:
        command = parse_command("weekly revenue please")
        response = fallback_response(command.raw_text, command)

        assert response.confidence == 0.4
        assert response.text == bucket_text(FallbackBucket.REVENUE)
        assert response.command is None

    def test_debtors_fall_to_generic(self) -> None:
        """Test no bucket matches a debtor query."""
        command = parse_command("show top 10 debtors")
        response = fallback_response(command.raw_text, command)

        assert response.type == "conversation"
        assert response.confidence == 0.3
        assert response.text == GENERIC_HELP

    def test_unknown_customer_bucket(self) -> None:
        message = "any news from client Mehta?"
        response = fallback_response(message, parse_command(message))
        assert response.confidence == 0.4
        assert response.text == bucket_text(FallbackBucket.CUSTOMER)

    def test_unknown_invoice_bucket(self) -> None:
        message = "payment status"
        response = fallback_response(message, parse_command(message))
        assert response.confidence == 0.4
        assert response.text == bucket_text(FallbackBucket.INVOICE)

    def test_threshold_is_adjustable(self) -> None:
        command = parse_command("show top 10 debtors")
        response = fallback_response(command.raw_text, command, low_confidence_threshold=90)
        assert response.confidence == 0.5
        assert "top debtors" in response.text

    def test_never_requires_action(self) -> None:
        for message in ("create lead", "sales", "client", "invoice", "hello"):
            response = fallback_response(message, parse_command(message))
            assert response.type == "conversation"
            assert response.confidence in (0.3, 0.4, 0.5)
            assert not response.requires_action
            assert response.action_type is None


class TestMatchBucket:
    """Tests for keyword bucket matching."""

    @pytest.mark.parametrize(
        "message,bucket",
        [
            ("How are SALES doing", FallbackBucket.REVENUE),
            ("revenue from clients", FallbackBucket.REVENUE),
            ("client list", FallbackBucket.CUSTOMER),
            ("customer invoice", FallbackBucket.CUSTOMER),
            ("payment received?", FallbackBucket.INVOICE),
            ("show top 10 debtors", FallbackBucket.GENERAL),
        ],
    )
    def test_buckets(self, message: str, bucket: FallbackBucket) -> None:
        assert match_bucket(message) == bucket

    def test_every_bucket_has_text(self) -> None:
        for bucket in FallbackBucket:
            assert bucket_text(bucket)
        assert bucket_text(FallbackBucket.GENERAL) == GENERIC_HELP
