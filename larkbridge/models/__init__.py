"""Shared models for the relay."""

from .linear_models import (
    ISSUE_KIND,
    LinearAssignee,
    LinearIssue,
    LinearIssueState,
    LinearWebhookEvent,
    LinearWebhookPayload,
    parse_event,
)

from .lark_models import (
    ActionBlock,
    CardElement,
    CardField,
    CardHeader,
    FieldsBlock,
    LarkCard,
    LarkMessage,
    TitleBlock,
    create_card_message,
)

__all__ = [
    # Linear webhook models
    "ISSUE_KIND",
    "LinearAssignee",
    "LinearIssue",
    "LinearIssueState",
    "LinearWebhookEvent",
    "LinearWebhookPayload",
    "parse_event",
    # Lark card models
    "ActionBlock",
    "CardElement",
    "CardField",
    "CardHeader",
    "FieldsBlock",
    "LarkCard",
    "LarkMessage",
    "TitleBlock",
    "create_card_message",
]
