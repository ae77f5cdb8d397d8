"""Pydantic models for Linear webhook payloads."""

import json
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..common.exceptions import MalformedPayloadError

ISSUE_KIND = "Issue"

NO_PRIORITY = 0
MIN_PRIORITY = 0
MAX_PRIORITY = 4


class LinearIssueState(BaseModel):
    """Workflow state of a Linear issue."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str


class LinearAssignee(BaseModel):
    """Linear user an issue is assigned to."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str


class LinearIssue(BaseModel):
    """The ``data`` record of an Issue webhook."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: Optional[str] = None
    title: str
    priority: int = NO_PRIORITY
    state: LinearIssueState
    assignee: Optional[LinearAssignee] = None
    identifier: str

    @field_validator("priority", mode="before")
    @classmethod
    def normalize_priority(cls, value: Any) -> int:
        # Linear uses 0 (no priority) through 4 (low); anything else is "no priority".
        if isinstance(value, bool):
            return NO_PRIORITY
        if isinstance(value, float) and not value.is_integer():
            return NO_PRIORITY
        try:
            priority = int(value)
        except (TypeError, ValueError, OverflowError):
            return NO_PRIORITY
        if not MIN_PRIORITY <= priority <= MAX_PRIORITY:
            return NO_PRIORITY
        return priority


class LinearWebhookPayload(BaseModel):
    """Envelope shared by every Linear webhook, whatever the entity type."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    action: str
    kind: str = Field(..., alias="type")
    url: str
    data: Dict[str, Any]


class LinearWebhookEvent(BaseModel):
    """A parsed inbound event. ``issue`` is only set for Issue events."""
    model_config = ConfigDict(frozen=True)

    action: str
    kind: str
    url: str
    issue: Optional[LinearIssue] = None

    @property
    def identifier(self) -> str:
        return self.issue.identifier if self.issue else "-"


def parse_event(body: bytes) -> LinearWebhookEvent:
    """Parse a raw webhook body into a :class:`LinearWebhookEvent`.

    Raises:
        MalformedPayloadError: the body is not a JSON object, or required
            envelope or issue fields are missing.
    """
    try:
        payload = json.loads(body)
    except (ValueError, RecursionError) as e:
        # RecursionError: nesting too deep for the decoder
        raise MalformedPayloadError(f"Invalid JSON payload: {e}") from e

    if not isinstance(payload, dict):
        raise MalformedPayloadError("Webhook payload must be a JSON object")

    try:
        envelope = LinearWebhookPayload.model_validate(payload)
        issue = None
        if envelope.kind == ISSUE_KIND:
            issue = LinearIssue.model_validate(envelope.data)
    except ValidationError as e:
        raise MalformedPayloadError(
            f"Webhook payload failed validation: {e.error_count()} error(s)"
        ) from e

    return LinearWebhookEvent(
        action=envelope.action,
        kind=envelope.kind,
        url=envelope.url,
        issue=issue,
    )
