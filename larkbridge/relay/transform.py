"""Filter Linear events and turn the relevant ones into Lark cards."""

from dataclasses import dataclass
from typing import Union

from ..models import (
    ISSUE_KIND,
    ActionBlock,
    CardField,
    CardHeader,
    FieldsBlock,
    LarkMessage,
    LinearWebhookEvent,
    TitleBlock,
    create_card_message,
)

SOURCE_SYSTEM = "Linear"
VIEW_BUTTON_TEXT = f"View in {SOURCE_SYSTEM}"
UNASSIGNED = "Unassigned"

RELAYED_ACTIONS = frozenset({"create", "update"})

ACTION_LABELS = {
    "create": "Created",
    "update": "Updated",
}

PRIORITY_COLORS = {
    1: "red",
    2: "orange",
    3: "yellow",
}
DEFAULT_PRIORITY_COLOR = "blue"  # 0 (no priority) and 4 (low)

PRIORITY_LABELS = {
    1: "Urgent",
    2: "High",
    3: "Medium",
    4: "Low",
}
DEFAULT_PRIORITY_LABEL = "None"


@dataclass(frozen=True)
class Skip:
    """The event is not relayed."""

    reason: str


@dataclass(frozen=True)
class Notify:
    """The event is relayed as ``message``."""

    message: LarkMessage


Classification = Union[Skip, Notify]


def action_label(action: str) -> str:
    return ACTION_LABELS.get(action, action)


def priority_color(priority: int) -> str:
    return PRIORITY_COLORS.get(priority, DEFAULT_PRIORITY_COLOR)


def priority_label(priority: int) -> str:
    return PRIORITY_LABELS.get(priority, DEFAULT_PRIORITY_LABEL)


def build_lark_card(event: LinearWebhookEvent) -> LarkMessage:
    """Build the interactive card for an Issue event.

    The event must carry an issue record; :func:`classify` guarantees that.
    """
    issue = event.issue
    if issue is None:
        raise ValueError(f"{event.kind} event has no issue data")

    assignee = issue.assignee.name if issue.assignee else UNASSIGNED

    return create_card_message(
        header=CardHeader(
            template=priority_color(issue.priority),
            title=f"[{SOURCE_SYSTEM}] {action_label(event.action)}: {issue.identifier}",
        ),
        title=TitleBlock(text=issue.title),
        fields=FieldsBlock(fields=(
            CardField(label="Status", value=issue.state.name),
            CardField(label="Priority", value=priority_label(issue.priority)),
            CardField(label="Assignee", value=assignee),
        )),
        action=ActionBlock(button_text=VIEW_BUTTON_TEXT, url=event.url),
    )


def classify(event: LinearWebhookEvent) -> Classification:
    """Decide whether ``event`` is relayed.

    Only Issue create and update events produce a card.
    """
    if event.kind != ISSUE_KIND:
        return Skip(reason=f"unsupported type {event.kind!r}")
    if event.action not in RELAYED_ACTIONS:
        return Skip(reason=f"unsupported action {event.action!r}")
    if event.issue is None:
        return Skip(reason="no issue data")
    return Notify(message=build_lark_card(event))
