import pytest

from larkbridge.models import ActionBlock, FieldsBlock, TitleBlock
from larkbridge.relay.transform import (
    Notify,
    Skip,
    action_label,
    build_lark_card,
    classify,
    priority_color,
    priority_label,
)
from tests.helpers import make_event


@pytest.mark.parametrize(
    "priority, color, label",
    [
        (0, "blue", "None"),
        (1, "red", "Urgent"),
        (2, "orange", "High"),
        (3, "yellow", "Medium"),
        (4, "blue", "Low"),
        (5, "blue", "None"),
        (99, "blue", "None"),
        (-1, "blue", "None"),
    ],
)
def test_priority_mappings(priority, color, label):
    assert priority_color(priority) == color
    assert priority_label(priority) == label


def test_action_label():
    assert action_label("create") == "Created"
    assert action_label("update") == "Updated"
    assert action_label("remove") == "remove"


@pytest.mark.parametrize("action", ["create", "update"])
def test_issue_create_and_update_notify(action):
    assert isinstance(classify(make_event(action=action)), Notify)


@pytest.mark.parametrize("action", ["create", "update", "remove"])
def test_other_kinds_skip(action):
    result = classify(make_event(action=action, kind="Project"))
    assert isinstance(result, Skip)
    assert "Project" in result.reason


@pytest.mark.parametrize("action", ["delete", "remove", "restore", ""])
def test_other_issue_actions_skip(action):
    result = classify(make_event(action=action))
    assert isinstance(result, Skip)


def test_issue_without_data_skips():
    assert isinstance(classify(make_event(with_issue=False)), Skip)


def test_card_header():
    card = classify(make_event(action="create", priority=1)).message.card
    assert card.header.title == "[Linear] Created: ENG-123"
    assert card.header.template == "red"


def test_card_element_order():
    elements = build_lark_card(make_event()).card.elements
    assert [type(element) for element in elements] == [TitleBlock, FieldsBlock, ActionBlock]


def test_card_content():
    title, fields, action = build_lark_card(make_event(priority=3)).card.elements

    assert title.text == "Auth service returns 500 on login"
    assert [(f.label, f.value) for f in fields.fields] == [
        ("Status", "In Progress"),
        ("Priority", "Medium"),
        ("Assignee", "Ada"),
    ]
    assert action.button_text == "View in Linear"
    assert action.url == "https://linear.app/team/issue/ENG-123"


def test_unassigned_issue():
    _, fields, _ = build_lark_card(make_event(assignee=None)).card.elements
    assert fields.fields[2].value == "Unassigned"


def test_transform_is_deterministic():
    event = make_event(action="update", priority=2)
    assert build_lark_card(event).to_payload() == build_lark_card(event).to_payload()


def test_build_requires_issue():
    with pytest.raises(ValueError):
        build_lark_card(make_event(kind="Comment", with_issue=False))
