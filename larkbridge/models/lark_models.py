"""Pydantic models for Lark interactive card messages.

A card is a header plus an ordered sequence of elements. Only three element
kinds are produced by the relay; each one owns its wire representation so the
Lark-specific JSON shape lives in this module alone.
"""

from typing import Any, Dict, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict

HeaderTemplate = Literal["red", "orange", "yellow", "blue"]


class CardHeader(BaseModel):
    """Card header: colour template and plain-text title."""
    model_config = ConfigDict(frozen=True)

    template: HeaderTemplate
    title: str

    def to_wire(self) -> Dict[str, Any]:
        return {
            "template": self.template,
            "title": {
                "content": self.title,
                "tag": "plain_text",
            },
        }


class TitleBlock(BaseModel):
    """Bold markdown line holding the issue title."""
    model_config = ConfigDict(frozen=True)

    text: str

    def to_wire(self) -> Dict[str, Any]:
        return {
            "tag": "div",
            "text": {
                "tag": "lark_md",
                "content": f"**{self.text}**",
            },
        }


class CardField(BaseModel):
    """A short ``**Label:** value`` field."""
    model_config = ConfigDict(frozen=True)

    label: str
    value: str

    def to_wire(self) -> Dict[str, Any]:
        return {
            "is_short": True,
            "text": {
                "tag": "lark_md",
                "content": f"**{self.label}:** {self.value}",
            },
        }


class FieldsBlock(BaseModel):
    """Row of short fields."""
    model_config = ConfigDict(frozen=True)

    fields: Tuple[CardField, ...]

    def to_wire(self) -> Dict[str, Any]:
        return {
            "tag": "div",
            "fields": [field.to_wire() for field in self.fields],
        }


class ActionBlock(BaseModel):
    """Single primary button linking to a URL."""
    model_config = ConfigDict(frozen=True)

    button_text: str
    url: str

    def to_wire(self) -> Dict[str, Any]:
        return {
            "tag": "action",
            "actions": [
                {
                    "tag": "button",
                    "text": {
                        "tag": "plain_text",
                        "content": self.button_text,
                    },
                    "type": "primary",
                    "url": self.url,
                }
            ],
        }


CardElement = Union[TitleBlock, FieldsBlock, ActionBlock]


class LarkCard(BaseModel):
    """Interactive card body."""
    model_config = ConfigDict(frozen=True)

    header: CardHeader
    elements: Tuple[CardElement, ...]

    def to_wire(self) -> Dict[str, Any]:
        return {
            "header": self.header.to_wire(),
            "elements": [element.to_wire() for element in self.elements],
        }


class LarkMessage(BaseModel):
    """Message posted to a Lark custom bot webhook."""
    model_config = ConfigDict(frozen=True)

    msg_type: Literal["interactive"] = "interactive"
    card: LarkCard

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the JSON body Lark expects."""
        return {
            "msg_type": self.msg_type,
            "card": self.card.to_wire(),
        }


def create_card_message(
    header: CardHeader,
    title: TitleBlock,
    fields: FieldsBlock,
    action: ActionBlock,
) -> LarkMessage:
    """Create a card message with the title, fields, action element order."""
    return LarkMessage(card=LarkCard(header=header, elements=(title, fields, action)))
