"""Block Kitのレイアウトブロック

https://api.slack.com/reference/block-kit/blocks
"""

from typing import Any, Literal

from pydantic import BaseModel, Field, SerializeAsAny, field_validator

from slack_event_kit.event.block_element import BlockElement, decode_block_element
from slack_event_kit.event.composition import TextCompositionObject
from slack_event_kit.event.exceptions import UnknownPayloadTypeError
from slack_event_kit.event.ids import BlockID
from slack_event_kit.event.payload import (
    RawPayload,
    decode_embedded,
    parse_payload,
    read_discriminator,
    validate_as,
)


def _decode_element_list(value: Any, embedding: str) -> Any:
    if value is None:
        return []
    if not isinstance(value, list):
        return value
    return [decode_embedded(element, decode_block_element, BlockElement, embedding) for element in value]


class Block(BaseModel, frozen=True):
    """レイアウトブロックの基底クラス"""

    type: str
    block_id: BlockID = BlockID("")

    def block_type(self) -> str:
        return self.type


class ActionsBlock(Block, frozen=True):
    type: Literal["actions"] = "actions"
    elements: list[SerializeAsAny[BlockElement]] = Field(default_factory=list)

    @field_validator("elements", mode="before")
    @classmethod
    def _decode_elements(cls, value: Any) -> Any:
        return _decode_element_list(value, "element of actions block")


class ContextBlock(Block, frozen=True):
    type: Literal["context"] = "context"
    elements: list[SerializeAsAny[BlockElement]] = Field(default_factory=list)

    @field_validator("elements", mode="before")
    @classmethod
    def _decode_elements(cls, value: Any) -> Any:
        return _decode_element_list(value, "element of context block")


class DividerBlock(Block, frozen=True):
    type: Literal["divider"] = "divider"


class FileBlock(Block, frozen=True):
    type: Literal["file"] = "file"
    external_id: str = ""
    source: str = ""


class ImageBlock(Block, frozen=True):
    type: Literal["image"] = "image"
    image_url: str = ""
    alt_text: str = ""
    title: TextCompositionObject | None = None


class InputBlock(Block, frozen=True):
    type: Literal["input"] = "input"
    label: TextCompositionObject | None = None
    element: SerializeAsAny[BlockElement] | None = None
    hint: TextCompositionObject | None = None
    optional: bool = False
    dispatch_action: bool = False

    @field_validator("element", mode="before")
    @classmethod
    def _decode_element(cls, value: Any) -> Any:
        if value is None:
            return None
        return decode_embedded(value, decode_block_element, BlockElement, "element of input block")


class SectionBlock(Block, frozen=True):
    type: Literal["section"] = "section"
    text: TextCompositionObject | None = None
    fields: list[TextCompositionObject] = Field(default_factory=list)
    accessory: SerializeAsAny[BlockElement] | None = None

    @field_validator("fields", mode="before")
    @classmethod
    def _accept_null_fields(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("accessory", mode="before")
    @classmethod
    def _decode_accessory(cls, value: Any) -> Any:
        if value is None:
            return None
        return decode_embedded(value, decode_block_element, BlockElement, "accessory of section block")


BLOCK_TYPES: dict[str, type[Block]] = {
    "section": SectionBlock,
    "divider": DividerBlock,
    "image": ImageBlock,
    "actions": ActionsBlock,
    "context": ContextBlock,
    "input": InputBlock,
    "file": FileBlock,
}


def decode_block(payload: RawPayload) -> Block:
    """typeに応じた具象ブロックへデコードする

    要素を含むブロックは、要素部分も判別子に応じて再帰的にデコードする。

    Raises:
        EmptyPayloadError: ペイロードが空の場合
        MalformedPayloadError: JSONとして不正、またはネストした要素のデコードに失敗した場合
        UnknownPayloadTypeError: typeに対応するブロックが登録されていない場合
    """
    parsed = parse_payload(payload)
    block_type = read_discriminator(parsed)

    mapping = BLOCK_TYPES.get(block_type)
    if mapping is None:
        msg = f"failed to handle unknown block type: {block_type}"
        raise UnknownPayloadTypeError(msg, block_type)

    return validate_as(mapping, parsed)
