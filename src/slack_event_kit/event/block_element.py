"""Block Kitのブロック要素

https://api.slack.com/reference/block-kit/block-elements
"""

from typing import Literal

from pydantic import BaseModel, Field

from slack_event_kit.event.composition import (
    ConfirmationDialogObject,
    FilterObject,
    OptionGroupObject,
    OptionObject,
    TextCompositionObject,
)
from slack_event_kit.event.exceptions import UnknownPayloadTypeError
from slack_event_kit.event.ids import ActionID, ChannelID, UserID
from slack_event_kit.event.payload import RawPayload, parse_payload, read_discriminator, validate_as


class BlockElement(BaseModel, frozen=True):
    """ブロック要素の基底クラス"""

    type: str

    def block_element_type(self) -> str:
        return self.type


class ButtonBlockElement(BlockElement, frozen=True):
    type: Literal["button"] = "button"
    text: TextCompositionObject | None = None
    action_id: ActionID = ActionID("")
    url: str = ""
    value: str = ""
    style: str = ""  # "primary", "danger" または空
    confirm: ConfirmationDialogObject | None = None


class CheckboxBlockElement(BlockElement, frozen=True):
    type: Literal["checkboxes"] = "checkboxes"
    action_id: ActionID = ActionID("")
    options: list[OptionObject] = Field(default_factory=list)
    initial_options: list[OptionObject] = Field(default_factory=list)
    confirm: ConfirmationDialogObject | None = None


class DatePickerBlockElement(BlockElement, frozen=True):
    type: Literal["datepicker"] = "datepicker"
    action_id: ActionID = ActionID("")
    placeholder: TextCompositionObject | None = None
    initial_date: str = ""  # YYYY-MM-DD
    confirm: ConfirmationDialogObject | None = None


class ImageBlockElement(BlockElement, frozen=True):
    type: Literal["image"] = "image"
    image_url: str = ""
    alt_text: str = ""


class MultiStaticSelectBlockElement(BlockElement, frozen=True):
    """静的な選択肢を持つ複数選択メニュー"""

    type: Literal["multi_static_select"] = "multi_static_select"
    placeholder: TextCompositionObject | None = None
    action_id: ActionID = ActionID("")
    options: list[OptionObject] = Field(default_factory=list)
    option_groups: list[OptionGroupObject] = Field(default_factory=list)
    initial_options: list[OptionObject] = Field(default_factory=list)
    confirm: ConfirmationDialogObject | None = None
    max_selected_items: int = 0


class MultiExternalSelectBlockElement(BlockElement, frozen=True):
    """外部データソースから選択肢を取得する複数選択メニュー"""

    type: Literal["multi_external_select"] = "multi_external_select"
    placeholder: TextCompositionObject | None = None
    action_id: ActionID = ActionID("")
    min_query_length: int = 0
    initial_options: list[OptionObject] = Field(default_factory=list)
    confirm: ConfirmationDialogObject | None = None
    max_selected_items: int = 0


class MultiUsersSelectBlockElement(BlockElement, frozen=True):
    """ユーザーの複数選択メニュー"""

    type: Literal["multi_users_select"] = "multi_users_select"
    placeholder: TextCompositionObject | None = None
    action_id: ActionID = ActionID("")
    initial_users: list[UserID] = Field(default_factory=list)
    confirm: ConfirmationDialogObject | None = None
    max_selected_items: int = 0


class MultiConversationsSelectBlockElement(BlockElement, frozen=True):
    """パブリック/プライベートチャンネル、DMの複数選択メニュー"""

    type: Literal["multi_conversations_select"] = "multi_conversations_select"
    placeholder: TextCompositionObject | None = None
    action_id: ActionID = ActionID("")
    initial_conversations: list[str] = Field(default_factory=list)
    default_to_current_conversation: bool = False
    confirm: ConfirmationDialogObject | None = None
    max_selected_items: int = 0
    filter: FilterObject | None = None


class MultiChannelsSelectBlockElement(BlockElement, frozen=True):
    """パブリックチャンネルの複数選択メニュー"""

    type: Literal["multi_channels_select"] = "multi_channels_select"
    placeholder: TextCompositionObject | None = None
    action_id: ActionID = ActionID("")
    initial_channels: list[ChannelID] = Field(default_factory=list)
    confirm: ConfirmationDialogObject | None = None
    max_selected_items: int = 0


class OverflowBlockElement(BlockElement, frozen=True):
    type: Literal["overflow"] = "overflow"
    action_id: ActionID = ActionID("")
    options: list[OptionObject] = Field(default_factory=list)
    confirm: ConfirmationDialogObject | None = None


class PlainTextInputBlockElement(BlockElement, frozen=True):
    type: Literal["plain_text_input"] = "plain_text_input"
    action_id: ActionID = ActionID("")
    placeholder: TextCompositionObject | None = None
    initial_value: str = ""
    multiline: bool = False
    min_length: int = 0
    max_length: int = 0


class RadioButtonGroupBlockElement(BlockElement, frozen=True):
    type: Literal["radio_buttons"] = "radio_buttons"
    action_id: ActionID = ActionID("")
    options: list[OptionObject] = Field(default_factory=list)
    initial_option: OptionObject | None = None
    confirm: ConfirmationDialogObject | None = None


class StaticSelectBlockElement(BlockElement, frozen=True):
    """静的な選択肢を持つ選択メニュー"""

    type: Literal["static_select"] = "static_select"
    placeholder: TextCompositionObject | None = None
    action_id: ActionID = ActionID("")
    options: list[OptionObject] = Field(default_factory=list)
    option_groups: list[OptionGroupObject] = Field(default_factory=list)
    initial_option: OptionObject | None = None
    confirm: ConfirmationDialogObject | None = None


class ExternalSelectBlockElement(BlockElement, frozen=True):
    type: Literal["external_select"] = "external_select"
    placeholder: TextCompositionObject | None = None
    action_id: ActionID = ActionID("")
    initial_option: OptionObject | None = None
    min_query_length: int = 0
    confirm: ConfirmationDialogObject | None = None


class UsersSelectBlockElement(BlockElement, frozen=True):
    type: Literal["users_select"] = "users_select"
    placeholder: TextCompositionObject | None = None
    action_id: ActionID = ActionID("")
    initial_user: UserID = UserID("")
    confirm: ConfirmationDialogObject | None = None


class ConversationsSelectBlockElement(BlockElement, frozen=True):
    type: Literal["conversations_select"] = "conversations_select"
    placeholder: TextCompositionObject | None = None
    action_id: ActionID = ActionID("")
    initial_conversation: str = ""
    default_to_current_conversation: bool = False
    confirm: ConfirmationDialogObject | None = None
    response_url_enabled: bool = False
    filter: FilterObject | None = None


class ChannelsSelectBlockElement(BlockElement, frozen=True):
    type: Literal["channels_select"] = "channels_select"
    placeholder: TextCompositionObject | None = None
    action_id: ActionID = ActionID("")
    initial_channel: ChannelID = ChannelID("")
    confirm: ConfirmationDialogObject | None = None
    response_url_enabled: bool = False


class TextObjectBlockElement(BlockElement, frozen=True):
    """contextブロックの要素として置かれるテキストオブジェクト

    typeは "mrkdwn" か "plain_text" のどちらかで、受け取った値をそのまま保持する。
    """

    type: Literal["mrkdwn", "plain_text"]
    text: str = ""
    emoji: bool = False
    verbatim: bool = False


BLOCK_ELEMENT_TYPES: dict[str, type[BlockElement]] = {
    "button": ButtonBlockElement,
    "checkboxes": CheckboxBlockElement,
    "datepicker": DatePickerBlockElement,
    "image": ImageBlockElement,
    "multi_static_select": MultiStaticSelectBlockElement,
    "multi_external_select": MultiExternalSelectBlockElement,
    "multi_users_select": MultiUsersSelectBlockElement,
    "multi_conversations_select": MultiConversationsSelectBlockElement,
    "multi_channels_select": MultiChannelsSelectBlockElement,
    "overflow": OverflowBlockElement,
    "plain_text_input": PlainTextInputBlockElement,
    "radio_buttons": RadioButtonGroupBlockElement,
    "static_select": StaticSelectBlockElement,
    "external_select": ExternalSelectBlockElement,
    "users_select": UsersSelectBlockElement,
    "conversations_select": ConversationsSelectBlockElement,
    "channels_select": ChannelsSelectBlockElement,
    "mrkdwn": TextObjectBlockElement,
    "plain_text": TextObjectBlockElement,
}


def decode_block_element(payload: RawPayload) -> BlockElement:
    """typeに応じた具象ブロック要素へデコードする

    Args:
        payload: ブロック要素1つ分の生のJSON、または読み込み済みのJSONオブジェクト

    Returns:
        BlockElement: 具象ブロック要素

    Raises:
        EmptyPayloadError: ペイロードが空の場合
        MalformedPayloadError: JSONとして不正、またはフィールドの型が不正な場合
        UnknownPayloadTypeError: typeに対応するブロック要素が登録されていない場合
    """
    parsed = parse_payload(payload)
    element_type = read_discriminator(parsed)

    mapping = BLOCK_ELEMENT_TYPES.get(element_type)
    if mapping is None:
        msg = f"failed to handle unknown block element type: {element_type}"
        raise UnknownPayloadTypeError(msg, element_type)

    return validate_as(mapping, parsed)
