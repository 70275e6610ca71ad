"""Block Kitのコンポジションオブジェクト

https://api.slack.com/reference/block-kit/composition-objects
"""

from typing import Literal

from pydantic import BaseModel, Field

from slack_event_kit.event.ids import ConversationType


class CompositionObject(BaseModel, frozen=True):
    """コンポジションオブジェクトの基底クラス"""


class TextCompositionObject(CompositionObject, frozen=True):
    type: Literal["plain_text", "mrkdwn"]
    text: str
    emoji: bool = False
    verbatim: bool = False


class ConfirmationDialogObject(CompositionObject, frozen=True):
    title: TextCompositionObject | None = None
    text: TextCompositionObject | None = None
    confirm: TextCompositionObject | None = None
    deny: TextCompositionObject | None = None
    style: str = ""  # "primary", "danger" または空


class OptionObject(CompositionObject, frozen=True):
    text: TextCompositionObject | None = None
    value: str = ""
    description: TextCompositionObject | None = None
    url: str = ""


class OptionGroupObject(CompositionObject, frozen=True):
    label: TextCompositionObject | None = None
    options: list[OptionObject] = Field(default_factory=list)


class FilterObject(CompositionObject, frozen=True):
    """会話選択メニューの絞り込み条件"""

    include: list[ConversationType] = Field(default_factory=list)
    exclude_external_shared_channels: bool = False
    exclude_bot_users: bool = False
