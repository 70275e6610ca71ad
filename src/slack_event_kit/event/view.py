"""モーダルやApp Homeタブを表すビュー

https://api.slack.com/reference/surfaces/views
"""

from typing import Any

from pydantic import BaseModel, Field, SerializeAsAny, field_validator

from slack_event_kit.event.block import Block, decode_block
from slack_event_kit.event.composition import OptionObject, TextCompositionObject
from slack_event_kit.event.ids import ActionID, AppID, BlockID, BotID, ChannelID, TeamID, UserID
from slack_event_kit.event.payload import decode_embedded


class ViewStateValue(BaseModel, frozen=True):
    """入力要素に入力・選択された値

    要素の種類によってどのフィールドに値が入るかが異なる。
    """

    type: str = ""
    value: str | None = None
    selected_date: str | None = None
    selected_option: OptionObject | None = None
    selected_options: list[OptionObject] = Field(default_factory=list)
    selected_user: UserID | None = None
    selected_users: list[UserID] = Field(default_factory=list)
    selected_channel: ChannelID | None = None
    selected_channels: list[ChannelID] = Field(default_factory=list)
    selected_conversation: str | None = None
    selected_conversations: list[str] = Field(default_factory=list)


class ViewState(BaseModel, frozen=True):
    # block_id -> action_id -> 入力値
    values: dict[BlockID, dict[ActionID, ViewStateValue]] = Field(default_factory=dict)


class View(BaseModel, frozen=True):
    id: str = ""
    team_id: TeamID = TeamID("")
    type: str = ""  # "home" または "modal"
    blocks: list[SerializeAsAny[Block]] = Field(default_factory=list)
    private_metadata: str = ""
    callback_id: str = ""
    state: ViewState | None = None
    hash: str = ""
    title: TextCompositionObject | None = None
    close: TextCompositionObject | None = None
    submit: TextCompositionObject | None = None
    clear_on_close: bool = False
    notify_on_close: bool = False
    root_view_id: str | None = None
    previous_view_id: str | None = None
    app_id: AppID = AppID("")
    external_id: str = ""
    app_installed_team_id: TeamID = TeamID("")
    bot_id: BotID = BotID("")

    @field_validator("blocks", mode="before")
    @classmethod
    def _decode_blocks(cls, value: Any) -> Any:
        if value is None:
            return []
        if not isinstance(value, list):
            return value
        return [decode_embedded(block, decode_block, Block, "block of view") for block in value]

