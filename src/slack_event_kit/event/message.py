"""messageイベントとそのサブタイプ

https://api.slack.com/events/message
"""

from typing import Any, Literal

from pydantic import BaseModel, Field, SerializeAsAny, field_validator

from slack_event_kit.event.block import Block, decode_block
from slack_event_kit.event.common import File, TypedEvent
from slack_event_kit.event.ids import AppID, BotID, ChannelID, TeamID, UserID
from slack_event_kit.event.payload import decode_embedded
from slack_event_kit.event.timestamp import TimeStamp


class Edited(BaseModel, frozen=True):
    user: UserID = UserID("")
    ts: TimeStamp | None = None


class Message(TypedEvent, frozen=True):
    """messageイベント

    {
        "type": "message",
        "channel": "C2147483705",
        "user": "U2147483697",
        "text": "Hello, world!",
        "ts": "1355517523.000005",
        "edited": {
            "user": "U2147483697",
            "ts": "1355517536.000001"
        }
    }
    """

    type: Literal["message"] = "message"
    channel: ChannelID = ChannelID("")
    user: UserID = UserID("")
    text: str = ""
    ts: TimeStamp | None = None
    thread_ts: TimeStamp | None = None  # https://api.slack.com/docs/message-threading
    edited: Edited | None = None
    team: TeamID = TeamID("")
    client_msg_id: str = ""
    channel_type: str = ""
    event_ts: TimeStamp | None = None
    blocks: list[SerializeAsAny[Block]] = Field(default_factory=list)

    @field_validator("blocks", mode="before")
    @classmethod
    def _decode_blocks(cls, value: Any) -> Any:
        if value is None:
            return []
        if not isinstance(value, list):
            return value
        return [decode_embedded(block, decode_block, Block, "block of message") for block in value]


# Events APIではchannel_typeによって購読対象のイベントが区別される

class AppHomeMessage(Message, frozen=True):
    """message.app_home: App HomeのMessagesタブに投稿されたメッセージ"""


class ChannelMessage(Message, frozen=True):
    """message.channels: パブリックチャンネルに投稿されたメッセージ"""


class GroupMessage(Message, frozen=True):
    """message.groups / message.mpim: プライベートチャンネルまたはグループDMに投稿されたメッセージ"""


class IMMessage(Message, frozen=True):
    """message.im: DMに投稿されたメッセージ"""


class MiscMessage(Message, frozen=True):
    """サブタイプ付きのメッセージ

    専用の型を持たないサブタイプは、このクラスの共通フィールドのみでデコードする。
    https://api.slack.com/events/message#message_subtypes
    """

    subtype: str = ""
    hidden: bool = False


class BotMessage(MiscMessage, frozen=True):
    bot_id: BotID = BotID("")
    app_id: AppID = AppID("")
    username: str = ""
    icons: dict[str, str] = Field(default_factory=dict)


class MeMessage(MiscMessage, frozen=True):
    """/me コマンドによるメッセージ"""


class ChannelJoinMessage(MiscMessage, frozen=True):
    inviter: UserID = UserID("")


class FileShareMessage(MiscMessage, frozen=True):
    files: list[File] = Field(default_factory=list)
    upload: bool = False


class MessageChanged(MiscMessage, frozen=True):
    message: Message | None = None
    previous_message: Message | None = None


class MessageDeleted(MiscMessage, frozen=True):
    deleted_ts: TimeStamp | None = None
    previous_message: Message | None = None


class MessageReplied(MiscMessage, frozen=True):
    message: dict[str, Any] = Field(default_factory=dict)


class ThreadBroadcast(MiscMessage, frozen=True):
    root: Message | None = None
