"""Web APIへ送信するリクエスト"""

import json
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

from slack_event_kit.event import TimeStamp
from slack_event_kit.event.ids import ChannelID


class ParseMode(StrEnum):
    """https://api.slack.com/reference/surfaces/formatting#automatic-parsing"""

    NONE = "none"
    FULL = "full"


class AttachmentField(BaseModel, frozen=True):
    title: str = ""
    value: str
    short: bool = False


class MessageAttachment(BaseModel, frozen=True):
    """https://api.slack.com/reference/messaging/attachments"""

    fallback: str
    color: str = ""
    pretext: str = ""
    author_name: str = ""
    author_link: str = ""
    author_icon: str = ""
    title: str = ""
    title_link: str = ""
    text: str = ""
    fields: list[AttachmentField] = Field(default_factory=list)
    image_url: str = ""
    thumb_url: str = ""


@dataclass
class PostMessage:
    """chat.postMessageの送信内容

    デフォルト値はよく使われる設定（link_names=1, unfurl_links=True など）に合わせている。
    https://api.slack.com/methods/chat.postMessage
    """

    channel: ChannelID
    text: str
    parse: ParseMode = ParseMode.FULL
    link_names: int = 1
    attachments: list[MessageAttachment] = field(default_factory=list)
    blocks: list[BaseModel | dict[str, Any]] = field(default_factory=list)
    unfurl_links: bool = True
    unfurl_media: bool = True
    username: str = ""
    as_user: bool = False
    icon_url: str = ""
    icon_emoji: str = ""
    reply_broadcast: bool = False
    thread_ts: TimeStamp | str | None = None  # スレッドへ返信する場合の親メッセージのts

    def to_params(self) -> dict[str, Any]:
        """AsyncWebClient.chat_postMessageに渡す引数を組み立てる

        thread_tsは受信時の表記をそのまま送る。
        """
        params: dict[str, Any] = {
            "channel": self.channel,
            "text": self.text,
            "parse": str(self.parse),
            "link_names": self.link_names,
            "unfurl_links": self.unfurl_links,
            "unfurl_media": self.unfurl_media,
            "as_user": self.as_user,
        }

        if self.thread_ts is not None:
            params["thread_ts"] = str(self.thread_ts)
            params["reply_broadcast"] = self.reply_broadcast
        if self.username:
            params["username"] = self.username
        if self.icon_url:
            params["icon_url"] = self.icon_url
        if self.icon_emoji:
            params["icon_emoji"] = self.icon_emoji
        if self.attachments:
            params["attachments"] = json.dumps(
                [a.model_dump(exclude_defaults=True) for a in self.attachments],
                ensure_ascii=False,
            )
        if self.blocks:
            params["blocks"] = json.dumps(
                [b.model_dump(mode="json", exclude_none=True) if isinstance(b, BaseModel) else b for b in self.blocks],
                ensure_ascii=False,
            )

        return params
