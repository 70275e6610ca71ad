"""クライアントからSlackへ送信するRTMフレーム

https://api.slack.com/rtm#sending_messages
"""

import threading
from typing import Literal

from pydantic import BaseModel

from slack_event_kit.event.ids import ChannelID


class OutgoingEventID:
    """接続ごとに一意な送信フレームIDを払い出すカウンター

    1から始まる正の整数を単調増加で返す。複数のタスクやスレッドから同時に呼ばれてもよい。
    """

    def __init__(self) -> None:
        self._id = 0
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            self._id += 1
            return self._id


class OutgoingEvent(BaseModel, frozen=True):
    """送信フレームの共通フィールド

    Slackからの返信はreply_toにこのidを持つため、送信と返信の対応付けに使える。
    """

    id: int
    type: str

    def event_type(self) -> str:
        return self.type


class OutgoingMessage(OutgoingEvent, frozen=True):
    """RTM APIで送信できる唯一のメッセージ形式

    装飾されたメッセージを送る場合はWeb APIを使う。
    """

    type: Literal["message"] = "message"
    channel: ChannelID
    text: str


class Ping(OutgoingEvent, frozen=True):
    """接続の死活確認用フレーム。Slackはpongを返す"""

    type: Literal["ping"] = "ping"


def new_outgoing_message(event_id: OutgoingEventID, channel: ChannelID, text: str) -> OutgoingMessage:
    return OutgoingMessage(id=event_id.next(), channel=channel, text=text)


def new_ping(event_id: OutgoingEventID) -> Ping:
    return Ping(id=event_id.next())
