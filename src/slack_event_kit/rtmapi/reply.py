"""RTM API固有の受信フレーム

イベントとしては定義されておらず、送信フレームへの返信としてのみ届く。
https://api.slack.com/rtm#handling_responses
"""

from typing import Literal

from pydantic import BaseModel

from slack_event_kit.event import TimeStamp


class Pong(BaseModel, frozen=True):
    """pingへの応答

    https://api.slack.com/rtm#ping_and_pong
    """

    type: Literal["pong"] = "pong"
    reply_to: int = 0

    def event_type(self) -> str:
        return self.type


class OKReply(BaseModel, frozen=True):
    """送信したメッセージが受け付けられた"""

    ok: Literal[True] = True
    reply_to: int = 0
    ts: TimeStamp | None = None
    text: str = ""


class ReplyError(BaseModel, frozen=True):
    code: int = 0
    msg: str = ""


class NGReply(BaseModel, frozen=True):
    """送信したメッセージが拒否された"""

    ok: Literal[False] = False
    reply_to: int = 0
    error: ReplyError | None = None
