"""Web APIのレスポンス"""

from pydantic import BaseModel

from slack_event_kit.event import TimeStamp
from slack_event_kit.event.ids import ChannelID


class APIResponse(BaseModel, frozen=True):
    """Web APIの共通レスポンス

    https://api.slack.com/web#evaluating_responses
    """

    ok: bool
    error: str = ""
    warning: str = ""
    channel: ChannelID | None = None
    ts: TimeStamp | None = None


class RTMConnectResponse(APIResponse, frozen=True):
    """https://api.slack.com/methods/rtm.connect"""

    url: str = ""
