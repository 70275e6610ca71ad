"""Events APIのエンベロープのデコード

https://api.slack.com/events-api#callback_field_overview
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, Field

from slack_event_kit.event import TimeStamp, TypedEvent, map_event
from slack_event_kit.event.exceptions import MalformedPayloadError, UnknownPayloadTypeError
from slack_event_kit.event.ids import EventID, TeamID
from slack_event_kit.event.payload import dumps_for_message, parse_payload, read_discriminator, validate_as
from slack_event_kit.eventsapi.request import SlackRequest


class URLVerification(BaseModel, frozen=True):
    """エンドポイント登録時に送られる検証用のペイロード

    challengeの値をそのままレスポンスボディとして返す必要がある。
    https://api.slack.com/events/url_verification
    """

    type: Literal["url_verification"] = "url_verification"
    challenge: str = ""
    token: str = ""


class EventCallback(BaseModel, frozen=True):
    """event_callbackのエンベロープが持つメタデータ"""

    token: str = ""
    team_id: TeamID = TeamID("")
    api_app_id: str = ""
    type: Literal["event_callback"] = "event_callback"
    authed_users: list[str] = Field(default_factory=list)
    event_id: EventID = EventID("")
    event_time: TimeStamp | None = None


@dataclass(frozen=True)
class EventWrapper:
    """エンベロープのメタデータ、デコードしたイベント、元のリクエストをまとめたもの"""

    callback: EventCallback
    event: TypedEvent
    request: SlackRequest


def decode_payload(request: SlackRequest) -> URLVerification | EventWrapper:
    """Events APIのリクエストボディをデコードする

    Args:
        request: Slackから受信したリクエスト

    Returns:
        URLVerification | EventWrapper: エンドポイント検証用のペイロード、またはイベントとメタデータ

    Raises:
        EmptyPayloadError: ボディが空の場合
        MalformedPayloadError: JSONとして不正、typeが無いか文字列でない、またはeventフィールドが欠けている場合
        UnknownPayloadTypeError: エンベロープ、または内側のイベントのtypeが未知の場合
    """
    parsed = parse_payload(request.payload)

    type_value = read_discriminator(parsed)
    if type_value == "url_verification":
        return validate_as(URLVerification, parsed)

    if type_value == "event_callback":
        callback = validate_as(EventCallback, parsed)

        # 内側のイベントはRTM APIと同じ振り分けを通してデコードする
        inner = parsed.get("event")
        if not isinstance(inner, Mapping):
            msg = f"required event field is not given: {dumps_for_message(parsed)}"
            raise MalformedPayloadError(msg)

        return EventWrapper(callback=callback, event=map_event(inner), request=request)

    msg = f"undefined type of {type_value} is given"
    raise UnknownPayloadTypeError(msg, type_value)
