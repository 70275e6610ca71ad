"""RTM APIの受信フレームのデコード"""

from slack_event_kit.event import TypedEvent, map_event
from slack_event_kit.event.exceptions import EventDecodeError
from slack_event_kit.event.payload import RawPayload, parse_payload, validate_as
from slack_event_kit.rtmapi.reply import NGReply, OKReply, Pong

DecodedPayload = TypedEvent | Pong | OKReply | NGReply


def decode_payload(payload: RawPayload) -> DecodedPayload:
    """受信したテキストフレームをイベント、またはRTM API固有の返信へデコードする

    Args:
        payload: 受信したテキストフレームのデータ

    Returns:
        DecodedPayload: 具象イベント、Pong、OKReply、NGReplyのいずれか

    Raises:
        EmptyPayloadError: 空のフレームを受信した場合（呼び出し側は読み飛ばしてよい）
        MalformedPayloadError: JSONとして不正、または既知のどの形式にも当てはまらない場合
        UnknownPayloadTypeError: typeが未知で、かつ返信フレームでもない場合
    """
    parsed = parse_payload(payload)

    try:
        return map_event(parsed)
    except EventDecodeError:
        # 返信フレームはreply_toを持つ
        if "reply_to" not in parsed:
            raise

        # https://api.slack.com/rtm#ping_and_pong
        if parsed.get("type") == "pong":
            return validate_as(Pong, parsed)

        # https://api.slack.com/rtm#handling_responses
        if "ok" in parsed:
            if parsed["ok"] is True:
                return validate_as(OKReply, parsed)
            return validate_as(NGReply, parsed)

        raise
