"""RTM API連携モジュール"""

from slack_event_kit.rtmapi.connection import Connection, connect
from slack_event_kit.rtmapi.decoder import DecodedPayload, decode_payload
from slack_event_kit.rtmapi.exceptions import ConnectionClosedError, RTMError, UnexpectedMessageTypeError
from slack_event_kit.rtmapi.outgoing import (
    OutgoingEventID,
    OutgoingMessage,
    Ping,
    new_outgoing_message,
    new_ping,
)
from slack_event_kit.rtmapi.reply import NGReply, OKReply, Pong, ReplyError

__all__ = [
    "Connection",
    "ConnectionClosedError",
    "DecodedPayload",
    "NGReply",
    "OKReply",
    "OutgoingEventID",
    "OutgoingMessage",
    "Ping",
    "Pong",
    "RTMError",
    "ReplyError",
    "UnexpectedMessageTypeError",
    "connect",
    "decode_payload",
    "new_outgoing_message",
    "new_ping",
]
