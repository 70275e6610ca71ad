"""イベントペイロードのデコードモジュール"""

from slack_event_kit.event.block import BLOCK_TYPES, Block, decode_block
from slack_event_kit.event.block_element import BLOCK_ELEMENT_TYPES, BlockElement, decode_block_element
from slack_event_kit.event.common import TypedEvent, Typer
from slack_event_kit.event.decoder import (
    EVENT_TYPES,
    MESSAGE_CHANNEL_TYPES,
    MESSAGE_SUBTYPES,
    decode,
    map_event,
)
from slack_event_kit.event.exceptions import (
    EmptyPayloadError,
    EventDecodeError,
    MalformedPayloadError,
    UnknownPayloadTypeError,
)
from slack_event_kit.event.message import Message, MiscMessage
from slack_event_kit.event.payload import parse_payload
from slack_event_kit.event.timestamp import TimeStamp
from slack_event_kit.event.view import View

__all__ = [
    "BLOCK_ELEMENT_TYPES",
    "BLOCK_TYPES",
    "Block",
    "BlockElement",
    "EVENT_TYPES",
    "EmptyPayloadError",
    "EventDecodeError",
    "MESSAGE_CHANNEL_TYPES",
    "MESSAGE_SUBTYPES",
    "MalformedPayloadError",
    "Message",
    "MiscMessage",
    "TimeStamp",
    "TypedEvent",
    "Typer",
    "UnknownPayloadTypeError",
    "View",
    "decode",
    "decode_block",
    "decode_block_element",
    "map_event",
    "parse_payload",
]
