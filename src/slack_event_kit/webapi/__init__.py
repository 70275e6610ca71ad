"""Web API連携モジュール"""

from slack_event_kit.webapi.client import SlackClient
from slack_event_kit.webapi.exceptions import SlackAPIError, SlackError
from slack_event_kit.webapi.request import AttachmentField, MessageAttachment, ParseMode, PostMessage
from slack_event_kit.webapi.response import APIResponse, RTMConnectResponse

__all__ = [
    "APIResponse",
    "AttachmentField",
    "MessageAttachment",
    "ParseMode",
    "PostMessage",
    "RTMConnectResponse",
    "SlackAPIError",
    "SlackClient",
    "SlackError",
]
