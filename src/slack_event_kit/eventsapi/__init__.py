"""Events API連携モジュール"""

from slack_event_kit.eventsapi.decoder import EventCallback, EventWrapper, URLVerification, decode_payload
from slack_event_kit.eventsapi.exceptions import BadRequestError, EventsAPIError
from slack_event_kit.eventsapi.request import SlackRequest, new_slack_request
from slack_event_kit.eventsapi.server import (
    DefaultEventReceiver,
    EventReceiver,
    build_application,
    setup_handler,
)
from slack_event_kit.eventsapi.validator import RequestValidator, SignatureValidator

__all__ = [
    "BadRequestError",
    "DefaultEventReceiver",
    "EventCallback",
    "EventReceiver",
    "EventWrapper",
    "EventsAPIError",
    "RequestValidator",
    "SignatureValidator",
    "SlackRequest",
    "URLVerification",
    "build_application",
    "decode_payload",
    "new_slack_request",
    "setup_handler",
]
