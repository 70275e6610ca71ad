import json
from datetime import UTC, datetime

import pytest

from slack_event_kit.event import EmptyPayloadError, MalformedPayloadError, UnknownPayloadTypeError, decode
from slack_event_kit.event.events import ReactionAdded
from slack_event_kit.event.message import ChannelMessage
from slack_event_kit.eventsapi.decoder import EventWrapper, URLVerification, decode_payload
from slack_event_kit.eventsapi.request import SlackRequest

REACTION_ADDED = {
    "type": "reaction_added",
    "user": "U024BE7LH",
    "reaction": "thumbsup",
    "item_user": "U0G9QF9C6",
    "item": {"type": "message", "channel": "C0G9QF9GZ", "ts": "1360782400.498405"},
    "event_ts": "1360782804.083113",
}


def _make_request(payload: bytes) -> SlackRequest:
    return SlackRequest(
        signature="v0=dummy",
        timestamp=datetime.fromtimestamp(1531420618, tz=UTC),
        payload=payload,
    )


def _event_callback(event: object) -> bytes:
    return json.dumps({
        "token": "ZZZZZZWSxiZZZ2yIvs3peJ",
        "team_id": "T061EG9R6",
        "api_app_id": "A0MDYCDME",
        "event": event,
        "type": "event_callback",
        "authed_users": ["U061F7AUR"],
        "event_id": "Ev9UQ52YNA",
        "event_time": 1234567890,
    }).encode()


class TestDecodePayload:
    """Events APIのdecode_payload関数のテスト"""

    def test_url_verification(self) -> None:
        """url_verificationはchallengeを持つURLVerificationになること"""
        request = _make_request(b"""
        {
            "token": "Jhj5dZrVaK7ZwHHjRyZWjbDl",
            "challenge": "3eZbrw1aBm2rZgRNFdxV2595E9CY3gmdALWMmHkvFXO7tYXAYM8P",
            "type": "url_verification"
        }
        """)

        decoded = decode_payload(request)

        assert isinstance(decoded, URLVerification)
        assert decoded.challenge == "3eZbrw1aBm2rZgRNFdxV2595E9CY3gmdALWMmHkvFXO7tYXAYM8P"
        assert decoded.token == "Jhj5dZrVaK7ZwHHjRyZWjbDl"

    def test_event_callback(self) -> None:
        """event_callbackのメタデータと内側のイベントがデコードされること"""
        request = _make_request(_event_callback(REACTION_ADDED))

        decoded = decode_payload(request)

        assert isinstance(decoded, EventWrapper)
        assert decoded.callback.team_id == "T061EG9R6"
        assert decoded.callback.api_app_id == "A0MDYCDME"
        assert decoded.callback.event_id == "Ev9UQ52YNA"
        assert decoded.callback.authed_users == ["U061F7AUR"]
        assert decoded.callback.event_time is not None
        assert decoded.callback.event_time.time == datetime.fromtimestamp(1234567890, tz=UTC)
        assert decoded.request is request

        assert isinstance(decoded.event, ReactionAdded)
        assert decoded.event.reaction == "thumbsup"

    def test_inner_event_is_same_as_direct_decode(self) -> None:
        """内側のイベントは単体でデコードした結果と等しいこと"""
        decoded = decode_payload(_make_request(_event_callback(REACTION_ADDED)))

        assert isinstance(decoded, EventWrapper)
        assert decoded.event == decode(json.dumps(REACTION_ADDED))

    def test_inner_message_is_dispatched_by_channel_type(self) -> None:
        """内側のメッセージもchannel_typeで振り分けられること"""
        event = {
            "type": "message",
            "channel": "C2147483705",
            "user": "U2147483697",
            "text": "Hello world",
            "ts": "1355517523.000005",
            "event_ts": "1355517523.000005",
            "channel_type": "channel",
        }

        decoded = decode_payload(_make_request(_event_callback(event)))

        assert isinstance(decoded, EventWrapper)
        assert isinstance(decoded.event, ChannelMessage)
        assert decoded.event.text == "Hello world"

    def test_empty(self) -> None:
        """空のボディはEmptyPayloadErrorになること"""
        with pytest.raises(EmptyPayloadError):
            decode_payload(_make_request(b""))

    def test_missing_type(self) -> None:
        """typeが無い場合はMalformedPayloadErrorになること"""
        with pytest.raises(MalformedPayloadError) as exc_info:
            decode_payload(_make_request(b'{"token": "Jhj5dZrVaK7ZwHHjRyZWjbDl"}'))
        assert "unknown structure" in str(exc_info.value)
        assert "Jhj5dZrVaK7ZwHHjRyZWjbDl" in str(exc_info.value)

    @pytest.mark.parametrize("payload", [b'{"type": 123}', b'{"type": null}', b'{"type": ["event_callback"]}'])
    def test_type_is_not_string(self, payload: bytes) -> None:
        """typeが文字列でない場合は未知のエンベロープではなくMalformedPayloadErrorになること"""
        with pytest.raises(MalformedPayloadError) as exc_info:
            decode_payload(_make_request(payload))
        assert not isinstance(exc_info.value, UnknownPayloadTypeError)

    def test_unknown_envelope_type(self) -> None:
        """未知のエンベロープのtypeはUnknownPayloadTypeErrorになること"""
        with pytest.raises(UnknownPayloadTypeError) as exc_info:
            decode_payload(_make_request(b'{"type": "app_rate_limited"}'))
        assert exc_info.value.type_value == "app_rate_limited"

    def test_unknown_inner_event_type(self) -> None:
        """内側のイベントのtypeが未知の場合もUnknownPayloadTypeErrorになること"""
        with pytest.raises(UnknownPayloadTypeError) as exc_info:
            decode_payload(_make_request(_event_callback({"type": "UNKNOWN_VALUE"})))
        assert exc_info.value.type_value == "UNKNOWN_VALUE"

    @pytest.mark.parametrize("event", [None, "reaction_added", ["reaction_added"]])
    def test_event_is_not_object(self, event: object) -> None:
        """eventが無い、またはオブジェクトでない場合はMalformedPayloadErrorになること"""
        with pytest.raises(MalformedPayloadError):
            decode_payload(_make_request(_event_callback(event)))

    def test_invalid_json(self) -> None:
        """JSONとして不正な場合はMalformedPayloadErrorになること"""
        with pytest.raises(MalformedPayloadError):
            decode_payload(_make_request(b'{"type": "event_callback"'))
