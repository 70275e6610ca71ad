"""Events APIのエンドポイントを提供するaiohttpハンドラ"""

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Protocol, runtime_checkable

from aiohttp import web

from slack_event_kit.event.exceptions import EmptyPayloadError, MalformedPayloadError, UnknownPayloadTypeError
from slack_event_kit.eventsapi.decoder import EventWrapper, URLVerification, decode_payload
from slack_event_kit.eventsapi.exceptions import BadRequestError
from slack_event_kit.eventsapi.request import new_slack_request
from slack_event_kit.eventsapi.validator import RequestValidator

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT_PATH = "/slack/events"

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


@runtime_checkable
class EventReceiver(Protocol):
    """デコードされたイベントを受け取るProtocol"""

    async def receive(self, wrapper: EventWrapper) -> None: ...


class DefaultEventReceiver:
    """関数を渡すだけで使えるEventReceiver実装

    同期関数とコルーチン関数のどちらでも受け付ける。
    """

    def __init__(self, callback: Callable[[EventWrapper], Awaitable[None] | None]) -> None:
        self._callback = callback

    async def receive(self, wrapper: EventWrapper) -> None:
        result = self._callback(wrapper)
        if inspect.isawaitable(result):
            await result


def setup_handler(receiver: EventReceiver, validator: RequestValidator | None = None) -> Handler:
    """Events APIのリクエストを処理するハンドラを組み立てる

    Args:
        receiver: event_callbackのイベントを受け取るレシーバー
        validator: リクエストの検証を行うバリデータ（Noneの場合は検証しない）

    Returns:
        Handler: aiohttpのルーティングに登録できるハンドラ
    """

    async def handler(request: web.Request) -> web.StreamResponse:
        try:
            slack_request = await new_slack_request(request)
        except BadRequestError as e:
            logger.warning("Rejected a request without valid Slack headers: %s", e)
            return web.Response(status=400)

        if validator is not None and not validator.validate(slack_request):
            logger.warning("Rejected a request with invalid signature")
            return web.Response(status=401)

        try:
            decoded = decode_payload(slack_request)
        except (EmptyPayloadError, MalformedPayloadError) as e:
            logger.warning("Rejected a malformed payload: %s", e)
            return web.Response(status=400)
        except UnknownPayloadTypeError as e:
            # 未知のイベント種別は受信成功として扱う
            logger.info("Successfully received the payload but don't know how to handle: %s", e.type_value)
            return web.Response(status=200)

        if isinstance(decoded, URLVerification):
            return web.Response(status=200, text=decoded.challenge, content_type="text/plain")

        if isinstance(decoded, EventWrapper):
            await receiver.receive(decoded)
            return web.Response(status=200)

        logger.error("Decoded payload has unexpected type: %s", type(decoded).__name__)
        return web.Response(status=500)

    return handler


def build_application(
    receiver: EventReceiver,
    validator: RequestValidator | None = None,
    path: str = DEFAULT_ENDPOINT_PATH,
) -> web.Application:
    """Events APIのハンドラを登録したaiohttpアプリケーションを作成する"""
    app = web.Application()
    app.router.add_post(path, setup_handler(receiver, validator))
    return app
