"""Events API、Web API、RTM APIをまとめて扱うファサード

細かい設定が必要な場合は、eventsapi / webapi / rtmapi の各モジュールを直接使う。
"""

import asyncio
import logging

from aiohttp import web
from slack_sdk.web.async_client import AsyncWebClient

from slack_event_kit.config import Config
from slack_event_kit.eventsapi import EventReceiver, SignatureValidator, build_application
from slack_event_kit.rtmapi import Connection, connect
from slack_event_kit.webapi import APIResponse, PostMessage, SlackClient

logger = logging.getLogger(__name__)


class GatewayError(Exception):
    """ファサードの利用方法が不正な場合のエラー"""


class SlackGateway:
    """Slackとのやり取りをまとめて扱うクラス"""

    def __init__(self, config: Config, slack_client: SlackClient | None = None) -> None:
        """初期化

        Args:
            config: 統合設定
            slack_client: 設定済みのSlackClient（Noneの場合はconfigのトークンで作成する）
        """
        self._config = config
        if slack_client is None:
            web_client = AsyncWebClient(token=config.slack_bot_token, timeout=config.request_timeout)
            slack_client = SlackClient(web_client)
        self._slack_client = slack_client

    async def post_message(self, message: PostMessage) -> APIResponse:
        """chat.postMessageでメッセージを投稿する

        Raises:
            SlackAPIError: Slack APIがエラーを返した場合
        """
        return await self._slack_client.post_message(message)

    async def connect_rtm(self) -> Connection:
        """rtm.connectでURLを取得し、WebSocketサーバーへ接続する

        Raises:
            SlackAPIError: rtm.connectがエラーを返した場合
        """
        response = await self._slack_client.connect_rtm()
        return await connect(response.url)

    async def run_server(self, receiver: EventReceiver) -> None:
        """Events APIのリクエストを受けるサーバーを起動し、キャンセルされるまで待ち受ける

        全てのリクエストの署名を検証するため、Signing Secretが必須。

        Args:
            receiver: デコードしたイベントを受け取るレシーバー

        Raises:
            GatewayError: Signing Secretが設定されていない場合
        """
        if not self._config.slack_signing_secret:
            msg = "signing secret is not set"
            raise GatewayError(msg)

        app = build_application(
            receiver,
            validator=SignatureValidator(self._config.slack_signing_secret),
            path=self._config.endpoint_path,
        )
        runner = web.AppRunner(app)
        await runner.setup()
        site = web.TCPSite(runner, port=self._config.listen_port)
        await site.start()
        logger.info(
            "Events API server started: port=%d, path=%s",
            self._config.listen_port,
            self._config.endpoint_path,
        )

        try:
            await asyncio.Event().wait()
        finally:
            await runner.cleanup()
            logger.info("Events API server stopped")
