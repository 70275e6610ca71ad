import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from slack_event_kit.config import Config
from slack_event_kit.event.ids import ChannelID
from slack_event_kit.eventsapi import DefaultEventReceiver
from slack_event_kit.gateway import GatewayError, SlackGateway
from slack_event_kit.webapi import APIResponse, PostMessage, RTMConnectResponse, SlackClient


def _make_config(**kwargs: object) -> Config:
    values: dict[str, object] = {"slack_bot_token": "xoxb-test", "slack_signing_secret": "test-secret"}
    values.update(kwargs)
    return Config(**values)  # type: ignore[arg-type]


class TestSlackGateway:
    """SlackGatewayのテスト"""

    def test_create_slack_client_from_config(self) -> None:
        """SlackClientが渡されない場合は設定のトークンで作成されること"""
        gateway = SlackGateway(_make_config(request_timeout=10))

        assert isinstance(gateway._slack_client, SlackClient)
        assert gateway._slack_client._client.token == "xoxb-test"
        assert gateway._slack_client._client.timeout == 10

    async def test_post_message(self) -> None:
        """SlackClientへ投稿が委譲されること"""
        mock_slack_client = AsyncMock(spec=SlackClient)
        mock_slack_client.post_message.return_value = APIResponse(ok=True)
        gateway = SlackGateway(_make_config(), slack_client=mock_slack_client)
        message = PostMessage(channel=ChannelID("C1H9RESGL"), text="hello")

        response = await gateway.post_message(message)

        assert response.ok is True
        mock_slack_client.post_message.assert_awaited_once_with(message)

    async def test_connect_rtm(self) -> None:
        """rtm.connectで取得したURLへ接続すること"""
        mock_slack_client = AsyncMock(spec=SlackClient)
        mock_slack_client.connect_rtm.return_value = RTMConnectResponse(ok=True, url="wss://example.com/websocket")
        mock_connection = MagicMock()
        gateway = SlackGateway(_make_config(), slack_client=mock_slack_client)

        with patch("slack_event_kit.gateway.connect", AsyncMock(return_value=mock_connection)) as mock_connect:
            connection = await gateway.connect_rtm()

        assert connection is mock_connection
        mock_connect.assert_awaited_once_with("wss://example.com/websocket")

    async def test_run_server_requires_signing_secret(self) -> None:
        """Signing Secretが無い場合はサーバーを起動しないこと"""
        gateway = SlackGateway(_make_config(slack_signing_secret=""), slack_client=AsyncMock(spec=SlackClient))

        with pytest.raises(GatewayError):
            await gateway.run_server(DefaultEventReceiver(lambda _: None))

    async def test_run_server_until_cancelled(self) -> None:
        """キャンセルされるまで待ち受け、終了時に後片付けされること"""
        gateway = SlackGateway(
            _make_config(listen_port=3000, endpoint_path="/events"),
            slack_client=AsyncMock(spec=SlackClient),
        )
        mock_runner = AsyncMock()
        mock_site = AsyncMock()

        with (
            patch("slack_event_kit.gateway.web.AppRunner", return_value=mock_runner) as mock_app_runner,
            patch("slack_event_kit.gateway.web.TCPSite", return_value=mock_site) as mock_tcp_site,
        ):
            task = asyncio.create_task(gateway.run_server(DefaultEventReceiver(lambda _: None)))
            for _ in range(10):
                await asyncio.sleep(0)
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task

        app = mock_app_runner.call_args.args[0]
        assert any(route.resource.canonical == "/events" for route in app.router.routes() if route.resource)
        mock_tcp_site.assert_called_once_with(mock_runner, port=3000)
        mock_runner.setup.assert_awaited_once()
        mock_site.start.assert_awaited_once()
        mock_runner.cleanup.assert_awaited_once()
