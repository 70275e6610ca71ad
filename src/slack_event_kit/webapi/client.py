"""Slack Web API操作を担当するクライアントクラス"""

import logging
from typing import Any

from slack_sdk.web.async_client import AsyncWebClient

from slack_event_kit.webapi.exceptions import SlackAPIError
from slack_event_kit.webapi.request import PostMessage
from slack_event_kit.webapi.response import APIResponse, RTMConnectResponse

logger = logging.getLogger(__name__)


def _response_data(response: Any) -> dict[str, Any]:
    # AsyncSlackResponseの場合はdataの辞書を取り出す
    data = getattr(response, "data", response)
    return dict(data)


class SlackClient:
    """Slack Web API操作を担当するクライアントクラス"""

    def __init__(self, client: AsyncWebClient) -> None:
        """依存注入でAsyncWebClientを受け取る"""
        self._client = client

    async def post_message(self, message: PostMessage) -> APIResponse:
        """メッセージを投稿する

        Args:
            message: 投稿内容

        Returns:
            APIResponse: 投稿されたメッセージのchannelとtsを含むレスポンス

        Raises:
            SlackAPIError: Slack APIがエラーを返した場合
        """
        response = await self._client.chat_postMessage(**message.to_params())
        data = _response_data(response)

        if not data.get("ok"):
            error_code = data.get("error", "unknown_error")
            raise SlackAPIError(f"Failed chat.postMessage request: {error_code}", error_code)

        return APIResponse.model_validate(data)

    async def connect_rtm(self) -> RTMConnectResponse:
        """RTM APIのWebSocket URLを取得する

        Raises:
            SlackAPIError: Slack APIがエラーを返した場合
        """
        response = await self._client.rtm_connect()
        data = _response_data(response)

        if not data.get("ok"):
            error_code = data.get("error", "unknown_error")
            raise SlackAPIError(f"Failed rtm.connect request: {error_code}", error_code)

        logger.debug("rtm.connect succeeded")
        return RTMConnectResponse.model_validate(data)
