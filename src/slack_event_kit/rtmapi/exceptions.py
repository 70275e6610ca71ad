"""RTM API連携に関する例外"""

from aiohttp import WSMsgType


class RTMError(Exception):
    """RTM API関連のエラーの基底クラス"""


class UnexpectedMessageTypeError(RTMError):
    """テキスト以外のWebSocketフレームを受信した場合のエラー"""

    def __init__(self, message_type: WSMsgType, payload: object) -> None:
        """初期化

        Args:
            message_type: 受信したフレームの種別
            payload: 受信したフレームのデータ
        """
        super().__init__(f"unexpected message type, {message_type.name}, is given: {payload!r}")
        self.message_type = message_type
        self.payload = payload


class ConnectionClosedError(RTMError):
    """WebSocket接続が閉じられた場合のエラー"""
