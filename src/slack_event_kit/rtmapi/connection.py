"""RTM APIのWebSocket接続"""

import logging

import aiohttp
from aiohttp import WSMsgType

from slack_event_kit.rtmapi.decoder import DecodedPayload, decode_payload
from slack_event_kit.rtmapi.exceptions import ConnectionClosedError, UnexpectedMessageTypeError
from slack_event_kit.rtmapi.outgoing import OutgoingEventID, OutgoingMessage, Ping, new_ping

logger = logging.getLogger(__name__)

_CLOSED_MESSAGE_TYPES = (WSMsgType.CLOSE, WSMsgType.CLOSING, WSMsgType.CLOSED, WSMsgType.ERROR)


class Connection:
    """WebSocket接続の薄いラッパー

    送信フレームのIDは接続ごとに一意である必要があるため、接続ごとにカウンターを持つ。
    """

    def __init__(
        self,
        ws: aiohttp.ClientWebSocketResponse,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """初期化

        Args:
            ws: 確立済みのWebSocket接続
            session: close時に併せて閉じるセッション（呼び出し側が管理する場合はNone）
        """
        self._ws = ws
        self._session = session
        self._outgoing_event_id = OutgoingEventID()

    async def receive(self) -> DecodedPayload:
        """次のフレームを受信してデコードする

        Raises:
            ConnectionClosedError: 接続が閉じられた場合
            UnexpectedMessageTypeError: テキスト以外のフレームを受信した場合
            EventDecodeError: フレームのデコードに失敗した場合
        """
        message = await self._ws.receive()

        if message.type in _CLOSED_MESSAGE_TYPES:
            msg = f"connection is closed: {message.type.name}"
            raise ConnectionClosedError(msg)

        # RTM APIはテキストフレームのみを送信する
        if message.type != WSMsgType.TEXT:
            raise UnexpectedMessageTypeError(message.type, message.data)

        return decode_payload(message.data)

    async def send(self, message: OutgoingMessage) -> OutgoingMessage:
        """メッセージを送信する

        idはこの接続のカウンターで払い出した値に置き換えて送信する。

        Returns:
            OutgoingMessage: 実際に送信したid付きのメッセージ
        """
        numbered = message.model_copy(update={"id": self._outgoing_event_id.next()})
        await self._ws.send_str(numbered.model_dump_json())
        return numbered

    async def ping(self) -> Ping:
        ping = new_ping(self._outgoing_event_id)
        await self._ws.send_str(ping.model_dump_json())
        return ping

    async def close(self) -> None:
        await self._ws.close()
        if self._session is not None:
            await self._session.close()


async def connect(url: str, session: aiohttp.ClientSession | None = None) -> Connection:
    """SlackのWebSocketサーバーへ接続する

    Args:
        url: rtm.connectで取得したWebSocket URL
        session: 接続に使うセッション（Noneの場合は新規に作成し、Connectionのclose時に閉じる）

    Returns:
        Connection: 確立した接続
    """
    owned_session = None
    if session is None:
        owned_session = aiohttp.ClientSession()
        session = owned_session

    try:
        ws = await session.ws_connect(url)
    except aiohttp.ClientError:
        if owned_session is not None:
            await owned_session.close()
        raise

    logger.info("Connected to RTM API")
    return Connection(ws, session=owned_session)
