"""Slackから送信されたリクエスト"""

from dataclasses import dataclass
from datetime import UTC, datetime

from aiohttp import web

from slack_event_kit.eventsapi.exceptions import BadRequestError

SIGNATURE_HEADER = "X-Slack-Signature"
REQUEST_TIMESTAMP_HEADER = "X-Slack-Request-Timestamp"


@dataclass(frozen=True)
class SlackRequest:
    """Slackから送信されたリクエストボディと署名関連のヘッダー

    https://api.slack.com/authentication/verifying-requests-from-slack
    """

    signature: str  # X-Slack-Signatureの値（"v0=" から始まる）
    timestamp: datetime  # X-Slack-Request-Timestampの値
    payload: bytes  # 署名検証に使うため、受け取ったボディをそのまま保持する


async def new_slack_request(request: web.Request) -> SlackRequest:
    """受信したHTTPリクエストからSlackRequestを組み立てる

    Args:
        request: aiohttpが受け取ったリクエスト

    Returns:
        SlackRequest: 署名・タイムスタンプ・ボディ

    Raises:
        BadRequestError: 署名またはタイムスタンプのヘッダーが欠けている、またはタイムスタンプが整数でない場合
    """
    signature = request.headers.get(SIGNATURE_HEADER, "")
    if not signature:
        msg = f"required {SIGNATURE_HEADER} header is absent"
        raise BadRequestError(msg)

    timestamp = request.headers.get(REQUEST_TIMESTAMP_HEADER, "")
    if not timestamp:
        msg = f"required {REQUEST_TIMESTAMP_HEADER} header is absent"
        raise BadRequestError(msg)

    try:
        requested_at = datetime.fromtimestamp(int(timestamp), tz=UTC)
    except (ValueError, OverflowError, OSError) as e:
        msg = f"failed to parse {REQUEST_TIMESTAMP_HEADER} header: {timestamp}"
        raise BadRequestError(msg) from e

    payload = await request.read()

    return SlackRequest(signature=signature, timestamp=requested_at, payload=payload)
