"""リクエストの署名検証"""

import hashlib
import hmac
from typing import Protocol, runtime_checkable

from slack_event_kit.eventsapi.request import SlackRequest


@runtime_checkable
class RequestValidator(Protocol):
    """Slackからのリクエストが正当かを判定するProtocol"""

    def validate(self, request: SlackRequest) -> bool: ...


class SignatureValidator:
    """Signing Secretを使ってリクエストの署名を検証する

    https://api.slack.com/authentication/verifying-requests-from-slack
    """

    def __init__(self, secret: str) -> None:
        self._secret = secret

    def expected_signature(self, request: SlackRequest) -> str:
        """リクエストに付与されているべき署名を計算する"""
        base = f"v0:{int(request.timestamp.timestamp())}:".encode() + request.payload
        digest = hmac.new(self._secret.encode(), base, hashlib.sha256).hexdigest()
        return f"v0={digest}"

    def validate(self, request: SlackRequest) -> bool:
        return hmac.compare_digest(request.signature.encode(), self.expected_signature(request).encode())
