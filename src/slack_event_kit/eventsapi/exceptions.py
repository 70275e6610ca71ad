"""Events API連携に関する例外"""


class EventsAPIError(Exception):
    """Events API関連のエラーの基底クラス"""


class BadRequestError(EventsAPIError):
    """Slackからのリクエストとして必要なヘッダーが欠けている、または不正な場合のエラー"""
