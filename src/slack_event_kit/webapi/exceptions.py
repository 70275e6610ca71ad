"""Web API連携に関する例外"""


class SlackError(Exception):
    """Web API関連のエラーの基底クラス"""


class SlackAPIError(SlackError):
    """Web APIがok: falseを返した場合のエラー"""

    def __init__(self, message: str, error_code: str) -> None:
        """初期化

        Args:
            message: エラーメッセージ
            error_code: Slack APIから返されたエラーコード（例: "channel_not_found"）
        """
        super().__init__(message)
        self.error_code = error_code
