"""イベントペイロードのデコードに関する例外"""


class EventDecodeError(Exception):
    """イベントデコード関連のエラーの基底クラス"""


class EmptyPayloadError(EventDecodeError):
    """空のペイロードが渡された場合のエラー

    RTM APIではキープアライブ相当の空フレームで発生するため、呼び出し側は読み飛ばしてよい。
    """

    def __init__(self, message: str = "empty payload was given") -> None:
        super().__init__(message)


class MalformedPayloadError(EventDecodeError):
    """ペイロードの構造が不正な場合のエラー

    JSONとして不正、必須フィールドの欠落や型不一致、ネストした要素のデコード失敗で発生する。
    """


class UnknownPayloadTypeError(EventDecodeError):
    """構造は正しいが、判別子の値に対応する型が登録されていない場合のエラー"""

    def __init__(self, message: str, type_value: str) -> None:
        """初期化

        Args:
            message: エラーメッセージ
            type_value: 解決できなかった判別子（type / subtype / channel_type の値）
        """
        super().__init__(message)
        self.type_value = type_value
