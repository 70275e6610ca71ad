"""JSONペイロードの読み込みと判別子の取得"""

import json
from collections.abc import Callable, Mapping
from decimal import Decimal
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from slack_event_kit.event.exceptions import EmptyPayloadError, EventDecodeError, MalformedPayloadError

RawPayload = bytes | bytearray | str | Mapping[str, Any]

ModelT = TypeVar("ModelT", bound=BaseModel)
T = TypeVar("T")


def parse_payload(payload: RawPayload) -> dict[str, Any]:
    """ペイロードをJSONオブジェクトとして読み込む

    小数を含む数値はDecimalとして読み込み、タイムスタンプの元の表記を失わないようにする。
    読み込み済みのMappingが渡された場合はそのまま辞書として返す。

    Args:
        payload: 生のペイロード、または読み込み済みのJSONオブジェクト

    Returns:
        dict[str, Any]: 読み込んだJSONオブジェクト

    Raises:
        EmptyPayloadError: 前後の空白を除いて空の場合
        MalformedPayloadError: JSONとして不正、またはトップレベルがオブジェクトでない場合
    """
    if isinstance(payload, Mapping):
        return dict(payload)

    text = payload.decode("utf-8", errors="replace") if isinstance(payload, bytes | bytearray) else payload
    text = text.strip()
    if not text:
        raise EmptyPayloadError

    try:
        parsed = json.loads(text, parse_float=Decimal)
    except json.JSONDecodeError as e:
        msg = f"given payload is not a valid JSON: {e}: {text}"
        raise MalformedPayloadError(msg) from e

    if not isinstance(parsed, dict):
        msg = f"given payload has unknown structure. can not handle: {text}"
        raise MalformedPayloadError(msg)

    return parsed


def read_discriminator(parsed: Mapping[str, Any], field: str = "type") -> str:
    """判別子フィールドの値を文字列として取り出す

    Raises:
        MalformedPayloadError: フィールドが存在しない、または文字列でない場合
    """
    value = parsed.get(field)
    if not isinstance(value, str):
        msg = f"given payload has unknown structure. can not handle: {dumps_for_message(parsed)}"
        raise MalformedPayloadError(msg)
    return value


def dumps_for_message(parsed: Mapping[str, Any]) -> str:
    """エラーメッセージに埋め込むためにJSON文字列へ戻す"""
    return json.dumps(parsed, ensure_ascii=False, default=str)


def validate_as(model: type[ModelT], parsed: Mapping[str, Any]) -> ModelT:
    """読み込み済みのJSONオブジェクトを指定のモデルとして検証する

    Raises:
        MalformedPayloadError: 必須フィールドの欠落や型不一致、ネストした要素のデコードに失敗した場合
    """
    try:
        return model.model_validate(parsed)
    except ValidationError as e:
        msg = f"failed to decode {model.__name__}: {e}"
        raise MalformedPayloadError(msg) from e


def decode_embedded(value: Any, decoder: Callable[[RawPayload], T], base: type[T], embedding: str) -> T:
    """多相なフィールドに埋め込まれた生のJSONオブジェクトを判別子に応じてデコードする

    外側のモデルの検証中に呼ばれるため、失敗はどの埋め込み箇所かを添えたValueErrorとして送出する。
    """
    if isinstance(value, base):
        return value
    if not isinstance(value, Mapping):
        msg = f"{embedding} must be a JSON object: {value!r}"
        raise ValueError(msg)

    try:
        return decoder(value)
    except EventDecodeError as e:
        msg = f"failed to decode {embedding}: {e}"
        raise ValueError(msg) from e
