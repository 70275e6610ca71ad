"""Slack形式のタイムスタンプ"""

import re
from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, model_serializer, model_validator

# ドットより前の整数部（符号付き10進数）
_INTEGER_PART_PATTERN = re.compile(r"[+-]?[0-9]+")


class TimeStamp(BaseModel, frozen=True):
    """Slack形式のタイムスタンプ

    Slackは "1355517536.000001" のような形式でタイムスタンプを渡す。
    ドットより前がUNIX時刻（秒）で、後ろはチャンネル内で値を一意にするための連番。
    整数形式（1355517536）で渡されることもある。

    time は original_value から導出した秒精度の値で、小数部は切り捨てられる。
    シリアライズ時は time から文字列を再生成せず、常に original_value をそのまま返す。
    """

    time: datetime
    original_value: str  # Slackから渡されたままの値 e.g. "1355517536.000001"

    @model_validator(mode="before")
    @classmethod
    def _accept_wire_value(cls, value: Any) -> Any:
        # bool は int のサブクラスなので先に弾く
        if isinstance(value, bool):
            msg = f"timestamp must be given as a number or a string: {value!r}"
            raise ValueError(msg)
        if isinstance(value, str | int | Decimal | float):
            return _split_wire_value(str(value))
        return value

    @model_serializer
    def _serialize(self) -> str:
        return self.original_value

    def __str__(self) -> str:
        return self.original_value


def _split_wire_value(original_value: str) -> dict[str, Any]:
    integer_part = original_value.split(".", 1)[0]
    if not _INTEGER_PART_PATTERN.fullmatch(integer_part):
        msg = f"invalid timestamp is given: {original_value!r}"
        raise ValueError(msg)

    try:
        time = datetime.fromtimestamp(int(integer_part), tz=UTC)
    except (OverflowError, OSError, ValueError) as e:
        msg = f"timestamp is out of range: {original_value!r}"
        raise ValueError(msg) from e

    return {"time": time, "original_value": original_value}
