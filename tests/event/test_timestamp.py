from datetime import UTC, datetime
from decimal import Decimal

import pytest
from pydantic import BaseModel, ValidationError

from slack_event_kit.event.timestamp import TimeStamp


class _Holder(BaseModel):
    ts: TimeStamp | None = None


class TestTimeStampValidation:
    """TimeStampの読み込みのテスト"""

    def test_dotted_string(self) -> None:
        """ドット付きの文字列から秒精度の時刻と元の値が取得できること"""
        ts = TimeStamp.model_validate("1355517536.000001")
        assert ts.time == datetime.fromtimestamp(1355517536, tz=UTC)
        assert ts.original_value == "1355517536.000001"

    def test_integer_string(self) -> None:
        """整数形式の文字列も読み込めること"""
        ts = TimeStamp.model_validate("1446598059")
        assert ts.time == datetime.fromtimestamp(1446598059, tz=UTC)
        assert ts.original_value == "1446598059"

    def test_integer(self) -> None:
        """JSONの整数値も読み込めること"""
        ts = TimeStamp.model_validate(1360782804)
        assert ts.time == datetime.fromtimestamp(1360782804, tz=UTC)
        assert ts.original_value == "1360782804"

    def test_decimal_keeps_original_digits(self) -> None:
        """Decimalとして読み込んだ数値は小数部の桁がそのまま保持されること"""
        ts = TimeStamp.model_validate(Decimal("1360782804.083100"))
        assert ts.original_value == "1360782804.083100"

    def test_sub_second_digits_are_dropped_from_time(self) -> None:
        """小数部はtimeには反映されないこと"""
        ts = TimeStamp.model_validate("1355517536.999999")
        assert ts.time.microsecond == 0

    @pytest.mark.parametrize("value", ["abc", "", ".000001", "12a.000001"])
    def test_invalid_integer_part(self, value: str) -> None:
        """ドットより前が整数でない場合はエラーになること"""
        with pytest.raises(ValidationError):
            TimeStamp.model_validate(value)

    def test_reject_bool(self) -> None:
        """真偽値はタイムスタンプとして受け付けないこと"""
        with pytest.raises(ValidationError):
            TimeStamp.model_validate(True)

    def test_as_field(self) -> None:
        """モデルのフィールドとして文字列から読み込めること"""
        holder = _Holder.model_validate({"ts": "1355517523.000005"})
        assert holder.ts is not None
        assert holder.ts.original_value == "1355517523.000005"


class TestTimeStampSerialization:
    """TimeStampの書き出しのテスト"""

    @pytest.mark.parametrize(
        "value",
        [
            "1355517536.000001",
            "1355517536",
            "0001355517536.000001000",
            "1355517536.00000000000000000001",
            "-1",
        ],
    )
    def test_str_returns_original_value(self, value: str) -> None:
        """str()は元の表記をそのまま返すこと"""
        assert str(TimeStamp.model_validate(value)) == value

    def test_model_dump(self) -> None:
        """model_dumpは元の表記を返すこと"""
        ts = TimeStamp.model_validate("0001355517536.000001000")
        assert ts.model_dump() == "0001355517536.000001000"

    def test_nested_model_dump_json(self) -> None:
        """ネストしたモデルのJSONでも元の表記が文字列として出力されること"""
        holder = _Holder.model_validate({"ts": "1355517536.000001"})
        assert holder.model_dump_json() == '{"ts":"1355517536.000001"}'

    def test_round_trip(self) -> None:
        """書き出した値を読み込み直すと元と等しくなること"""
        ts = TimeStamp.model_validate("1355517536.000100")
        assert TimeStamp.model_validate(ts.model_dump()) == ts

    def test_frozen(self) -> None:
        """生成後は変更できないこと"""
        ts = TimeStamp.model_validate("1355517536.000001")
        with pytest.raises(ValidationError):
            ts.original_value = "1"  # type: ignore[misc]
