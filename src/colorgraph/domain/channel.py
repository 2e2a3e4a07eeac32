"""チャンネル（色成分の数値表現）定義。

各色成分は正準表現である float（有界チャンネルでは [0, 1]）を経由して
別のチャンネル表現に変換される。
domain層のためPure Python（struct による精度丸めのみ）。
"""

from __future__ import annotations

import math
import struct
from enum import Enum


class ChannelError(ValueError):
    """色型が要求するチャンネル種別と一致しない。"""


class Channel(Enum):
    """色成分の数値表現。

    有界チャンネル (U8, U16) は [0, max_value] の整数で、正準 [0, 1] に比例スケールする。
    浮動小数点チャンネルは値をそのまま通し、各精度に丸めるのみ。
    """

    U8 = ("u8", 255, "")
    U16 = ("u16", 65535, "")
    F16 = ("f16", None, "e")
    F32 = ("f32", None, "f")
    F64 = ("f64", None, "d")

    def __init__(self, label: str, max_value: int | None, struct_format: str) -> None:
        self._label = label
        self._max_value = max_value
        self._struct_format = struct_format

    @property
    def label(self) -> str:
        return self._label

    @property
    def max_value(self) -> int | None:
        return self._max_value

    @property
    def is_float(self) -> bool:
        return self._max_value is None

    def to_float(self, value: float) -> float:
        """成分値を正準 float に変換。"""
        if self._max_value is None:
            return float(value)
        return value / self._max_value

    def from_float(self, value: float) -> int | float:
        """正準 float からこのチャンネルの成分値を生成。

        有界チャンネル: [0, 1] にクランプ（NaN は 0）して四捨五入。
        浮動小数点チャンネル: 精度に丸める（範囲外は ±inf）。
        """
        if self._max_value is None:
            return _round_to_precision(float(value), self._struct_format)
        if math.isnan(value):
            return 0
        clamped = max(0.0, min(1.0, value))
        return int(math.floor(clamped * self._max_value + 0.5))

    def convert(self, value: float, target: Channel) -> int | float:
        """成分値を別のチャンネル表現に変換。"""
        if target is self:
            return self.coerce(value)
        return target.from_float(self.to_float(value))

    def coerce(self, value: float) -> int | float:
        """このチャンネルの表現に正規化（コンストラクタ用）。

        有界チャンネルでは値をそのまま整数スケールとして扱い、丸め＋クランプ。
        """
        if self._max_value is None:
            return _round_to_precision(float(value), self._struct_format)
        if math.isnan(value):
            return 0
        clamped = max(0, min(self._max_value, value))
        return int(math.floor(clamped + 0.5))


DEFAULT_CHANNEL = Channel.F64


def require_float(channel: Channel, type_name: str) -> None:
    """浮動小数点チャンネル以外なら ChannelError。"""
    if not channel.is_float:
        raise ChannelError(
            f"{type_name} requires a floating-point channel, got {channel.label}"
        )


def _round_to_precision(value: float, fmt: str) -> float:
    """IEEE 754 の指定精度に丸める。"""
    if fmt == "d" or not math.isfinite(value):
        return value
    try:
        return struct.unpack(fmt, struct.pack(fmt, value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)
