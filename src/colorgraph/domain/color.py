"""CIE 色値型（XYZ, xyY, L*a*b*）。

全ての色値は不変の値型。成分はチャンネル表現で保持し、
演算は正準 float を経由してチャンネルに戻す（変換と同じ規則）。
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import ClassVar, TypeVar

from colorgraph.domain.channel import DEFAULT_CHANNEL, Channel, require_float
from colorgraph.domain.white_point import (
    DEFAULT_WHITE_POINT,
    WhitePoint,
    ensure_same_white_point,
)

logger = logging.getLogger(__name__)

_C = TypeVar("_C", bound="ColorValue")


class ColorValue:
    """3成分色値の共通処理（正規化・加算・スカラー倍）。

    サブクラスは frozen dataclass で、`_components` に成分フィールド名を並べる。
    """

    _components: ClassVar[tuple[str, str, str]]
    _float_only: ClassVar[bool] = False
    channel: Channel

    def __post_init__(self) -> None:
        if self._float_only:
            require_float(self.channel, type(self).__name__)
        for name in self._components:
            object.__setattr__(self, name, self.channel.coerce(getattr(self, name)))

    def components(self) -> tuple[float, float, float]:
        """チャンネル表現のままの成分。"""
        a, b, c = (getattr(self, name) for name in self._components)
        return (a, b, c)

    def to_floats(self) -> tuple[float, float, float]:
        """正準 float の成分。"""
        a, b, c = (self.channel.to_float(v) for v in self.components())
        return (a, b, c)

    def with_floats(self: _C, values: tuple[float, float, float]) -> _C:
        """正準 float から同じ型・チャンネル・白色点の色を生成。"""
        updates = {
            name: self.channel.from_float(v) for name, v in zip(self._components, values)
        }
        return replace(self, **updates)

    def _check_compatible(self, other: ColorValue) -> None:
        """加算可能か検証（サブクラスで白色点・色空間を確認）。"""

    def __add__(self: _C, other: object) -> _C:
        if type(other) is not type(self):
            return NotImplemented
        self._check_compatible(other)  # type: ignore[arg-type]
        mine = self.to_floats()
        theirs = other.to_floats()  # type: ignore[attr-defined]
        return self.with_floats(
            (mine[0] + theirs[0], mine[1] + theirs[1], mine[2] + theirs[2])
        )

    def __mul__(self: _C, scale: object) -> _C:
        if isinstance(scale, bool) or not isinstance(scale, (int, float)):
            return NotImplemented
        f = float(scale)
        a, b, c = self.to_floats()
        return self.with_floats((a * f, b * f, c * f))

    __rmul__ = __mul__


class _WhitePointTagged(ColorValue):
    white_point: WhitePoint

    def _check_compatible(self, other: ColorValue) -> None:
        ensure_same_white_point(self.white_point, other.white_point)  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Xyz(_WhitePointTagged):
    """CIE XYZ 三刺激値。"""

    x: float
    y: float
    z: float
    channel: Channel = DEFAULT_CHANNEL
    white_point: WhitePoint = DEFAULT_WHITE_POINT

    _components: ClassVar[tuple[str, str, str]] = ("x", "y", "z")
    _float_only: ClassVar[bool] = True


@dataclass(frozen=True)
class Yxy(_WhitePointTagged):
    """CIE xyY。x, y は色度座標、luma は輝度 Y。"""

    x: float
    y: float
    luma: float
    channel: Channel = DEFAULT_CHANNEL
    white_point: WhitePoint = DEFAULT_WHITE_POINT

    _components: ClassVar[tuple[str, str, str]] = ("x", "y", "luma")
    _float_only: ClassVar[bool] = True


@dataclass(frozen=True)
class Lab(_WhitePointTagged):
    """CIE L*a*b* 色空間の色。"""

    l: float  # noqa: E741
    a: float
    b: float
    channel: Channel = DEFAULT_CHANNEL
    white_point: WhitePoint = DEFAULT_WHITE_POINT

    _components: ClassVar[tuple[str, str, str]] = ("l", "a", "b")
    _float_only: ClassVar[bool] = True

    def brightness(self) -> float:
        return self.l

    def chromacity(self) -> float:
        """a*b* 平面上の半径（彩度 C*ab）。"""
        return math.sqrt(self.a**2 + self.b**2)

    def hue(self) -> float:
        """a*b* 平面上の角度（ラジアン, [0, 2π)）。"""
        # +0.0 で -0.0 を 0.0 に
        h = math.atan2(self.b, self.a) + 0.0
        if h < 0.0:
            h += math.tau
            # -0.0 付近の負値は 2π に丸まる
            if h >= math.tau:
                h = 0.0
        return h

    def offset_chromacity(self, chroma_offset: float) -> Lab:
        """(a*, b*) ベクトルを現在の向きに沿って chroma_offset だけ伸縮。

        L* は不変。彩度 0（無彩色）では向きが定まらないため、
        元の色をそのまま返す。
        """
        current = self.chromacity()
        if current == 0.0:
            logger.debug("offset_chromacity on achromatic Lab %s, returning unchanged", self)
            return self
        scale = chroma_offset / current
        return replace(self, a=self.a + self.a * scale, b=self.b + self.b * scale)
