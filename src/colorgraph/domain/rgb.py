"""RGB 色値型（リニアRGB / ガンマエンコードRGB と、その不透明度付き版）。"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from colorgraph.domain.channel import DEFAULT_CHANNEL, Channel
from colorgraph.domain.color import ColorValue
from colorgraph.domain.rgb_space import (
    DEFAULT_RGB_SPACE,
    ColorSpaceMismatchError,
    MatrixColorSpace,
)
from colorgraph.domain.white_point import WhitePoint


class _SpaceTagged(ColorValue):
    space: MatrixColorSpace

    @property
    def white_point(self) -> WhitePoint:
        return self.space.white_point

    def _check_compatible(self, other: ColorValue) -> None:
        if other.space is not self.space:  # type: ignore[attr-defined]
            raise ColorSpaceMismatchError(
                f"color space mismatch: {self.space.name} vs {other.space.name}"  # type: ignore[attr-defined]
            )


@dataclass(frozen=True)
class Rgb(_SpaceTagged):
    """リニア光の RGB。space の行列で XYZ と結ばれる。"""

    r: float
    g: float
    b: float
    channel: Channel = DEFAULT_CHANNEL
    space: MatrixColorSpace = DEFAULT_RGB_SPACE

    _components: ClassVar[tuple[str, str, str]] = ("r", "g", "b")

    def to_tuple(self) -> tuple[float, float, float]:
        return self.components()


@dataclass(frozen=True)
class Srgb(_SpaceTagged):
    """表示エンコード（ガンマ適用済み）の RGB。既定は sRGB / D65。

    U8 チャンネルなら各成分 0-255。既定チャンネルは F64 で成分は [0, 1] の値。
    0-255 の整数サンプルは channel=Channel.U8 を指定すること
    （F64 のままでは範囲外の float としてそのまま通る）。
    """

    r: float
    g: float
    b: float
    channel: Channel = DEFAULT_CHANNEL
    space: MatrixColorSpace = DEFAULT_RGB_SPACE

    _components: ClassVar[tuple[str, str, str]] = ("r", "g", "b")

    def to_tuple(self) -> tuple[float, float, float]:
        return self.components()


class _AlphaTagged:
    """不透明度付きの色の共通処理。

    alpha は color と同じチャンネル表現で持ち、省略時はチャンネルの最大値（不透明）。
    """

    color: Any
    alpha: float | None
    _float_only: ClassVar[bool] = False

    def __post_init__(self) -> None:
        channel = self.color.channel
        if self.alpha is None:
            alpha = channel.from_float(1.0)
        else:
            alpha = channel.coerce(self.alpha)
        object.__setattr__(self, "alpha", alpha)

    @property
    def channel(self) -> Channel:
        return self.color.channel

    @property
    def space(self) -> MatrixColorSpace:
        return self.color.space

    @property
    def white_point(self) -> WhitePoint:
        return self.color.space.white_point

    def to_floats(self) -> tuple[float, float, float, float]:
        """正準 float の (r, g, b, alpha)。"""
        r, g, b = self.color.to_floats()
        return (r, g, b, self.channel.to_float(self.alpha))


@dataclass(frozen=True)
class Rgba(_AlphaTagged):
    """不透明度付きリニアRGB。"""

    color: Rgb
    alpha: float | None = None


@dataclass(frozen=True)
class Srgba(_AlphaTagged):
    """不透明度付き表示エンコードRGB。"""

    color: Srgb
    alpha: float | None = None
