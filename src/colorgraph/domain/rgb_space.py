"""RGB 色空間（原色・変換行列・伝達関数）定義。

各 RGB 色空間は xyY で与えた三原色、リニアRGB↔XYZ の 3×3 行列、
ガンマ（伝達関数）を持つ。行列は実行時に再計算せず定数として持つ。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

from colorgraph.domain.color import Yxy
from colorgraph.domain.matrix import Mat3, mat3_inverse, mat3_mul_vec
from colorgraph.domain.white_point import WhitePoint


class ColorSpaceMismatchError(ValueError):
    """異なる RGB 色空間の色を組み合わせようとした。"""


class TransferFunction(Protocol):
    """リニア光 ↔ 表示エンコード値の非線形カーブ。"""

    def decode(self, value: float) -> float:
        """表示値 → リニア値。"""
        ...

    def encode(self, value: float) -> float:
        """リニア値 → 表示値。"""
        ...


class SrgbTransfer:
    """IEC 61966-2-1 sRGB の区分的べき乗カーブ。"""

    DECODE_THRESHOLD = 0.04045
    ENCODE_THRESHOLD = 0.0031308

    def decode(self, value: float) -> float:
        if value <= self.DECODE_THRESHOLD:
            return value / 12.92
        return ((value + 0.055) / 1.055) ** 2.4

    def encode(self, value: float) -> float:
        if value <= self.ENCODE_THRESHOLD:
            return 12.92 * value
        return 1.055 * value ** (1.0 / 2.4) - 0.055

    def __repr__(self) -> str:
        return "SrgbTransfer()"


class GammaTransfer:
    """純粋なべき乗カーブ。負値は符号を保って折り返す。"""

    def __init__(self, gamma: float) -> None:
        self.gamma = gamma

    def decode(self, value: float) -> float:
        return math.copysign(abs(value) ** self.gamma, value)

    def encode(self, value: float) -> float:
        return math.copysign(abs(value) ** (1.0 / self.gamma), value)

    def __repr__(self) -> str:
        return f"GammaTransfer({self.gamma!r})"


class LinearTransfer:
    """恒等カーブ（リニアエンコード）。"""

    def decode(self, value: float) -> float:
        return value

    def encode(self, value: float) -> float:
        return value

    def __repr__(self) -> str:
        return "LinearTransfer()"


@dataclass(frozen=True)
class MatrixColorSpace:
    """行列で XYZ と結ばれる RGB 色空間。

    原色の色度は慣例に従い D50 タグ付きの xyY で持つ（色順応状態と独立に定義）。
    作業白色点 white_point は行列の導出に使った白。
    """

    name: str
    white_point: WhitePoint
    red: Yxy
    green: Yxy
    blue: Yxy
    to_xyz_matrix: Mat3
    to_rgb_matrix: Mat3
    transfer: TransferFunction

    def __repr__(self) -> str:
        return f"MatrixColorSpace({self.name!r})"


def rgb_to_xyz_matrix(red: Yxy, green: Yxy, blue: Yxy, white: WhitePoint) -> Mat3:
    """xy 原色と白色点からリニアRGB→XYZ 行列を導出。

    各原色の XYZ（Y=1）を列に並べた行列 P について、
    S = P⁻¹·W として列を S でスケールする標準的な構成。
    """
    columns = []
    for primary in (red, green, blue):
        x, y = primary.x, primary.y
        columns.append((x / y, 1.0, (1.0 - x - y) / y))
    p: Mat3 = (
        (columns[0][0], columns[1][0], columns[2][0]),
        (columns[0][1], columns[1][1], columns[2][1]),
        (columns[0][2], columns[1][2], columns[2][2]),
    )
    s = mat3_mul_vec(mat3_inverse(p), white.xyz)
    return (
        (p[0][0] * s[0], p[0][1] * s[1], p[0][2] * s[2]),
        (p[1][0] * s[0], p[1][1] * s[1], p[1][2] * s[2]),
        (p[2][0] * s[0], p[2][1] * s[1], p[2][2] * s[2]),
    )


# --- sRGB (D65) ---

SRGB = MatrixColorSpace(
    name="sRGB",
    white_point=WhitePoint.D65,
    red=Yxy(0.6400, 0.3300, 0.212656, white_point=WhitePoint.D50),
    green=Yxy(0.3000, 0.6000, 0.715158, white_point=WhitePoint.D50),
    blue=Yxy(0.1500, 0.0600, 0.072186, white_point=WhitePoint.D50),
    to_xyz_matrix=(
        (0.4124564, 0.3575761, 0.1804375),
        (0.2126729, 0.7151522, 0.0721750),
        (0.0193339, 0.1191920, 0.9503041),
    ),
    to_rgb_matrix=(
        (3.2404542, -1.5371385, -0.4985314),
        (-0.9692660, 1.8760108, 0.0415560),
        (0.0556434, -0.2040259, 1.0572252),
    ),
    transfer=SrgbTransfer(),
)

# --- Adobe RGB (1998) (D65, γ = 563/256) ---

ADOBE_RGB = MatrixColorSpace(
    name="Adobe RGB (1998)",
    white_point=WhitePoint.D65,
    red=Yxy(0.6400, 0.3300, 0.297361, white_point=WhitePoint.D50),
    green=Yxy(0.2100, 0.7100, 0.627355, white_point=WhitePoint.D50),
    blue=Yxy(0.1500, 0.0600, 0.075285, white_point=WhitePoint.D50),
    to_xyz_matrix=(
        (0.5767309, 0.1855540, 0.1881852),
        (0.2973769, 0.6273491, 0.0752741),
        (0.0270343, 0.0706872, 0.9911085),
    ),
    to_rgb_matrix=(
        (2.0413690, -0.5649464, -0.3446944),
        (-0.9692660, 1.8760108, 0.0415560),
        (0.0134474, -0.1183897, 1.0154096),
    ),
    transfer=GammaTransfer(563.0 / 256.0),
)

DEFAULT_RGB_SPACE = SRGB
