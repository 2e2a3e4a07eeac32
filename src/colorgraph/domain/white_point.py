"""基準白色点（CIE 標準光源）定義。

各白色点は Y=1 に正規化した XYZ 三刺激値を定数として持つ。
色順応は行わないため、異なる白色点の色同士の演算は呼び出し側のエラー。
"""

from __future__ import annotations

from enum import Enum


class WhitePointMismatchError(ValueError):
    """異なる白色点の色を色順応なしで組み合わせようとした。"""


class WhitePoint(Enum):
    """CIE 1931 2° 観測者の標準光源。"""

    A = (1.09850, 1.00000, 0.35585, "A")
    D50 = (0.96422, 1.00000, 0.82521, "D50")
    D55 = (0.95682, 1.00000, 0.92149, "D55")
    D65 = (0.95047, 1.00000, 1.08883, "D65")
    D75 = (0.94972, 1.00000, 1.22638, "D75")
    E = (1.00000, 1.00000, 1.00000, "E")

    def __init__(self, x: float, y: float, z: float, label: str) -> None:
        self._x = x
        self._y = y
        self._z = z
        self._label = label

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    @property
    def label(self) -> str:
        return self._label

    @property
    def xyz(self) -> tuple[float, float, float]:
        return (self._x, self._y, self._z)


DEFAULT_WHITE_POINT = WhitePoint.D65


def ensure_same_white_point(left: WhitePoint, right: WhitePoint) -> None:
    """白色点が一致しなければ WhitePointMismatchError。"""
    if left is not right:
        raise WhitePointMismatchError(
            f"white point mismatch: {left.label} vs {right.label} "
            "(chromatic adaptation is not supported)"
        )
