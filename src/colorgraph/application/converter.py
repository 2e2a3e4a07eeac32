"""色変換グラフのルーティング。

色値型をノード、domain.conversion の各関数を辺とするグラフ上の
全ペア最短経路を構築時に求めておき、変換時は順に適用する。
中間値は F64 で保持し、最終結果のみを指定チャンネルに変換する。
"""

from __future__ import annotations

import logging
from collections import deque
from types import MappingProxyType
from typing import Any, Callable, Mapping, TypeVar, Union

from colorgraph.domain.channel import DEFAULT_CHANNEL, Channel
from colorgraph.domain.color import ColorValue, Lab, Xyz, Yxy
from colorgraph.domain.conversion import (
    lab_to_xyz,
    rgb_to_rgba,
    rgb_to_srgb,
    rgb_to_xyz,
    rgba_to_rgb,
    rgba_to_srgba,
    srgb_to_rgb,
    srgb_to_rgba,
    srgb_to_srgba,
    srgba_to_rgba,
    srgba_to_srgb,
    with_channel,
    xyz_to_lab,
    xyz_to_rgb,
    xyz_to_yxy,
    yxy_to_xyz,
)
from colorgraph.domain.rgb import Rgb, Rgba, Srgb, Srgba
from colorgraph.domain.rgb_space import DEFAULT_RGB_SPACE, MatrixColorSpace

logger = logging.getLogger(__name__)

AnyColor = Union[ColorValue, Rgba, Srgba]
_C = TypeVar("_C", bound=AnyColor)

ConversionStep = Callable[[Any, Union[Channel, None]], Any]
"""変換ステップ: (color, channel) -> color"""


class ColorConverter:
    """任意の色値型間の変換。

    XYZ から RGB 系への変換先色空間はコンストラクタで指定する。
    RGB 系のソースは自身の色空間を使う。
    経路表は構築時に確定し、以降は読み取り専用。
    """

    def __init__(self, space: MatrixColorSpace = DEFAULT_RGB_SPACE) -> None:
        self._space = space
        self._edges: Mapping[type, Mapping[type, ConversionStep]] = MappingProxyType({
            Srgb: {Rgb: srgb_to_rgb, Srgba: srgb_to_srgba, Rgba: srgb_to_rgba},
            Srgba: {Srgb: srgba_to_srgb, Rgba: srgba_to_rgba},
            Rgb: {Srgb: rgb_to_srgb, Xyz: rgb_to_xyz, Rgba: rgb_to_rgba},
            Rgba: {Rgb: rgba_to_rgb, Srgba: rgba_to_srgba},
            Xyz: {
                Rgb: lambda c, ch: xyz_to_rgb(c, space, ch),
                Lab: xyz_to_lab,
                Yxy: xyz_to_yxy,
            },
            Lab: {Xyz: lab_to_xyz},
            Yxy: {Xyz: yxy_to_xyz},
        })
        self._paths: Mapping[tuple[type, type], tuple[type, ...]] = MappingProxyType({
            (source, target): route
            for source in self._edges
            for target, route in _shortest_paths(self._edges, source).items()
        })

    @property
    def space(self) -> MatrixColorSpace:
        return self._space

    def path(self, source: type, target: type) -> list[type]:
        """source から target への最短経路（両端を含む型のリスト）。

        Raises:
            TypeError: 未知の色値型
        """
        for t in (source, target):
            if t not in self._edges:
                raise TypeError(f"unsupported color type: {t.__name__}")
        return list(self._paths[(source, target)])

    def convert(
        self,
        color: AnyColor,
        target: type[_C],
        channel: Channel | None = None,
    ) -> _C:
        """color を target 型に変換。

        Args:
            color: 変換元の色
            target: 変換先の色値型
            channel: 結果のチャンネル（None なら変換関数の既定に従う）

        Returns:
            target 型の色
        """
        route = self.path(type(color), target)
        if channel is None:
            channel = _default_channel(color.channel, target)
        if len(route) == 1:
            if channel is color.channel:
                return color  # type: ignore[return-value]
            return with_channel(color, channel)  # type: ignore[return-value]

        logger.debug(
            "converting via %s", " -> ".join(t.__name__ for t in route)
        )
        result: Any = color
        last = len(route) - 2
        for i, (src, dst) in enumerate(zip(route, route[1:])):
            step = self._edges[src][dst]
            result = step(result, channel if i == last else Channel.F64)
        return result  # type: ignore[no-any-return]


def _shortest_paths(
    edges: Mapping[type, Mapping[type, ConversionStep]], source: type
) -> dict[type, tuple[type, ...]]:
    """source から到達可能な全ての型への最短経路（BFS）。"""
    previous: dict[type, type | None] = {source: None}
    queue: deque[type] = deque([source])
    while queue:
        node = queue.popleft()
        for neighbor in edges[node]:
            if neighbor not in previous:
                previous[neighbor] = node
                queue.append(neighbor)

    paths: dict[type, tuple[type, ...]] = {}
    for target in previous:
        route: list[type] = []
        node_or_none: type | None = target
        while node_or_none is not None:
            route.append(node_or_none)
            node_or_none = previous[node_or_none]
        route.reverse()
        paths[target] = tuple(route)
    return paths


def _default_channel(source: Channel, target: type) -> Channel:
    """channel 未指定時の結果チャンネル。float 専用型へは有界チャンネルを F64 に。"""
    if target._float_only and not source.is_float:  # type: ignore[attr-defined]
        return DEFAULT_CHANNEL
    return source


_DEFAULT_CONVERTER = ColorConverter()


def convert(
    color: AnyColor,
    target: type[_C],
    channel: Channel | None = None,
) -> _C:
    """sRGB を既定の RGB 色空間とする変換。"""
    return _DEFAULT_CONVERTER.convert(color, target, channel)
