"""色値型間の変換（Pure Python）。

各変換は純粋関数。計算は Python float（64bit）で行い、
結果のみを指定チャンネルに変換する。channel=None ならソースのチャンネルを保つ
（有界チャンネルから float 専用型への変換では F64）。
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TypeVar

from colorgraph.domain.channel import DEFAULT_CHANNEL, Channel
from colorgraph.domain.color import ColorValue, Lab, Xyz, Yxy
from colorgraph.domain.matrix import Vec3, mat3_mul_vec
from colorgraph.domain.rgb import Rgb, Rgba, Srgb, Srgba
from colorgraph.domain.rgb_space import DEFAULT_RGB_SPACE, MatrixColorSpace
from colorgraph.domain.white_point import ensure_same_white_point

logger = logging.getLogger(__name__)

_T = TypeVar("_T", bound="ColorValue | Rgba | Srgba")

# CIE L*a*b* 定数（有理数で厳密に定義）
LAB_EPSILON = 216.0 / 24389.0  # (6/29)^3
LAB_KAPPA = 24389.0 / 27.0  # (29/3)^3
LAB_DELTA = 16.0 / 116.0


def _resolve_channel(source: Channel, requested: Channel | None, float_only: bool) -> Channel:
    if requested is not None:
        return requested
    if float_only and not source.is_float:
        return DEFAULT_CHANNEL
    return source


def _narrow(values: Vec3, channel: Channel) -> Vec3:
    a, b, c = (channel.from_float(v) for v in values)
    return (a, b, c)


def with_channel(color: _T, channel: Channel) -> _T:
    """同じ色を別のチャンネル表現に変換。不透明度付きの色は alpha も変換する。"""
    if isinstance(color, (Rgba, Srgba)):
        return replace(
            color,
            color=with_channel(color.color, channel),
            alpha=color.channel.convert(color.alpha, channel),
        )
    updates = {
        name: color.channel.convert(value, channel)
        for name, value in zip(color._components, color.components())
    }
    return replace(color, channel=channel, **updates)


# --- ガンマエンコードRGB ↔ リニアRGB ---


def srgb_to_rgb(color: Srgb, channel: Channel | None = None) -> Rgb:
    """伝達関数でデコードしてリニアRGBに。"""
    decode = color.space.transfer.decode
    r, g, b = (decode(v) for v in color.to_floats())
    out = _resolve_channel(color.channel, channel, float_only=False)
    return Rgb(*_narrow((r, g, b), out), channel=out, space=color.space)


def rgb_to_srgb(color: Rgb, channel: Channel | None = None) -> Srgb:
    """伝達関数でエンコードして表示値に。"""
    encode = color.space.transfer.encode
    r, g, b = (encode(v) for v in color.to_floats())
    out = _resolve_channel(color.channel, channel, float_only=False)
    return Srgb(*_narrow((r, g, b), out), channel=out, space=color.space)


# --- 不透明度付きRGB ---


def srgb_to_srgba(color: Srgb, channel: Channel | None = None) -> Srgba:
    """不透明（alpha = チャンネル最大値）の Srgba に。"""
    out = _resolve_channel(color.channel, channel, float_only=False)
    return Srgba(with_channel(color, out))


def srgb_to_rgba(color: Srgb, channel: Channel | None = None) -> Rgba:
    """デコードして不透明の Rgba に。"""
    return Rgba(srgb_to_rgb(color, channel))


def rgb_to_rgba(color: Rgb, channel: Channel | None = None) -> Rgba:
    out = _resolve_channel(color.channel, channel, float_only=False)
    return Rgba(with_channel(color, out))


def srgba_to_rgba(color: Srgba, channel: Channel | None = None) -> Rgba:
    """RGB 成分のみデコード。alpha は値を保ったままチャンネル変換。"""
    out = _resolve_channel(color.channel, channel, float_only=False)
    return Rgba(srgb_to_rgb(color.color, out), color.channel.convert(color.alpha, out))


def rgba_to_srgba(color: Rgba, channel: Channel | None = None) -> Srgba:
    """RGB 成分のみエンコード。alpha は値を保ったままチャンネル変換。"""
    out = _resolve_channel(color.channel, channel, float_only=False)
    return Srgba(rgb_to_srgb(color.color, out), color.channel.convert(color.alpha, out))


def srgba_to_srgb(color: Srgba, channel: Channel | None = None) -> Srgb:
    """alpha を捨てる。"""
    out = _resolve_channel(color.channel, channel, float_only=False)
    return with_channel(color.color, out)


def rgba_to_rgb(color: Rgba, channel: Channel | None = None) -> Rgb:
    """alpha を捨てる。"""
    out = _resolve_channel(color.channel, channel, float_only=False)
    return with_channel(color.color, out)


# --- リニアRGB ↔ XYZ ---


def rgb_to_xyz(color: Rgb, channel: Channel | None = None) -> Xyz:
    """RGB→XYZ 行列を適用。白色点は色空間のもの。"""
    xyz = mat3_mul_vec(color.space.to_xyz_matrix, color.to_floats())
    out = _resolve_channel(color.channel, channel, float_only=True)
    return Xyz(*_narrow(xyz, out), channel=out, white_point=color.space.white_point)


def xyz_to_rgb(
    color: Xyz,
    space: MatrixColorSpace = DEFAULT_RGB_SPACE,
    channel: Channel | None = None,
) -> Rgb:
    """XYZ→RGB 逆行列を適用。ガマット外の値もクリップしない（float チャンネル）。

    Raises:
        WhitePointMismatchError: XYZ の白色点が色空間と異なる
    """
    ensure_same_white_point(color.white_point, space.white_point)
    rgb = mat3_mul_vec(space.to_rgb_matrix, color.to_floats())
    out = _resolve_channel(color.channel, channel, float_only=False)
    return Rgb(*_narrow(rgb, out), channel=out, space=space)


def srgb_to_xyz(color: Srgb, channel: Channel | None = None) -> Xyz:
    """デコード→RGB→XYZ 行列。中間値は丸めない。"""
    decode = color.space.transfer.decode
    r, g, b = (decode(v) for v in color.to_floats())
    xyz = mat3_mul_vec(color.space.to_xyz_matrix, (r, g, b))
    out = _resolve_channel(color.channel, channel, float_only=True)
    return Xyz(*_narrow(xyz, out), channel=out, white_point=color.space.white_point)


def xyz_to_srgb(
    color: Xyz,
    space: MatrixColorSpace = DEFAULT_RGB_SPACE,
    channel: Channel | None = None,
) -> Srgb:
    """XYZ→RGB 逆行列→エンコード。中間値は丸めない。"""
    ensure_same_white_point(color.white_point, space.white_point)
    encode = space.transfer.encode
    r, g, b = mat3_mul_vec(space.to_rgb_matrix, color.to_floats())
    encoded = (encode(r), encode(g), encode(b))
    out = _resolve_channel(color.channel, channel, float_only=False)
    return Srgb(*_narrow(encoded, out), channel=out, space=space)


# --- XYZ ↔ L*a*b* ---


def _lab_f(t: float) -> float:
    """LAB変換の補助関数。ε 以下は立方根に接する直線。"""
    if t > LAB_EPSILON:
        return t ** (1.0 / 3.0)
    return LAB_KAPPA / 116.0 * t + LAB_DELTA


def _lab_f_inv(f: float) -> float:
    """_lab_f の逆関数。分岐判定は f ではなく f³ と ε の比較。"""
    f3 = f**3
    if f3 > LAB_EPSILON:
        return f3
    return (f - LAB_DELTA) * 116.0 / LAB_KAPPA


def xyz_to_lab(color: Xyz, channel: Channel | None = None) -> Lab:
    """XYZ → CIE L*a*b*（XYZ と同じ白色点基準）。"""
    x, y, z = color.to_floats()
    xn, yn, zn = color.white_point.xyz

    fx = _lab_f(x / xn)
    fy = _lab_f(y / yn)
    fz = _lab_f(z / zn)

    l_star = 116.0 * fy - 16.0
    a_star = 500.0 * (fx - fy)
    b_star = 200.0 * (fy - fz)

    out = _resolve_channel(color.channel, channel, float_only=True)
    return Lab(
        *_narrow((l_star, a_star, b_star), out),
        channel=out,
        white_point=color.white_point,
    )


def lab_to_xyz(color: Lab, channel: Channel | None = None) -> Xyz:
    """CIE L*a*b* → XYZ。"""
    l_star, a_star, b_star = color.to_floats()
    xn, yn, zn = color.white_point.xyz

    fy = (l_star + 16.0) / 116.0
    fx = a_star / 500.0 + fy
    fz = fy - b_star / 200.0

    xyz = (_lab_f_inv(fx) * xn, _lab_f_inv(fy) * yn, _lab_f_inv(fz) * zn)
    out = _resolve_channel(color.channel, channel, float_only=True)
    return Xyz(*_narrow(xyz, out), channel=out, white_point=color.white_point)


# --- XYZ ↔ xyY ---


def xyz_to_yxy(color: Xyz, channel: Channel | None = None) -> Yxy:
    """XYZ → xyY。X+Y+Z=0（黒）は x=y=0。"""
    x, y, z = color.to_floats()
    total = x + y + z
    if total != 0.0:
        chroma_x = x / total
        chroma_y = y / total
    else:
        chroma_x = 0.0
        chroma_y = 0.0
    out = _resolve_channel(color.channel, channel, float_only=True)
    return Yxy(
        *_narrow((chroma_x, chroma_y, y), out),
        channel=out,
        white_point=color.white_point,
    )


def yxy_to_xyz(color: Yxy, channel: Channel | None = None) -> Xyz:
    """xyY → XYZ。y=0 は定義できないため XYZ(0, 0, 0) を返す。"""
    x, y, luma = color.to_floats()
    out = _resolve_channel(color.channel, channel, float_only=True)
    if y == 0.0:
        logger.debug("xyY with y=0 has no XYZ equivalent, returning black: %s", color)
        return Xyz(0.0, 0.0, 0.0, channel=out, white_point=color.white_point)
    xyz = (x * luma / y, luma, (1.0 - x - y) * luma / y)
    return Xyz(*_narrow(xyz, out), channel=out, white_point=color.white_point)


# --- 合成 ---


def srgb_to_lab(color: Srgb, channel: Channel | None = None) -> Lab:
    """エンコードRGB → L*a*b*（色空間の白色点基準）。"""
    out = _resolve_channel(color.channel, channel, float_only=True)
    return xyz_to_lab(srgb_to_xyz(color, Channel.F64), out)


def lab_to_srgb(
    color: Lab,
    space: MatrixColorSpace = DEFAULT_RGB_SPACE,
    channel: Channel | None = None,
) -> Srgb:
    """L*a*b* → エンコードRGB。"""
    out = _resolve_channel(color.channel, channel, float_only=False)
    return xyz_to_srgb(lab_to_xyz(color, Channel.F64), space, out)
