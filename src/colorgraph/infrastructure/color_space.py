"""色空間変換（NumPyベースのバッチ処理）。

domain.conversion と同じ式を (..., 3) 配列全体に対して一括で実行する。
縮退ケース（X+Y+Z=0, xyY の y=0）の扱いもスカラー版と同じ。
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from colorgraph.domain.channel import Channel
from colorgraph.domain.conversion import LAB_DELTA, LAB_EPSILON, LAB_KAPPA
from colorgraph.domain.rgb_space import (
    DEFAULT_RGB_SPACE,
    GammaTransfer,
    LinearTransfer,
    MatrixColorSpace,
    SrgbTransfer,
    TransferFunction,
)
from colorgraph.domain.white_point import (
    DEFAULT_WHITE_POINT,
    WhitePoint,
    ensure_same_white_point,
)

FloatArray = npt.NDArray[np.float64]

_DTYPES: dict[Channel, type[np.generic]] = {
    Channel.U8: np.uint8,
    Channel.U16: np.uint16,
    Channel.F16: np.float16,
    Channel.F32: np.float32,
    Channel.F64: np.float64,
}


def channel_dtype(channel: Channel) -> np.dtype:
    """チャンネルに対応する NumPy dtype。"""
    return np.dtype(_DTYPES[channel])


def _check_last_axis(array: npt.NDArray) -> None:
    if array.shape[-1] != 3:
        raise ValueError(f"expected (..., 3) array, got shape {array.shape}")


def to_float_batch(array: npt.ArrayLike, channel: Channel) -> FloatArray:
    """チャンネル表現の配列を正準 float64 に変換。"""
    values = np.asarray(array, dtype=np.float64)
    if channel.is_float:
        return values
    return values / float(channel.max_value)  # type: ignore[arg-type]


def from_float_batch(array: npt.ArrayLike, channel: Channel) -> npt.NDArray:
    """正準 float の配列をチャンネル表現に変換。

    有界チャンネル: [0, 1] にクランプ（NaN は 0）して四捨五入。
    """
    values = np.asarray(array, dtype=np.float64)
    if channel.is_float:
        with np.errstate(over="ignore"):
            return values.astype(_DTYPES[channel])
    clamped = np.clip(np.nan_to_num(values, nan=0.0), 0.0, 1.0)
    scaled = np.floor(clamped * channel.max_value + 0.5)
    return scaled.astype(_DTYPES[channel])


# --- 伝達関数 ---


def decode_batch(array: npt.ArrayLike, transfer: TransferFunction) -> FloatArray:
    """表示値 → リニア値（配列版）。"""
    v = np.asarray(array, dtype=np.float64)
    if isinstance(transfer, SrgbTransfer):
        # 負値を含む場合も power 側は評価されるため、abs で NaN 警告を避ける
        curve = ((np.abs(v) + 0.055) / 1.055) ** 2.4
        return np.where(v <= SrgbTransfer.DECODE_THRESHOLD, v / 12.92, curve)
    if isinstance(transfer, GammaTransfer):
        return np.sign(v) * np.abs(v) ** transfer.gamma
    if isinstance(transfer, LinearTransfer):
        return v.copy()
    return np.vectorize(transfer.decode, otypes=[np.float64])(v)


def encode_batch(array: npt.ArrayLike, transfer: TransferFunction) -> FloatArray:
    """リニア値 → 表示値（配列版）。クリップしない。"""
    v = np.asarray(array, dtype=np.float64)
    if isinstance(transfer, SrgbTransfer):
        curve = 1.055 * np.abs(v) ** (1.0 / 2.4) - 0.055
        return np.where(v <= SrgbTransfer.ENCODE_THRESHOLD, 12.92 * v, curve)
    if isinstance(transfer, GammaTransfer):
        return np.sign(v) * np.abs(v) ** (1.0 / transfer.gamma)
    if isinstance(transfer, LinearTransfer):
        return v.copy()
    return np.vectorize(transfer.encode, otypes=[np.float64])(v)


# --- リニアRGB ↔ XYZ ---


def rgb_to_xyz_batch(
    linear: npt.ArrayLike,
    space: MatrixColorSpace = DEFAULT_RGB_SPACE,
) -> FloatArray:
    """リニアRGB (..., 3) → XYZ (..., 3)。"""
    rgb = np.asarray(linear, dtype=np.float64)
    _check_last_axis(rgb)
    m = np.array(space.to_xyz_matrix, dtype=np.float64)
    return rgb @ m.T


def xyz_to_rgb_batch(
    xyz: npt.ArrayLike,
    space: MatrixColorSpace = DEFAULT_RGB_SPACE,
    white_point: WhitePoint = DEFAULT_WHITE_POINT,
) -> FloatArray:
    """XYZ (..., 3) → リニアRGB (..., 3)。ガマット外もクリップしない。

    Raises:
        WhitePointMismatchError: white_point が色空間の白色点と異なる
    """
    ensure_same_white_point(white_point, space.white_point)
    values = np.asarray(xyz, dtype=np.float64)
    _check_last_axis(values)
    m = np.array(space.to_rgb_matrix, dtype=np.float64)
    return values @ m.T


# --- XYZ ↔ L*a*b* ---


def _lab_f(t: FloatArray) -> FloatArray:
    return np.where(
        t > LAB_EPSILON, np.cbrt(t), LAB_KAPPA / 116.0 * t + LAB_DELTA
    )


def _lab_f_inv(f: FloatArray) -> FloatArray:
    f3 = f**3
    return np.where(f3 > LAB_EPSILON, f3, (f - LAB_DELTA) * 116.0 / LAB_KAPPA)


def xyz_to_lab_batch(
    xyz: npt.ArrayLike,
    white_point: WhitePoint = DEFAULT_WHITE_POINT,
) -> FloatArray:
    """XYZ (..., 3) → L*a*b* (..., 3)。"""
    values = np.asarray(xyz, dtype=np.float64)
    _check_last_axis(values)
    normalized = values / np.array(white_point.xyz, dtype=np.float64)

    f = _lab_f(normalized)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]

    l_star = 116.0 * fy - 16.0
    a_star = 500.0 * (fx - fy)
    b_star = 200.0 * (fy - fz)

    return np.stack([l_star, a_star, b_star], axis=-1)


def lab_to_xyz_batch(
    lab: npt.ArrayLike,
    white_point: WhitePoint = DEFAULT_WHITE_POINT,
) -> FloatArray:
    """L*a*b* (..., 3) → XYZ (..., 3)。"""
    values = np.asarray(lab, dtype=np.float64)
    _check_last_axis(values)
    l_star, a_star, b_star = values[..., 0], values[..., 1], values[..., 2]

    fy = (l_star + 16.0) / 116.0
    fx = a_star / 500.0 + fy
    fz = fy - b_star / 200.0

    t = _lab_f_inv(np.stack([fx, fy, fz], axis=-1))
    return t * np.array(white_point.xyz, dtype=np.float64)


# --- XYZ ↔ xyY ---


def xyz_to_yxy_batch(xyz: npt.ArrayLike) -> FloatArray:
    """XYZ (..., 3) → xyY (..., 3) [x, y, luma]。X+Y+Z=0 は x=y=0。"""
    values = np.asarray(xyz, dtype=np.float64)
    _check_last_axis(values)
    total = values.sum(axis=-1)
    nonzero = total != 0.0
    safe_total = np.where(nonzero, total, 1.0)
    x = np.where(nonzero, values[..., 0] / safe_total, 0.0)
    y = np.where(nonzero, values[..., 1] / safe_total, 0.0)
    return np.stack([x, y, values[..., 1]], axis=-1)


def yxy_to_xyz_batch(yxy: npt.ArrayLike) -> FloatArray:
    """xyY (..., 3) → XYZ (..., 3)。y=0 の要素は (0, 0, 0)。"""
    values = np.asarray(yxy, dtype=np.float64)
    _check_last_axis(values)
    x, y, luma = values[..., 0], values[..., 1], values[..., 2]
    defined = y != 0.0
    scale = np.where(defined, luma / np.where(defined, y, 1.0), 0.0)
    big_x = x * scale
    big_z = (1.0 - x - y) * scale
    big_y = np.where(defined, luma, 0.0)
    return np.stack([big_x, big_y, big_z], axis=-1)


# --- 合成 ---


def srgb_to_lab_batch(
    rgb_array: npt.ArrayLike,
    channel: Channel = Channel.U8,
    space: MatrixColorSpace = DEFAULT_RGB_SPACE,
) -> FloatArray:
    """エンコードRGB配列 → L*a*b* (float64)。

    Args:
        rgb_array: (..., 3) 配列（channel の表現。U8 なら 0-255）
        channel: 入力のチャンネル
        space: 入力の RGB 色空間

    Returns:
        (..., 3) の float64 配列 (LAB)
    """
    encoded = to_float_batch(rgb_array, channel)
    _check_last_axis(encoded)
    linear = decode_batch(encoded, space.transfer)
    return xyz_to_lab_batch(rgb_to_xyz_batch(linear, space), space.white_point)


def lab_to_srgb_batch(
    lab_array: npt.ArrayLike,
    channel: Channel = Channel.U8,
    space: MatrixColorSpace = DEFAULT_RGB_SPACE,
) -> npt.NDArray:
    """L*a*b* 配列 → エンコードRGB配列（channel の dtype）。

    有界チャンネルでは範囲外がクランプされる。
    """
    xyz = lab_to_xyz_batch(lab_array, space.white_point)
    linear = xyz_to_rgb_batch(xyz, space, space.white_point)
    return from_float_batch(encode_batch(linear, space.transfer), channel)
