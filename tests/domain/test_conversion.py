"""conversion.py のテスト。"""

import math

import pytest

from colorgraph.domain.channel import Channel, ChannelError
from colorgraph.domain.color import Lab, Xyz, Yxy
from colorgraph.domain.conversion import (
    LAB_EPSILON,
    LAB_KAPPA,
    _lab_f,
    _lab_f_inv,
    lab_to_srgb,
    lab_to_xyz,
    rgb_to_rgba,
    rgb_to_srgb,
    rgb_to_xyz,
    rgba_to_rgb,
    rgba_to_srgba,
    srgb_to_lab,
    srgb_to_rgb,
    srgb_to_rgba,
    srgb_to_srgba,
    srgb_to_xyz,
    srgba_to_rgba,
    srgba_to_srgb,
    with_channel,
    xyz_to_lab,
    xyz_to_rgb,
    xyz_to_srgb,
    xyz_to_yxy,
    yxy_to_xyz,
)
from colorgraph.domain.rgb import Rgb, Rgba, Srgb, Srgba
from colorgraph.domain.rgb_space import ADOBE_RGB
from colorgraph.domain.white_point import WhitePoint, WhitePointMismatchError

WHITE_U8 = Srgb(255, 255, 255, channel=Channel.U8)
BLACK_U8 = Srgb(0, 0, 0, channel=Channel.U8)

XYZ_SAMPLES = [
    Xyz(0.95047, 1.0, 1.08883),
    Xyz(0.4124564, 0.2126729, 0.0193339),
    Xyz(0.2, 0.3, 0.4),
    Xyz(0.05, 0.04, 0.06),
    Xyz(0.001, 0.002, 0.0005),  # ε 以下（直線区間）
    Xyz(LAB_EPSILON * 0.95047, LAB_EPSILON, LAB_EPSILON * 1.08883),  # 区切り点
    Xyz(0.3, 0.2, 0.5, white_point=WhitePoint.D50),
]

LAB_SAMPLES = [
    Lab(0.0, 0.0, 0.0),
    Lab(100.0, 0.0, 0.0),
    Lab(50.0, 20.0, -30.0),
    Lab(8.0, 0.0, 0.0),  # L = κε
    Lab(5.0, 1.0, -1.0),
    Lab(75.0, -40.0, 60.0, white_point=WhitePoint.A),
]


def _assert_components_close(a, b, tol: float) -> None:
    for x, y in zip(a.to_floats(), b.to_floats()):
        assert abs(x - y) < tol, f"{a} != {b}"


class TestFixedPoints:
    def test_white_to_xyz(self) -> None:
        xyz = srgb_to_xyz(WHITE_U8)
        assert xyz.white_point is WhitePoint.D65
        assert xyz.y == pytest.approx(WhitePoint.D65.y, abs=1e-6)
        assert xyz.x == pytest.approx(WhitePoint.D65.x, abs=1e-6)
        assert xyz.z == pytest.approx(WhitePoint.D65.z, abs=1e-6)

    def test_white_to_lab(self) -> None:
        lab = srgb_to_lab(WHITE_U8)
        assert lab.l == pytest.approx(100.0, abs=1e-4)
        assert lab.a == pytest.approx(0.0, abs=1e-4)
        assert lab.b == pytest.approx(0.0, abs=1e-4)

    def test_black_to_xyz(self) -> None:
        assert srgb_to_xyz(BLACK_U8) == Xyz(0.0, 0.0, 0.0)

    def test_black_to_lab(self) -> None:
        lab = srgb_to_lab(BLACK_U8)
        assert lab.l == pytest.approx(0.0, abs=1e-9)
        assert lab.a == 0.0
        assert lab.b == 0.0

    def test_red_has_positive_a(self) -> None:
        lab = srgb_to_lab(Srgb(200, 0, 0, channel=Channel.U8))
        assert lab.a > 0

    def test_yellow_has_positive_b(self) -> None:
        lab = srgb_to_lab(Srgb(255, 255, 0, channel=Channel.U8))
        assert lab.b > 0


class TestTransferConversion:
    def test_srgb_rgb_roundtrip(self) -> None:
        for i in range(101):
            v = i / 100
            c = Srgb(v, 1.0 - v, v * v)
            _assert_components_close(rgb_to_srgb(srgb_to_rgb(c)), c, 1e-6)

    def test_keeps_space(self) -> None:
        c = Srgb(0.5, 0.5, 0.5, space=ADOBE_RGB)
        linear = srgb_to_rgb(c)
        assert linear.space is ADOBE_RGB
        assert linear.r == pytest.approx(0.5 ** (563.0 / 256.0))

    def test_channel_kept_by_default(self) -> None:
        assert srgb_to_rgb(WHITE_U8).channel is Channel.U8
        assert srgb_to_rgb(WHITE_U8, Channel.F32).channel is Channel.F32


class TestRgbXyz:
    def test_rgb_xyz_roundtrip(self) -> None:
        for rgb in (Rgb(0.2, 0.5, 0.9), Rgb(1.0, 0.0, 0.0), Rgb(0.01, 0.02, 0.03)):
            _assert_components_close(xyz_to_rgb(rgb_to_xyz(rgb)), rgb, 1e-5)

    def test_xyz_rgb_xyz_roundtrip(self) -> None:
        for rgb in (Rgb(0.2, 0.5, 0.9), Rgb(0.7, 0.7, 0.1)):
            xyz = rgb_to_xyz(rgb)
            _assert_components_close(rgb_to_xyz(xyz_to_rgb(xyz)), xyz, 1e-5)

    def test_out_of_gamut_not_clipped(self) -> None:
        """ガマット外（負値）はクリップせずそのまま。"""
        rgb = xyz_to_rgb(Xyz(0.1, 0.5, 0.1))
        assert rgb.r < 0.0

    def test_out_of_gamut_clamped_for_bounded_target(self) -> None:
        srgb = xyz_to_srgb(Xyz(0.1, 0.5, 0.1), channel=Channel.U8)
        assert srgb.r == 0

    def test_white_point_mismatch_raises(self) -> None:
        with pytest.raises(WhitePointMismatchError):
            xyz_to_rgb(Xyz(0.3, 0.3, 0.3, white_point=WhitePoint.D50))
        with pytest.raises(WhitePointMismatchError):
            xyz_to_srgb(Xyz(0.3, 0.3, 0.3, white_point=WhitePoint.D50))

    def test_srgb_u8_roundtrip_exact(self) -> None:
        """U8 → XYZ(F64) → U8 で全グレー値が一致。"""
        for v in range(256):
            c = Srgb(v, v, v, channel=Channel.U8)
            assert xyz_to_srgb(srgb_to_xyz(c), channel=Channel.U8) == c

    def test_srgb_u8_roundtrip_colors(self) -> None:
        for rgb in [(255, 0, 0), (0, 255, 0), (0, 0, 255), (200, 100, 50), (12, 240, 130)]:
            c = Srgb(*rgb, channel=Channel.U8)
            assert xyz_to_srgb(srgb_to_xyz(c), channel=Channel.U8) == c

    def test_bounded_source_gives_f64_xyz(self) -> None:
        assert srgb_to_xyz(WHITE_U8).channel is Channel.F64
        assert srgb_to_xyz(Srgb(1.0, 1.0, 1.0, channel=Channel.F32)).channel is Channel.F32

    def test_adobe_white(self) -> None:
        xyz = srgb_to_xyz(Srgb(1.0, 1.0, 1.0, space=ADOBE_RGB))
        for a, b in zip(xyz.to_floats(), WhitePoint.D65.xyz):
            assert abs(a - b) < 1e-6
        back = xyz_to_srgb(xyz, ADOBE_RGB)
        assert back.space is ADOBE_RGB
        _assert_components_close(back, Srgb(1.0, 1.0, 1.0, space=ADOBE_RGB), 1e-5)


class TestLabFunction:
    def test_continuous_at_breakpoint(self) -> None:
        """直線区間が ε で立方根と接続する。"""
        below = _lab_f(LAB_EPSILON * (1 - 1e-9))
        above = _lab_f(LAB_EPSILON * (1 + 1e-9))
        assert abs(above - below) < 1e-6
        assert _lab_f(LAB_EPSILON) == pytest.approx(6.0 / 29.0)

    def test_inverse(self) -> None:
        for t in (0.0, 0.001, LAB_EPSILON, 0.01, 0.5, 1.0):
            assert _lab_f_inv(_lab_f(t)) == pytest.approx(t, abs=1e-12)

    def test_dark_lightness_is_linear(self) -> None:
        """Y/Yn ≤ ε では L* = κ·Y/Yn。"""
        yr = 0.005
        lab = xyz_to_lab(Xyz(0.95047 * yr, yr, 1.08883 * yr))
        assert lab.l == pytest.approx(LAB_KAPPA * yr, abs=1e-9)
        assert lab.a == pytest.approx(0.0, abs=1e-9)
        assert lab.b == pytest.approx(0.0, abs=1e-9)


class TestXyzLab:
    @pytest.mark.parametrize("xyz", XYZ_SAMPLES)
    def test_xyz_lab_roundtrip(self, xyz: Xyz) -> None:
        back = lab_to_xyz(xyz_to_lab(xyz))
        assert back.white_point is xyz.white_point
        _assert_components_close(back, xyz, 1e-9)

    @pytest.mark.parametrize("lab", LAB_SAMPLES)
    def test_lab_xyz_roundtrip(self, lab: Lab) -> None:
        back = xyz_to_lab(lab_to_xyz(lab))
        assert back.white_point is lab.white_point
        _assert_components_close(back, lab, 1e-9)

    def test_triple_roundtrip(self) -> None:
        for xyz in XYZ_SAMPLES:
            lab = xyz_to_lab(xyz)
            _assert_components_close(xyz_to_lab(lab_to_xyz(lab)), lab, 1e-9)

    def test_lightness_sweep_roundtrip(self) -> None:
        """区切り点付近を含む L* 全域で往復が連続。"""
        for i in range(0, 401):
            lab = Lab(i * 0.25, 0.0, 0.0)
            back = xyz_to_lab(lab_to_xyz(lab))
            assert back.l == pytest.approx(lab.l, abs=1e-9)

    def test_channel_selection(self) -> None:
        lab = xyz_to_lab(Xyz(0.2, 0.3, 0.4), Channel.F32)
        assert lab.channel is Channel.F32
        with pytest.raises(ChannelError):
            xyz_to_lab(Xyz(0.2, 0.3, 0.4), Channel.U8)


class TestXyzYxy:
    def test_black_is_defined(self) -> None:
        """X+Y+Z=0 は NaN ではなく x=y=0。"""
        yxy = xyz_to_yxy(Xyz(0.0, 0.0, 0.0))
        assert yxy == Yxy(0.0, 0.0, 0.0)

    def test_white_chromaticity(self) -> None:
        yxy = xyz_to_yxy(Xyz(*WhitePoint.D65.xyz))
        assert yxy.x == pytest.approx(0.3127, abs=1e-4)
        assert yxy.y == pytest.approx(0.3290, abs=1e-4)
        assert yxy.luma == 1.0

    def test_roundtrip(self) -> None:
        for xyz in XYZ_SAMPLES:
            back = yxy_to_xyz(xyz_to_yxy(xyz))
            assert back.white_point is xyz.white_point
            _assert_components_close(back, xyz, 1e-12)

    def test_zero_y_returns_black(self) -> None:
        """y=0 は定義できないため XYZ(0, 0, 0)。"""
        xyz = yxy_to_xyz(Yxy(0.3, 0.0, 0.5, white_point=WhitePoint.D50))
        assert xyz == Xyz(0.0, 0.0, 0.0, white_point=WhitePoint.D50)
        assert not any(math.isnan(v) for v in xyz.to_floats())


class TestComposite:
    def test_lab_srgb_roundtrip_u8(self) -> None:
        for rgb in [(255, 255, 255), (0, 0, 0), (128, 128, 128), (200, 100, 50), (0, 0, 255)]:
            c = Srgb(*rgb, channel=Channel.U8)
            assert lab_to_srgb(srgb_to_lab(c), channel=Channel.U8) == c

    def test_lab_to_srgb_keeps_float_channel(self) -> None:
        srgb = lab_to_srgb(Lab(50.0, 0.0, 0.0, channel=Channel.F32))
        assert srgb.channel is Channel.F32


class TestWithChannel:
    def test_u8_to_f32_and_back(self) -> None:
        c = Srgb(12, 200, 255, channel=Channel.U8)
        wide = with_channel(c, Channel.F32)
        assert wide.channel is Channel.F32
        assert with_channel(wide, Channel.U8) == c

    def test_u8_to_u16(self) -> None:
        c = with_channel(Srgb(1, 0, 255, channel=Channel.U8), Channel.U16)
        assert c.to_tuple() == (257, 0, 65535)

    def test_float_only_type_rejects_bounded(self) -> None:
        with pytest.raises(ChannelError):
            with_channel(Lab(50.0, 0.0, 0.0), Channel.U8)


class TestAlpha:
    """不透明度付きRGBへの変換。"""

    def test_default_alpha_u8(self) -> None:
        srgba = srgb_to_srgba(Srgb(10, 20, 30, channel=Channel.U8))
        assert srgba.alpha == 255
        assert srgba.channel is Channel.U8
        assert srgba.color == Srgb(10, 20, 30, channel=Channel.U8)

    def test_default_alpha_f64(self) -> None:
        assert srgb_to_srgba(Srgb(0.1, 0.2, 0.3)).alpha == 1.0
        assert srgb_to_rgba(Srgb(0.1, 0.2, 0.3)).alpha == 1.0

    def test_default_alpha_follows_target_channel(self) -> None:
        assert srgb_to_srgba(WHITE_U8, Channel.U16).alpha == 65535
        assert srgb_to_rgba(WHITE_U8, Channel.F32).alpha == 1.0

    def test_srgb_to_rgba_decodes(self) -> None:
        rgba = srgb_to_rgba(Srgb(0.5, 0.5, 0.5))
        assert rgba.color == srgb_to_rgb(Srgb(0.5, 0.5, 0.5))
        assert rgba.color.r == pytest.approx(0.214041, abs=1e-6)

    def test_alpha_untouched_by_decode(self) -> None:
        srgba = Srgba(Srgb(200, 100, 50, channel=Channel.U8), 128)
        rgba = srgba_to_rgba(srgba)
        assert rgba.channel is Channel.U8
        assert rgba.alpha == 128
        assert rgba_to_srgba(rgba).alpha == 128

    def test_alpha_kept_across_channel_change(self) -> None:
        srgba = Srgba(Srgb(200, 100, 50, channel=Channel.U8), 51)
        wide = srgba_to_rgba(srgba, Channel.F64)
        assert wide.channel is Channel.F64
        assert wide.alpha == pytest.approx(0.2)
        narrow = rgba_to_srgba(wide, Channel.U8)
        assert narrow.alpha == 51
        assert narrow.color == srgba.color

    def test_with_channel_converts_alpha(self) -> None:
        srgba = Srgba(Srgb(255, 0, 0, channel=Channel.U8), 0)
        assert with_channel(srgba, Channel.F32) == Srgba(
            Srgb(1.0, 0.0, 0.0, channel=Channel.F32), 0.0
        )
        half = Rgba(Rgb(0.5, 0.5, 0.5), 0.5)
        assert with_channel(half, Channel.U8).alpha == 128

    def test_bounded_alpha_clamped(self) -> None:
        assert Srgba(WHITE_U8, 300).alpha == 255
        assert Srgba(WHITE_U8, -4).alpha == 0

    def test_drop_alpha(self) -> None:
        rgb = Rgb(0.1, 0.2, 0.3)
        assert rgba_to_rgb(rgb_to_rgba(rgb)) == rgb
        assert srgba_to_srgb(Srgba(WHITE_U8, 10)) == WHITE_U8
        assert srgba_to_srgb(Srgba(WHITE_U8, 10), Channel.F64) == Srgb(1.0, 1.0, 1.0)

    def test_space_follows_color(self) -> None:
        srgba = srgb_to_srgba(Srgb(0.2, 0.4, 0.6, space=ADOBE_RGB))
        assert srgba.space is ADOBE_RGB
        assert srgb_to_rgba(srgba.color).space is ADOBE_RGB

    def test_to_floats(self) -> None:
        srgba = Srgba(Srgb(255, 0, 51, channel=Channel.U8), 102)
        assert srgba.to_floats() == (1.0, 0.0, 0.2, 0.4)
