"""SVG 1.0 キーワードカラー定数。

http://www.w3.org/TR/SVG/types.html#ColorKeywords
全て sRGB / U8 の Srgb 値。
"""

from __future__ import annotations

from colorgraph.domain.channel import Channel
from colorgraph.domain.rgb import Srgb


def _u8(r: int, g: int, b: int) -> Srgb:
    return Srgb(r, g, b, channel=Channel.U8)


NAMED_COLORS: dict[str, Srgb] = {
    "aliceblue": _u8(0xF0, 0xF8, 0xFF),
    "antiquewhite": _u8(0xFA, 0xEB, 0xD7),
    "aqua": _u8(0x00, 0xFF, 0xFF),
    "aquamarine": _u8(0x7F, 0xFF, 0xD4),
    "azure": _u8(0xF0, 0xFF, 0xFF),
    "beige": _u8(0xF5, 0xF5, 0xDC),
    "bisque": _u8(0xFF, 0xE4, 0xC4),
    "black": _u8(0x00, 0x00, 0x00),
    "blanchedalmond": _u8(0xFF, 0xEB, 0xCD),
    "blue": _u8(0x00, 0x00, 0xFF),
    "blueviolet": _u8(0x8A, 0x2B, 0xE2),
    "brown": _u8(0xA5, 0x2A, 0x2A),
    "burlywood": _u8(0xDE, 0xB8, 0x87),
    "cadetblue": _u8(0x5F, 0x9E, 0xA0),
    "chartreuse": _u8(0x7F, 0xFF, 0x00),
    "chocolate": _u8(0xD2, 0x69, 0x1E),
    "coral": _u8(0xFF, 0x7F, 0x50),
    "cornflowerblue": _u8(0x64, 0x95, 0xED),
    "cornsilk": _u8(0xFF, 0xF8, 0xDC),
    "crimson": _u8(0xDC, 0x14, 0x3C),
    "cyan": _u8(0x00, 0xFF, 0xFF),
    "darkblue": _u8(0x00, 0x00, 0x8B),
    "darkcyan": _u8(0x00, 0x8B, 0x8B),
    "darkgoldenrod": _u8(0xB8, 0x86, 0x0B),
    "darkgray": _u8(0xA9, 0xA9, 0xA9),
    "darkgreen": _u8(0x00, 0x64, 0x00),
    "darkkhaki": _u8(0xBD, 0xB7, 0x6B),
    "darkmagenta": _u8(0x8B, 0x00, 0x8B),
    "darkolivegreen": _u8(0x55, 0x6B, 0x2F),
    "darkorange": _u8(0xFF, 0x8C, 0x00),
    "darkorchid": _u8(0x99, 0x32, 0xCC),
    "darkred": _u8(0x8B, 0x00, 0x00),
    "darksalmon": _u8(0xE9, 0x96, 0x7A),
    "darkseagreen": _u8(0x8F, 0xBC, 0x8F),
    "darkslateblue": _u8(0x48, 0x3D, 0x8B),
    "darkslategray": _u8(0x2F, 0x4F, 0x4F),
    "darkturquoise": _u8(0x00, 0xCE, 0xD1),
    "darkviolet": _u8(0x94, 0x00, 0xD3),
    "deeppink": _u8(0xFF, 0x14, 0x93),
    "deepskyblue": _u8(0x00, 0xBF, 0xFF),
    "dimgray": _u8(0x69, 0x69, 0x69),
    "dodgerblue": _u8(0x1E, 0x90, 0xFF),
    "firebrick": _u8(0xB2, 0x22, 0x22),
    "floralwhite": _u8(0xFF, 0xFA, 0xF0),
    "forestgreen": _u8(0x22, 0x8B, 0x22),
    "fuchsia": _u8(0xFF, 0x00, 0xFF),
    "gainsboro": _u8(0xDC, 0xDC, 0xDC),
    "ghostwhite": _u8(0xF8, 0xF8, 0xFF),
    "gold": _u8(0xFF, 0xD7, 0x00),
    "goldenrod": _u8(0xDA, 0xA5, 0x20),
    "gray": _u8(0x80, 0x80, 0x80),
    "green": _u8(0x00, 0x80, 0x00),
    "greenyellow": _u8(0xAD, 0xFF, 0x2F),
    "honeydew": _u8(0xF0, 0xFF, 0xF0),
    "hotpink": _u8(0xFF, 0x69, 0xB4),
    "indianred": _u8(0xCD, 0x5C, 0x5C),
    "indigo": _u8(0x4B, 0x00, 0x82),
    "ivory": _u8(0xFF, 0xFF, 0xF0),
    "khaki": _u8(0xF0, 0xE6, 0x8C),
    "lavender": _u8(0xE6, 0xE6, 0xFA),
    "lavenderblush": _u8(0xFF, 0xF0, 0xF5),
    "lawngreen": _u8(0x7C, 0xFC, 0x00),
    "lemonchiffon": _u8(0xFF, 0xFA, 0xCD),
    "lightblue": _u8(0xAD, 0xD8, 0xE6),
    "lightcoral": _u8(0xF0, 0x80, 0x80),
    "lightcyan": _u8(0xE0, 0xFF, 0xFF),
    "lightgoldenrodyellow": _u8(0xFA, 0xFA, 0xD2),
    "lightgreen": _u8(0x90, 0xEE, 0x90),
    "lightgrey": _u8(0xD3, 0xD3, 0xD3),
    "lightpink": _u8(0xFF, 0xB6, 0xC1),
    "lightsalmon": _u8(0xFF, 0xA0, 0x7A),
    "lightseagreen": _u8(0x20, 0xB2, 0xAA),
    "lightskyblue": _u8(0x87, 0xCE, 0xFA),
    "lightslategray": _u8(0x77, 0x88, 0x99),
    "lightsteelblue": _u8(0xB0, 0xC4, 0xDE),
    "lightyellow": _u8(0xFF, 0xFF, 0xE0),
    "lime": _u8(0x00, 0xFF, 0x00),
    "limegreen": _u8(0x32, 0xCD, 0x32),
    "linen": _u8(0xFA, 0xF0, 0xE6),
    "magenta": _u8(0xFF, 0x00, 0xFF),
    "maroon": _u8(0x80, 0x00, 0x00),
    "mediumaquamarine": _u8(0x66, 0xCD, 0xAA),
    "mediumblue": _u8(0x00, 0x00, 0xCD),
    "mediumorchid": _u8(0xBA, 0x55, 0xD3),
    "mediumpurple": _u8(0x93, 0x70, 0xDB),
    "mediumseagreen": _u8(0x3C, 0xB3, 0x71),
    "mediumslateblue": _u8(0x7B, 0x68, 0xEE),
    "mediumspringgreen": _u8(0x00, 0xFA, 0x9A),
    "mediumturquoise": _u8(0x48, 0xD1, 0xCC),
    "mediumvioletred": _u8(0xC7, 0x15, 0x85),
    "midnightblue": _u8(0x19, 0x19, 0x70),
    "mintcream": _u8(0xF5, 0xFF, 0xFA),
    "mistyrose": _u8(0xFF, 0xE4, 0xE1),
    "moccasin": _u8(0xFF, 0xE4, 0xB5),
    "navajowhite": _u8(0xFF, 0xDE, 0xAD),
    "navy": _u8(0x00, 0x00, 0x80),
    "oldlace": _u8(0xFD, 0xF5, 0xE6),
    "olive": _u8(0x80, 0x80, 0x00),
    "olivedrab": _u8(0x6B, 0x8E, 0x23),
    "orange": _u8(0xFF, 0xA5, 0x00),
    "orangered": _u8(0xFF, 0x45, 0x00),
    "orchid": _u8(0xDA, 0x70, 0xD6),
    "palegoldenrod": _u8(0xEE, 0xE8, 0xAA),
    "palegreen": _u8(0x98, 0xFB, 0x98),
    "palevioletred": _u8(0xDB, 0x70, 0x93),
    "papayawhip": _u8(0xFF, 0xEF, 0xD5),
    "peachpuff": _u8(0xFF, 0xDA, 0xB9),
    "peru": _u8(0xCD, 0x85, 0x3F),
    "pink": _u8(0xFF, 0xC0, 0xCB),
    "plum": _u8(0xDD, 0xA0, 0xDD),
    "powderblue": _u8(0xB0, 0xE0, 0xE6),
    "purple": _u8(0x80, 0x00, 0x80),
    "red": _u8(0xFF, 0x00, 0x00),
    "rosybrown": _u8(0xBC, 0x8F, 0x8F),
    "royalblue": _u8(0x41, 0x69, 0xE1),
    "saddlebrown": _u8(0x8B, 0x45, 0x13),
    "salmon": _u8(0xFA, 0x80, 0x72),
    "sandybrown": _u8(0xFA, 0xA4, 0x60),
    "seagreen": _u8(0x2E, 0x8B, 0x57),
    "seashell": _u8(0xFF, 0xF5, 0xEE),
    "sienna": _u8(0xA0, 0x52, 0x2D),
    "silver": _u8(0xC0, 0xC0, 0xC0),
    "skyblue": _u8(0x87, 0xCE, 0xEB),
    "slateblue": _u8(0x6A, 0x5A, 0xCD),
    "slategray": _u8(0x70, 0x80, 0x90),
    "snow": _u8(0xFF, 0xFA, 0xFA),
    "springgreen": _u8(0x00, 0xFF, 0x7F),
    "steelblue": _u8(0x46, 0x82, 0xB4),
    "tan": _u8(0xD2, 0xB4, 0x8C),
    "teal": _u8(0x00, 0x80, 0x80),
    "thistle": _u8(0xD8, 0xBF, 0xD8),
    "tomato": _u8(0xFF, 0x63, 0x47),
    "turquoise": _u8(0x40, 0xE0, 0xD0),
    "violet": _u8(0xEE, 0x82, 0xEE),
    "wheat": _u8(0xF5, 0xDE, 0xB3),
    "white": _u8(0xFF, 0xFF, 0xFF),
    "whitesmoke": _u8(0xF5, 0xF5, 0xF5),
    "yellow": _u8(0xFF, 0xFF, 0x00),
    "yellowgreen": _u8(0x9A, 0xCD, 0x32),
}


def named_color(name: str) -> Srgb:
    """キーワード名から色を取得。大文字小文字・空白・ハイフンは無視。

    Raises:
        KeyError: 未知の色名
    """
    key = "".join(name.split()).replace("-", "").lower()
    try:
        return NAMED_COLORS[key]
    except KeyError:
        raise KeyError(f"unknown color name: {name!r}") from None
