"""
Color conversions between hex, RGB and HSL.
"""

import re
from typing import Dict, Optional, Tuple

_HEX = re.compile(r'^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')
_RGB = re.compile(r'^rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*(?:,\s*[\d.]+\s*)?\)$', re.I)
_HSL = re.compile(r'^hsla?\(\s*(\d{1,3})\s*,\s*(\d{1,3})%\s*,\s*(\d{1,3})%\s*(?:,\s*[\d.]+\s*)?\)$', re.I)


def _clamp(value: float) -> int:
    return max(0, min(255, int(round(value))))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    return '#' + ''.join(f'{_clamp(c):02x}' for c in (r, g, b))


def hex_to_rgb(value: str) -> Optional[Tuple[int, int, int]]:
    match = _HEX.match(value.strip())
    if not match:
        return None
    digits = match.group(1)
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    number = int(digits, 16)
    return (number >> 16) & 255, (number >> 8) & 255, number & 255


def rgb_to_hsl(r: float, g: float, b: float) -> Tuple[int, int, int]:
    r, g, b = r / 255, g / 255, b / 255
    high, low = max(r, g, b), min(r, g, b)
    diff = high - low
    lightness = (high + low) / 2

    hue = saturation = 0.0
    if diff != 0:
        saturation = diff / (2 - high - low) if lightness > 0.5 else diff / (high + low)
        if high == r:
            hue = (g - b) / diff + (6 if g < b else 0)
        elif high == g:
            hue = (b - r) / diff + 2
        else:
            hue = (r - g) / diff + 4
        hue /= 6

    return int(round(hue * 360)), int(round(saturation * 100)), int(round(lightness * 100))


def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[int, int, int]:
    h, s, l = (h % 360) / 360, s / 100, l / 100
    if s == 0:
        grey = _clamp(l * 255)
        return grey, grey, grey

    def channel(p: float, q: float, t: float) -> float:
        t %= 1
        if t < 1 / 6:
            return p + (q - p) * 6 * t
        if t < 1 / 2:
            return q
        if t < 2 / 3:
            return p + (q - p) * (2 / 3 - t) * 6
        return p

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    return (_clamp(channel(p, q, h + 1 / 3) * 255),
            _clamp(channel(p, q, h) * 255),
            _clamp(channel(p, q, h - 1 / 3) * 255))


def parse_color(value: str) -> Optional[Tuple[int, int, int]]:
    """Parse hex, rgb() or hsl() notation into an RGB triple."""
    value = value.strip()
    rgb = hex_to_rgb(value)
    if rgb:
        return rgb

    match = _RGB.match(value)
    if match:
        return tuple(_clamp(int(c)) for c in match.groups())

    match = _HSL.match(value)
    if match:
        h, s, l = (int(c) for c in match.groups())
        return hsl_to_rgb(h, min(s, 100), min(l, 100))

    return None


def convert_color(value: str) -> Optional[Dict[str, str]]:
    """All three notations for a color, or None when it cannot be parsed."""
    rgb = parse_color(value)
    if rgb is None:
        return None
    h, s, l = rgb_to_hsl(*rgb)
    return {
        'hex': rgb_to_hex(*rgb),
        'rgb': f'rgb({rgb[0]}, {rgb[1]}, {rgb[2]})',
        'hsl': f'hsl({h}, {s}%, {l}%)',
    }
