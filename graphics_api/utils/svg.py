"""SVG string helpers: recoloring, resizing and data URIs."""

from __future__ import annotations

import base64
import re
from typing import Optional
from urllib.parse import quote

_HEX_FILL_STYLE = re.compile(r"fill:\s*#[0-9a-fA-F]{6}")
_HEX_FILL_ATTR = re.compile(r'fill="#[0-9a-fA-F]{6}"')
_HEX_STROKE_STYLE = re.compile(r"stroke:\s*#[0-9a-fA-F]{6}")
_HEX_STROKE_ATTR = re.compile(r'stroke="#[0-9a-fA-F]{6}"')

_STOP1 = re.compile(r'class="stop1"[^>]*stop-color="[^"]+"')
_STOP2 = re.compile(r'class="stop2"[^>]*stop-color="[^"]+"')


def replace_current_color(svg: str, color: str) -> str:
    return svg.replace("currentColor", color)


def recolor_hex(svg: str, color: str) -> str:
    """Replace every six-digit hex fill and stroke, in attributes and styles."""
    svg = _HEX_FILL_STYLE.sub(f"fill: {color}", svg)
    svg = _HEX_FILL_ATTR.sub(f'fill="{color}"', svg)
    svg = _HEX_STROKE_STYLE.sub(f"stroke: {color}", svg)
    svg = _HEX_STROKE_ATTR.sub(f'stroke="{color}"', svg)
    return svg


def apply_gradient_stops(svg: str, primary: Optional[str] = None, secondary: Optional[str] = None) -> str:
    """Recolor IRA-style linearGradient stops tagged stop1/stop2."""
    if primary:
        svg = _STOP1.sub(f'class="stop1" stop-color="{primary}"', svg)
    if secondary:
        svg = _STOP2.sub(f'class="stop2" stop-color="{secondary}"', svg)
    return svg


def set_size(svg: str, size: int, current: str = r'[^"]*') -> str:
    """Rewrite the first width and height attributes."""
    svg = re.sub(rf'width="{current}"', f'width="{size}"', svg, count=1)
    svg = re.sub(rf'height="{current}"', f'height="{size}"', svg, count=1)
    return svg


def svg_to_data_uri(svg: str) -> str:
    """Percent-encoded SVG data URI."""
    return f"data:image/svg+xml,{quote(svg, safe='-_.!~*()')}"


def svg_to_base64_data_uri(svg: str) -> str:
    encoded = base64.b64encode(svg.encode("utf-8")).decode("ascii")
    return f"data:image/svg+xml;base64,{encoded}"


def bytes_to_data_uri(content: bytes, media_type: str) -> str:
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{media_type};base64,{encoded}"


def looks_like_svg(content: str, content_type: str = "") -> bool:
    return "svg" in content_type or content.lstrip().startswith("<svg")
