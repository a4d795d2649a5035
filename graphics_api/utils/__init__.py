"""Utility helpers for the graphics query engine."""

from .svg import (
    apply_gradient_stops,
    bytes_to_data_uri,
    looks_like_svg,
    recolor_hex,
    replace_current_color,
    set_size,
    svg_to_base64_data_uri,
    svg_to_data_uri,
)

__all__ = [
    "apply_gradient_stops",
    "bytes_to_data_uri",
    "looks_like_svg",
    "recolor_hex",
    "replace_current_color",
    "set_size",
    "svg_to_base64_data_uri",
    "svg_to_data_uri",
]
