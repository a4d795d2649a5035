"""Tests for SVG string helpers."""

from graphics_api.utils.svg import (
    apply_gradient_stops,
    bytes_to_data_uri,
    looks_like_svg,
    recolor_hex,
    replace_current_color,
    set_size,
)


def test_replace_current_color_everywhere():
    svg = '<svg fill="currentColor"><path stroke="currentColor"/></svg>'
    assert replace_current_color(svg, "#000") == '<svg fill="#000"><path stroke="#000"/></svg>'


def test_recolor_hex_attributes_and_styles():
    svg = '<path fill="#AABBCC" stroke="#112233" style="fill:#abcdef;stroke: #123456"/>'
    assert recolor_hex(svg, "red") == '<path fill="red" stroke="red" style="fill: red;stroke: red"/>'


def test_recolor_hex_ignores_short_hex():
    svg = '<path fill="#fff"/>'
    assert recolor_hex(svg, "red") == svg


def test_set_size_rewrites_first_pair_only():
    svg = '<svg width="10" height="10"><rect width="10" height="10"/></svg>'
    assert set_size(svg, 64) == '<svg width="64" height="64"><rect width="10" height="10"/></svg>'


def test_set_size_with_expected_value():
    svg = '<svg width="20" height="24"/>'
    assert set_size(svg, 48, current="24") == '<svg width="20" height="48"/>'


def test_gradient_stops_only_when_given():
    svg = '<stop class="stop1" stop-color="#000"/><stop class="stop2" stop-color="#111"/>'
    assert apply_gradient_stops(svg, primary="#fff") == (
        '<stop class="stop1" stop-color="#fff"/><stop class="stop2" stop-color="#111"/>'
    )


def test_bytes_to_data_uri():
    assert bytes_to_data_uri(b"GIF89a", "image/gif") == "data:image/gif;base64,R0lGODlh"


def test_looks_like_svg():
    assert looks_like_svg("\n <svg/>")
    assert looks_like_svg("<?xml ?>", "image/svg+xml")
    assert not looks_like_svg("<html/>", "text/html")
