"""SVG arc geometry for donut and pie slices.

Angles are degrees measured clockwise from the positive x axis (SVG's y axis
points down). The chart is drawn in a 200x200 box centred on (100, 100).

Path grammar:

    pie:   M cx cy L x1 y1 A R R 0 large 1 x2 y2 Z
    donut: M x1 y1 A R R 0 large 1 x2 y2 L x3 y3 A r r 0 large 0 x4 y4 Z

An SVG arc whose start and end points coincide renders nothing, so a full
360 degree slice is written as two half-circle arc commands per radius.
"""

from __future__ import annotations

import math
from typing import List

from widgetkit.config.settings import CHART_CENTER, OUTER_RADIUS

__all__ = [
    "FULL_CIRCLE",
    "build_path",
    "format_number",
    "inner_radius_for",
    "point_on_circle",
]

FULL_CIRCLE = 360.0


def format_number(value: float) -> str:
    """Shortest round-trip form; integral values carry no fractional part."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def inner_radius_for(is_donut: bool, thickness: int) -> int:
    if not is_donut:
        return 0
    return max(0, OUTER_RADIUS - thickness)


def point_on_circle(radius: float, angle_deg: float) -> tuple[float, float]:
    rad = angle_deg * math.pi / 180
    return (
        CHART_CENTER + radius * math.cos(rad),
        CHART_CENTER + radius * math.sin(rad),
    )


def _arc_commands(
    radius: float, from_deg: float, to_deg: float, sweep_deg: float, sweep_flag: int
) -> List[str]:
    """Arc command(s) ending at ``to_deg``; ``sweep_deg`` is the slice's sweep."""
    f = format_number
    if sweep_deg >= FULL_CIRCLE:
        steps = [(from_deg + to_deg) / 2, to_deg]
        large_arc = 0
    else:
        steps = [to_deg]
        large_arc = 1 if sweep_deg > 180 else 0
    out: List[str] = []
    for angle in steps:
        x, y = point_on_circle(radius, angle)
        out.append(f"A {f(radius)} {f(radius)} 0 {large_arc} {sweep_flag} {f(x)} {f(y)}")
    return out


def build_path(start_angle: float, sweep_angle: float, outer_r: float, inner_r: float) -> str:
    f = format_number
    end_angle = start_angle + sweep_angle
    x1, y1 = point_on_circle(outer_r, start_angle)
    outer = _arc_commands(outer_r, start_angle, end_angle, sweep_angle, 1)

    if inner_r <= 0:
        parts = [f"M {f(CHART_CENTER)} {f(CHART_CENTER)}", f"L {f(x1)} {f(y1)}", *outer]
        return " ".join(parts) + " Z"

    x3, y3 = point_on_circle(inner_r, end_angle)
    inner = _arc_commands(inner_r, end_angle, start_angle, sweep_angle, 0)
    parts = [f"M {f(x1)} {f(y1)}", *outer, f"L {f(x3)} {f(y3)}", *inner]
    return " ".join(parts) + " Z"
