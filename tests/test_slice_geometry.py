import pytest

from widgetkit.charting import Slice, build_path, inner_radius_for
from widgetkit.charting.geometry import format_number, point_on_circle


def test_pie_quarter_exact_path():
    assert build_path(0, 90, 90, 0) == "M 100 100 L 190 100 A 90 90 0 0 1 100 190 Z"


def test_donut_quarter_exact_path():
    assert build_path(0, 90, 90, 70) == (
        "M 190 100 A 90 90 0 0 1 100 190 L 100 170 A 70 70 0 0 0 170 100 Z"
    )


def test_pie_path_starts_at_center():
    path = build_path(0, 90, 90, 0)
    assert path.startswith("M 100 100")
    assert "A 90 90" in path
    assert "A 70 70" not in path


def test_donut_path_does_not_start_at_center():
    path = build_path(0, 60, 90, 70)
    assert not path.startswith("M 100 100")
    assert "A 90 90" in path
    assert "A 70 70" in path
    assert path.endswith(" Z")


def test_large_arc_flag():
    assert "A 90 90 0 1 1" in build_path(0, 270, 90, 0)
    assert "A 90 90 0 0 1" in build_path(0, 180, 90, 0)
    assert "A 90 90 0 0 1" in build_path(0, 179.9, 90, 0)


def test_inner_arc_shares_flag_and_reverses_winding():
    path = build_path(30, 200, 90, 70)
    assert "A 90 90 0 1 1" in path
    assert "A 70 70 0 1 0" in path


def test_full_circle_donut_uses_two_arcs_per_radius():
    path = build_path(0, 360, 90, 70)
    assert path.count("A 90 90") == 2
    assert path.count("A 70 70") == 2


def test_full_circle_pie_uses_two_outer_arcs():
    path = build_path(0, 360, 90, 0)
    assert path.count("A 90 90") == 2
    assert path.startswith("M 100 100 L 190 100")


def test_pie_endpoints_match_circle_points():
    x2, y2 = point_on_circle(90, 45 + 60)
    assert build_path(45, 60, 90, 0).endswith(f"{format_number(x2)} {format_number(y2)} Z")


def test_format_number():
    assert format_number(100.0) == "100"
    assert format_number(70) == "70"
    assert format_number(12.5) == "12.5"


def test_inner_radius_for():
    assert inner_radius_for(False, 20) == 0
    assert inner_radius_for(True, 20) == 70
    assert inner_radius_for(True, 200) == 0
    assert inner_radius_for(True, -10) == 100


def test_slice_derives_path_and_metadata():
    s = Slice("Test", 10, 0, 90, 90, 70, "#FF0000")
    assert s.label == "Test"
    assert s.value == 10
    assert s.color == "#FF0000"
    assert s.css_class == "donut-slice"
    assert s.end_angle == 90
    assert s.path_data == build_path(0, 90, 90, 70)


def test_slice_is_immutable():
    s = Slice("Test", 10, 0, 90, 90, 0, "#FF0000")
    with pytest.raises(AttributeError):
        s.value = 11
