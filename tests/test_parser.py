"""Tests for the d-string parser."""

import warnings

import pytest

from svgpathxform.errors import PathGrammarWarning, DegenerateArcWarning
from svgpathxform.parser import PathParser, parse_path, transform_d
from svgpathxform.path import (Line, QuadraticBezier, SmoothQuadraticBezier,
                               CubicBezier, SmoothCubicBezier, Arc)
from svgpathxform.transform import Matrix

from tests.conftest import ROUND_TRIP_DS


def test_axis_optimization():
    path = parse_path("M0,0 L0,10")
    assert path.d() == "M0,0 V10 "
    assert path.d(relative=True) == "M0,0 v10 "


def test_implicit_lineto_after_moveto():
    path = parse_path("M0,0 5,5 10,10")
    assert len(path) == 1
    assert path[0].start == 0j
    assert list(path[0]) == [Line(5 + 5j), Line(10 + 10j)]


def test_implicit_relative_lineto_after_moveto():
    path = parse_path("m1,1 2,2")
    assert path[0].start == 1 + 1j
    assert list(path[0]) == [Line(3 + 3j)]


def test_close_and_reopen():
    path = parse_path("M0,0 L10,0 L10,10 Z L0,20")
    assert len(path) == 2
    first, second = path
    assert first.closed
    assert list(first) == [Line(10), Line(10 + 10j), Line(0j)]
    assert second.start == 0j
    assert not second.closed
    assert list(second) == [Line(20j)]
    assert path.d() == "M0,0 H10 V10 L0,0 M0,0 V20 "
    assert path.d(relative=True) == "M0,0 h10 v10 l-10,-10 M0,0 v20 "


def test_numbers_after_closepath_are_ignored():
    path = parse_path("M0,0 L1,0 Z 5 L0,1")
    assert len(path) == 2
    assert list(path[1]) == [Line(1j)]


def test_subpaths_in_document_order():
    path = parse_path("M0,0 L1,0 M5,5 L6,5")
    assert [sp.start for sp in path] == [0j, 5 + 5j]
    assert path.d() == "M0,0 H1 M5,5 H6 "


def test_subpath_without_segments_is_dropped():
    path = parse_path("M0,0 M5,5 L6,6")
    assert len(path) == 1
    assert path[0].start == 5 + 5j
    assert len(parse_path("M0,0")) == 0
    assert parse_path("M0,0").d() == ""
    assert len(parse_path("M0,0 L1,1 Z Z")) == 1


def test_horizontal_and_vertical_lines():
    path = parse_path("M1,2 h3 v4 H0 V0")
    assert list(path[0]) == [Line(4 + 2j), Line(4 + 6j), Line(6j), Line(0j)]


def test_glued_numbers():
    path = parse_path("M1-2L.5.5")
    assert path[0].start == 1 - 2j
    assert list(path[0]) == [Line(0.5 + 0.5j)]


def test_curves_keep_their_letters():
    path = parse_path("M0,0 C1,1 2,0 3,1 S4,2 5,1")
    assert list(path[0]) == [CubicBezier(1 + 1j, 2, 3 + 1j),
                             SmoothCubicBezier(4 + 2j, 5 + 1j)]
    assert path.d() == "M0,0 C1,1 2,0 3,1 S4,2 5,1 "


def test_relative_curves():
    path = parse_path("M10,10 c1,1 2,2 3,0 s1,1 2,0 q1,1 2,0 t2,0")
    assert list(path[0]) == [CubicBezier(11 + 11j, 12 + 12j, 13 + 10j),
                             SmoothCubicBezier(14 + 11j, 15 + 10j),
                             QuadraticBezier(16 + 11j, 17 + 10j),
                             SmoothQuadraticBezier(19 + 10j)]


def test_reflected_control_point():
    parser = PathParser()
    parser.parse("M0,0 Q1,1 2,0")
    assert parser.reflected_control('quadratic') == 3 - 1j
    # not the same family: no reflection
    assert parser.reflected_control('cubic') == 2

    parser.parse("M0,0 Q1,1 2,0 T4,0")
    # the control point of T is itself reflected by the next T
    assert parser.reflected_control('quadratic') == 5 + 1j

    parser.parse("M0,0 Q1,1 2,0 L4,0")
    assert parser.reflected_control('quadratic') == 4


def test_arc():
    path = parse_path("M0,0 A5,3 30 1 0 10,4")
    assert list(path[0]) == [Arc(5 + 3j, 30, True, False, 10 + 4j)]


def test_arc_negative_radii():
    path = parse_path("M0,0 a-5,-3 0 0 1 10,0")
    assert path[0][0].radius == 5 + 3j


def test_arc_compact_flags():
    path = parse_path("M0,0 a5,5 0 1110,10")
    assert list(path[0]) == [Arc(5 + 5j, 0, True, True, 10 + 10j)]
    path = parse_path("M0,0 A5 5 0 0110 10")
    assert list(path[0]) == [Arc(5 + 5j, 0, False, True, 10 + 10j)]


def test_arc_rotation_follows_the_transform():
    path = parse_path("M0,0 A5,3 0 0 1 10,0", angle=90)
    arc = path[0][0]
    assert arc.radius == 5 + 3j
    assert arc.rotation == 90
    assert path.d() == "M0,0 A5,3 90 0 1 0,10 "

    path = parse_path("M0,0 A5,3 0 0 1 10,0", matrix=[0, 1, -1, 0, 0, 0])
    assert path[0][0].rotation == pytest.approx(90)
    assert path[0][0].radius == 5 + 3j


def test_matrix_angle_wins_over_disagreeing_angle():
    path = parse_path("M0,0 A5,3 0 0 1 10,0", matrix=[0, 1, -1, 0, 0, 0],
                      angle=45)
    assert path[0][0].rotation == pytest.approx(90)


def test_degenerate_arc_becomes_a_line():
    with pytest.warns(DegenerateArcWarning):
        path = parse_path("M0,0 A5,5 0 0 0 0,0")
    assert list(path[0]) == [Line(0j)]
    assert path.d() == "M0,0 V0 "

    with pytest.warns(DegenerateArcWarning):
        path = parse_path("M0,0 A0,5 0 0 1 10,0")
    assert list(path[0]) == [Line(10)]


def test_transform_applies_to_every_point():
    path = parse_path("M1,1 C2,2 3,3 4,4", matrix=[2, 0, 0, 2, 1, 1])
    assert path[0].start == 3 + 3j
    assert list(path[0]) == [CubicBezier(5 + 5j, 7 + 7j, 9 + 9j)]
    assert path.bbox() == (3, 9, 3, 9)


def test_transform_with_matrix_object():
    path = parse_path("M0,0 L10,0", matrix=Matrix.translation(5, 5))
    assert path.d() == "M5,5 H15 "


def test_bbox_includes_control_points():
    path = parse_path("M0,0 Q5,-10 10,0")
    assert path.bbox() == (0, 10, -10, 0)


def test_unknown_command_skips_to_next_moveto():
    with pytest.warns(PathGrammarWarning):
        path = parse_path("M0,0 L10,0 X 5,5 L20,20 M30,30 L40,40")
    assert len(path) == 2
    assert list(path[0]) == [Line(10)]
    assert path[1].start == 30 + 30j
    assert list(path[1]) == [Line(40 + 40j)]


def test_command_before_moveto_is_ignored():
    with pytest.warns(PathGrammarWarning):
        path = parse_path("L5,5 M0,0 L1,1")
    assert len(path) == 1
    assert path[0].start == 0j
    assert list(path[0]) == [Line(1 + 1j)]


def test_incomplete_command_is_dropped():
    with pytest.warns(PathGrammarWarning):
        path = parse_path("M0,0 L10,0 C1,1 2")
    assert len(path) == 1
    assert list(path[0]) == [Line(10)]

    with pytest.warns(PathGrammarWarning):
        path = parse_path("M0,0 L10 H5")
    assert list(path[0]) == [Line(5)]


def test_malformed_numbers_are_zero():
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        path = parse_path("M0,0 L.,5")
    assert list(path[0]) == [Line(5j)]


def test_parser_is_reusable():
    parser = PathParser()
    first = parser.parse("M0,0 L1,1 M2,2 L3,3")
    second = parser.parse("M0,0 L1,1")
    assert len(first) == 2
    assert len(second) == 1


def test_parse_requires_a_string():
    with pytest.raises(TypeError):
        parse_path(None)


def test_transform_d():
    d, bbox = transform_d("M0,0 L10,0", angle=90)
    assert d == "M0,0 V10 "
    assert bbox == (0, 0, 0, 10)
    d, _ = transform_d("M0,0 L10,0", angle=90, relative=True)
    assert d == "M0,0 v10 "


def _outline(path):
    return [(subpath.start, list(subpath)) for subpath in path]


@pytest.mark.parametrize('d', ROUND_TRIP_DS)
def test_round_trip(d):
    path = parse_path(d)
    assert _outline(parse_path(path.d())) == _outline(path)


@pytest.mark.parametrize('d', ROUND_TRIP_DS)
def test_absolute_output_is_a_fixed_point(d):
    out = parse_path(d).d()
    assert parse_path(out).d() == out


@pytest.mark.parametrize('d', ROUND_TRIP_DS)
def test_relative_output_is_a_fixed_point(d):
    out = parse_path(d).d(relative=True)
    assert parse_path(out).d(relative=True) == out


def test_relative_round_trip(every_command_d):
    path = parse_path(every_command_d)
    assert _outline(parse_path(path.d(relative=True))) == _outline(path)
    assert path.d() == ("M10,10 H15 V15 H0 V0 L10,10 "
                        "M15,15 Q16,16 17,15 T19,15 C20,16 21,17 22,15 "
                        "S23,16 24,15 A3,4 10 1 0 29,20 L27,18 ")


def test_oversized_number_is_zero():
    path = parse_path("M" + "9" * 400 + ",0 L1,1")
    assert path[0].start == 0j
    assert list(path[0]) == [Line(1 + 1j)]


def test_dangling_exponent_marker_is_a_command():
    # "1e" is the number 1 followed by the letter e
    with pytest.warns(PathGrammarWarning):
        path = parse_path("M1e L5,5")
    assert len(path) == 0

    with pytest.warns(PathGrammarWarning):
        path = parse_path("M0,0 L1,1 L2e,3 M4,4 L5,5")
    assert _outline(path) == [(0j, [Line(1 + 1j)]), (4 + 4j, [Line(5 + 5j)])]


def test_huge_coordinates_are_written_in_full():
    path = parse_path("M1e308,0 L0,0")
    big = str(int(1e308))
    assert path.d() == "M{},0 H0 ".format(big)
    assert path.d(relative=True) == "M{},0 h-{} ".format(big, big)

    path = parse_path("M1,1 L2,1", matrix=[1e306, 0, 0, 1, 0, 0])
    assert path.d().startswith("M{},1 H".format(str(int(1e306))))


@pytest.mark.parametrize('parse, d, category', [
    (parse_path, "M0,0 X1", PathGrammarWarning),
    (parse_path, "M0,0 L1", PathGrammarWarning),
    (PathParser().parse, "L1,1 M0,0 L1,1", PathGrammarWarning),
    (PathParser().parse, "M0,0 A0,0 0 0 0 1,1", DegenerateArcWarning),
    (transform_d, "M0,0 A5,5 0 0 0 0,0", DegenerateArcWarning),
])
def test_warnings_point_at_the_caller(parse, d, category):
    with pytest.warns(category) as record:
        parse(d)
    assert all(w.filename.endswith('test_parser.py') for w in record)
