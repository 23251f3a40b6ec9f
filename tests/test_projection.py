import math

import pytest

from tripviz.geometry import Bounds, compute_bounds, make_projection


def test_compute_bounds_of_two_points():
    bounds = compute_bounds([(40.0, -74.0), (40.8, -73.0)])

    assert bounds == Bounds(min_lat=40.0, max_lat=40.8, min_lng=-74.0, max_lng=-73.0)
    assert bounds.lat_range == pytest.approx(0.8)
    assert bounds.lng_range == pytest.approx(1.0)


def test_zero_range_is_replaced_by_one():
    bounds = compute_bounds([(10.0, 20.0), (10.0, 20.0)])

    assert bounds.lat_range == 1
    assert bounds.lng_range == 1


def test_compute_bounds_rejects_empty_input():
    with pytest.raises(ValueError):
        compute_bounds([])


def test_corners_map_to_padded_edges():
    project = make_projection(
        [(40.0, -74.0), (40.8, -73.0)], width=600, height=400, padding=40
    )

    # North-west corner is top-left, south-east corner is bottom-right
    assert project(40.8, -74.0) == pytest.approx((40, 40))
    assert project(40.0, -73.0) == pytest.approx((560, 360))


def test_latitude_is_inverted():
    project = make_projection([(0.0, 0.0), (1.0, 1.0)], 200, 200, 10)

    _, y_south = project(0.0, 0.5)
    _, y_north = project(1.0, 0.5)

    assert y_north < y_south


def test_projected_points_stay_inside_padded_rectangle():
    points = [(6.52, 3.37), (7.37, 3.94), (8.1, 5.2), (9.07, 7.39), (7.9, 4.6)]
    width, height, padding = 600, 400, 40
    project = make_projection(points, width, height, padding)

    for x, y in project.project_all(points):
        assert padding - 1e-9 <= x <= width - padding + 1e-9
        assert padding - 1e-9 <= y <= height - padding + 1e-9


def test_single_point_is_deterministic():
    project = make_projection([(51.5, -0.12)], 600, 400, 40)

    first = project(51.5, -0.12)
    second = project(51.5, -0.12)

    assert first == second
    assert first == (40, 40)
    assert all(math.isfinite(v) for v in first)


def test_point_outside_bounds_projects_outside_padding():
    project = make_projection([(0.0, 0.0), (1.0, 1.0)], 100, 100, 10)

    x, y = project(2.0, 2.0)

    assert x > 90
    assert y < 10
    assert not project.bounds.contains(2.0, 2.0)
