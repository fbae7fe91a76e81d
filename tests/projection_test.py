import math
import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from pseudo3d.geometry.Axis import Axis
from pseudo3d.geometry.Offset import Offset
from pseudo3d.geometry.Point3D import Point3D
from pseudo3d.projection.ProjectionEngine import ProjectionEngine, project
from pseudo3d.projection.ProjectionMode import CANONICAL_MODE, ProjectionMode
from pseudo3d.projection.projection_constants import ISOMETRIC_SCALE


ANGLES = [0.0, 0.3, math.pi / 2, 2.5, math.pi, 4.0, 2 * math.pi - 0.01, -1.2, 17.0]
DISTANCES = [0.0, 18.0, 50.0, 100.0, -30.0, 1e6]


@pytest.fixture
def points():
    return [
        Point3D(5, 0, 0),
        Point3D(0, 5, 0),
        Point3D(0, 0, 5),
        Point3D(-3.5, 2.25, 1.0),
        Point3D(32, -32, 0),
        Point3D(0.1, 0.2, -0.3),
    ]


@pytest.fixture
def flat_engine():
    return ProjectionEngine(ProjectionMode(perspective=False))


def test_project_is_deterministic(points):
    for p in points:
        for angle in ANGLES:
            for d in DISTANCES:
                assert project(p, angle, d) == project(p, angle, d)


def test_origin_maps_to_origin():
    for angle in ANGLES:
        for d in DISTANCES:
            assert project(Point3D.Zero, angle, d) == Offset(0, 0)


def test_rotation_is_periodic(points):
    for p in points:
        for angle in ANGLES:
            a = project(p, angle, 50.0)
            b = project(p, angle + 2 * math.pi, 50.0)
            assert a.x == pytest.approx(b.x, abs=1e-9)
            assert a.y == pytest.approx(b.y, abs=1e-9)


def test_zero_distance_disables_perspective(points, flat_engine):
    for p in points:
        for angle in ANGLES:
            assert project(p, angle, 0.0) == flat_engine.project(p, angle, 0.0)
            assert project(p, angle, 0.0) == flat_engine.project(p, angle, 50.0)


def test_perspective_off_ignores_distance(points, flat_engine):
    for p in points:
        assert flat_engine.project(p, 0.7, 18.0) == flat_engine.project(p, 0.7, 100.0)


def test_x_axis_end_at_zero_rotation():
    o = project(Point3D(5, 0, 0), 0.0, 50.0)
    radio = 50.0 / (50.0 - 5 * math.sin(math.pi / 6))
    assert o.x == pytest.approx(5 * math.cos(math.pi / 6) * 32 * radio, rel=1e-12)
    assert o.y == pytest.approx(-(5 * math.sin(math.pi / 6)) * 32 * radio, rel=1e-12)
    assert o.x == pytest.approx(145.9, abs=0.1)
    assert o.y == pytest.approx(-84.2, abs=0.1)


def test_y_axis_end_at_quarter_turn():
    o = project(Point3D(0, 5, 0), math.pi / 2, 50.0)
    radio = 50.0 / 52.5
    assert o.x == pytest.approx(-5 * math.cos(math.pi / 6) * 32 * radio, rel=1e-9)
    assert o.y == pytest.approx(2.5 * 32 * radio, rel=1e-9)
    # Mirror of the X axis case, pulled in by the smaller ratio
    mirrored = project(Point3D(5, 0, 0), 0.0, 50.0)
    assert abs(o.x) < abs(mirrored.x)
    assert o.x < 0 < o.y


def test_isometric_angle_is_not_rounded():
    # Rounding the half-angle to whole degrees would move this point noticeably
    o = ProjectionEngine(ProjectionMode(perspective=False)).project(Point3D(1, 0, 0), 0.0, 0.0)
    assert o.x == pytest.approx(math.sqrt(3) / 2 * ISOMETRIC_SCALE, rel=1e-12)
    assert o.y == pytest.approx(-0.5 * ISOMETRIC_SCALE, rel=1e-12)


def test_z_moves_straight_up():
    o = project(Point3D(0, 0, 5), 1.234, 0.0)
    assert o.x == 0
    assert o.y == pytest.approx(5 * ISOMETRIC_SCALE)


def test_singularity_propagates_infinity():
    # At rotation 0, (1, -1, -50) has projected depth exactly 50
    o = project(Point3D(1, -1, -50), 0.0, 50.0)
    assert o.x == math.inf
    assert o.y == -math.inf
    assert not o.is_finite


def test_singularity_with_zero_x_gives_nan():
    o = project(Point3D(0, 0, -50), 0.0, 50.0)
    assert math.isnan(o.x)
    assert o.y == -math.inf


def test_singularity_sign_follows_distance():
    o = project(Point3D(1, -1, 50), 0.0, -50.0)
    assert o.x == -math.inf
    assert o.y == -math.inf


def test_max_ratio_clamps_singularity():
    engine = ProjectionEngine(ProjectionMode(max_ratio=10.0))
    o = engine.project(Point3D(1, -1, -50), 0.0, 50.0)
    assert o.is_finite
    assert o.x == pytest.approx(2 * math.cos(math.pi / 6) * ISOMETRIC_SCALE * 10.0)
    assert o.y == pytest.approx(-50 * ISOMETRIC_SCALE * 10.0)


def test_max_ratio_leaves_small_ratios_alone():
    clamped = ProjectionEngine(ProjectionMode(max_ratio=10.0))
    p = Point3D(5, 0, 0)
    assert clamped.project(p, 0.0, 50.0) == project(p, 0.0, 50.0)


def test_max_ratio_must_be_positive():
    with pytest.raises(ValueError):
        ProjectionMode(max_ratio=0.0)


def test_mode_accepts_any_axis_collection():
    mode = ProjectionMode(rotation_axes={Axis.X, Axis.Z})
    assert mode.rotation_axes == frozenset({Axis.X, Axis.Z})


def test_no_rotation_front_view():
    engine = ProjectionEngine(
        ProjectionMode(rotation_axes=frozenset(), isometric=False, perspective=False, scale=40.0)
    )
    for angle in ANGLES:
        assert engine.project(Point3D(1, 2, 3), angle, 50.0) == Offset(40.0, -80.0)


def test_rotation_about_x():
    engine = ProjectionEngine(
        ProjectionMode(rotation_axes=frozenset({Axis.X}), isometric=False, perspective=False, scale=40.0)
    )
    o = engine.project(Point3D(0, 0, 5), 0.0, 0.0, rotation_x=math.pi / 2)
    assert o.x == 0
    assert o.y == pytest.approx(200.0)


def test_rotation_about_y_moves_z_into_x():
    engine = ProjectionEngine(
        ProjectionMode(rotation_axes=frozenset({Axis.Y}), isometric=False, perspective=False, scale=40.0)
    )
    o = engine.project(Point3D(0, 0, 5), 0.0, 0.0, rotation_y=math.pi / 2)
    assert o.x == pytest.approx(200.0)
    assert o.y == pytest.approx(0.0, abs=1e-12)


def test_unlisted_axes_ignore_their_angle():
    p = Point3D(-3.5, 2.25, 1.0)
    assert ProjectionEngine(CANONICAL_MODE).project(p, 0.4, 50.0, rotation_x=1.0, rotation_y=2.0) == project(
        p, 0.4, 50.0
    )


def test_project_array_matches_scalar(points):
    engine = ProjectionEngine(CANONICAL_MODE)
    arr = np.array([p.as_tuple() for p in points])
    for angle in ANGLES:
        for d in DISTANCES:
            out = engine.project_array(arr, angle, d)
            assert out.shape == (len(points), 2)
            for row, p in zip(out, points):
                o = engine.project(p, angle, d)
                assert row[0] == pytest.approx(o.x, rel=1e-12, abs=1e-12)
                assert row[1] == pytest.approx(o.y, rel=1e-12, abs=1e-12)


def test_project_array_all_rotation_axes():
    engine = ProjectionEngine(
        ProjectionMode(rotation_axes=frozenset(Axis), isometric=False, perspective=True, scale=40.0)
    )
    p = Point3D(1.5, -2.0, 0.75)
    out = engine.project_array(np.array([p.as_tuple()]), 0.3, 25.0, rotation_x=0.5, rotation_y=1.1)
    o = engine.project(p, 0.3, 25.0, rotation_x=0.5, rotation_y=1.1)
    assert out[0, 0] == pytest.approx(o.x)
    assert out[0, 1] == pytest.approx(o.y)


def test_project_array_singularity():
    engine = ProjectionEngine(CANONICAL_MODE)
    out = engine.project_array(np.array([[1.0, -1.0, -50.0], [5.0, 0.0, 0.0]]), 0.0, 50.0)
    assert out[0, 0] == np.inf
    assert out[0, 1] == -np.inf
    assert np.isfinite(out[1]).all()


def test_project_array_clamps():
    engine = ProjectionEngine(ProjectionMode(max_ratio=10.0))
    out = engine.project_array(np.array([[1.0, -1.0, -50.0]]), 0.0, 50.0)
    assert out[0, 1] == pytest.approx(-50 * ISOMETRIC_SCALE * 10.0)
