"""
===============================================================================
GEOMETRY TESTS
===============================================================================

Covers the vector algebra and the intersection tests:

1. VECTOR ALGEBRA
   - add/sub/scale/dot, rotation direction
   - normalize idempotence, zero vector fallback

2. MIRROR SEGMENTS
   - Endpoints and normal at rotation 0 and 90 degrees

3. RAY/SEGMENT INTERSECTION
   - Midpoint hit, parallel ray, off-segment and behind-the-ray misses

4. RAY/CIRCLE INTERSECTION
   - Hit through the center, miss, start inside, circle behind

Run with:
    python developer_tests/test_geometry.py

Or with pytest:
    pytest developer_tests/test_geometry.py -v
===============================================================================
"""

import sys
import math
from pathlib import Path

# Add the src-python directory to the path
src_path = Path(__file__).resolve().parents[2]
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from light_ray_toy.core.geometry import Vector2, geometry


TOLERANCE = 1e-9


def assert_close(actual, expected, tol=TOLERANCE, msg=""):
    """Assert that two values are close within tolerance."""
    if abs(actual - expected) > tol:
        raise AssertionError(
            f"{msg}: expected {expected}, got {actual} (diff: {abs(actual - expected)})"
        )


def assert_vec_close(actual, expected, tol=TOLERANCE, msg=""):
    assert_close(actual.x, expected.x, tol, f"{msg} (x)")
    assert_close(actual.y, expected.y, tol, f"{msg} (y)")


# =============================================================================
# VECTOR ALGEBRA
# =============================================================================

def test_basic_operations():
    a = Vector2(1.0, 2.0)
    b = Vector2(3.0, -4.0)

    assert geometry.add(a, b) == Vector2(4.0, -2.0)
    assert geometry.sub(a, b) == Vector2(-2.0, 6.0)
    assert geometry.scale(2.0, a) == Vector2(2.0, 4.0)
    assert geometry.dot(a, b) == -5.0
    assert geometry.cross(a, b) == -10.0
    assert_close(geometry.length(b), 5.0)
    # Operations return new values
    assert a == Vector2(1.0, 2.0)
    print("  add/sub/scale/dot/cross - PASS")


def test_vector_is_immutable():
    v = Vector2(1.0, 2.0)
    try:
        v.x = 5.0
    except AttributeError:
        pass
    else:
        raise AssertionError("Vector2 should be immutable")


def test_coerce():
    assert Vector2.coerce((1, 2)) == Vector2(1.0, 2.0)
    assert Vector2.coerce({'x': 3, 'y': 4}) == Vector2(3.0, 4.0)
    v = Vector2(5.0, 6.0)
    assert Vector2.coerce(v) is v
    for bad in ({'x': 1}, (1, 2, 3), 7):
        try:
            Vector2.coerce(bad)
        except ValueError:
            continue
        raise AssertionError(f"coerce({bad!r}) should raise ValueError")


def test_shapely_round_trip():
    v = Vector2(1.5, -2.5)
    assert Vector2.from_shapely(v.to_shapely()) == v
    assert v.to_dict() == {'x': 1.5, 'y': -2.5}


def test_normalize_idempotent():
    vectors = [
        Vector2(3.0, 4.0), Vector2(-1e-3, 2e-3), Vector2(1e6, -1e6),
        Vector2(0.0, -7.0), Vector2(0.3, 0.0),
    ]
    for v in vectors:
        once = geometry.normalize(v)
        twice = geometry.normalize(once)
        assert_close(geometry.length(once), 1.0, 1e-12, f"|normalize({v})|")
        assert_vec_close(twice, once, 1e-12, f"normalize idempotence for {v}")
    print("  normalize idempotence - PASS")


def test_normalize_zero_vector():
    zero = Vector2(0.0, 0.0)
    assert geometry.normalize(zero) == zero
    assert geometry.normalize(geometry.normalize(zero)) == zero


def test_rotate():
    rotated = geometry.rotate(Vector2(1.0, 0.0), math.pi / 2)
    assert_vec_close(rotated, Vector2(0.0, 1.0), 1e-12, "rotate +x by 90 deg")

    rotated = geometry.rotate(Vector2(2.0, 1.0), math.pi)
    assert_vec_close(rotated, Vector2(-2.0, -1.0), 1e-12, "rotate by 180 deg")

    v = Vector2(3.0, -4.0)
    assert_close(geometry.length(geometry.rotate(v, 1.234)), 5.0, 1e-12, "rotation keeps length")


# =============================================================================
# MIRROR SEGMENTS
# =============================================================================

def test_mirror_segment_unrotated():
    seg = geometry.mirror_segment(Vector2(10.0, 20.0), 0.0, 40.0)
    assert_vec_close(seg.p1, Vector2(-10.0, 20.0), msg="p1")
    assert_vec_close(seg.p2, Vector2(30.0, 20.0), msg="p2")
    assert_vec_close(seg.normal, Vector2(0.0, 1.0), msg="normal")


def test_mirror_segment_rotated():
    seg = geometry.mirror_segment(Vector2(10.0, 20.0), math.pi / 2, 40.0)
    assert_vec_close(seg.p1, Vector2(10.0, 0.0), 1e-9, "p1")
    assert_vec_close(seg.p2, Vector2(10.0, 40.0), 1e-9, "p2")
    # The normal is a direction: rotated but not translated
    assert_vec_close(seg.normal, Vector2(-1.0, 0.0), 1e-12, "normal")
    print("  mirror segment derivation - PASS")


# =============================================================================
# RAY/SEGMENT INTERSECTION
# =============================================================================

def test_segment_hit_at_midpoint():
    inter = geometry.ray_segment_intersection(
        Vector2(0.0, 0.0), Vector2(1.0, 0.0), Vector2(5.0, -1.0), Vector2(5.0, 1.0)
    )
    assert inter is not None
    assert_close(inter.u, 0.5, msg="u")
    assert_close(inter.t, 5.0, msg="t")
    assert inter.t > 0
    assert_vec_close(inter.point, Vector2(5.0, 0.0), msg="point")


def test_segment_hit_oblique():
    # Ray from (0, 0) toward the midpoint (10, 10) of a tilted segment
    direction = geometry.normalize(Vector2(1.0, 1.0))
    inter = geometry.ray_segment_intersection(
        Vector2(0.0, 0.0), direction, Vector2(8.0, 12.0), Vector2(12.0, 8.0)
    )
    assert inter is not None
    assert_close(inter.u, 0.5, 1e-9, "u")
    assert_close(inter.t, math.sqrt(200.0), 1e-9, "t")


def test_segment_parallel_ray():
    inter = geometry.ray_segment_intersection(
        Vector2(0.0, 0.0), Vector2(1.0, 0.0), Vector2(5.0, 1.0), Vector2(10.0, 1.0)
    )
    assert inter is None
    # Collinear is also parallel
    inter = geometry.ray_segment_intersection(
        Vector2(0.0, 0.0), Vector2(1.0, 0.0), Vector2(5.0, 0.0), Vector2(10.0, 0.0)
    )
    assert inter is None


def test_segment_miss_off_the_end():
    inter = geometry.ray_segment_intersection(
        Vector2(0.0, 5.0), Vector2(1.0, 0.0), Vector2(5.0, -1.0), Vector2(5.0, 1.0)
    )
    assert inter is None


def test_segment_behind_ray():
    inter = geometry.ray_segment_intersection(
        Vector2(10.0, 0.0), Vector2(1.0, 0.0), Vector2(5.0, -1.0), Vector2(5.0, 1.0)
    )
    assert inter is None
    print("  ray/segment misses - PASS")


# =============================================================================
# RAY/CIRCLE INTERSECTION
# =============================================================================

def test_circle_hit_through_center():
    inter = geometry.ray_circle_intersection(
        Vector2(0.0, 0.0), Vector2(1.0, 0.0), Vector2(100.0, 0.0), 10.0
    )
    assert inter is not None
    assert_close(inter.t, 90.0, 1e-9, "t = distance - radius")
    assert_vec_close(inter.point, Vector2(90.0, 0.0), 1e-9, "near-side point")
    assert_vec_close(inter.normal, Vector2(-1.0, 0.0), 1e-12, "outward normal")


def test_circle_miss():
    inter = geometry.ray_circle_intersection(
        Vector2(0.0, 0.0), Vector2(1.0, 0.0), Vector2(100.0, 20.0), 10.0
    )
    assert inter is None


def test_circle_behind_ray():
    inter = geometry.ray_circle_intersection(
        Vector2(0.0, 0.0), Vector2(1.0, 0.0), Vector2(-100.0, 0.0), 10.0
    )
    assert inter is None


def test_circle_from_inside_is_not_a_front_face_hit():
    # The far root exists, but the ray leaves along the outward normal there
    inter = geometry.ray_circle_intersection(
        Vector2(100.0, 0.0), Vector2(1.0, 0.0), Vector2(100.0, 0.0), 10.0
    )
    assert inter is None


def test_circle_min_advance():
    # Starting 0.005 outside the surface: the near root is inside the epsilon
    inter = geometry.ray_circle_intersection(
        Vector2(89.995, 0.0), Vector2(1.0, 0.0), Vector2(100.0, 0.0), 10.0, min_advance=0.01
    )
    assert inter is None
    inter = geometry.ray_circle_intersection(
        Vector2(89.995, 0.0), Vector2(1.0, 0.0), Vector2(100.0, 0.0), 10.0, min_advance=0.001
    )
    assert inter is not None
    assert_close(inter.t, 0.005, 1e-9, "t")
    print("  ray/circle intersection - PASS")


def main():
    """Run all geometry tests."""
    tests = [v for k, v in sorted(globals().items()) if k.startswith('test_') and callable(v)]
    failed = 0
    for test in tests:
        try:
            test()
            print(f"  [PASS] {test.__name__}")
        except AssertionError as e:
            failed += 1
            print(f"  [FAIL] {test.__name__}: {e}")
    print(f"\nResults: {len(tests) - failed}/{len(tests)} tests passed")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
