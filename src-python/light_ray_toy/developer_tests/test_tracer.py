"""
===============================================================================
RAY TRACER TESTS
===============================================================================

The bounded bounce loop for a single (light, wavelength) trace:

1. FREE PROPAGATION
   - One segment spanning the whole length budget

2. MIRRORS
   - 90 degree redirection by a 45 degree mirror
   - Back faces do not reflect
   - The emitting obstacle is excluded

3. LIMITS
   - A closed ring of mirrors stops at the bounce limit
   - Two facing mirrors far apart stop at the length limit

4. PRISMS
   - Refraction angle per color

Run with:
    python developer_tests/test_tracer.py

Or with pytest:
    pytest developer_tests/test_tracer.py -v
===============================================================================
"""

import io
import sys
import math
from contextlib import redirect_stdout
from pathlib import Path

# Add the src-python directory to the path
src_path = Path(__file__).resolve().parents[2]
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from light_ray_toy.core.geometry import Vector2, geometry
from light_ray_toy.core.palette import PALETTE
from light_ray_toy.core.scene_objs import Light, Mirror, Prism, Target
from light_ray_toy.core.tracer import RayTracer, TraceTermination


TOLERANCE = 1e-6

ORIGIN = Vector2(100.0, 300.0)
PLUS_X = Vector2(1.0, 0.0)


def assert_close(actual, expected, tol=TOLERANCE, msg=""):
    """Assert that two values are close within tolerance."""
    if abs(actual - expected) > tol:
        raise AssertionError(
            f"{msg}: expected {expected}, got {actual} (diff: {abs(actual - expected)})"
        )


def mirror_ring():
    """Four mirrors facing inward around ORIGIN, 20 units away on each side."""
    return [
        Mirror('right', position=(120, 300), rotation=math.pi / 2, size=40),
        Mirror('left', position=(80, 300), rotation=-math.pi / 2, size=40),
        Mirror('top', position=(100, 280), rotation=0.0, size=40),
        Mirror('bottom', position=(100, 320), rotation=math.pi, size=40),
    ]


# =============================================================================
# FREE PROPAGATION
# =============================================================================

def test_no_obstacles_single_segment():
    tracer = RayTracer()
    for index in range(len(PALETTE)):
        result = tracer.trace(ORIGIN, PLUS_X, index, [])
        assert len(result.segments) == 1
        seg = result.segments[0]
        assert seg.start == ORIGIN
        assert_close(seg.end.x, 1100.0, msg="end x")
        assert_close(seg.end.y, 300.0, msg="end y")
        assert_close(seg.length, 1000.0, msg="length")
        assert seg.color == PALETTE[index].color
        assert seg.interaction_type == 'source'
        assert result.termination is TraceTermination.NO_HIT
        assert result.bounces == 0
    print("  free propagation - PASS")


def test_direction_is_normalized():
    result = RayTracer().trace(ORIGIN, Vector2(5.0, 0.0), 0, [])
    assert_close(result.segments[0].length, 1000.0, msg="length")


def test_lights_and_targets_do_not_block():
    objects = [
        Light('light2', position=(300, 300)),
        Target('target1', position=(500, 300), size=60),
    ]
    result = RayTracer().trace(ORIGIN, PLUS_X, 0, objects)
    assert len(result.segments) == 1
    assert_close(result.segments[0].length, 1000.0, msg="length")


# =============================================================================
# MIRRORS
# =============================================================================

def test_mirror_redirects_by_90_degrees():
    mirror = Mirror('m1', position=(400, 300), rotation=math.pi / 4, size=40)
    for index in range(len(PALETTE)):
        result = RayTracer().trace(ORIGIN, PLUS_X, index, [mirror])
        assert len(result.segments) == 2, f"expected 2 segments, got {len(result.segments)}"
        first, second = result.segments

        assert_close(first.end.x, 400.0, msg="hit x")
        assert_close(first.end.y, 300.0, msg="hit y")
        assert_close(geometry.dot(first.direction, second.direction), 0.0, 1e-9, "orthogonal")
        assert_close(second.direction.y, 1.0, 1e-9, "reflected toward +y")
        assert second.interaction_type == 'reflect'
        # Remaining budget after the 300-unit first leg
        assert_close(second.length, 700.0, msg="second length")
        assert result.termination is TraceTermination.NO_HIT
        assert result.bounces == 1
    print("  45 degree mirror - PASS")


def test_mirror_origin_is_nudged_off_the_surface():
    mirror = Mirror('m1', position=(400, 300), rotation=math.pi / 4, size=40)
    second = RayTracer().trace(ORIGIN, PLUS_X, 0, [mirror]).segments[1]
    normal = mirror.get_segment().normal
    expected = geometry.add(Vector2(400.0, 300.0), geometry.scale(0.1, normal))
    assert_close(second.start.x, expected.x, msg="start x")
    assert_close(second.start.y, expected.y, msg="start y")


def test_mirror_back_face_is_transparent():
    mirror = Mirror('m1', position=(400, 300), rotation=-math.pi / 4, size=40)
    result = RayTracer().trace(ORIGIN, PLUS_X, 0, [mirror])
    assert len(result.segments) == 1


def test_nearest_mirror_wins():
    near = Mirror('near', position=(300, 300), rotation=math.pi / 4, size=40)
    far = Mirror('far', position=(600, 300), rotation=math.pi / 4, size=40)
    result = RayTracer().trace(ORIGIN, PLUS_X, 0, [far, near])
    assert_close(result.segments[0].end.x, 300.0, msg="first hit x")


def test_source_is_excluded():
    mirror = Mirror('m1', position=(400, 300), rotation=math.pi / 4, size=40)
    result = RayTracer().trace(ORIGIN, PLUS_X, 0, [mirror], source_id='m1')
    assert len(result.segments) == 1
    assert result.segments[0].source_id == 'm1'


# =============================================================================
# LIMITS
# =============================================================================

def test_closed_mirror_ring_hits_bounce_limit():
    result = RayTracer().trace(ORIGIN, PLUS_X, 0, mirror_ring())
    assert len(result.segments) == 10, f"expected 10 segments, got {len(result.segments)}"
    assert result.termination is TraceTermination.BOUNCE_LIMIT
    assert result.bounces == 10
    assert result.length < 1000.0
    assert not result.escaped
    print("  bounce limit - PASS")


def test_custom_bounce_limit():
    result = RayTracer(max_bounces=3).trace(ORIGIN, PLUS_X, 0, mirror_ring())
    assert len(result.segments) == 3
    assert result.termination is TraceTermination.BOUNCE_LIMIT


def test_length_limit():
    objects = [
        Mirror('right', position=(500, 300), rotation=math.pi / 2, size=40),
        Mirror('left', position=(50, 300), rotation=-math.pi / 2, size=40),
    ]
    result = RayTracer().trace(ORIGIN, PLUS_X, 0, objects)
    # 400 + 449.9 stays in budget, the third leg overshoots it
    assert len(result.segments) == 3
    assert result.termination is TraceTermination.LENGTH_LIMIT
    assert result.length > 1000.0
    print("  length limit - PASS")


# =============================================================================
# PRISMS
# =============================================================================

def test_prism_refraction_per_color():
    # The ray meets the disc 20 units above its center: 30 degrees incidence
    prism = Prism('p1', position=(300, 320), size=80)
    for index, wavelength in enumerate(PALETTE):
        result = RayTracer().trace(ORIGIN, PLUS_X, index, [prism])
        assert len(result.segments) == 2
        first, second = result.segments
        assert_close(first.end.x, 300.0 - math.sqrt(1200.0), 1e-9, "entry x")
        assert second.interaction_type == 'refract'

        d = second.direction
        angle = math.degrees(math.atan2(d.y, d.x))
        expected = 30.0 - math.degrees(math.asin(0.5 / wavelength.refractive_index))
        assert_close(angle, expected, 1e-6, f"{wavelength.color} angle")
    print("  prism dispersion - PASS")


def test_wavelength_index_out_of_range():
    try:
        RayTracer().trace(ORIGIN, PLUS_X, len(PALETTE), [])
    except IndexError:
        return
    raise AssertionError("Expected IndexError for an index outside the palette")


def test_verbose_output():
    mirror = Mirror('m1', position=(400, 300), rotation=math.pi / 4, size=40)
    buf = io.StringIO()
    with redirect_stdout(buf):
        RayTracer(verbose=2).trace(ORIGIN, PLUS_X, 0, [mirror], source_id='light1')
    output = buf.getvalue()
    assert "bounce 0: mirror 'm1'" in output
    assert "stopped by no_hit" in output

    buf = io.StringIO()
    with redirect_stdout(buf):
        RayTracer().trace(ORIGIN, PLUS_X, 0, [mirror])
    assert buf.getvalue() == ""


def main():
    """Run all tracer tests."""
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
