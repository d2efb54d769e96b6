import random

import pytest

from bloom.geometry.generator import generate_curve_control_points, generate_radial_endpoints


class _FixedRandom:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def test_radial_endpoints_two_points_on_y_axis(rng):
    pts = generate_radial_endpoints(800, 600, rng)
    assert len(pts) == 2
    assert pts[0].x == 0 and pts[1].x == 0


def test_radial_endpoint_bounds(rng):
    # R = min(300, 400) = 300
    for _ in range(50):
        inner, outer = generate_radial_endpoints(800, 600, rng)
        assert 0 <= inner.y < 300 / 8
        assert 300 - 300 / 4 < outer.y <= 300
        assert outer.y >= inner.y


def test_radial_endpoints_exact_values():
    inner, outer = generate_radial_endpoints(800, 600, _FixedRandom(0.5))
    assert inner.y == pytest.approx(0.5 * 300 / 8)
    assert outer.y == pytest.approx(300 - 0.5 * 300 / 4)


@pytest.mark.parametrize("count", [0, 1, 7, 10])
def test_curve_points_count_and_parity(rng, count):
    pts = generate_curve_control_points(800, 600, count, rng)
    assert len(pts) == count
    for i, p in enumerate(pts):
        if i % 2 == 0:
            assert p.x == 0
        else:
            assert 0 <= p.x < 1


def test_curve_points_exact_values():
    # segment length = 300 / 10 = 30; jitter is zero at random() == 0.5
    pts = generate_curve_control_points(800, 600, 10, _FixedRandom(0.5))
    assert [p.y for p in pts] == pytest.approx([30 * i for i in range(10)])
    assert [p.x for p in pts] == [0.0, 0.5] * 5


def test_curve_points_jitter_bounds(rng):
    pts = generate_curve_control_points(1000, 400, 7, rng)
    seg = 200 / 7
    for i, p in enumerate(pts):
        assert seg * i - 2.5 * seg <= p.y <= seg * i + 2.5 * seg


@pytest.mark.parametrize("size", [(0, 0), (0, 600), (-10, 300)])
def test_degenerate_viewport_collapses(rng, size):
    inner, outer = generate_radial_endpoints(*size, rng)
    assert inner.y == 0 and outer.y == 0
    pts = generate_curve_control_points(*size, 10, rng)
    assert len(pts) == 10
    assert all(p.y == 0 for p in pts)


def test_uses_module_random_by_default():
    random.seed(7)
    a = generate_curve_control_points(800, 600, 5)
    random.seed(7)
    b = generate_curve_control_points(800, 600, 5)
    assert a == b


def test_point_sets_are_tuples(rng):
    assert isinstance(generate_radial_endpoints(800, 600, rng), tuple)
    assert isinstance(generate_curve_control_points(800, 600, 4, rng), tuple)
