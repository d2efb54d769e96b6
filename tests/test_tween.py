import pytest

from bloom.anim.morph import MorphEngine
from bloom.anim.tween import EASINGS, Tween, TweenState, cubic_in_out, get_easing


@pytest.mark.parametrize("name", sorted(EASINGS))
def test_easing_endpoints(name):
    ease = EASINGS[name]
    assert ease(0.0) == 0.0
    assert ease(1.0) == 1.0


def test_cubic_is_smooth_at_midpoint():
    assert cubic_in_out(0.5) == pytest.approx(0.5)
    assert cubic_in_out(0.25) < 0.25
    assert cubic_in_out(0.75) > 0.75


def test_unknown_easing():
    with pytest.raises(ValueError):
        get_easing("bounce")
    with pytest.raises(ValueError):
        Tween(1000, easing="bounce")


def test_progress_monotonic_within_cycle():
    tw = Tween(8000, easing="cubic_in_out", start_ms=100)
    last = -1.0
    for now in range(100, 8100, 97):
        assert tw.update(now) is False
        assert tw.progress >= last
        assert 0.0 <= tw.progress <= 1.0
        last = tw.progress


def test_completes_at_duration():
    tw = Tween(8000, easing="linear")
    assert tw.update(4000) is False
    assert tw.progress == pytest.approx(0.5)
    assert tw.update(8000) is True
    assert tw.progress == 1.0
    assert tw.state is TweenState.COMPLETING
    tw.restart(8000)
    assert tw.progress == 0.0
    assert tw.state is TweenState.RUNNING


def test_clock_before_start_clamps_to_zero():
    tw = Tween(1000, easing="linear", start_ms=500)
    tw.update(0)
    assert tw.progress == 0.0


def test_zero_duration_always_completes():
    tw = Tween(0, easing="linear")
    assert tw.update(0) is True


def _morph(rng, easing="linear"):
    return MorphEngine.create((800, 600), 8000, easing, start_ms=0, rng=rng)


def test_cycle_promotes_targets(rng):
    m = _morph(rng)
    radial_target = m.geometry.radial.target
    family_targets = [f.pair.target for f in m.geometry.families]

    assert m.update(7999, (800, 600), rng) is False
    assert m.update(8000, (800, 600), rng) is True

    assert m.progress == 0.0
    assert m.cycles == 1
    assert m.geometry.radial.current == radial_target
    assert [f.pair.current for f in m.geometry.families] == family_targets
    # fresh targets are new collections
    assert m.geometry.radial.target is not radial_target


def test_progress_resets_then_restarts_from_boundary(rng):
    m = _morph(rng)
    m.update(9000, (800, 600), rng)
    assert m.progress == 0.0
    m.update(9000 + 2000, (800, 600), rng)
    assert m.progress == pytest.approx(0.25)


def test_family_sizes_stay_constant_across_cycles(rng):
    m = _morph(rng)
    sizes = [len(f.pair.current) for f in m.geometry.families]
    assert sizes == [10, 7]
    now = 0
    for _ in range(5):
        now += 8000
        m.update(now, (800, 600), rng)
        assert [len(f.pair.current) for f in m.geometry.families] == sizes
        assert [len(f.pair.target) for f in m.geometry.families] == sizes


def test_fresh_targets_use_viewport_at_boundary(rng):
    m = _morph(rng)
    m.update(8000, (100, 100), rng)
    inner, outer = m.geometry.radial.target
    assert outer.y <= 50
