import math

import pytest

from fdfview.view import ALPHA, BETA, GAMMA, View


def test_for_grid_uses_default_angles():
    view = View.for_grid(10, 10, 1500, 1000)
    assert (view.alpha, view.beta, view.gamma) == (ALPHA, BETA, GAMMA)


def test_for_grid_centres_on_image():
    view = View.for_grid(10, 10, 1500, 1000)
    assert view.x_trans == 1500 // 2
    assert view.y_trans == 1000 // 2


def test_for_grid_keeps_grid_dimensions():
    view = View.for_grid(19, 11, 1500, 1000)
    assert (view.columns, view.rows) == (19, 11)


def test_for_grid_spacing_fits_half_the_image():
    view = View.for_grid(19, 11, 1500, 1000)
    assert view.div * 19 <= 1500 // 2
    assert view.div * 11 <= 1000 // 2
    assert view.div >= 1


def test_for_grid_limited_by_tighter_axis():
    wide = View.for_grid(10, 10, 1500, 1000)
    tall = View.for_grid(10, 10, 1000, 1500)
    assert wide.div == tall.div


def test_for_grid_spacing_never_below_one():
    view = View.for_grid(5000, 5000, 1500, 1000)
    assert view.div == 1


@pytest.mark.parametrize("columns, rows", [(0, 3), (3, 0)])
def test_for_grid_rejects_empty_grid(columns, rows):
    with pytest.raises(ValueError):
        View.for_grid(columns, rows, 1500, 1000)


def test_trig_of_zero_angles():
    view = View(columns=2, rows=2, alpha=0.0, beta=0.0, gamma=0.0)
    trig = view.trig()
    assert (trig.cos_a, trig.sin_a) == (1.0, 0.0)
    assert (trig.cos_b, trig.sin_b) == (1.0, 0.0)
    assert (trig.cos_g, trig.sin_g) == (1.0, 0.0)


def test_trig_of_default_alpha_is_symmetric():
    trig = View(columns=2, rows=2).trig()
    assert trig.cos_a == pytest.approx(trig.sin_a)


@pytest.mark.parametrize("angle", [0.3, -1.2, GAMMA, math.pi / 2])
def test_trig_values_lie_on_unit_circle(angle):
    trig = View(columns=1, rows=1, alpha=angle, beta=angle, gamma=angle).trig()
    for cos, sin in [(trig.cos_a, trig.sin_a), (trig.cos_b, trig.sin_b), (trig.cos_g, trig.sin_g)]:
        assert cos * cos + sin * sin == pytest.approx(1.0)


def test_trig_follows_angle_changes():
    view = View(columns=1, rows=1, alpha=0.0)
    before = view.trig()
    view.alpha = math.pi / 2
    after = view.trig()
    assert after.sin_a == pytest.approx(1.0)
    assert before.sin_a == 0.0