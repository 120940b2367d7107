import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from skychart.planets import Planets, Position, crop_angle, normalize_angle

J2000 = 2451545.0
TWO_PI = 2 * math.pi

PLANET_METHODS = [
    "mercury",
    "venus",
    "mars",
    "jupiter",
    "saturn",
    "uranus",
    "neptune",
    "pluto",
]


def test_normalize_angle_full_turn_is_zero():
    assert normalize_angle(TWO_PI) == 0.0


def test_normalize_angle_negative_full_turn_is_zero():
    assert normalize_angle(-TWO_PI) == 0.0


def test_normalize_angle_wraps_large_values():
    assert normalize_angle(3 * math.pi) == pytest.approx(math.pi)


def test_normalize_angle_wraps_negative_values():
    assert normalize_angle(-math.pi / 2) == pytest.approx(3 * math.pi / 2)


@given(st.floats(min_value=1e-9, max_value=TWO_PI - 1e-9))
def test_normalize_angle_keeps_values_in_range(x):
    assert normalize_angle(x) == x


@given(st.floats(min_value=-1000.0, max_value=1000.0))
def test_normalize_angle_result_range_and_direction(x):
    y = normalize_angle(x)
    assert 0.0 <= y < TWO_PI
    assert math.sin(y) == pytest.approx(math.sin(x), abs=1e-9)
    assert math.cos(y) == pytest.approx(math.cos(x), abs=1e-9)


def test_crop_angle_clamps():
    assert crop_angle(2.0) == math.pi / 2
    assert crop_angle(-2.0) == -math.pi / 2
    assert crop_angle(0.25) == 0.25


def test_default_model_equals_zero_jd():
    assert Planets().sun() == Planets(0).sun()
    assert Planets().moon() == Planets(0).moon()


def test_non_positive_jd_is_ignored():
    assert Planets(-5.0).mars() == Planets().mars()
    assert Planets(-5.0).jd == 0.0


def test_set_jd_matches_constructor():
    model = Planets()
    model.set_jd(J2000)
    fresh = Planets(J2000)
    assert model.jd == J2000
    assert model.sun() == fresh.sun()
    assert model.moon() == fresh.moon()
    assert model.jupiter() == fresh.jupiter()


def test_set_jd_changes_positions():
    model = Planets(J2000)
    before = model.moon()
    model.set_jd(J2000 + 7)
    assert model.moon().ra != pytest.approx(before.ra, abs=1e-3)


def test_sun_at_j2000():
    sun = Planets(J2000).sun()
    assert sun.ra == pytest.approx(-1.3743, abs=0.01)
    assert sun.dec == pytest.approx(-0.4021, abs=0.01)
    assert sun.phase is None


def test_sun_distance_near_one_au():
    sun = Planets(J2000).sun()
    assert 0.98 < sun.distance < 1.02


def test_moon_distance_and_phase_range():
    moon = Planets(J2000).moon()
    assert 0.0023 < moon.distance < 0.0028
    assert 0.0 <= moon.phase < TWO_PI


def test_moon_phase_advances_by_one_lunation():
    a = Planets(J2000).moon().phase
    b = Planets(J2000 + 29.53059).moon().phase
    assert math.cos(a) == pytest.approx(math.cos(b), abs=1e-6)
    assert math.sin(a) == pytest.approx(math.sin(b), abs=1e-6)


def test_position_fields():
    pos = Position(1.0, 0.5, 2.0, 3.0)
    assert (pos.ra, pos.dec, pos.distance, pos.phase) == (1.0, 0.5, 2.0, 3.0)


@pytest.mark.parametrize(
    "method, low, high",
    [
        ("mercury", 0.30, 0.47),
        ("venus", 0.71, 0.73),
        ("mars", 1.37, 1.67),
        ("jupiter", 4.9, 5.5),
        ("saturn", 9.0, 10.1),
        ("uranus", 18.2, 20.2),
        ("neptune", 29.7, 30.4),
        ("pluto", 29.0, 50.0),
    ],
)
def test_heliocentric_distances(method, low, high):
    pos = getattr(Planets(J2000), method)()
    assert low < pos.distance < high


@given(st.floats(min_value=2400000.5, max_value=2500000.5))
def test_planet_positions_are_in_range(jd):
    model = Planets(jd)
    for name in PLANET_METHODS:
        pos = getattr(model, name)()
        assert -math.pi <= pos.ra <= math.pi
        assert -math.pi / 2 <= pos.dec <= math.pi / 2
        assert pos.distance > 0
        assert 0.0 <= pos.phase <= TWO_PI


@given(st.floats(min_value=2400000.5, max_value=2500000.5))
def test_sun_and_moon_positions_are_in_range(jd):
    model = Planets(jd)
    for pos in (model.sun(), model.moon()):
        assert -math.pi <= pos.ra <= math.pi
        assert -math.pi / 2 <= pos.dec <= math.pi / 2
        assert pos.distance > 0


@given(st.floats(min_value=2400000.5, max_value=2500000.5))
def test_sun_declination_within_obliquity(jd):
    dec = Planets(jd).sun().dec
    assert abs(dec) <= math.radians(23.5)