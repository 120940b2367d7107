import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from skychart.series import (
    ARCSEC_PER_RADIAN,
    J2000,
    mean_arguments,
    mercury_terms,
    mars_terms,
    jupiter_terms,
    moon_terms,
    neptune_terms,
    pluto_terms,
    saturn_terms,
    sun_terms,
    uranus_terms,
    venus_terms,
)

julian_dates = st.floats(min_value=2415020.0, max_value=2488070.0, allow_nan=False)


def test_mean_arguments_at_epoch():
    args = mean_arguments(J2000)
    assert args.t == 0
    assert args.vt == 1
    assert args.vt2000 == 0
    assert args.eps == pytest.approx(math.radians(23.4392911))
    assert args.ms == pytest.approx(0.993126 * 2 * math.pi)
    assert args.ls == pytest.approx(0.779072 * 2 * math.pi)


def test_mean_arguments_one_day_step():
    a = mean_arguments(J2000 + 100.0)
    b = mean_arguments(J2000 + 101.0)
    assert b.t - a.t == pytest.approx(1.0)
    assert b.ms - a.ms == pytest.approx(0.00273777850 * 2 * math.pi)
    assert b.mm - a.mm == pytest.approx(0.03629164709 * 2 * math.pi)
    assert b.om - a.om == pytest.approx(-0.00014709391 * 2 * math.pi)


def test_mean_arguments_century():
    args = mean_arguments(J2000 + 36525.0)
    assert args.vt2000 == pytest.approx(1.0)
    assert args.vt == pytest.approx(2.0)
    assert args.jd == J2000 + 36525.0


def test_sun_longitude_at_epoch():
    la, _ = sun_terms(mean_arguments(J2000))
    degrees = (la / 3600.0) % 360.0
    assert degrees == pytest.approx(280.38, abs=0.05)


def test_sun_advances_about_one_revolution_per_year():
    la0, _ = sun_terms(mean_arguments(J2000))
    la1, _ = sun_terms(mean_arguments(J2000 + 365.25))
    assert (la1 - la0) / 3600.0 == pytest.approx(360.0, abs=0.1)


@given(julian_dates)
def test_sun_distance_bounds(jd):
    _, r = sun_terms(mean_arguments(jd))
    assert abs(r - 1.00014) <= 0.01675 + 0.00014 + 1e-12


@given(julian_dates)
def test_mercury_radius_bounds(jd):
    _, _, r = mercury_terms(mean_arguments(jd))
    assert abs(r - 0.39528) <= 0.07834 + 0.00795 + 0.00121 + 0.00022 + 1e-12


@given(julian_dates)
def test_venus_bounds(jd):
    _, b, r = venus_terms(mean_arguments(jd))
    assert abs(r - 0.72335) <= 0.00493 + 1e-12
    assert abs(b) <= 12215 + 83 + 83 + 1e-9


@given(julian_dates)
def test_mars_radius_bounds(jd):
    _, b, r = mars_terms(mean_arguments(jd))
    assert abs(r - 1.53031) <= 0.14170 + 0.00660 + 0.00047 + 1e-12
    assert abs(b) <= 6603 + 622 + 615 + 64 + 1e-9


@given(julian_dates)
def test_uranus_latitude_bounds(jd):
    _, b, _ = uranus_terms(mean_arguments(jd))
    assert abs(b) <= 2775 + 131 + 130 + 1e-9


@given(julian_dates)
def test_pluto_radius_bounds(jd):
    _, _, r = pluto_terms(mean_arguments(jd))
    assert abs(r - 40.74638) <= 9.58235 + 1.16703 + 0.22649 + 0.04996 + 1e-12


@pytest.mark.parametrize(
    "terms, mean",
    [
        (jupiter_terms, 5.20883),
        (saturn_terms, 9.55774),
        (uranus_terms, 19.21216),
        (neptune_terms, 30.07175),
    ],
)
def test_outer_planet_radius_near_mean(terms, mean):
    for offset in (-20000.0, 0.0, 15000.0):
        _, _, r = terms(mean_arguments(J2000 + offset))
        assert abs(r - mean) / mean < 0.1


@given(julian_dates)
def test_moon_distance_in_earth_radii(jd):
    _, _, r = moon_terms(mean_arguments(jd))
    assert abs(r - 60.36298) < 5


def test_moon_longitude_follows_mean_longitude():
    args = mean_arguments(J2000 + 1234.5)
    la, _, _ = moon_terms(args)
    assert abs(la - args.lm * ARCSEC_PER_RADIAN) < 40000


def test_series_are_deterministic():
    args = mean_arguments(J2000 + 42.0)
    assert moon_terms(args) == moon_terms(mean_arguments(J2000 + 42.0))
    assert saturn_terms(args) == saturn_terms(mean_arguments(J2000 + 42.0))