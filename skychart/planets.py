"""Apparent equatorial positions of the Sun, the Moon and the planets.

Each body's position is derived from the trigonometric series in
:mod:`skychart.series` and turned into equatorial coordinates
for the mean obliquity of the date.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Callable

from skychart.series import (
    ARCSEC_PER_RADIAN,
    MeanArguments,
    jupiter_terms,
    mars_terms,
    mean_arguments,
    mercury_terms,
    moon_terms,
    neptune_terms,
    pluto_terms,
    saturn_terms,
    sun_terms,
    uranus_terms,
    venus_terms,
)

_TWO_PI = 2.0 * math.pi
_HALF_PI = math.pi / 2.0
_EARTH_RADII_PER_AU = 23454.8
_SYNODIC_MONTH = 29.53059
_LUNATION_EPOCH = 1721088.5

_Series = Callable[[MeanArguments], "tuple[float, float, float]"]


def normalize_angle(rad: float) -> float:
    """Reduce an angle in radians to the range 0 .. 2pi."""
    if rad > _TWO_PI:
        rad = math.modf(rad / _TWO_PI)[0] * _TWO_PI
    elif rad < 0:
        rad = (1 - math.modf(-rad / _TWO_PI)[0]) * _TWO_PI
    if rad == _TWO_PI:
        return 0.0
    return rad


def crop_angle(rad: float) -> float:
    """Clamp an angle in radians to the range -pi/2 .. pi/2."""
    if rad > _HALF_PI:
        return _HALF_PI
    if rad < -_HALF_PI:
        return -_HALF_PI
    return rad


@dataclass(frozen=True, slots=True)
class Position:
    """Equatorial position of a body.

    ``ra`` and ``dec`` are in radians, ``distance`` in AU. ``phase`` is in
    radians (0 new, pi/2 first quarter, pi full, 3pi/2 last quarter);
    it is None for the Sun.
    """

    ra: float
    dec: float
    distance: float
    phase: float | None = None


def _zero_arguments() -> MeanArguments:
    return MeanArguments(**{f.name: 0.0 for f in fields(MeanArguments)})


class Planets:
    """Positions of the Sun, the Moon and the planets at one instant.

    The model follows Pokorny Z., Astronomicke algoritmy pro kalkulatory, 1988.
    """

    def __init__(self, jd: float = 0.0) -> None:
        self._jd = 0.0
        self._args = _zero_arguments()
        self._sun_longitude = 0.0
        self._sun_distance = 0.0
        if jd > 0:
            self.set_jd(jd)

    @property
    def jd(self) -> float:
        """The Julian date (UTC) the model is computed for."""
        return self._jd

    def set_jd(self, jd: float) -> None:
        """Recompute the model for another Julian date (UTC)."""
        self._jd = jd
        self._args = mean_arguments(jd)
        longitude, distance = sun_terms(self._args)
        self._sun_longitude = normalize_angle(longitude / ARCSEC_PER_RADIAN)
        self._sun_distance = distance

    def _equatorial(self, lon: float, lat: float) -> tuple[float, float]:
        eps = self._args.eps
        if abs(lon - math.pi / 2) < 0.000001:
            return math.pi / 2, eps
        if abs(lon - 3 * math.pi / 2) < 0.000001:
            return -(math.pi / 2), -eps
        ra = math.atan2(
            math.sin(lat) * math.sin(-eps) + math.cos(eps) * math.cos(lat) * math.sin(lon),
            math.cos(lat) * math.cos(lon),
        )
        dec = math.asin(
            math.sin(lat) * math.cos(eps) + math.cos(lat) * math.sin(eps) * math.sin(lon)
        )
        return ra, dec

    def _heliocentric(self, series: _Series) -> Position:
        l, b, r = series(self._args)
        l = normalize_angle(l / ARCSEC_PER_RADIAN)
        b = crop_angle(b / ARCSEC_PER_RADIAN)
        ds, lambdas = self._sun_distance, self._sun_longitude
        delta = math.sqrt(
            ds * ds + r * r + 2 * r * ds * math.cos(b) * math.cos(l - lambdas)
        )
        la = (
            math.atan2(
                r * math.cos(b) * math.sin(l - self._args.ls),
                r * math.cos(b) * math.cos(l - lambdas) + ds,
            )
            + lambdas
        )
        be = math.asin(r / delta * math.sin(b))
        ra, dec = self._equatorial(la, be)
        cos_fi = (r * r + delta * delta - ds * ds) / 2 / r / delta
        fi = math.acos(max(-1.0, min(1.0, cos_fi)))
        phase = math.pi - fi if math.sin(lambdas - la) <= 0 else math.pi + fi
        return Position(ra, dec, r, phase)

    def moon(self) -> Position:
        """Position, Earth-Moon distance and phase of the Moon."""
        la, be, r = moon_terms(self._args)
        la = normalize_angle(la / ARCSEC_PER_RADIAN)
        be = crop_angle(be / ARCSEC_PER_RADIAN)
        ra, dec = self._equatorial(la, be)
        phase = normalize_angle(
            ((self._jd - _LUNATION_EPOCH) / _SYNODIC_MONTH) * _TWO_PI + math.pi / 2
        )
        return Position(ra, dec, r / _EARTH_RADII_PER_AU, phase)

    def sun(self) -> Position:
        """Position and Earth-Sun distance of the Sun."""
        ra, dec = self._equatorial(self._sun_longitude, 0.0)
        return Position(ra, dec, self._sun_distance)

    def mercury(self) -> Position:
        """Position, heliocentric distance and phase of Mercury."""
        return self._heliocentric(mercury_terms)

    def venus(self) -> Position:
        """Position, heliocentric distance and phase of Venus."""
        return self._heliocentric(venus_terms)

    def mars(self) -> Position:
        """Position, heliocentric distance and phase of Mars."""
        return self._heliocentric(mars_terms)

    def jupiter(self) -> Position:
        """Position, heliocentric distance and phase of Jupiter."""
        return self._heliocentric(jupiter_terms)

    def saturn(self) -> Position:
        """Position, heliocentric distance and phase of Saturn."""
        return self._heliocentric(saturn_terms)

    def uranus(self) -> Position:
        """Position, heliocentric distance and phase of Uranus."""
        return self._heliocentric(uranus_terms)

    def neptune(self) -> Position:
        """Position, heliocentric distance and phase of Neptune."""
        return self._heliocentric(neptune_terms)

    def pluto(self) -> Position:
        """Position, heliocentric distance and phase of Pluto."""
        return self._heliocentric(pluto_terms)