"""Trigonometric series for the Sun, the Moon and the planets.

The series give ecliptic longitude and latitude in arcseconds and the
radius vector in AU (for the Moon, in Earth radii). Source of the
coefficients: Pokorny Z., Astronomicke algoritmy pro kalkulatory, 1988.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from math import cos, sin

J2000 = 2451545.0
DAYS_PER_CENTURY = 36525.0
ARCSEC_PER_RADIAN = 3600.0 * 180.0 / math.pi
_TWO_PI = 2.0 * math.pi


def _rev(phase: float, rate: float, t: float) -> float:
    """Angle in radians from a phase and a daily rate, both in revolutions."""
    return (phase + rate * t) * _TWO_PI


@dataclass(frozen=True, slots=True)
class MeanArguments:
    """Mean orbital arguments at one instant, angles in radians.

    For each body ``vl*`` is the mean longitude, ``m*`` the mean anomaly and
    ``u*`` the argument of latitude (1 Mercury, 2 Venus, 4 Mars, ..., 9 Pluto).
    For the Moon ``lm``, ``mm``, ``um``, ``fm`` and ``om`` are the mean
    longitude, mean anomaly, argument of latitude, elongation and node;
    for the Sun ``ls`` and ``ms`` are the mean longitude and mean anomaly.
    """

    jd: float
    t: float
    vt: float
    vt2000: float
    eps: float
    lm: float
    mm: float
    um: float
    fm: float
    om: float
    ls: float
    ms: float
    vl1: float
    m1: float
    u1: float
    vl2: float
    m2: float
    u2: float
    vl4: float
    m4: float
    u4: float
    vl5: float
    m5: float
    u5: float
    vl6: float
    m6: float
    u6: float
    vl7: float
    m7: float
    u7: float
    vl8: float
    m8: float
    u8: float
    vl9: float
    m9: float
    u9: float


def mean_arguments(jd: float) -> MeanArguments:
    """Compute the mean arguments for a Julian date."""
    t = jd - J2000
    vt2000 = t / DAYS_PER_CENTURY
    vt = 1 + vt2000
    eps = math.radians(
        23.4392911
        - 0.0130042 * vt2000
        - 0.00000164 * vt2000 * vt2000
        + 0.000000503 * vt2000 * vt2000 * vt2000
    )
    return MeanArguments(
        jd=jd,
        t=t,
        vt=vt,
        vt2000=vt2000,
        eps=eps,
        lm=_rev(0.606434, 0.03660110129, t),
        mm=_rev(0.374897, 0.03629164709, t),
        um=_rev(0.259091, 0.03674819520, t),
        fm=_rev(0.827362, 0.03386319198, t),
        om=_rev(0.347343, -0.00014709391, t),
        ls=_rev(0.779072, 0.00273790931, t),
        ms=_rev(0.993126, 0.00273777850, t),
        vl1=_rev(0.700695, 0.01136771400, t),
        m1=_rev(0.485541, 0.01136759566, t),
        u1=_rev(0.566441, 0.01136762384, t),
        vl2=_rev(0.505498, 0.00445046867, t),
        m2=_rev(0.140023, 0.00445036173, t),
        u2=_rev(0.292498, 0.00445040017, t),
        vl4=_rev(0.987353, 0.00145575328, t),
        m4=_rev(0.053856, 0.00145561327, t),
        u4=_rev(0.849694, 0.00145569465, t),
        vl5=_rev(0.089608, 0.00023080893, t),
        m5=_rev(0.056531, 0.00023080893, t),
        u5=_rev(0.814734, 0.00023080893, t),
        vl6=_rev(0.133295, 0.00009294371, t),
        m6=_rev(0.882987, 0.00009294371, t),
        u6=_rev(0.821218, 0.00009294371, t),
        vl7=_rev(0.870169, 0.00003269438, t),
        m7=_rev(0.400589, 0.00003269438, t),
        u7=_rev(0.664614, 0.00003265562, t),
        vl8=_rev(0.846912, 0.00001672092, t),
        m8=_rev(0.725368, 0.00001672092, t),
        u8=_rev(0.480856, 0.00001663715, t),
        vl9=_rev(0.663854, 0.00001115482, t),
        m9=_rev(0.041020, 0.00001104864, t),
        u9=_rev(0.357355, 0.00001104864, t),
    )


def moon_terms(args: MeanArguments) -> tuple[float, float, float]:
    """Geocentric longitude and latitude [arcsec] and distance [Earth radii] of the Moon."""
    mm, um, fm, om = args.mm, args.um, args.fm, args.om
    ms, ls, vl2, vt = args.ms, args.ls, args.vl2, args.vt

    la = (
        args.lm * ARCSEC_PER_RADIAN
        + 22640 * sin(mm)
        - 4586 * sin(mm - 2 * fm)
        + 2370 * sin(2 * fm)
        + 769 * sin(2 * mm)
        - 668 * sin(ms)
        - 412 * sin(2 * um)
        - 212 * sin(2 * mm - 2 * fm)
        - 206 * sin(mm - 2 * fm + ms)
        + 192 * sin(mm + 2 * fm)
        + 165 * sin(2 * fm - ms)
        + 148 * sin(mm - ms)
        - 125 * sin(fm)
        - 110 * sin(mm + ms)
        - 55 * sin(2 * um - 2 * fm)
        - 45 * sin(mm + 2 * um)
        + 40 * sin(mm - 2 * um)
        - 38 * sin(mm - 4 * fm)
        + 36 * sin(3 * mm)
        - 31 * sin(2 * mm - 4 * fm)
        + 28 * sin(mm - 2 * fm - ms)
        - 24 * sin(2 * fm + ms)
        + 19 * sin(mm - fm)
        + 18 * sin(fm + ms)
        + 15 * sin(mm + 2 * fm - ms)
        + 14 * sin(2 * mm + 2 * fm)
        + 14 * sin(4 * fm)
        - 13 * sin(3 * mm - 2 * fm)
        - 11 * sin(mm - 16 * ls - 18 * vl2)
        + 10 * sin(2 * mm - ms)
        + 9 * sin(mm - 2 * um - 2 * fm)
        + 9 * cos(mm + 16 * ls - 18 * vl2)
        - 9 * sin(2 * mm - 2 * fm + ms)
        - 8 * sin(mm - fm)
        + 8 * sin(2 * fm - 2 * ms)
        - 8 * sin(2 * ms + ms)
        - 7 * sin(2 * ms)
        - 7 * sin(mm - 2 * fm + 2 * ms)
        + 7 * sin(om)
        - 6 * sin(mm - 2 * um + 2 * fm)
        - 6 * sin(2 * um + 2 * fm)
        - 4 * sin(mm - 4 * fm + ms)
        + 4 * vt * cos(mm + 16 * ls - 18 * vl2)
        - 4 * sin(2 * mm - 2 * um)
        + 4 * vt * sin(mm + 16 * ls - 18 * vl2)
        + 3 * sin(mm - 3 * fm)
        - 3 * sin(mm + 2 * fm + ms)
        - 3 * sin(2 * mm - 4 * fm + ms)
        - 3 * sin(mm - 2 * ms)
        + 3 * sin(mm - 2 * fm - 2 * ms)
        - 2 * sin(2 * mm - 2 * fm - ms)
        - 2 * sin(2 * um - 2 * fm + ms)
        + 2 * sin(mm + 4 * fm)
        + 2 * sin(4 * mm)
        + 2 * sin(4 * fm - ms)
        + 2 * sin(2 * mm - fm)
    )

    be = (
        18461 * sin(um)
        + 1010 * sin(mm + um)
        + 1000 * sin(mm - um)
        - 624 * sin(um - 2 * fm)
        - 199 * sin(mm - um - 2 * fm)
        - 167 * sin(mm + um - 2 * fm)
        + 117 * sin(um - 2 * fm)
        + 62 * sin(2 * mm + um)
        + 33 * sin(mm - um + 2 * fm)
        + 32 * sin(2 * mm - um)
        + 30 * sin(um - 2 * fm + ms)
        - 16 * sin(2 * mm + um - 2 * fm)
        + 15 * sin(mm + um + 2 * fm)
        + 12 * sin(um - 2 * fm - ms)
        - 9 * sin(mm - um - 2 * fm + ms)
        - 8 * sin(um - om)
        + 8 * sin(um + 2 * fm - ms)
        - 7 * sin(mm + um - 2 * fm + ms)
        + 7 * sin(mm + um - ms)
        - 7 * sin(mm + um - 4 * fm)
        - 6 * sin(um + ms)
        - 6 * sin(3 * um)
        + 6 * sin(mm - um - ms)
        - 5 * sin(um - fm)
        - 5 * sin(mm + um + ms)
        - 5 * sin(mm - um + ms)
        + 5 * sin(um - ms)
        + 5 * sin(um - fm)
        + 4 * sin(3 * mm + um)
        - 4 * sin(um - 4 * fm)
        - 3 * sin(mm - um - 4 * fm)
        + 3 * sin(mm - 3 * um)
        - 2 * sin(2 * mm - um - 4 * fm)
        - 2 * sin(3 * um - 2 * fm)
        + 2 * sin(2 * mm - um + 2 * fm)
        + 2 * sin(mm - um + 2 * fm - ms)
        + 2 * sin(2 * mm - um - 2 * fm)
        + 2 * sin(3 * mm - um)
    )

    r = (
        60.36298
        - 3.27746 * cos(mm)
        - 0.57994 * cos(mm - 2 * fm)
        - 0.46357 * cos(2 * fm)
        - 0.08904 * cos(2 * mm)
        + 0.03865 * cos(2 * mm - 2 * fm)
        - 0.03237 * cos(2 * fm - ms)
        - 0.02688 * cos(mm + 2 * fm)
        - 0.02358 * cos(mm - 2 * fm + ms)
        - 0.02030 * cos(mm - ms)
        + 0.01719 * cos(fm)
        + 0.01671 * cos(mm + ms)
        + 0.01247 * cos(mm - 2 * um)
        + 0.00704 * cos(ms)
        + 0.00529 * cos(2 * fm + ms)
        - 0.00524 * cos(mm - 4 * fm)
        + 0.00398 * cos(mm - 2 * fm - ms)
        - 0.00366 * cos(3 * mm)
        - 0.00295 * cos(2 * mm - 4 * fm)
        - 0.00263 * cos(fm + ms)
        + 0.00249 * cos(3 * mm - 2 * fm)
        - 0.00221 * cos(mm + 2 * fm - ms)
        + 0.00185 * cos(2 * um - 2 * fm)
        - 0.00161 * cos(2 * fm - 2 * ms)
        + 0.00147 * cos(mm + 2 * um - 2 * fm)
        - 0.00142 * cos(4 * fm)
        + 0.00139 * cos(2 * mm - 2 * fm + ms)
        - 0.00118 * cos(2 * mm - 4 * fm + ms)
        - 0.00116 * cos(2 * mm - 2 * fm)
        - 0.00110 * cos(2 * mm - ms)
    )
    return la, be, r


def sun_terms(args: MeanArguments) -> tuple[float, float]:
    """Geocentric longitude [arcsec] and distance [AU] of the Sun."""
    ms, m2, m4, m5 = args.ms, args.m2, args.m4, args.m5
    la = (
        args.ls * ARCSEC_PER_RADIAN
        + 6910 * sin(ms)
        + 72 * sin(2 * ms)
        - 17 * args.vt * sin(ms)
        - 7 * cos(ms - m5)
        + 6 * sin(args.lm - args.ls)
        + 5 * sin(4 * ms + 8 * m4 + 3 * m5)
        - 5 * cos(2 * ms - 2 * m2)
        - 4 * sin(ms - m2)
        + 4 * cos(4 * ms - 8 * m4 + 3 * m5)
        + 3 * sin(2 * ms - 2 * m2)
        - 3 * sin(m5)
        - 3 * sin(2 * ms - 2 * m5)
    )
    r = 1.00014 - 0.01675 * cos(ms) - 0.00014 * cos(2 * ms)
    return la, r


def mercury_terms(args: MeanArguments) -> tuple[float, float, float]:
    """Heliocentric longitude and latitude [arcsec] and radius [AU] of Mercury."""
    m1, u1, m2, vt = args.m1, args.u1, args.m2, args.vt
    l = (
        args.vl1 * ARCSEC_PER_RADIAN
        + 84378 * sin(m1)
        + 10733 * sin(2 * m1)
        + 1892 * sin(3 * m1)
        - 646 * sin(2 * u1)
        + 381 * sin(4 * m1)
        - 306 * sin(m1 - 2 * u1)
        - 274 * sin(m1 + 2 * u1)
        - 92 * sin(2 * m1 + 2 * u1)
        + 83 * sin(5 * m1)
        - 28 * sin(3 * m1 + 2 * u1)
        + 25 * sin(2 * m1 - 2 * u1)
        + 19 * sin(6 * m1)
        - 9 * sin(4 * m1 + 2 * u1)
        + 8 * vt * sin(m1)
        + 7 * cos(m1 - 5 * m2)
    )
    b = (
        24134 * sin(u1)
        + 5180 * sin(m1 - u1)
        + 4910 * sin(m1 + u1)
        + 1124 * sin(2 * m1 + u1)
        + 271 * sin(3 * m1 + u1)
        + 132 * sin(2 * m1 - u1)
        + 67 * sin(4 * m1 + u1)
        + 18 * sin(5 * m1 + u1)
        - 10 * sin(3 * u1)
        + 9 * sin(m1 - 3 * u1)
    )
    r = (
        0.39528
        - 0.07834 * cos(m1)
        - 0.00795 * cos(2 * m1)
        - 0.00121 * cos(3 * m1)
        - 0.00022 * cos(4 * m1)
    )
    return l, b, r


def venus_terms(args: MeanArguments) -> tuple[float, float, float]:
    """Heliocentric longitude and latitude [arcsec] and radius [AU] of Venus."""
    m2, u2, ms, vt = args.m2, args.u2, args.ms, args.vt
    l = (
        args.vl2 * ARCSEC_PER_RADIAN
        + 2814 * sin(m2)
        - 181 * sin(2 * u2)
        - 20 * vt * sin(m2)
        + 12 * sin(2 * m2)
        - 10 * cos(2 * ms - 2 * m2)
        + 7 * cos(3 * ms - 3 * m2)
    )
    b = 12215 * sin(u2) + 83 * sin(m2 + u2) + 83 * sin(m2 - u2)
    r = 0.72335 - 0.00493 * cos(m2)
    return l, b, r


def mars_terms(args: MeanArguments) -> tuple[float, float, float]:
    """Heliocentric longitude and latitude [arcsec] and radius [AU] of Mars."""
    m4, u4, m5, m2, u2, ms, vt = args.m4, args.u4, args.m5, args.m2, args.u2, args.ms, args.vt
    l = (
        args.vl4 * ARCSEC_PER_RADIAN
        + 38451 * sin(m4)
        + 2238 * sin(2 * m4)
        + 181 * sin(3 * m4)
        - 52 * sin(2 * u4)
        + 37 * vt * sin(m4)
        - 22 * cos(m4 - 2 * m5)
        - 19 * sin(m4 - m5)
        + 17 * cos(m4 - m5)
        + 17 * sin(4 * m4)
        - 16 * cos(2 * m4 - 2 * m5)
        + 13 * cos(ms - 2 * m4)
        - 10 * sin(m4 - 2 * u2)
        - 10 * sin(m4 + 2 * u4)
        + 7 * cos(ms - m4)
        - 7 * cos(2 * ms - 3 * m4)
        - 5 * sin(m2 - 3 * m4)
        - 5 * sin(ms - m4)
        - 5 * sin(ms - 2 * m4)
        - 4 * cos(2 * ms - 4 * m4)
        + 4 * vt * sin(2 * m4)
        + 4 * cos(m5)
        + 3 * cos(m2 - 3 * m4)
        + 3 * cos(2 * m4 - 2 * m5)
    )
    b = 6603 * sin(u4) + 622 * sin(m4 - u4) + 615 * sin(m4 + u4) + 64 * sin(2 * m4 + u4)
    r = 1.53031 - 0.14170 * cos(m4) - 0.00660 * cos(2 * m4) - 0.00047 * cos(3 * m4)
    return l, b, r


def jupiter_terms(args: MeanArguments) -> tuple[float, float, float]:
    """Heliocentric longitude and latitude [arcsec] and radius [AU] of Jupiter."""
    m5, m6, m7, vl5, vt = args.m5, args.m6, args.m7, args.vl5, args.vt
    l = (
        vl5 * ARCSEC_PER_RADIAN
        + 19934 * sin(m5)
        + 5023 * vt
        + 2511
        + 1093 * cos(2 * m5 - 5 * m6)
        + 601 * sin(2 * m5)
        - 479 * sin(2 * m5 - 5 * m6)
        - 185 * sin(2 * m5 - 2 * m6)
        + 137 * sin(3 * m5 - 5 * m6)
        - 131 * sin(m5 - 2 * m6)
        + 79 * cos(m5 - m6)
        - 76 * cos(2 * m5 - 2 * m6)
        - 74 * vt * cos(m5)
        + 68 * vt * sin(m5)
        + 66 * cos(2 * m5 - 3 * m6)
        + 63 * cos(3 * m5 - 5 * m6)
        + 53 * cos(m5 - 5 * m6)
        + 49 * sin(2 * m5 - 3 * m6)
        - 43 * vt * sin(2 * m5 - 5 * m6)
        - 37 * cos(m5)
        + 25 * sin(2 * vl5)
        + 25 * sin(3 * m5)
        - 23 * sin(m5 - 5 * m6)
        - 19 * vt * sin(2 * m5 - 5 * m6)
        + 17 * cos(2 * m5 - 4 * m6)
        + 17 * cos(3 * m5 - 3 * m6)
        - 14 * sin(m5 - m6)
        - 13 * sin(3 * m5 - 4 * m6)
        - 9 * cos(vl5)
        + 9 * cos(m6)
        - 9 * sin(m6)
        - 9 * sin(3 * m5 - 2 * m6)
        + 9 * sin(4 * m5 - 5 * m6)
        + 9 * sin(2 * m5 - 6 * m6 + 3 * m7)
        - 8 * cos(4 * m5 - 10 * m6)
        + 7 * cos(3 * m5 - 4 * m6)
        - 7 * cos(m5 - 3 * m6)
        - 7 * sin(4 * m5 - 10 * m6)
        - 7 * sin(m5 - 3 * m6)
        + 6 * cos(4 * m5 - 5 * m6)
        - 6 * sin(3 * m5 - 3 * m6)
        + 5 * cos(2 * m6)
        - 4 * sin(4 * m5 - 4 * m6)
        - 4 * cos(3 * m6)
        + 4 * cos(2 * m5 - m6)
        - 4 * cos(3 * m5 - 2 * m6)
        - 4 * vt * cos(2 * m5)
        + 3 * vt * sin(2 * m5)
        + 3 * cos(5 * m6)
        + 3 * cos(5 * m5 - 10 * m6)
        + 3 * sin(2 * m6)
        - 2 * sin(2 * vl5 - m5)
        + 2 * sin(2 * vl5 + m5)
        - 2 * vt * sin(3 * m5 - 5 * m6)
        - 2 * vt * sin(m5 - 5 * m6)
    )
    b = (
        -4692 * cos(m5)
        + 259 * sin(m5)
        + 227
        - 227 * cos(2 * m5)
        + 30 * vt * sin(m5)
        + 21 * vt * cos(m5)
        + 16 * sin(3 * m5 - 5 * m6)
        - 13 * sin(m5 - 5 * m6)
        - 12 * cos(3 * m5)
        + 12 * sin(2 * m5)
        + 7 * cos(3 * m5 - 5 * m6)
        - 5 * cos(m5 - 5 * m6)
    )
    r = (
        5.20883
        - 0.25122 * cos(m5)
        - 0.00604 * cos(2 * m5)
        + 0.00260 * cos(2 * m5 - 2 * m6)
        - 0.00170 * cos(3 * m5 - 5 * m6)
        - 0.00091 * vt * sin(m5)
        - 0.00084 * vt * cos(m5)
        + 0.00069 * sin(2 * m5 - 3 * m6)
        - 0.00067 * sin(m5 - 5 * m6)
        + 0.00066 * sin(3 * m5 - 5 * m6)
        + 0.00063 * sin(m5 - m6)
        - 0.00051 * cos(2 * m5 - 3 * m6)
        - 0.00046 * sin(m5)
        - 0.00029 * cos(m5 - 5 * m6)
        + 0.00027 * cos(m5 - 2 * m6)
        - 0.00022 * cos(3 * m5)
        - 0.00021 * sin(2 * m5 - 5 * m6)
    )
    return l, b, r


def saturn_terms(args: MeanArguments) -> tuple[float, float, float]:
    """Heliocentric longitude and latitude [arcsec] and radius [AU] of Saturn."""
    m5, m6, m7, vl6, vt = args.m5, args.m6, args.m7, args.vl6, args.vt
    l = (
        vl6 * ARCSEC_PER_RADIAN
        + 23045 * sin(m6)
        + 5014 * vt
        - 2689 * cos(2 * m5 - 5 * m6)
        + 2507
        + 1177 * sin(2 * m5 - 5 * m6)
        - 826 * cos(2 * m5 - 4 * m6)
        + 802 * sin(2 * m6)
        + 425 * sin(m5 - 2 * m6)
        - 229 * vt * cos(m6)
        - 153 * cos(2 * m5 - 6 * m6)
        - 142 * vt * sin(m6)
        - 114 * cos(m6)
        + 101 * vt * sin(2 * m5 - 5 * m6)
        - 70 * cos(2 * vl6)
        + 67 * sin(2 * vl6)
        + 66 * sin(2 * m5 - 6 * m6)
        + 60 * vt * cos(2 * m5 - 5 * m6)
        + 41 * sin(m5 - 3 * m6)
        + 39 * sin(3 * m6)
        + 31 * sin(m5 - m6)
        + 31 * sin(2 * m5 - 2 * m6)
        - 29 * cos(2 * m5 - 3 * m6)
        - 28 * sin(2 * m5 - 6 * m6 + 3 * m7)
        + 28 * cos(m5 - 3 * m6)
        + 22 * vt * sin(2 * m5 - 4 * m6)
        - 22 * sin(m6 - 3 * m7)
        + 20 * sin(2 * m5 - 3 * m6)
        + 20 * cos(4 * m5 - 10 * m6)
        + 19 * cos(2 * m6 - 3 * m7)
        + 19 * sin(4 * m5 - 10 * m6)
        - 17 * vt * cos(2 * m6)
        - 16 * cos(m6 - 3 * m7)
        - 12 * sin(2 * m5 - 4 * m6)
        + 12 * cos(m5)
        - 12 * sin(2 * m6 - 2 * m7)
        - 11 * vt * sin(2 * m6)
        - 11 * cos(2 * m5 - 7 * m6)
        + 10 * sin(2 * m6 - 3 * m7)
        + 10 * cos(2 * m5 + 2 * m6)
        + 9 * sin(4 * m5 - 9 * m6)
        - 8 * sin(m6 - 2 * m7)
        - 8 * cos(vl6 + m6)
        + 8 * cos(vl6 - m6)
        + 8 * sin(m6 - m7)
        - 8 * sin(2 * vl6 - m6)
        + 7 * sin(2 * vl6 + m6)
        - 7 * cos(m5 - 2 * m6)
        - 7 * cos(2 * m6)
        - 6 * vt * sin(4 * m5 - 10 * m6)
        + 6 * vt * cos(4 * m5 - 10 * m6)
        + 6 * vt * sin(2 * m5 - 6 * m6)
        - 5 * sin(3 * m5 - 7 * m6)
        - 5 * cos(3 * m5 - 3 * m6)
        - 5 * cos(2 * m6 - 2 * m7)
        + 5 * sin(3 * m5 - 4 * m6)
        + 5 * sin(2 * m5 - 7 * m6)
        + 4 * sin(3 * m5 - 5 * m6)
        + 4 * vt * cos(m5 - 2 * m6)
        + 3 * vt * cos(3 * m5 - 4 * m6)
        + 3 * cos(2 * m5 - 6 * m6 + 3 * m7)
        - 3 * vt * sin(2 * vl6)
        + 3 * vt * cos(2 * m5 - 6 * m6)
        - 3 * vt * cos(2 * vl6)
        + 3 * cos(3 * m5 - 7 * m6)
        + 3 * cos(4 * m5 - 9 * m6)
        + 3 * sin(3 * m5 - 6 * m6)
        + 3 * sin(2 * m5 - m6)
        + 3 * sin(m5 - 4 * m6)
        + 2 * cos(3 * m6 - 3 * m7)
        + 2 * vt * sin(m5 - 2 * m6)
        + 2 * sin(4 * m6)
        - 2 * cos(3 * m5 - 4 * m6)
        - 2 * cos(2 * m5 - m6)
        - 2 * sin(2 * m5 - 7 * m6 + 3 * m7)
        + 2 * cos(m5 - 4 * m6)
        + 2 * cos(4 * m5 - 11 * m6)
        - 2 * sin(m6 - m7)
    )
    b = (
        8297 * sin(m6)
        - 3346 * cos(m6)
        + 462 * sin(2 * m6)
        - 189 * cos(2 * m6)
        + 185
        - 79 * vt * cos(m6)
        - 71 * cos(2 * m5 - 4 * m6)
        + 46 * sin(2 * m5 - 4 * m6)
        - 45 * cos(2 * m5 - 6 * m6)
        + 29 * sin(3 * m6)
        - 20 * cos(2 * m5 - 3 * m6)
        + 18 * vt * sin(m6)
        - 14 * cos(2 * m5 - 5 * m6)
        - 11 * cos(3 * m6)
        - 10 * vt
        + 9 * sin(m5 - 3 * m6)
        + 8 * sin(m5 - m6)
        - 6 * sin(2 * m5 - 3 * m6)
        + 5 * sin(2 * m5 - 7 * m6)
        - 5 * cos(2 * m5 - 7 * m6)
        + 4 * sin(2 * m5 - 5 * m6)
        - 4 * vt * sin(2 * m6)
        - 3 * cos(m5 - m6)
        + 3 * cos(m5 - 3 * m6)
        + 3 * vt * sin(2 * m5 - 4 * m6)
        + 3 * sin(m5 - 2 * m6)
        + 2 * sin(4 * m6)
        - 2 * cos(2 * m5 - 2 * m6)
    )
    r = (
        9.55774
        - 0.53252 * cos(m6)
        - 0.01878 * sin(2 * m5 - 4 * m6)
        - 0.01482 * cos(2 * m6)
        + 0.00817 * sin(m5 - m6)
        - 0.00539 * cos(m5 - 2 * m6)
        - 0.00524 * vt * sin(m6)
        + 0.00349 * sin(2 * m5 - 5 * m6)
        + 0.00328 * vt * cos(m6)
        - 0.00225 * sin(m6)
        + 0.00149 * cos(2 * m5 - 6 * m6)
        - 0.00126 * cos(2 * m5 - 2 * m6)
        + 0.00104 * cos(m5 - m6)
        + 0.00101 * cos(2 * m5 - 5 * m6)
        + 0.00098 * cos(m5 - 3 * m6)
        - 0.00073 * cos(2 * m5 - 3 * m6)
        - 0.00062 * cos(3 * m6)
        + 0.00042 * sin(2 * m6 - 3 * m7)
        + 0.00041 * sin(2 * m5 - 2 * m6)
        - 0.00040 * sin(m5 - 3 * m6)
        + 0.00040 * cos(2 * m5 - 4 * m6)
        - 0.00028 * vt
        - 0.00023 * sin(m5)
        + 0.00020 * sin(2 * m5 - 7 * m6)
    )
    return l, b, r


def uranus_terms(args: MeanArguments) -> tuple[float, float, float]:
    """Heliocentric longitude and latitude [arcsec] and radius [AU] of Uranus."""
    m5, m6, m7, m8, u7, vt = args.m5, args.m6, args.m7, args.m8, args.u7, args.vt
    l = (
        args.vl7 * ARCSEC_PER_RADIAN
        + 19397 * sin(m7)
        + 570 * sin(2 * m7)
        - 536 * vt * cos(m7)
        + 143 * sin(m6 - 2 * m7)
        + 110 * vt * sin(m7)
        + 102 * sin(m6 - 3 * m7)
        + 76 * cos(m6 - 3 * m7)
        - 49 * sin(m5 - m7)
        + 32 * vt * vt
        - 30 * vt * cos(2 * m7)
        + 29 * sin(2 * m5 - 6 * m6 + 3 * m7)
        + 29 * cos(2 * m7 - 2 * m8)
        - 28 * cos(m7 - m8)
        + 23 * sin(3 * m7)
        - 21 * cos(m5 - m7)
        + 20 * sin(m7 - m8)
        + 20 * cos(m6 - 2 * m7)
        - 19 * cos(m6 - m7)
        + 17 * sin(2 * m7 - 3 * m8)
        + 14 * sin(3 * m7 - 3 * m8)
        + 13 * sin(m6 - m7)
        - 12 * vt * vt * cos(m7)
        - 12 * cos(m7)
        + 10 * sin(2 * m7 - 2 * m8)
        - 9 * sin(2 * u7)
        - 9 * vt * vt * sin(m7)
        + 9 * cos(2 * m7 - 3 * m8)
        + 8 * vt * cos(m6 - 2 * m7)
        + 7 * vt * cos(m6 - 3 * m7)
        - 7 * vt * sin(m6 - 3 * m7)
        + 7 * vt * sin(2 * m7)
        + 6 * sin(2 * m5 - 6 * m6 + 2 * m7)
        + 6 * cos(2 * m5 - 6 * m6 + 2 * m7)
        + 5 * sin(m6 - 4 * m7)
        - 4 * sin(3 * m7 - 4 * m8)
        + 4 * cos(3 * m7 - 3 * m8)
        - 3 * cos(m8)
        - 2 * sin(m8)
    )
    b = 2775 * sin(u7) + 131 * sin(m7 - u7) + 130 * sin(m7 + u7)
    r = (
        19.21216
        - 0.90154 * cos(m7)
        - 0.02488 * vt * sin(m7)
        - 0.00585 * cos(m6 - 2 * m7)
        - 0.00508 * vt * cos(m7)
        - 0.00451 * cos(m5 - m7)
        + 0.00336 * sin(m6 - m7)
        + 0.00198 * sin(m5 - m7)
        + 0.00118 * cos(m6 - 3 * m7)
        + 0.00107 * sin(m6 - 2 * m7)
        - 0.00103 * vt * sin(2 * m7)
        - 0.00081 * cos(3 * m7 - 3 * m8)
    )
    return l, b, r


def neptune_terms(args: MeanArguments) -> tuple[float, float, float]:
    """Heliocentric longitude and latitude [arcsec] and radius [AU] of Neptune."""
    m5, m6, m7, m8, u8, vt = args.m5, args.m6, args.m7, args.m8, args.u8, args.vt
    l = (
        args.vl8 * ARCSEC_PER_RADIAN
        + 3523 * sin(m8)
        - 50 * sin(2 * u8)
        - 43 * vt * cos(m8)
        + 29 * sin(m5 - m8)
        + 19 * sin(2 * m8)
        + 19 * sin(2 * m8)
        - 18 * cos(m5 - m8)
        + 13 * cos(m6 - m8)
        + 13 * sin(m6 + m8)
        - 9 * sin(2 * m7 - 3 * m8)
        + 9 * cos(2 * m7 - 2 * m8)
        - 5 * cos(2 * m7 - 3 * m8)
        - 4 * vt * sin(m8)
        + 4 * cos(m7 - 2 * m8)
        + 4 * vt * vt * sin(m8)
    )
    b = 6404 * sin(u8) + 55 * sin(m8 + u8) + 55 * sin(m8 - u8) - 33 * vt * sin(u8)
    r = (
        30.07175
        - 0.25701 * cos(m8)
        - 0.00787 * cos(2 * args.vl7 - m7 - 2 * args.vl8)
        + 0.00409 * cos(m5 - m8)
        - 0.00314 * vt * sin(m8)
        + 0.00250 * sin(m5 - m8)
        - 0.00194 * sin(m6 - m8)
        + 0.00185 * cos(m6 - m8)
    )
    return l, b, r


def pluto_terms(args: MeanArguments) -> tuple[float, float, float]:
    """Heliocentric longitude and latitude [arcsec] and radius [AU] of Pluto."""
    m9, u9, vt = args.m9, args.u9, args.vt
    l = (
        args.vl9 * ARCSEC_PER_RADIAN
        + 101577 * sin(m9)
        + 15517 * sin(2 * m9)
        - 3593 * sin(2 * u9)
        + 3414 * sin(3 * m9)
        - 2201 * sin(m9 - 2 * u9)
        - 1871 * sin(m9 - 2 * u9)
        + 839 * sin(4 * m9)
        - 757 * sin(2 * m9 + 2 * u9)
        - 285 * sin(3 * m9 + 2 * u9)
        + 227 * vt * vt * sin(m9)
        + 218 * sin(2 * m9 - 2 * u9)
        + 200 * vt * sin(m9)
    )
    b = (
        57726 * sin(u9)
        + 15257 * sin(m9 - u9)
        + 14102 * sin(m9 + u9)
        + 3870 * sin(2 * m9 + u9)
        + 1138 * sin(3 * m9 + u9)
        + 472 * sin(2 * m9 - u9)
        + 353 * sin(4 * m9 + u9)
        - 144 * sin(m9 - 3 * u9)
        - 119 * sin(3 * u9)
        - 111 * sin(m9 + 3 * u9)
    )
    r = (
        40.74638
        - 9.58235 * cos(m9)
        - 1.16703 * cos(2 * m9)
        - 0.22649 * cos(3 * m9)
        - 0.04996 * cos(4 * m9)
    )
    return l, b, r