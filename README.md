# skychart

A small toolkit for sky-chart software. It has no dependencies outside the
standard library.

- `skychart.geometry` has immutable 2D points (`Point`) and 3D vectors
  (`Vector3`). They support addition, subtraction, scaling, dot and cross
  products, lengths and normalisation.
- `skychart.constellations` has the `Constellation` enumeration of the 88 IAU
  constellations. It also has `SER1` and `SER2` for Serpens Caput and Serpens
  Cauda, and `NONE` for an undefined constellation. The enumeration gives Latin
  names and three-letter abbreviations, and looks constellations up by either one.
- `skychart.series` has `mean_arguments(jd)`, which returns a `MeanArguments`
  record. It also has the trigonometric series `moon_terms`, `sun_terms`,
  `mercury_terms`, …, `pluto_terms`. These give longitude and latitude in
  arcseconds and the radius.
- `skychart.planets` has `Planets`, which gives the equatorial position of the
  Sun, the Moon and the planets from Mercury to Pluto for a Julian date. It
  returns each one as a `Position`. The module also has the helpers
  `normalize_angle` and `crop_angle`.

## Installation

```
pip install .
```

To install what the tests need as well:

```
pip install ".[test]"
```

## Examples

### Vectors

```python
from skychart.geometry import Point, Vector3

v = Vector3(1.0, 2.0, 2.0)
print(v.length())                                # 3.0
print(v.cross(Vector3(0.0, 0.0, 1.0)))           # Vector3(x=2.0, y=-1.0, z=0.0)
print(Vector3.from_point(Point(1.0, 2.0), 3.0).to_point())   # Point(x=1.0, y=2.0)
print(Point(3.0, 4.0).normalized())              # Point(x=0.6, y=0.8)
```

`normalized()` returns a null vector when the length is zero.

### Constellations

```python
from skychart.constellations import Constellation

ori = Constellation.from_abbreviation("Ori")
print(ori.latin_name(), ori.is_valid())          # Orion True
print(Constellation.from_latin_name("Ursa Major").abbreviation())  # UMa
```

Lookups match exactly. An unknown name or abbreviation raises `ValueError`.
`latin_name()`, `local_name()` and `abbreviation()` also raise `ValueError` for
`NONE`, `SER1` and `SER2`. `local_name()` passes the Latin name through
`gettext`.

### Sun, Moon and planets

```python
from skychart.planets import Planets

sky = Planets(2451545.0)      # J2000.0
mars = sky.mars()
print(mars.ra, mars.dec, mars.distance, mars.phase)

sky.set_jd(2460000.5)
print(sky.moon().phase)
```

A `Position` holds these fields:

- `ra` and `dec`: equatorial coordinates in radians, for the mean obliquity of
  the date.
- `distance` in AU. For a planet this is its distance from the Sun. For the Sun
  it is the Earth–Sun distance. For the Moon it is the Earth–Moon distance.
- `phase` in radians: 0 is new, pi/2 is first quarter, pi is full and 3pi/2 is
  last quarter. It is `None` for the Sun.

## What it does not do

This is a library only. It has no command-line tool and does not draw charts.
It has no star catalogues and no constellation boundaries. The planetary model
is a short analytic series, meant for display rather than precise ephemerides.

## Running the tests

```
pytest
```