"""The 88 constellations with their Latin names and IAU abbreviations."""

from __future__ import annotations

import gettext
from enum import IntEnum

_LATIN_NAMES: tuple[str, ...] = (
    "",
    "Andromeda",
    "Antlia",
    "Apus",
    "Aquila",
    "Aquarius",
    "Ara",
    "Aries",
    "Auriga",
    "Bootes",
    "Caelum",
    "Camelopardalis",
    "Capricornus",
    "Carina",
    "Cassiopeia",
    "Centaurus",
    "Cepheus",
    "Cetus",
    "Chamaeleon",
    "Circinus",
    "Canis Major",
    "Canis Minor",
    "Cancer",
    "Columba",
    "Coma Berenices",
    "Corona Australis",
    "Corona Borealis",
    "Crater",
    "Crux",
    "Corvus",
    "Canes Venatici",
    "Cygnus",
    "Delphinus",
    "Dorado",
    "Draco",
    "Equuleus",
    "Eridanus",
    "Fornax",
    "Gemini",
    "Grus",
    "Hercules",
    "Horologium",
    "Hydra",
    "Hydrus",
    "Indus",
    "Lacerta",
    "Leo",
    "Lepus",
    "Libra",
    "Leo Minor",
    "Lupus",
    "Lynx",
    "Lyra",
    "Mensa",
    "Microscopium",
    "Monoceros",
    "Musca",
    "Norma",
    "Octans",
    "Ophiuchus",
    "Orion",
    "Pavo",
    "Pegasus",
    "Perseus",
    "Phoenix",
    "Pictor",
    "Piscis Austrinus",
    "Pisces",
    "Puppis",
    "Pyxis",
    "Reticulum",
    "Sculptor",
    "Scorpius",
    "Scutum",
    "Serpens",
    "Sextans",
    "Sagitta",
    "Sagittarius",
    "Taurus",
    "Telescopium",
    "Triangulum Australe",
    "Triangulum",
    "Tucana",
    "Ursa Major",
    "Ursa Minor",
    "Vela",
    "Virgo",
    "Volans",
    "Vulpecula",
)


class Constellation(IntEnum):
    """A constellation, identified by its IAU abbreviation.

    NONE stands for an undefined constellation. SER1 and SER2 are the two
    parts of Serpens (Caput and Cauda); they are valid identifiers but have
    no name or abbreviation of their own.
    """

    NONE = 0
    And = 1
    Ant = 2
    Aps = 3
    Aql = 4
    Aqr = 5
    Ara = 6
    Ari = 7
    Aur = 8
    Boo = 9
    Cae = 10
    Cam = 11
    Cap = 12
    Car = 13
    Cas = 14
    Cen = 15
    Cep = 16
    Cet = 17
    Cha = 18
    Cir = 19
    CMa = 20
    CMi = 21
    Cnc = 22
    Col = 23
    Com = 24
    CrA = 25
    CrB = 26
    Crt = 27
    Cru = 28
    Crv = 29
    CVn = 30
    Cyg = 31
    Del = 32
    Dor = 33
    Dra = 34
    Equ = 35
    Eri = 36
    For = 37
    Gem = 38
    Gru = 39
    Her = 40
    Hor = 41
    Hya = 42
    Hyi = 43
    Ind = 44
    Lac = 45
    Leo = 46
    Lep = 47
    Lib = 48
    LMi = 49
    Lup = 50
    Lyn = 51
    Lyr = 52
    Men = 53
    Mic = 54
    Mon = 55
    Mus = 56
    Nor = 57
    Oct = 58
    Oph = 59
    Ori = 60
    Pav = 61
    Peg = 62
    Per = 63
    Phe = 64
    Pic = 65
    PsA = 66
    Psc = 67
    Pup = 68
    Pyx = 69
    Ret = 70
    Scl = 71
    Sco = 72
    Sct = 73
    Ser = 74
    Sex = 75
    Sge = 76
    Sgr = 77
    Tau = 78
    Tel = 79
    TrA = 80
    Tri = 81
    Tuc = 82
    UMa = 83
    UMi = 84
    Vel = 85
    Vir = 86
    Vol = 87
    Vul = 88
    SER1 = 89
    SER2 = 90

    def is_valid(self) -> bool:
        """Return True for any defined constellation, including Serpens parts."""
        return self is not Constellation.NONE

    def is_null(self) -> bool:
        """Return True for the undefined constellation."""
        return self is Constellation.NONE

    def _require_named(self) -> None:
        if not Constellation.And <= self <= Constellation.Vul:
            raise ValueError(f"{self.name} has no name or abbreviation")

    def latin_name(self) -> str:
        """Return the Latin name, e.g. 'Ursa Major'."""
        self._require_named()
        return _LATIN_NAMES[self.value]

    def local_name(self) -> str:
        """Return the name translated into the current locale."""
        return gettext.gettext(self.latin_name())

    def abbreviation(self) -> str:
        """Return the three-letter IAU abbreviation, e.g. 'UMa'."""
        self._require_named()
        return self.name

    @classmethod
    def _named(cls) -> list[Constellation]:
        return [c for c in cls if cls.And <= c <= cls.Vul]

    @classmethod
    def from_latin_name(cls, name: str) -> Constellation:
        """Find a constellation by its exact Latin name; raise ValueError if unknown."""
        for constellation in cls._named():
            if name and _LATIN_NAMES[constellation.value] == name:
                return constellation
        raise ValueError(f"unknown constellation name: {name!r}")

    @classmethod
    def from_abbreviation(cls, abbreviation: str) -> Constellation:
        """Find a constellation by its exact abbreviation; raise ValueError if unknown."""
        for constellation in cls._named():
            if abbreviation and constellation.name == abbreviation:
                return constellation
        raise ValueError(f"unknown constellation abbreviation: {abbreviation!r}")