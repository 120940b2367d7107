import pytest

from skychart.constellations import Constellation

NAMED = [c for c in Constellation if Constellation.And <= c <= Constellation.Vul]


def test_there_are_88_named_constellations():
    named = [c for c in list(Constellation) if Constellation.And <= c <= Constellation.Vul]
    assert len(named) == 88
    latin = {c.latin_name() for c in named}
    abbreviations = {c.abbreviation() for c in named}
    assert len(latin) == 88
    assert len(abbreviations) == 88
    assert {Constellation.from_latin_name(name) for name in latin} == set(named)


@pytest.mark.parametrize("constellation", NAMED)
def test_latin_name_round_trip(constellation):
    assert Constellation.from_latin_name(constellation.latin_name()) is constellation


@pytest.mark.parametrize("constellation", NAMED)
def test_abbreviation_round_trip(constellation):
    assert Constellation.from_abbreviation(constellation.abbreviation()) is constellation


def test_known_names():
    assert Constellation.And.latin_name() == "Andromeda"
    assert Constellation.UMa.latin_name() == "Ursa Major"
    assert Constellation.Vul.latin_name() == "Vulpecula"
    assert Constellation.CrA.latin_name() == "Corona Australis"


def test_known_abbreviations():
    assert Constellation.from_latin_name("Canis Major").abbreviation() == "CMa"
    assert Constellation.from_latin_name("Piscis Austrinus").abbreviation() == "PsA"
    assert Constellation.from_abbreviation("Ori").latin_name() == "Orion"


def test_local_name_defaults_to_latin():
    assert Constellation.Cyg.local_name() == "Cygnus"


def test_validity():
    assert Constellation.NONE.is_valid() is False
    assert Constellation.NONE.is_null() is True
    assert Constellation.And.is_valid() is True
    assert Constellation.And.is_null() is False
    assert Constellation.SER1.is_valid() is True
    assert Constellation.SER2.is_valid() is True


@pytest.mark.parametrize(
    "constellation", [Constellation.NONE, Constellation.SER1, Constellation.SER2]
)
def test_unnamed_members_raise(constellation):
    with pytest.raises(ValueError):
        constellation.latin_name()
    with pytest.raises(ValueError):
        constellation.abbreviation()
    with pytest.raises(ValueError):
        constellation.local_name()


@pytest.mark.parametrize("name", ["", "andromeda", "Andromeda ", "Serpens Caput", "Pluto"])
def test_unknown_latin_name_raises(name):
    with pytest.raises(ValueError):
        Constellation.from_latin_name(name)


@pytest.mark.parametrize("abbreviation", ["", "and", "AND", "NONE", "SER1", "Xyz"])
def test_unknown_abbreviation_raises(abbreviation):
    with pytest.raises(ValueError):
        Constellation.from_abbreviation(abbreviation)


def test_ordering_follows_values():
    andromeda = Constellation.from_abbreviation("And")
    vulpecula = Constellation.from_abbreviation("Vul")
    assert Constellation.NONE < andromeda < vulpecula < Constellation.SER1
    assert sorted(NAMED, reverse=True)[0] is vulpecula
    assert min(NAMED) is andromeda