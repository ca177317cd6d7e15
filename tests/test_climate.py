import pytest

from rustlings.exercises.climate import Climate, ParseClimateError, parse_climate


def _error(text):
    with pytest.raises(ParseClimateError) as info:
        parse_climate(text)
    return info.value


def test_empty():
    err = _error("")
    assert err.kind is ParseClimateError.Kind.EMPTY
    assert str(err) == "empty input"


def test_short():
    err = _error("Boston,1991")
    assert err.kind is ParseClimateError.Kind.BAD_LEN
    assert str(err) == "incorrect number of fields"


def test_long():
    err = _error("Paris,1920,17.2,extra")
    assert err.kind is ParseClimateError.Kind.BAD_LEN
    assert str(err) == "incorrect number of fields"


def test_no_city():
    err = _error(",1997,20.5")
    assert err.kind is ParseClimateError.Kind.NO_CITY
    assert str(err) == "no city name"


def test_parse_int_neg():
    err = _error("Barcelona,-25,22.3")
    assert err.kind is ParseClimateError.Kind.PARSE_INT
    assert str(err) == f"error parsing year: {err.source}"
    assert str(err) == "error parsing year: invalid digit found in string"


def test_parse_int_bad():
    err = _error("Beijing,foo,15.0")
    assert err.kind is ParseClimateError.Kind.PARSE_INT
    assert str(err) == f"error parsing year: {err.source}"


def test_parse_float():
    err = _error("Manila,2001,bar")
    assert err.kind is ParseClimateError.Kind.PARSE_FLOAT
    assert str(err) == f"error parsing temperature: {err.source}"
    assert str(err) == "error parsing temperature: invalid float literal"


def test_parse_good():
    assert parse_climate("Munich,2015,23.1") == Climate(
        city="Munich", year=2015, temp=23.1
    )


def test_downcast():
    err = _error("São Paulo,-21,28.5")
    assert err.kind is ParseClimateError.Kind.PARSE_INT
    assert isinstance(err.source, ValueError)
    assert err.__cause__ is err.source


def test_float_rejects_underscores():
    err = _error("Oslo,2000,1_0")
    assert err.kind is ParseClimateError.Kind.PARSE_FLOAT