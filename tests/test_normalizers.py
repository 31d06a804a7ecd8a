import pytest

from aamva_decoder.normalizers.address import (
    normalize_city,
    normalize_state,
    normalize_street,
    normalize_zip,
)
from aamva_decoder.normalizers.dates import resolve_date
from aamva_decoder.normalizers.names import (
    normalize_full_name,
    normalize_name,
    split_full_name,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("SMITH", "Smith"),
        ("MCDONALD", "McDonald"),
        ("O'BRIEN", "O'Brien"),
        ("SMITH-JONES", "Smith-Jones"),
        ("MARY ANNE", "Mary Anne"),
        ("MCDONALD-O'BRIEN", "McDonald-O'Brien"),
        ("MC", "Mc"),
        ("  DOE ", "Doe"),
        ("", ""),
    ],
)
def test_normalize_name(raw, expected):
    assert normalize_name(raw) == expected


@pytest.mark.parametrize("raw", ["SMITH", "JOHN", "ÉLODIE", "X", "ZZZZ"])
def test_single_token_matches_capitalize(raw):
    assert normalize_name(raw) == raw.capitalize()


@pytest.mark.parametrize("raw", ["MCDONALD", "O'BRIEN", "SMITH-JONES", "ANNE  MARIE", "D'ANGELO"])
def test_normalize_name_is_idempotent(raw):
    once = normalize_name(raw)
    assert normalize_name(once) == once


def test_split_full_name():
    assert split_full_name("JOHNSON,JOHN,MICHAEL") == ("Johnson", "John", "Michael")
    assert split_full_name("JOHNSON, JOHN") == ("Johnson", "John", None)
    assert split_full_name("JOHNSON") == ("Johnson", None, None)
    assert split_full_name("JOHNSON,,MICHAEL") == ("Johnson", None, "Michael")
    assert split_full_name("JOHNSON,JOHN MICHAEL") == ("Johnson", "John", "Michael")
    # con tres segmentos el espacio pertenece al nombre
    assert split_full_name("JOHNSON,MARY ANNE,LOU") == ("Johnson", "Mary Anne", "Lou")


def test_normalize_full_name():
    assert normalize_full_name("MCDONALD,RONALD") == "McDonald,Ronald"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12251995", "1995-12-25"),
        ("01151990", "1990-01-15"),
        ("19950101", "1995-01-01"),  # mes 19 inválido -> CCYYMMDD
        ("20001231", "2000-12-31"),
        ("02291992", "1992-02-29"),  # bisiesto
        ("02291991", None),
        ("02301990", None),
        ("13451990", None),
        ("1990", None),
        ("", None),
        ("01-15-1990", "1990-01-15"),
    ],
)
def test_resolve_date(raw, expected):
    assert resolve_date(raw) == expected


def test_normalize_zip_keeps_content():
    assert normalize_zip("941102345 ") == "941102345"
    assert normalize_zip(" 02134    ") == "02134"
    assert normalize_zip("K1A 0B1") == "K1A 0B1"


def test_normalize_street():
    assert normalize_street("123 MAIN ST") == "123 Main St"
    assert normalize_street("4500 N. LAKE SHORE BLVD APT 12") == "4500 N Lake Shore Blvd Apt 12"
    assert normalize_street("1 NW MARKET   ST") == "1 NW Market St"


def test_normalize_city_and_state():
    assert normalize_city("SAN FRANCISCO") == "San Francisco"
    assert normalize_state(" ca ") == "CA"
