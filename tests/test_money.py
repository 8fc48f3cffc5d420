from __future__ import annotations

import pytest

from cnnumeral.money import fen_to_yuan, yuan_to_fen


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, "0.00"),
        ("", "0.00"),
        (0.2, "0.00"),
        (0, "0.00"),
        ("0", "0.00"),
        ("-0", "-0.00"),
        ("0.2", "0.00"),
        ("-0.2", "-0.00"),
        ("2.0", "0.02"),
        ("2", "0.02"),
        ("20", "0.20"),
        ("200", "2.00"),
        ("2000", "20.00"),
        ("2000.45", "20.00"),
        ("-2000", "-20.00"),
        (123456789012345678, "1234567890123456.78"),
    ],
)
def test_fen_to_yuan(value, expected):
    assert fen_to_yuan(value) == expected


def test_fen_to_yuan_errors_and_empty_format():
    for bad in (".2", "-.2", "9.007199254740992e+21", "null", "num"):
        assert fen_to_yuan(bad) == ""
    assert fen_to_yuan(None, "--") == "--"
    assert fen_to_yuan("", "--") == "--"
    assert fen_to_yuan("null", "--") == ""


def test_fen_to_yuan_cut_zero():
    assert fen_to_yuan(2000, cut_zero=True) == "20"
    assert fen_to_yuan(2010, cut_zero=True) == "20.1"
    assert fen_to_yuan(5, cut_zero=True) == "0.05"
    assert fen_to_yuan(0, cut_zero=True) == "0"
    assert fen_to_yuan("-2000", cut_zero=True) == "-20"


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, "0"),
        ("", "0"),
        ("0.000", "0"),
        ("0.001", "0"),
        ("0.010", "1"),
        ("0.101", "10"),
        ("0.00", "0"),
        ("0.01", "1"),
        ("0.10", "10"),
        ("0.0", "0"),
        ("0.1", "10"),
        (0, "0"),
        ("-0", "-0"),
        (0.1, "10"),
        ("10", "1000"),
        ("10.0201", "1002"),
        ("-10.0201", "-1002"),
    ],
)
def test_yuan_to_fen(value, expected):
    assert yuan_to_fen(value) == expected


def test_yuan_to_fen_errors_and_empty_format():
    for bad in (".2", "-.2", "null", "9.007199254740992e+21"):
        assert yuan_to_fen(bad) == ""
    assert yuan_to_fen(None, "--") == "--"
    assert yuan_to_fen("", "--") == "--"
