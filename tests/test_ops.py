"""Tests for the shared operation tables."""

import pytest

from ringops.service.ops import INT_OPS, REAL_OPS, encode_real, evaluate, lookup


def test_arity_from_operand_names():
    assert INT_OPS["degree"][1] == ("x",)
    assert INT_OPS["quot"][1] == ("x", "y")
    assert REAL_OPS["div"][1] == ("a", "b")


def test_lookup():
    assert lookup("int", "rem") is INT_OPS["rem"]
    assert lookup("real", "rem") is None
    assert lookup("complex", "div") is None


def test_evaluate_int():
    assert evaluate("int", "div", [-7, 2]) == -4
    assert evaluate("int", "quot", [-7, 2]) == -3


def test_evaluate_real_encodes_non_finite():
    assert evaluate("real", "div", [1.0, 4.0]) == 0.25
    assert evaluate("real", "div", [1.0, 0.0]) == "Infinity"
    assert evaluate("real", "div", [0.0, 0.0]) == "NaN"


def test_evaluate_unknown():
    with pytest.raises(KeyError):
        evaluate("int", "pow", [2, 3])


def test_encode_real_passes_ints_through():
    assert encode_real(7) == 7
    assert encode_real(float("-inf")) == "-Infinity"
