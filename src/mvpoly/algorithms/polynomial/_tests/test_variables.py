import itertools

import numpy as np
import pytest

from mvpoly.algorithms.polynomial.variables import (MAX_INDEX, MAX_NAME_PART,
                                                    NAME_CHARS, VariableId,
                                                    _pack_variable_id,
                                                    _unpack_variable_id,
                                                    id_to_variable_name,
                                                    is_valid_variable_name,
                                                    parse_variable_name,
                                                    variable_name_to_id)
from mvpoly.algorithms.utils.exceptions import VariableNameError


def test_constants():
    assert len(NAME_CHARS) == 30
    assert MAX_NAME_PART == 923521
    assert MAX_INDEX == 2325


@pytest.mark.parametrize("name, index, expected", [
    ("@", 1, 2),
    ("t", 1, 48),
    ("x", 1, 56),
    ("ab", 1, 322),
    ("ab", 2, 2 * (161 + 923521)),
    ("zzzz", 1, 2 * 923520),
])
def test_variable_name_to_id_values(name, index, expected):
    assert variable_name_to_id(name, index) == expected


def test_ids_are_even_and_positive():
    for name in ["@", "x", "q_", "abcd", "zzzz"]:
        for index in (1, 2, 17, MAX_INDEX):
            var_id = variable_name_to_id(name, index)
            assert var_id > 0
            assert var_id % 2 == 0


def test_largest_id_fits_32_bits():
    assert variable_name_to_id("zzzz", MAX_INDEX) < 2**32


@pytest.mark.parametrize("name", ["x", "y", "@", "#", "_", ".", "ab", "t.x", "zzzz", "@@@@", "qd_"])
@pytest.mark.parametrize("index", [1, 2, 9, 10, 123, MAX_INDEX])
def test_round_trip(name, index):
    assert id_to_variable_name(variable_name_to_id(name, index)) == name + str(index)


def test_round_trip_all_short_names():
    """Every name of up to two characters survives encoding."""
    names = list(NAME_CHARS) + ["".join(p) for p in itertools.product(NAME_CHARS, repeat=2)]
    for name in names:
        var_id = variable_name_to_id(name, 3)
        assert id_to_variable_name(var_id) == name + "3"


def test_distinct_names_get_distinct_ids():
    ids = {variable_name_to_id("".join(p), 1) for p in itertools.product("@xz.", repeat=3)}
    assert len(ids) == 4 ** 3


def test_pack_unpack_kernels():
    var_id = _pack_variable_id(161, 5)
    name_part, k = _unpack_variable_id(var_id)
    assert (name_part, k) == (161, 4)


@pytest.mark.parametrize("name, valid", [
    ("x", True),
    ("abcd", True),
    ("@#_.", True),
    ("", False),
    ("X", False),
    ("x1", False),
    ("a b", False),
])
def test_is_valid_variable_name(name, valid):
    assert is_valid_variable_name(name) is valid


def test_invalid_character_raises():
    with pytest.raises(VariableNameError):
        variable_name_to_id("X")


def test_empty_name_raises():
    with pytest.raises(VariableNameError):
        variable_name_to_id("")


def test_name_too_long_raises():
    with pytest.raises(VariableNameError):
        variable_name_to_id("abcde")


@pytest.mark.parametrize("index", [0, -1, MAX_INDEX + 1, 1.5, 2.0, "2"])
def test_index_out_of_range_raises(index):
    with pytest.raises(VariableNameError):
        variable_name_to_id("x", index)


def test_numpy_integer_index():
    var_id = variable_name_to_id("x", np.int64(3))
    assert var_id == variable_name_to_id("x", 3)
    assert var_id % 2 == 0


def test_variable_name_error_is_value_error():
    with pytest.raises(ValueError):
        variable_name_to_id("x", 0)


@pytest.mark.parametrize("label, expected", [
    ("x", ("x", 1)),
    ("x1", ("x", 1)),
    ("q12", ("q", 12)),
    ("t.x7", ("t.x", 7)),
])
def test_parse_variable_name(label, expected):
    assert parse_variable_name(label) == expected


@pytest.mark.parametrize("label", ["", "12", "X1"])
def test_parse_variable_name_rejects(label):
    with pytest.raises(VariableNameError):
        parse_variable_name(label)


def test_variable_id_facade():
    v = VariableId("q", 3)
    assert v.encode() == variable_name_to_id("q", 3)
    assert VariableId.decode(v.encode()) == v
    assert str(v) == "q3"
