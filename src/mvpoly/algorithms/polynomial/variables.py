"""Encoding of named variables into compact integer identifiers.

A variable is a short name drawn from a 30-symbol alphabet together with a
positive index that tells apart variables sharing a base name.  The pair is
packed into one even integer so that the low bit stays free for auxiliary
identifiers.

Notes
-----
- The name is read as a base-31 numeral, most significant character first.
  Digit 0 is the blank digit, so names of up to 4 characters fit below
  ``31**4``.
- Ids are kept below ``2**32`` after halving; this leaves headroom for the
  automatic-differentiation scalars that carry ids as values.
"""

from __future__ import annotations

import numbers
import re
from dataclasses import dataclass
from typing import Tuple

from numba import njit

from mvpoly.algorithms.utils.config import FASTMATH
from mvpoly.algorithms.utils.exceptions import VariableNameError

#  id = 2 * (name_part + MAX_NAME_PART * (index - 1))
#
#  ┌─────────┬──────────┬────────────────────────────┬───────────────────┐
#  │ part    │ low bit  │ name_part                  │ index - 1         │
#  │ range   │ 0        │ 0 ... 31^4 - 1             │ 0 ... MAX_INDEX-1 │
#  └─────────┴──────────┴────────────────────────────┴───────────────────┘

NAME_CHARS = "@#_.abcdefghijklmnopqrstuvwxyz"
NUM_NAME_CHARS = len(NAME_CHARS)
NAME_LENGTH = 4
NAME_BASE = NUM_NAME_CHARS + 1      # extra digit for the blank character
MAX_NAME_PART = NAME_BASE ** NAME_LENGTH

_ID_RANGE = 2**32 - 1               # unsigned 32-bit id space
MAX_INDEX = _ID_RANGE // 2 // MAX_NAME_PART

# Returned by queries that find no single variable
NO_VARIABLE = 0

_LABEL_RE = re.compile(r"^(?P<name>.*?)(?P<index>\d*)$")


@njit(fastmath=FASTMATH, cache=False)
def _pack_variable_id(name_part: int, index: int) -> int:
    """Pack a name numeral and a 1-based index into an even id."""
    return 2 * (name_part + MAX_NAME_PART * (index - 1))


@njit(fastmath=FASTMATH, cache=False)
def _unpack_variable_id(var_id: int):
    """Inverse of :func:`_pack_variable_id`.

    Returns
    -------
    tuple
        ``(name_part, k)`` where ``k`` is the zero-based packed index.
    """
    half = var_id // 2
    return half % MAX_NAME_PART, half // MAX_NAME_PART


def is_valid_variable_name(name: str) -> bool:
    """Check that *name* is non-empty and uses only alphabet characters."""
    if len(name) < 1:
        return False
    return all(ch in NAME_CHARS for ch in name)


def _name_to_numeral(name: str) -> int:
    name_part = 0
    multiplier = 1
    for ch in reversed(name):
        offset = NAME_CHARS.find(ch)
        if offset < 0:
            raise VariableNameError(f"Character {ch!r} of variable name {name!r} is not allowed")
        name_part += (offset + 1) * multiplier
        multiplier *= NAME_BASE
    return name_part


def variable_name_to_id(name: str, index: int = 1) -> int:
    """Encode a variable name and index as an integer id.

    Parameters
    ----------
    name : str
        One to four characters from :data:`NAME_CHARS`.
    index : int, default 1
        Disambiguation index, ``1 <= index <= MAX_INDEX``.

    Returns
    -------
    int
        Even, strictly positive variable id.

    Raises
    ------
    VariableNameError
        If the name is empty or malformed, too long for the name space, or the
        index is not an integer in the reserved range.
    """
    if len(name) < 1:
        raise VariableNameError("Variable name must not be empty")
    name_part = _name_to_numeral(name)
    if name_part > MAX_NAME_PART:
        raise VariableNameError(f"Variable name {name!r} exceeds max allowed length of {NAME_LENGTH}")
    if not isinstance(index, numbers.Integral):
        raise VariableNameError(f"Variable index must be an integer, got {index!r}")
    if index > MAX_INDEX:
        raise VariableNameError(f"Variable index {index} exceeds max ID {MAX_INDEX}")
    if index < 1:
        raise VariableNameError(f"Variable index must be > 0, got {index}")
    return int(_pack_variable_id(name_part, int(index)))


def id_to_variable_name(var_id: int) -> str:
    """Decode an id into its display label ``name + str(k + 1)``.

    ``k`` is the zero-based index packed into the id, so for every valid pair
    ``id_to_variable_name(variable_name_to_id(name, m)) == name + str(m)``.
    """
    name_part, k = _unpack_variable_id(var_id)
    name_part, k = int(name_part), int(k)
    multiplier = NAME_BASE ** (NAME_LENGTH - 1)
    chars = []
    for _ in range(NAME_LENGTH):
        digit = (name_part // multiplier) % NAME_BASE
        if digit > 0:
            chars.append(NAME_CHARS[digit - 1])
        multiplier //= NAME_BASE
    if not chars:
        chars.append(NAME_CHARS[0])
    return "".join(chars) + str(k + 1)


def parse_variable_name(label: str) -> Tuple[str, int]:
    """Split a display label such as ``"x12"`` into ``("x", 12)``.

    A label without a numeric suffix has index 1.
    """
    match = _LABEL_RE.match(label)
    name, digits = match.group("name"), match.group("index")
    if not is_valid_variable_name(name):
        raise VariableNameError(f"Cannot parse variable label {label!r}")
    return name, int(digits) if digits else 1


@dataclass(frozen=True)
class VariableId:
    """Named variable with its disambiguation index."""

    name: str
    index: int = 1

    def encode(self) -> int:
        return variable_name_to_id(self.name, self.index)

    @classmethod
    def decode(cls, var_id: int) -> "VariableId":
        return cls(*parse_variable_name(id_to_variable_name(var_id)))

    def __str__(self) -> str:
        return f"{self.name}{self.index}"
